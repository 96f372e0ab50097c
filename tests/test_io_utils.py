import io

import pytest

from examcolor.io_utils import (
    load_table, load_timeslots, parse_timeslots, save_schedule_csv, schedule_to_frame
)
from examcolor.cleaning import clean_rosters
from examcolor.models import InvalidInputError


def test_load_table_strips_fields_and_skips_blank_lines():
    text = "CS101 , alice,bob \n\n  CS225,carol,\n"
    assert load_table(io.StringIO(text)) == [["CS101", "alice", "bob"], ["CS225", "carol"]]


def test_load_table_from_bytes_and_path(tmp_path):
    data = b"A,s1,s2\nB,s2\n"
    assert load_table(io.BytesIO(data)) == [["A", "s1", "s2"], ["B", "s2"]]
    path = tmp_path / "courses.csv"
    path.write_bytes(data)
    assert load_table(str(path)) == [["A", "s1", "s2"], ["B", "s2"]]


def test_load_table_other_delimiter():
    assert load_table(io.StringIO("A;s1;s2\n"), delimiter=";") == [["A", "s1", "s2"]]


def test_load_timeslots_one_per_line_or_one_line():
    assert load_timeslots(io.StringIO("Mon AM\nMon PM\n")) == ["Mon AM", "Mon PM"]
    assert load_timeslots(io.StringIO("Mon AM, Mon PM, Tue AM\n")) == ["Mon AM", "Mon PM", "Tue AM"]


def test_duplicate_timeslots_rejected():
    with pytest.raises(InvalidInputError):
        load_timeslots(io.StringIO("T1\nT1\n"))
    with pytest.raises(InvalidInputError):
        parse_timeslots("T1,T2,T1")


def test_parse_timeslots():
    assert parse_timeslots(" T1, T2 ,T3") == ["T1", "T2", "T3"]


def test_save_schedule_csv(tmp_path):
    path = tmp_path / "schedule.csv"
    save_schedule_csv(str(path), [["T1", "A", "B"], ["T2"]])
    assert path.read_text().splitlines() == ["T1,A,B", "T2"]


def test_schedule_to_frame():
    df = schedule_to_frame([["T1", "A", "B"], ["T2"], ["T3", "C"]])
    assert list(df.columns) == ["timeslot", "course"]
    assert df.values.tolist() == [["T1", "A"], ["T1", "B"], ["T3", "C"]]
    assert schedule_to_frame([["-1"]]).empty


def test_line_without_key_keeps_empty_key():
    table = load_table(io.StringIO(", s1, s2\nA,s3\n"))
    assert table == [["", "s1", "s2"], ["A", "s3"]]


def test_line_without_key_is_rejected_by_cleaning():
    courses = load_table(io.StringIO(", s1, s2\nA,s3\n"))
    with pytest.raises(InvalidInputError):
        clean_rosters(courses, [["s1", "A"]])


def test_timeslot_file_line_without_label_rejected():
    with pytest.raises(InvalidInputError):
        load_timeslots(io.StringIO("T1\n, T2\n"))
