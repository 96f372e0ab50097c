import pytest

from main import main


def write(path, text):
    path.write_text(text)
    return str(path)


def test_cli_schedules_and_saves(tmp_path, capsys):
    courses = write(tmp_path / "courses.csv", "A,s1,s2\nB,s2,s3\nC,s1,s3\n")
    students = write(tmp_path / "students.csv", "s1,A,C\ns2,A,B\ns3,B,C\n")
    out = tmp_path / "schedule.csv"
    main(["--courses", courses, "--students", students,
          "--slots", "T1,T2,T3", "--out_schedule", str(out)])
    assert out.read_text().splitlines() == ["T1,A", "T2,B", "T3,C"]
    assert "Feasible: True" in capsys.readouterr().out


def test_cli_writes_sentinel_when_infeasible(tmp_path):
    courses = write(tmp_path / "courses.csv", "A,s1,s2\nB,s2,s3\nC,s1,s3\n")
    slots = write(tmp_path / "slots.txt", "T1\nT2\n")
    out = tmp_path / "schedule.csv"
    main(["--courses", courses, "--timeslots", slots, "--out_schedule", str(out)])
    assert out.read_text().splitlines() == ["-1"]


def test_cli_requires_timeslots(tmp_path):
    courses = write(tmp_path / "courses.csv", "A,s1\n")
    with pytest.raises(SystemExit):
        main(["--courses", courses])


def test_cli_reports_invalid_input(tmp_path):
    courses = write(tmp_path / "courses.csv", "A,s1\nA,s2\n")
    with pytest.raises(SystemExit, match="Invalid input"):
        main(["--courses", courses, "--slots", "T1", "--out_schedule", str(tmp_path / "o.csv")])
