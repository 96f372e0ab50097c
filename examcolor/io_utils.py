import csv
import io
import os
from typing import IO, List, Sequence, Union

import pandas as pd

from . import config
from .models import InvalidInputError, Table

TextOrPath = Union[str, os.PathLike, IO]


def _open_text(src: TextOrPath):
    """Return a text-mode file handle and a flag indicating whether to close it.

    Accepts a filesystem path, a text IO object, or a BytesIO buffer.
    """
    if isinstance(src, (str, os.PathLike)):
        f = open(src, 'r', newline='', encoding='utf-8')
        return f, True
    if isinstance(src, io.BytesIO):
        src.seek(0)
        f = io.TextIOWrapper(src, encoding='utf-8', newline='')
        return f, True
    if hasattr(src, 'read'):
        try:
            src.seek(0)
        except (AttributeError, OSError):
            # pipes and sockets cannot rewind; read from where they are
            pass
        return src, False
    raise TypeError("Unsupported input type; expected path or file-like object")


def load_table(src: TextOrPath, delimiter: str = config.DELIMITER) -> Table:
    """Read delimited text into records of stripped tokens.

    Blank lines are skipped and empty associated fields (e.g. from a
    trailing delimiter) are dropped. The first field is always kept as
    the key, even when empty.
    """
    table: Table = []
    f, should_close = _open_text(src)
    try:
        for row in csv.reader(f, delimiter=delimiter, skipinitialspace=True):
            tokens = [tok.strip() for tok in row]
            if not any(tokens):
                continue
            table.append([tokens[0]] + [tok for tok in tokens[1:] if tok])
    finally:
        if should_close:
            f.close()
    return table


def check_timeslots(timeslots: Sequence[str]) -> List[str]:
    """Labels as given; only their distinctness is checked."""
    labels = list(timeslots)
    seen = set()
    for label in labels:
        if label in seen:
            raise InvalidInputError(f"duplicate timeslot label: {label!r}")
        seen.add(label)
    return labels


def _stripped_labels(tokens) -> List[str]:
    labels = [tok.strip() for tok in tokens]
    if not all(labels):
        raise InvalidInputError("timeslot labels must not be empty")
    return check_timeslots(labels)


def load_timeslots(src: TextOrPath, delimiter: str = config.DELIMITER) -> List[str]:
    """Timeslot labels in file order; one per line or several per line."""
    return _stripped_labels(tok for record in load_table(src, delimiter) for tok in record)


def parse_timeslots(text: str, delimiter: str = config.DELIMITER) -> List[str]:
    return _stripped_labels(tok for tok in text.split(delimiter) if tok.strip())


def write_schedule_rows(f: IO, rows: Sequence[Sequence[str]]):
    w = csv.writer(f)
    for row in rows:
        w.writerow(list(row))


def save_schedule_csv(path: str, rows: Sequence[Sequence[str]]):
    with open(path, 'w', newline='', encoding='utf-8') as f:
        write_schedule_rows(f, rows)


def schedule_to_csv_text(rows: Sequence[Sequence[str]]) -> str:
    buf = io.StringIO()
    write_schedule_rows(buf, rows)
    return buf.getvalue()


def schedule_to_frame(rows: Sequence[Sequence[str]]) -> pd.DataFrame:
    """Long-format (timeslot, course) frame; empty for the infeasible row."""
    records = []
    for row in rows:
        if list(row) == [config.INFEASIBLE_TOKEN]:
            continue
        label, courses = row[0], row[1:]
        for course in courses:
            records.append({"timeslot": label, "course": course})
    return pd.DataFrame(records, columns=["timeslot", "course"])
