import logging
from typing import List, Set

from .models import InvalidInputError, Table

logger = logging.getLogger(__name__)


def validate_table(table: Table, what: str = "table") -> None:
    """Fail fast on records with no key and on repeated keys."""
    seen: Set[str] = set()
    for n, record in enumerate(table):
        if not record or not record[0]:
            raise InvalidInputError(f"{what}: record {n} has no key")
        key = record[0]
        if key in seen:
            raise InvalidInputError(f"{what}: duplicate key {key!r}")
        seen.add(key)


def clean_rosters(course_table: Table, student_table: Table) -> Table:
    """Keep only enrolments both tables agree on, and only non-empty courses.

    A student token listed under a course survives when some student record
    contains both that token and the course, anywhere in the record (key or
    listed course). Courses left with no students are dropped. Input order
    of courses and of students within a course is kept.
    """
    validate_table(course_table, "course table")
    student_sets: List[Set[str]] = [set(record) for record in student_table]

    cleaned: Table = []
    dropped_students = 0
    for record in course_table:
        course, roster = record[0], record[1:]
        # every token that co-occurs with this course in some student record
        allowed: Set[str] = set()
        for tokens in student_sets:
            if course in tokens:
                allowed |= tokens
        kept = [s for s in roster if s in allowed]
        dropped_students += len(roster) - len(kept)
        if kept:
            cleaned.append([course] + kept)
        else:
            logger.debug("dropping course %s: no consistent students", course)

    logger.info(
        "cleaned rosters: %d/%d courses kept, %d enrolments removed",
        len(cleaned), len(course_table), dropped_students,
    )
    return cleaned
