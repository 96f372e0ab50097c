from typing import List, Sequence

from .. import config
from ..models import ColoringResult


def infeasible_rows() -> List[List[str]]:
    return [[config.INFEASIBLE_TOKEN]]


def format_schedule(timeslots: Sequence[str], vertex_order: Sequence[str],
                    result: ColoringResult) -> List[List[str]]:
    """One row per timeslot label, followed by the courses colored with it.

    Courses keep vertex order and unused timeslots still get a row. An
    infeasible result becomes the single row ["-1"].
    """
    if not result.feasible:
        return infeasible_rows()
    rows = []
    for i, label in enumerate(timeslots):
        row = [label]
        for vertex, c in enumerate(result.colors):
            if c == i + 1:
                row.append(vertex_order[vertex])
        rows.append(row)
    return rows
