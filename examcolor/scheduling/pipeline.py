import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..algorithms.backtracking import color_graph
from ..cleaning import clean_rosters
from ..graph_build import build_conflict_graph
from ..io_utils import check_timeslots
from ..models import ColoringResult, ConflictGraph, Table
from .formatter import format_schedule

logger = logging.getLogger(__name__)


@dataclass
class ScheduleRun:
    rows: List[List[str]]
    graph: ConflictGraph
    result: ColoringResult
    timeslots: List[str]
    cleaned: Table


def schedule_exams(courses: Table, timeslots: Sequence[str],
                   students: Optional[Table] = None,
                   time_limit: Optional[float] = None) -> ScheduleRun:
    """Clean (when a student table is given), build conflicts, color, format."""
    labels = check_timeslots(timeslots)
    cleaned = clean_rosters(courses, students) if students is not None else [list(r) for r in courses]
    G = build_conflict_graph(cleaned)
    result = color_graph(G, len(labels), time_limit=time_limit)
    rows = format_schedule(labels, G.vertex_order, result)
    if not result.feasible:
        logger.warning("%d courses do not fit in %d timeslots", G.number_of_vertices, len(labels))
    return ScheduleRun(rows=rows, graph=G, result=result, timeslots=labels, cleaned=cleaned)


def schedule(courses: Table, timeslots: Sequence[str]) -> List[List[str]]:
    return schedule_exams(courses, timeslots).rows
