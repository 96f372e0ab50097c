import logging
import time
from typing import List, Optional, Sequence

from ..models import ColoringResult, ConflictGraph, SearchTimeout, infeasible

logger = logging.getLogger(__name__)


def is_safe(neighbors: Sequence[int], colors: Sequence[int], color: int) -> bool:
    """True when no neighbor currently holds `color` (0 means unassigned)."""
    for j in neighbors:
        if colors[j] == color:
            return False
    return True


def color_graph(graph: ConflictGraph, m: int, time_limit: Optional[float] = None) -> ColoringResult:
    """Exact m-coloring by chronological backtracking.

    Vertices are colored in vertex order, colors 1..m tried in increasing
    order, and the first complete assignment found depth-first is returned.
    The search is iterative: `cursor[k]` is the next color to try at depth
    k, and stepping back from a depth resets that vertex to 0. Exhausting
    every color at depth 0 proves no m-coloring exists, which is reported
    as an infeasible result rather than an error.

    Raises SearchTimeout if `time_limit` seconds pass before the search
    either succeeds or is exhausted.
    """
    if m < 0:
        raise ValueError("number of timeslots must be non-negative")
    v = graph.number_of_vertices
    adj: List[List[int]] = [sorted(graph.neighbors(i)) for i in range(v)]
    colors = [0] * v
    cursor = [1] * v
    start = time.perf_counter()
    steps = 0

    k = 0
    while 0 <= k < v:
        if time_limit is not None and (time.perf_counter() - start) >= time_limit:
            raise SearchTimeout(
                f"no answer after {time_limit}s ({steps} assignments tried)")
        colors[k] = 0
        chosen = 0
        for c in range(cursor[k], m + 1):
            if is_safe(adj[k], colors, c):
                chosen = c
                break
        if chosen:
            steps += 1
            colors[k] = chosen
            cursor[k] = chosen + 1
            k += 1
            if k < v:
                cursor[k] = 1
        else:
            cursor[k] = 1
            k -= 1

    elapsed = time.perf_counter() - start
    if k == v:
        logger.info("coloring found with %d timeslots (%d steps, %.3fs)", m, steps, elapsed)
        return ColoringResult(feasible=True, colors=colors, steps=steps)
    logger.info("no coloring with %d timeslots (%d steps, %.3fs)", m, steps, elapsed)
    return infeasible(steps)
