from typing import Sequence

from ..models import ColoringResult, ConflictGraph
from .validation import colors_in_range, conflicts_ok


def clique_lower_bound(G: ConflictGraph) -> int:
    """Lower bound on the timeslots needed, from a greedy maximal clique.

    Starts at the highest-degree course and keeps adding the highest-degree
    candidate adjacent to every course already in the clique.
    """
    g = G.graph
    if g.number_of_nodes() == 0:
        return 0
    seed = max(g.nodes(), key=lambda u: g.degree(u))
    clique = {seed}
    candidates = set(g.neighbors(seed))
    while candidates:
        u = max(candidates, key=lambda v: g.degree(v))
        clique.add(u)
        candidates &= set(g.neighbors(u))
    return len(clique)


def summary(G: ConflictGraph, timeslots: Sequence[str], result: ColoringResult) -> str:
    n = G.number_of_vertices
    m = G.number_of_edges
    total_slots = len(timeslots)
    used = len(set(result.colors)) if result.feasible else 0
    lb = clique_lower_bound(G)
    if result.feasible:
        valid = conflicts_ok(G, result.colors) and colors_in_range(result.colors, total_slots)
        outcome = f"Feasible: True  Valid (conflicts): {valid}\n"
    else:
        outcome = "Feasible: False  (no schedule fits in the given timeslots)\n"
    warning = ""
    if total_slots < lb:
        warning = (
            f"Warning: timeslots={total_slots} < clique LB={lb}; zero-conflict schedule is impossible.\n"
        )
    return (
        f"Courses: {n}  Conflicts: {m}\n"
        f"Timeslots available: {total_slots}  Used: {used}\n"
        f"Clique lower bound: {lb}\n"
        f"{outcome}"
        f"Search steps: {result.steps}\n"
        f"{warning}"
    )
