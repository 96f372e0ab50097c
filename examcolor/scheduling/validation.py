from typing import Sequence

from ..models import ConflictGraph, Table


def conflicts_ok(G: ConflictGraph, colors: Sequence[int]) -> bool:
    if len(colors) != G.number_of_vertices:
        return False
    if any(c == 0 for c in colors):
        return False
    for u, v in G.graph.edges():
        if colors[u] == colors[v]:
            return False
    return True


def colors_in_range(colors: Sequence[int], m: int) -> bool:
    return all(1 <= c <= m for c in colors)


def rosters_consistent(cleaned: Table, student_table: Table) -> bool:
    """Every kept (course, student) pair is backed by one student record."""
    student_sets = [set(record) for record in student_table]
    for record in cleaned:
        course, roster = record[0], record[1:]
        if not roster:
            return False
        for s in roster:
            if not any(s in tokens and course in tokens for tokens in student_sets):
                return False
    return True
