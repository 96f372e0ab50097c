import logging
from collections import defaultdict
from typing import Dict, List, Set

import networkx as nx

from .cleaning import validate_table
from .models import ConflictGraph, Table

logger = logging.getLogger(__name__)


def build_conflict_graph(courses: Table) -> ConflictGraph:
    """Conflict graph over course indices in input order.

    Courses i and j are adjacent when a roster token of i appears anywhere
    in record j, its key included. Self matches are ignored.
    """
    validate_table(courses, "course table")
    vertex_order: List[str] = [record[0] for record in courses]

    # token -> indices of the records containing it (key or roster)
    records_with: Dict[str, Set[int]] = defaultdict(set)
    for i, record in enumerate(courses):
        for tok in record:
            records_with[tok].add(i)

    G = nx.Graph()
    G.add_nodes_from(range(len(vertex_order)))
    for i, record in enumerate(courses):
        for tok in record[1:]:
            for j in records_with[tok]:
                if j != i:
                    G.add_edge(i, j)

    logger.info("conflict graph: %d courses, %d conflicts",
                G.number_of_nodes(), G.number_of_edges())
    return ConflictGraph(vertex_order=vertex_order, graph=G)
