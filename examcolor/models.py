from dataclasses import dataclass, field
from typing import List, Set

import networkx as nx

# token 0 is the key (course or student id), the rest are associated ids
Record = List[str]
Table = List[Record]


class InvalidInputError(ValueError):
    """Raised for tables or timeslot lists the scheduler cannot work with."""


class SearchTimeout(RuntimeError):
    """Raised when the coloring search runs past its time limit."""


@dataclass
class ConflictGraph:
    # vertex i is the course vertex_order[i]
    vertex_order: List[str]
    graph: nx.Graph

    @property
    def number_of_vertices(self) -> int:
        return len(self.vertex_order)

    @property
    def number_of_edges(self) -> int:
        return self.graph.number_of_edges()

    def neighbors(self, i: int) -> Set[int]:
        return set(self.graph.neighbors(i))

    def has_edge(self, i: int, j: int) -> bool:
        return self.graph.has_edge(i, j)

    def adjacency_matrix(self) -> List[List[int]]:
        n = self.number_of_vertices
        mat = [[0] * n for _ in range(n)]
        for u, v in self.graph.edges():
            mat[u][v] = 1
            mat[v][u] = 1
        return mat


@dataclass
class ColoringResult:
    feasible: bool
    # colors[i] in [1, m] for vertex i; empty when infeasible
    colors: List[int] = field(default_factory=list)
    steps: int = 0


def infeasible(steps: int = 0) -> ColoringResult:
    return ColoringResult(feasible=False, colors=[], steps=steps)
