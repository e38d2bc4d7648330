"""Breadth-first augmenting path search over a residual matrix."""
from __future__ import annotations

from collections import deque

import numpy as np

from .typing import Matrix, ParentArray, Vertex

NO_PARENT = -1


def find_augmenting_path(
    residual: Matrix,
    source: Vertex,
    sink: Vertex,
) -> tuple[bool, ParentArray]:
    """Search for a source-to-sink path of positive residual capacity.

    Neighbours are visited in increasing vertex order, so the path found is
    the first one breadth-first search reaches (fewest arcs, ties to the
    smallest index). ``residual`` is only read.

    Returns:
        ``(found, parent)`` where ``parent[v]`` is the predecessor of ``v`` on
        the search tree and ``NO_PARENT`` for the source and unreached
        vertices. ``parent`` only describes a path when ``found`` is true.
    """
    num_vertices = residual.shape[0]
    parent = [NO_PARENT] * num_vertices
    visited = np.zeros(num_vertices, dtype=bool)
    visited[source] = True

    queue = deque([source])
    while queue:
        vertex = queue.popleft()
        for neighbour in np.flatnonzero(residual[vertex] > 0).tolist():
            if visited[neighbour]:
                continue
            visited[neighbour] = True
            parent[neighbour] = vertex
            queue.append(neighbour)
    return bool(visited[sink]), parent


def path_to(parent: ParentArray, source: Vertex, sink: Vertex) -> list[Vertex]:
    """Vertex sequence from ``source`` to ``sink`` encoded by ``parent``."""
    path = [sink]
    vertex = sink
    while vertex != source:
        vertex = parent[vertex]
        path.append(vertex)
    path.reverse()
    return path


__all__ = ["NO_PARENT", "find_augmenting_path", "path_to"]
