"""Edge list to dense flow-network conversion and validation."""
from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Iterable, NamedTuple

import numpy as np

from .config import SolverConfig, resolve_config
from .errors import InvalidNetworkError, NetworkErrorKind
from .logging import get_logger
from .typing import BoolMatrix, Capacity, Matrix, Vertex

LOGGER = get_logger(__name__)


class Edge(NamedTuple):
    """A directed arc ``tail -> head``.

    ``weight`` is the capacity on input and the carried flow on output.
    """

    tail: Vertex
    head: Vertex
    weight: Capacity


@dataclass(frozen=True, eq=False)
class FlowNetwork:
    """Dense matrices for one solve call.

    ``residual`` starts as a copy of ``capacity`` and is the only matrix the
    engine mutates. ``exists`` marks the arcs present in the input.
    """

    capacity: Matrix
    residual: Matrix
    exists: BoolMatrix
    source: Vertex
    sink: Vertex

    @property
    def num_vertices(self) -> int:
        return int(self.capacity.shape[0])

    def flow_matrix(self) -> Matrix:
        """Flow on each input arc; zero where no input arc exists.

        The residual matrix only records net flow between two vertices, so
        for opposite arcs ``u -> v`` and ``v -> u`` the flow is reported on
        the direction it actually moves and the other arc carries zero.
        """
        net = np.clip(self.capacity - self.residual, 0, self.capacity)
        return np.where(self.exists, net, 0)

    def flow_edges(self) -> list[Edge]:
        """Input arcs in row-major order with their weight replaced by flow."""
        flow = self.flow_matrix()
        return [
            Edge(int(u), int(v), int(flow[u, v]))
            for u, v in np.argwhere(self.exists)
        ]


def _fail(kind: NetworkErrorKind, edge: Edge | None = None) -> InvalidNetworkError:
    LOGGER.debug("Rejected network: %s", kind.name)
    return InvalidNetworkError(kind, edge)


def _as_edge(raw) -> Edge:
    tail, head, weight = raw
    return Edge(operator.index(tail), operator.index(head), operator.index(weight))


def _unique_vertex(mask: np.ndarray) -> Vertex | None:
    candidates = np.flatnonzero(mask)
    if len(candidates) != 1:
        return None
    return int(candidates[0])


def validate_network(
    edges: Iterable[Edge | tuple[int, int, int]],
    num_vertices: int,
    *,
    config: SolverConfig | None = None,
) -> FlowNetwork:
    """Check an edge list and build its capacity, residual and existence matrices.

    Checks run in a fixed order and the first violation is raised:

    1. fewer than two vertices;
    2. per edge, in input order: zero weight, negative weight, endpoint out
       of range, self-loop, repeated ``(tail, head)`` pair, weight too large
       for ``config.dtype``;
    3. no edges at all;
    4. an opposite arc pair whose summed capacity overflows ``config.dtype``;
    5. not exactly one vertex without incoming capacity (the source);
    6. not exactly one vertex without outgoing capacity (the sink).

    Args:
        edges: ``Edge`` values or ``(tail, head, weight)`` triples.
        num_vertices: Number of vertices, indexed ``0..num_vertices-1``.
        config: Solver options; ``DEFAULT_CONFIG`` when omitted.

    Raises:
        InvalidNetworkError: With ``kind`` naming the violated invariant.
    """
    config = resolve_config(config)
    num_vertices = operator.index(num_vertices)
    if num_vertices < 2:
        raise _fail(NetworkErrorKind.TOO_FEW_VERTICES)

    capacity = np.zeros((num_vertices, num_vertices), dtype=config.dtype)
    exists = np.zeros((num_vertices, num_vertices), dtype=bool)
    num_edges = 0
    limit = int(np.iinfo(capacity.dtype).max)

    for raw in edges:
        edge = _as_edge(raw)
        tail, head, weight = edge
        if weight == 0:
            raise _fail(NetworkErrorKind.ZERO_WEIGHT_EDGE, edge)
        if weight < 0:
            raise _fail(NetworkErrorKind.NEGATIVE_WEIGHT_EDGE, edge)
        if not (0 <= tail < num_vertices and 0 <= head < num_vertices):
            raise _fail(NetworkErrorKind.BAD_ENDPOINT, edge)
        if tail == head:
            raise _fail(NetworkErrorKind.SELF_LOOP, edge)
        if exists[tail, head]:
            raise _fail(NetworkErrorKind.MULTI_EDGE, edge)
        if weight > limit:
            raise _fail(NetworkErrorKind.CAPACITY_OVERFLOW, edge)
        exists[tail, head] = True
        capacity[tail, head] = weight
        num_edges += 1

    if num_edges == 0:
        raise _fail(NetworkErrorKind.TOO_FEW_EDGES)

    # A residual entry can grow to capacity[u, v] + capacity[v, u].
    if (capacity > limit - capacity.T).any():
        raise _fail(NetworkErrorKind.CAPACITY_OVERFLOW)

    # Degree heuristic only; isolated vertices count as sources and sinks.
    source = _unique_vertex(~capacity.any(axis=0))
    if source is None:
        raise _fail(NetworkErrorKind.NOT_ONE_SOURCE)
    sink = _unique_vertex(~capacity.any(axis=1))
    if sink is None:
        raise _fail(NetworkErrorKind.NOT_ONE_SINK)

    LOGGER.debug(
        "Validated network: %d vertices, %d edges, source=%d, sink=%d",
        num_vertices,
        num_edges,
        source,
        sink,
    )
    return FlowNetwork(
        capacity=capacity,
        residual=capacity.copy(),
        exists=exists,
        source=source,
        sink=sink,
    )


__all__ = ["Edge", "FlowNetwork", "validate_network"]
