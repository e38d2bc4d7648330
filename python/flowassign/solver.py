"""Edmonds-Karp maximum flow on dense residual matrices."""
from __future__ import annotations

from typing import Iterable

from .config import SolverConfig, resolve_config
from .logging import get_logger
from .network import Edge, validate_network
from .search import find_augmenting_path, path_to
from .typing import FlowValue, Matrix, Vertex

LOGGER = get_logger(__name__)


def _augment_all(
    residual: Matrix,
    source: Vertex,
    sink: Vertex,
    config: SolverConfig,
) -> int:
    # A vertex that is both the unique source and the unique sink is isolated;
    # there is no path to augment and the search would report it reachable.
    if source == sink:
        return 0

    augmentations = 0
    while True:
        found, parent = find_augmenting_path(residual, source, sink)
        if not found:
            return augmentations

        bottleneck = None
        vertex = sink
        while vertex != source:
            prev = parent[vertex]
            arc = int(residual[prev, vertex])
            bottleneck = arc if bottleneck is None else min(bottleneck, arc)
            vertex = prev

        vertex = sink
        while vertex != source:
            prev = parent[vertex]
            residual[prev, vertex] -= bottleneck
            residual[vertex, prev] += bottleneck
            vertex = prev

        augmentations += 1
        if config.log_paths:
            LOGGER.debug(
                "Augmenting path %s carries %d",
                " -> ".join(map(str, path_to(parent, source, sink))),
                bottleneck,
            )


def edmonds_karp(
    residual: Matrix,
    source: Vertex,
    sink: Vertex,
    *,
    config: SolverConfig | None = None,
) -> None:
    """Push flow along BFS augmenting paths until none remain.

    ``residual`` must start equal to the capacity matrix. It is updated in
    place: each augmentation subtracts the bottleneck from every forward arc
    on the path and adds it to the matching reverse arc. Afterwards
    ``capacity - residual`` is the flow on each input arc.
    """
    _augment_all(residual, source, sink, resolve_config(config))


def max_flow_value(flow_edges: Iterable[Edge], source: Vertex) -> FlowValue:
    """Total flow leaving ``source`` in a solved edge list."""
    return sum(edge.weight for edge in flow_edges if edge.tail == source)


def solve_max_flow(
    edges: Iterable[Edge | tuple[int, int, int]],
    num_vertices: int,
    *,
    config: SolverConfig | None = None,
    return_stats: bool = False,
) -> list[Edge] | tuple[list[Edge], dict]:
    """Compute a maximum flow and report it per input edge.

    Source and sink are the unique vertices without incoming and without
    outgoing capacity respectively.

    Args:
        edges: ``Edge`` values or ``(tail, head, weight)`` triples with
            positive integer weights (capacities).
        num_vertices: Number of vertices, indexed ``0..num_vertices-1``.
        config: Solver options; ``DEFAULT_CONFIG`` when omitted.
        return_stats: When True, return ``(flow_edges, stats)``.

    Returns:
        One ``Edge`` per input arc in row-major ``(tail, head)`` order, with
        ``weight`` replaced by the flow it carries.

    Raises:
        InvalidNetworkError: If the edge list fails validation. Nothing is
            solved in that case.
    """
    config = resolve_config(config)
    network = validate_network(edges, num_vertices, config=config)
    augmentations = _augment_all(network.residual, network.source, network.sink, config)
    flow_edges = network.flow_edges()
    flow_value = max_flow_value(flow_edges, network.source)
    LOGGER.debug(
        "Max flow %d from %d to %d after %d augmentations",
        flow_value,
        network.source,
        network.sink,
        augmentations,
    )
    if return_stats:
        stats = {
            "flow_value": flow_value,
            "source": network.source,
            "sink": network.sink,
            "augmentations": augmentations,
            "num_vertices": network.num_vertices,
            "num_edges": len(flow_edges),
        }
        return flow_edges, stats
    return flow_edges


__all__ = ["edmonds_karp", "max_flow_value", "solve_max_flow"]
