"""NetworkX adapter for flowassign.

Lets callers solve max flow on a labelled ``nx.DiGraph`` instead of an
integer edge list. Source and sink are not passed in: like the edge-list API,
they are the unique nodes without incoming and without outgoing capacity.
"""
from __future__ import annotations

import math
import numbers
import operator
from typing import Dict, List, Tuple

import networkx as nx

from .config import SolverConfig
from .network import Edge
from .solver import solve_max_flow
from .typing import FlowDict, FlowValue, Node


def _as_capacity(cap) -> int:
    # numpy integers register as numbers.Integral
    if isinstance(cap, numbers.Integral):
        return operator.index(cap)
    if not isinstance(cap, numbers.Real) or not math.isfinite(cap):
        raise ValueError("Each edge must specify a finite capacity.")
    if cap != int(cap):
        raise ValueError("Edge capacity must be an integer.")
    return int(cap)


def _graph_to_edges(G: nx.DiGraph, capacity: str = "capacity") -> Tuple[List[Edge], Dict[Node, int], List[Node]]:
    if not G.is_directed():
        raise ValueError("Only directed graphs are supported.")
    if G.is_multigraph():
        raise ValueError("Multigraphs are not supported; merge parallel edges first.")
    nodes = list(G.nodes())
    index = {node: idx for idx, node in enumerate(nodes)}
    edges = []
    for u, v, data in G.edges(data=True):
        if capacity not in data:
            raise ValueError("Each edge must specify a finite capacity.")
        edges.append(Edge(index[u], index[v], _as_capacity(data[capacity])))
    return edges, index, nodes


def maximum_flow(
    G: nx.DiGraph,
    *,
    capacity: str = "capacity",
    config: SolverConfig | None = None,
    return_stats: bool = False,
) -> tuple[FlowValue, FlowDict] | tuple[FlowValue, FlowDict, dict]:
    """Return ``(flow_value, flow_dict)`` with the flow dict in NetworkX format.

    Args:
        G: NetworkX DiGraph with integer capacities on every edge.
        capacity: Edge attribute holding the capacity.
        config: Solver options.
        return_stats: When True, also return the solver stats with ``source``
            and ``sink`` translated back to node labels.

    Raises:
        ValueError: For undirected graphs, multigraphs or bad capacities.
        InvalidNetworkError: If the graph fails network validation.
    """
    edges, _index, nodes = _graph_to_edges(G, capacity)
    flow_edges, stats = solve_max_flow(edges, len(nodes), config=config, return_stats=True)
    flow_dict: FlowDict = {node: {} for node in nodes}
    for tail, head, flow in flow_edges:
        flow_dict[nodes[tail]][nodes[head]] = flow
    if return_stats:
        stats = dict(stats, source=nodes[stats["source"]], sink=nodes[stats["sink"]])
        return stats["flow_value"], flow_dict, stats
    return stats["flow_value"], flow_dict


__all__ = ["maximum_flow"]
