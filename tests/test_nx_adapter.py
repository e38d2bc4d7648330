import math

import networkx as nx
import numpy as np
import pytest

from flowassign import InvalidNetworkError, NetworkErrorKind
from flowassign import nx as flow_nx


def _labelled_graph() -> nx.DiGraph:
    graph = nx.DiGraph()
    graph.add_edge("s", "a", capacity=3)
    graph.add_edge("s", "b", capacity=2)
    graph.add_edge("a", "b", capacity=5)
    graph.add_edge("a", "t", capacity=2)
    graph.add_edge("b", "t", capacity=3)
    return graph


def test_maximum_flow_matches_networkx():
    graph = _labelled_graph()
    value, flow = flow_nx.maximum_flow(graph)
    assert value == nx.maximum_flow_value(graph, "s", "t") == 5
    assert flow["s"] == {"a": 3, "b": 2}
    assert flow["t"] == {}


def test_maximum_flow_stats_use_node_labels():
    value, _flow, stats = flow_nx.maximum_flow(_labelled_graph(), return_stats=True)
    assert value == stats["flow_value"]
    assert (stats["source"], stats["sink"]) == ("s", "t")


def test_custom_capacity_attribute():
    graph = nx.DiGraph()
    graph.add_edge(0, 1, bandwidth=4)
    graph.add_edge(1, 2, bandwidth=1)
    value, flow = flow_nx.maximum_flow(graph, capacity="bandwidth")
    assert value == 1
    assert flow[0][1] == 1


def test_graph_requires_directed():
    graph = nx.Graph()
    graph.add_edge("a", "b", capacity=1)
    with pytest.raises(ValueError, match="directed"):
        flow_nx.maximum_flow(graph)


def test_multigraph_is_rejected():
    graph = nx.MultiDiGraph()
    graph.add_edge("a", "b", capacity=1)
    with pytest.raises(ValueError, match="Multigraph"):
        flow_nx.maximum_flow(graph)


def test_missing_capacity_is_error():
    graph = nx.DiGraph()
    graph.add_edge("a", "b")
    with pytest.raises(ValueError, match="capacity"):
        flow_nx.maximum_flow(graph)


def test_infinite_capacity_is_error():
    graph = nx.DiGraph()
    graph.add_edge("a", "b", capacity=math.inf)
    with pytest.raises(ValueError, match="capacity"):
        flow_nx.maximum_flow(graph)


def test_fractional_capacity_is_error():
    graph = nx.DiGraph()
    graph.add_edge("a", "b", capacity=1.5)
    with pytest.raises(ValueError, match="integer"):
        flow_nx.maximum_flow(graph)


def test_invalid_network_propagates():
    graph = nx.DiGraph()
    graph.add_edge("a", "b", capacity=1)
    graph.add_edge("b", "a", capacity=1)
    with pytest.raises(InvalidNetworkError) as excinfo:
        flow_nx.maximum_flow(graph)
    assert excinfo.value.kind is NetworkErrorKind.NOT_ONE_SOURCE


def test_numpy_integer_capacities_are_accepted():
    graph = nx.DiGraph()
    graph.add_edge("s", "m", capacity=np.int64(3))
    graph.add_edge("m", "t", capacity=np.int32(2))
    value, flow = flow_nx.maximum_flow(graph)
    assert value == 2
    assert flow["s"]["m"] == 2
    assert type(flow["s"]["m"]) is int


def test_integral_float_capacity_is_accepted():
    graph = nx.DiGraph()
    graph.add_edge("s", "t", capacity=4.0)
    assert flow_nx.maximum_flow(graph)[0] == 4
