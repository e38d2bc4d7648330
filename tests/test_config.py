import numpy as np
import pytest

from flowassign import DEFAULT_CONFIG, Instructor, SolverConfig, build_assignment_network, solve_max_flow, validate_network


def test_default_config():
    assert DEFAULT_CONFIG.dtype is np.int64
    assert DEFAULT_CONFIG.log_paths is False


def test_dtype_controls_matrix_type(classic_edges):
    config = SolverConfig(dtype=np.int32)
    network = validate_network(classic_edges, 4, config=config)
    assert network.capacity.dtype == np.int32
    assert network.residual.dtype == np.int32
    staff = [Instructor("Smith", ["A"], 1)]
    assert build_assignment_network(staff, ["A"], config=config).capacity.dtype == np.int32


def test_dtype_does_not_change_result(classic_edges):
    assert solve_max_flow(classic_edges, 4, config=SolverConfig(dtype=np.int32)) == solve_max_flow(
        classic_edges, 4
    )


def test_non_integer_dtype_is_rejected():
    with pytest.raises(ValueError, match="integer"):
        SolverConfig(dtype=np.float64)


def test_unsigned_dtype_is_rejected():
    with pytest.raises(ValueError, match="signed"):
        SolverConfig(dtype=np.uint64)
