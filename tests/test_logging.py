import logging

import pytest

from flowassign import SolverConfig, solve_max_flow, validate_network
from flowassign.logging import (
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    reset_logging()
    setup_root_logger()


def test_logger_naming():
    assert get_logger("flowassign.solver").name == "flowassign.solver"


def test_package_logger_is_quiet_by_default():
    assert logging.getLogger("flowassign").getEffectiveLevel() == logging.WARNING


def test_set_global_log_level():
    set_global_log_level(logging.INFO)
    root = logging.getLogger("flowassign")
    assert root.level == logging.INFO
    assert all(handler.level == logging.INFO for handler in root.handlers)
    enable_debug_logging()
    assert get_logger("flowassign.network").getEffectiveLevel() == logging.DEBUG


def test_reset_logging_drops_handlers():
    reset_logging()
    assert logging.getLogger("flowassign").handlers == []


def test_rejection_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="flowassign")
    with pytest.raises(ValueError):
        validate_network([(0, 0, 1)], 2)
    assert "SELF_LOOP" in caplog.text


def test_augmenting_paths_logged_when_enabled(caplog, classic_edges):
    caplog.set_level(logging.DEBUG, logger="flowassign")
    solve_max_flow(classic_edges, 4, config=SolverConfig(log_paths=True))
    assert "Augmenting path 0 -> 1 -> 3 carries 2" in caplog.text
    assert "Max flow 5 from 0 to 3" in caplog.text


def test_augmenting_paths_not_logged_by_default(caplog, classic_edges):
    caplog.set_level(logging.DEBUG, logger="flowassign")
    solve_max_flow(classic_edges, 4)
    assert "Augmenting path" not in caplog.text
