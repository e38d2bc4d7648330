"""Python interface for flowassign.

Example:
    >>> from flowassign import solve_max_flow, max_flow_value
    >>> flow = solve_max_flow([(0, 1, 3), (0, 2, 2), (1, 2, 5), (1, 3, 2), (2, 3, 3)], 4)
    >>> max_flow_value(flow, source=0)
    5

Course assignment:
    ``assign_courses`` reduces an instructor/course assignment to the same
    max-flow engine and returns new ``Instructor`` records with
    ``assigned_courses`` filled in.
"""

from ._version import __version__
from .assignment import (
    Instructor,
    assign_courses,
    assign_courses_in_place,
    assignment_map,
    build_assignment_network,
)
from .config import DEFAULT_CONFIG, SolverConfig
from .errors import InvalidNetworkError, NetworkErrorKind
from .network import Edge, FlowNetwork, validate_network
from .search import find_augmenting_path
from .solver import edmonds_karp, max_flow_value, solve_max_flow
from .typing import AssignmentMap, FlowDict

__all__ = [
    "AssignmentMap",
    "DEFAULT_CONFIG",
    "Edge",
    "FlowDict",
    "FlowNetwork",
    "Instructor",
    "InvalidNetworkError",
    "NetworkErrorKind",
    "SolverConfig",
    "assign_courses",
    "assign_courses_in_place",
    "assignment_map",
    "build_assignment_network",
    "edmonds_karp",
    "find_augmenting_path",
    "max_flow_value",
    "solve_max_flow",
    "validate_network",
    "__version__",
]
