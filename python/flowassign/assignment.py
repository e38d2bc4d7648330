"""Course assignment as a bipartite b-matching solved by maximum flow.

The network has one vertex per instructor (``0..n-1``), a source (``n``), a
sink (``n+1``) and one vertex per course (``n+2..n+m+1``)::

    source --max_courses--> instructor --1--> preferred course --1--> sink

Every saturated instructor-to-course arc is an assignment. Preference order is
not weighted: any listed course is equally acceptable.

Example:
    >>> from flowassign import Instructor, assign_courses
    >>> staff = [Instructor("Smith", ["A", "B"], 1), Instructor("Jones", ["B"], 1)]
    >>> [i.assigned_courses for i in assign_courses(staff, ["A", "B"])]
    [['A'], ['B']]
"""
from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from .config import SolverConfig, resolve_config
from .logging import get_logger
from .network import FlowNetwork
from .solver import edmonds_karp
from .typing import AssignmentMap

LOGGER = get_logger(__name__)


@dataclass
class Instructor:
    last_name: str
    preferences: Sequence[str]
    max_courses: int
    assigned_courses: list[str] = field(default_factory=list)


def build_assignment_network(
    instructors: Sequence[Instructor],
    courses: Sequence[str],
    *,
    config: SolverConfig | None = None,
) -> FlowNetwork:
    """Build the source/instructor/course/sink network.

    The result is not run through ``validate_network``; callers provide at
    least one instructor and one course and non-negative loads.
    """
    config = resolve_config(config)
    num_instructors = len(instructors)
    source = num_instructors
    sink = num_instructors + 1
    first_course = num_instructors + 2
    num_vertices = first_course + len(courses)

    capacity = np.zeros((num_vertices, num_vertices), dtype=config.dtype)
    for i, instructor in enumerate(instructors):
        capacity[source, i] = instructor.max_courses
        wanted = set(instructor.preferences)
        for offset, course in enumerate(courses):
            if course in wanted:
                capacity[i, first_course + offset] = 1
    capacity[first_course:, sink] = 1

    return FlowNetwork(
        capacity=capacity,
        residual=capacity.copy(),
        exists=capacity > 0,
        source=source,
        sink=sink,
    )


def _solve_assignment(
    instructors: Sequence[Instructor],
    courses: Sequence[str],
    config: SolverConfig | None,
) -> list[list[str]]:
    network = build_assignment_network(instructors, courses, config=config)
    edmonds_karp(network.residual, network.source, network.sink, config=config)

    num_instructors = len(instructors)
    first_course = num_instructors + 2
    assigned: list[list[str]] = [[] for _ in instructors]
    # Course-major scan: each list follows course order.
    for offset, course in enumerate(courses):
        reverse = network.residual[first_course + offset, :num_instructors]
        for i in np.flatnonzero(reverse == 1).tolist():
            assigned[i].append(course)

    LOGGER.debug(
        "Assigned %d of %d courses to %d instructors",
        sum(len(names) for names in assigned),
        len(courses),
        num_instructors,
    )
    return assigned


def assign_courses(
    instructors: Sequence[Instructor],
    courses: Sequence[str],
    *,
    config: SolverConfig | None = None,
) -> list[Instructor]:
    """Assign courses without touching the input records.

    Returns:
        New ``Instructor`` records in input order whose ``assigned_courses``
        holds only the courses assigned by this call.
    """
    assigned = _solve_assignment(instructors, courses, config)
    return [
        dataclasses.replace(instructor, assigned_courses=names)
        for instructor, names in zip(instructors, assigned)
    ]


def assign_courses_in_place(
    instructors: Sequence[Instructor],
    courses: Sequence[str],
    *,
    config: SolverConfig | None = None,
) -> None:
    """Append each instructor's assigned courses to its own record."""
    assigned = _solve_assignment(instructors, courses, config)
    for instructor, names in zip(instructors, assigned):
        instructor.assigned_courses.extend(names)


def assignment_map(instructors: Sequence[Instructor]) -> AssignmentMap:
    """Map last name to assigned courses; later duplicates overwrite earlier ones."""
    return {
        instructor.last_name: list(instructor.assigned_courses)
        for instructor in instructors
    }


__all__ = [
    "Instructor",
    "assign_courses",
    "assign_courses_in_place",
    "assignment_map",
    "build_assignment_network",
]
