"""Errors raised when a flow network fails validation."""
from __future__ import annotations

import enum


class NetworkErrorKind(enum.Enum):
    """Which structural invariant of a flow network was violated."""

    TOO_FEW_VERTICES = "Too few vertices."
    TOO_FEW_EDGES = "Too few edges."
    ZERO_WEIGHT_EDGE = "Detected edge weight of 0."
    NEGATIVE_WEIGHT_EDGE = "Detected negative edge weight."
    BAD_ENDPOINT = "Edge interacts with nonexistent vertex."
    SELF_LOOP = "At least one self-loop."
    MULTI_EDGE = "Detected multi-edges."
    CAPACITY_OVERFLOW = "Edge capacities overflow the matrix integer type."
    NOT_ONE_SOURCE = "Zero or more than one source."
    NOT_ONE_SINK = "Zero or more than one sink."

    @property
    def message(self) -> str:
        return self.value


class InvalidNetworkError(ValueError):
    """Raised by the validator before any flow is computed.

    Attributes:
        kind: The violated invariant.
        edge: The offending edge for per-edge checks, otherwise ``None``.
    """

    def __init__(self, kind: NetworkErrorKind, edge=None) -> None:
        message = kind.message
        if edge is not None:
            message = f"{message} (edge {tuple(edge)})"
        super().__init__(message)
        self.kind = kind
        self.edge = edge


__all__ = ["InvalidNetworkError", "NetworkErrorKind"]
