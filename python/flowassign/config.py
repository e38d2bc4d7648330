"""Solver configuration."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SolverConfig:
    """Options shared by the validator and the max-flow engine."""

    # Signed integer dtype of the capacity and residual matrices
    dtype: type = np.int64

    # Log every augmenting path with its bottleneck at DEBUG level
    log_paths: bool = False

    def __post_init__(self) -> None:
        if not np.issubdtype(np.dtype(self.dtype), np.signedinteger):
            raise ValueError("dtype must be a signed numpy integer type.")


DEFAULT_CONFIG = SolverConfig()


def resolve_config(config: SolverConfig | None) -> SolverConfig:
    return DEFAULT_CONFIG if config is None else config


__all__ = ["DEFAULT_CONFIG", "SolverConfig", "resolve_config"]
