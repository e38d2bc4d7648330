"""Type aliases for the flowassign public API."""
from __future__ import annotations

from typing import Dict, Hashable, List

import numpy as np
import numpy.typing as npt

Vertex = int
Capacity = int
FlowValue = int
Node = Hashable

Matrix = npt.NDArray[np.integer]
BoolMatrix = npt.NDArray[np.bool_]
ParentArray = List[int]
FlowDict = Dict[Node, Dict[Node, FlowValue]]
AssignmentMap = Dict[str, List[str]]

__all__ = [
    "AssignmentMap",
    "BoolMatrix",
    "Capacity",
    "FlowDict",
    "FlowValue",
    "Matrix",
    "Node",
    "ParentArray",
    "Vertex",
]
