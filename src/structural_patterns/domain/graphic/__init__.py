"""Graphic bounded context - part-whole shape hierarchies."""

from .exceptions import CycleDetectedError, GraphicValidationError
from .graphic import CompositeGraphic, Graphic, Leaf
from .value_objects import ShapeKind

__all__ = [
    "Graphic",
    "Leaf",
    "CompositeGraphic",
    "ShapeKind",
    "GraphicValidationError",
    "CycleDetectedError",
]
