"""Graphic value objects."""
from enum import Enum


class ShapeKind(str, Enum):
    """Shape kinds drawn by the catalog's leaf graphics."""
    CIRCLE = "Circle"
    RECTANGLE = "Rectangle"
