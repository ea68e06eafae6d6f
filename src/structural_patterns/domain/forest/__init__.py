"""Forest bounded context - tree types shared across planted trees."""

from .exceptions import TreeTypeValidationError
from .forest_aggregate import Forest, Tree
from .tree_type_factory import TreeTypeFactory
from .value_objects import Coordinates, TreeType, TreeTypeKey

__all__ = [
    "Forest",
    "Tree",
    "TreeType",
    "TreeTypeKey",
    "TreeTypeFactory",
    "Coordinates",
    "TreeTypeValidationError",
]
