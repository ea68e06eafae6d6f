"""Graphic part-whole hierarchy.

A ``Graphic`` is either a ``Leaf`` (one shape) or a ``CompositeGraphic``
(an ordered group of graphics). Both answer ``render()`` so client code
treats single shapes and whole groups the same way.
"""
from abc import ABC, abstractmethod
from typing import Iterator, List, Tuple, Union

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator
from pydantic import ValidationError as PydanticValidationError

from structural_patterns.domain.graphic.exceptions import (
    CycleDetectedError,
    GraphicValidationError,
)
from structural_patterns.domain.graphic.value_objects import ShapeKind
from structural_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Graphic(BaseModel, ABC):
    """Component of the hierarchy: anything that can be rendered."""
    model_config = ConfigDict(extra="forbid")

    name: str

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            raise GraphicValidationError(
                f"Invalid {self.__class__.__name__}",
                details={"errors": [err["msg"] for err in e.errors()]}
            ) from e

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Names must be non-blank."""
        if not v or not v.strip():
            raise ValueError("name must not be empty")
        return v

    @abstractmethod
    def render(self) -> List[str]:
        """Describe this graphic, one line per drawn element."""
        raise NotImplementedError("This method should be implemented!")

    # Graphics are compared by identity: two groups named alike are still
    # different nodes of the tree.
    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)


class Leaf(Graphic):
    """A single shape. Immutable and terminal."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: str

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, v: Union[str, ShapeKind]) -> str:
        if isinstance(v, ShapeKind):
            return v.value
        if not isinstance(v, str) or not v.strip():
            raise ValueError("kind must be a non-empty string")
        return v

    @classmethod
    def circle(cls, name: str) -> "Leaf":
        return cls(kind=ShapeKind.CIRCLE, name=name)

    @classmethod
    def rectangle(cls, name: str) -> "Leaf":
        return cls(kind=ShapeKind.RECTANGLE, name=name)

    def render(self) -> List[str]:
        return [f"Drawing {self.kind}: {self.name}"]

    def __repr__(self) -> str:
        return f"Leaf(kind='{self.kind}', name='{self.name}')"


class CompositeGraphic(Graphic):
    """
    Ordered group of graphics, itself a graphic.

    Children keep insertion order and may be leaves or other composites.
    The same child may be added more than once; it is then rendered once
    per occurrence. A composite may never contain itself, directly or
    through a descendant group.
    """

    _children: List[Graphic] = PrivateAttr(default_factory=list)

    def add(self, graphic: Graphic) -> bool:
        """
        Append a child graphic.

        Args:
            graphic: Leaf or composite to append

        Returns:
            True once the child is appended

        Raises:
            GraphicValidationError: If the argument is not a Graphic
            CycleDetectedError: If the child is this group or contains it
        """
        if not isinstance(graphic, Graphic):
            raise GraphicValidationError(
                f"Cannot add {type(graphic).__name__} to composite '{self.name}'",
                details={"group_name": self.name}
            )
        if graphic is self or (
            isinstance(graphic, CompositeGraphic) and graphic.contains(self)
        ):
            raise CycleDetectedError(self.name, graphic.name)

        self._children.append(graphic)
        logger.debug("Graphic added", group=self.name, child=graphic.name,
                     size=len(self._children))
        return True

    def remove(self, graphic: Graphic) -> int:
        """
        Remove every occurrence of a child, matched by identity.

        Returns:
            Number of occurrences removed; 0 when the child is absent
        """
        before = len(self._children)
        self._children = [child for child in self._children if child is not graphic]
        removed = before - len(self._children)
        if removed:
            logger.debug("Graphic removed", group=self.name, child=graphic.name,
                         occurrences=removed)
        return removed

    def contains(self, graphic: Graphic) -> bool:
        """True if ``graphic`` is a descendant of this group."""
        stack = list(self._children)
        while stack:
            node = stack.pop()
            if node is graphic:
                return True
            if isinstance(node, CompositeGraphic):
                stack.extend(node._children)
        return False

    @property
    def children(self) -> Tuple[Graphic, ...]:
        return tuple(self._children)

    def render(self) -> List[str]:
        # Pre-order walk on an explicit stack; children pushed in reverse
        # so they pop in insertion order.
        lines: List[str] = []
        stack: List[Graphic] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, CompositeGraphic):
                lines.append(f"Drawing Composite: {node.name}")
                stack.extend(reversed(node._children))
            else:
                lines.extend(node.render())
        return lines

    def leaf_count(self) -> int:
        """Number of leaf occurrences below this group."""
        count = 0
        stack = list(self._children)
        while stack:
            node = stack.pop()
            if isinstance(node, CompositeGraphic):
                stack.extend(node._children)
            else:
                count += 1
        return count

    def depth(self) -> int:
        """Height of the subtree; an empty group has depth 1."""
        deepest = 1
        stack: List[Tuple[Graphic, int]] = [(self, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            if isinstance(node, CompositeGraphic):
                stack.extend((child, level + 1) for child in node._children)
        return deepest

    def __copy__(self) -> "CompositeGraphic":
        copied = super().__copy__()
        copied._children = list(self._children)
        return copied

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Graphic]:
        return iter(tuple(self._children))

    def __repr__(self) -> str:
        return f"CompositeGraphic(name='{self.name}', children={len(self._children)})"
