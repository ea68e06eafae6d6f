"""Forest value objects: intrinsic tree type state and extrinsic coordinates."""
from typing import Tuple, Union

from pydantic import field_validator
from pydantic import ValidationError as PydanticValidationError

from structural_patterns.domain.base.value_objects import ValueObject
from structural_patterns.domain.forest.exceptions import TreeTypeValidationError


class _ForestValueObject(ValueObject):
    """Value object that reports bad input as a forest validation error."""

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            raise TreeTypeValidationError(
                f"Invalid {self.__class__.__name__}",
                details={"errors": [err["msg"] for err in e.errors()]}
            ) from e


class TreeTypeKey(_ForestValueObject):
    """Every attribute that determines a tree type, in a fixed order."""
    name: str
    color: str
    texture: str

    @field_validator("name", "color", "texture")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("tree type attributes must not be empty")
        return v

    @property
    def identifier(self) -> Tuple[str, str, str]:
        return (self.name, self.color, self.texture)

    def __str__(self) -> str:
        return "/".join(self.identifier)


class TreeType(_ForestValueObject):
    """Intrinsic state shared by every tree of the same kind."""
    name: str
    color: str
    texture: str

    @classmethod
    def from_key(cls, key: TreeTypeKey) -> "TreeType":
        return cls(name=key.name, color=key.color, texture=key.texture)

    @property
    def key(self) -> TreeTypeKey:
        return TreeTypeKey(name=self.name, color=self.color, texture=self.texture)

    def render(self, x: float, y: float) -> str:
        return (
            f"Drawing {self.name} tree of color {self.color} "
            f"and texture {self.texture} at ({x}, {y})"
        )


class Coordinates(_ForestValueObject):
    """Position of a single planted tree."""
    x: Union[int, float]
    y: Union[int, float]

    @classmethod
    def of(cls, x: Union[int, float], y: Union[int, float]) -> "Coordinates":
        return cls(x=x, y=y)
