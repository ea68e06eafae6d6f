"""Base value object - immutable, compared by content."""
from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for all domain value objects."""
    model_config = ConfigDict(
        frozen=True,  # Value objects are immutable
        extra="forbid",
    )

    def __str__(self) -> str:
        values = ", ".join(f"{k}={v}" for k, v in self.model_dump().items())
        return f"{self.__class__.__name__}({values})"
