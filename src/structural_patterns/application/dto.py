"""Data transfer objects returned by the demo service."""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class PatternRunDTO(BaseModel):
    """Outcome of running one pattern demonstration."""
    model_config = ConfigDict(frozen=True)

    pattern: str
    category: str = "Structural"
    lines: List[str] = Field(default_factory=list)
    stats: Dict[str, int] = Field(default_factory=dict)

    @property
    def banner(self) -> str:
        return f"{self.category} : {self.pattern.capitalize()} pattern executed.."

    def to_dict(self) -> Dict[str, Any]:
        """Stable public API - returns a plain dictionary."""
        return self.model_dump()
