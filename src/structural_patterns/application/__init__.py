"""Application layer - demonstration drivers for the catalog."""

from .dto import PatternRunDTO
from .service import PatternDemoService, UnknownPatternError

__all__ = ["PatternDemoService", "PatternRunDTO", "UnknownPatternError"]
