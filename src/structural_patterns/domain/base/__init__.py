"""Base domain layer - shared kernel for all bounded contexts."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    InvariantViolationError,
    ValidationError,
)
from .value_objects import ValueObject
from .flyweight import FlyweightFactory

__all__ = [
    # Value Objects
    "ValueObject",
    # Flyweights
    "FlyweightFactory",
    # Exceptions
    "DomainException",
    "ValidationError",
    "InvariantViolationError",
    "ConfigurationError",
]
