"""Forest domain exceptions."""

from structural_patterns.domain.base.exceptions import ValidationError


class TreeTypeValidationError(ValidationError):
    """Raised when tree type or coordinate validation fails."""
