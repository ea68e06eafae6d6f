"""Graphic domain exceptions."""

from structural_patterns.domain.base.exceptions import InvariantViolationError, ValidationError


class GraphicValidationError(ValidationError):
    """Raised when graphic validation fails."""


class CycleDetectedError(InvariantViolationError):
    """Raised when adding a child would make a composite contain itself."""

    def __init__(self, group_name: str, child_name: str):
        message = f"Adding '{child_name}' to '{group_name}' would create a cycle"
        super().__init__(
            message,
            "CYCLE_DETECTED",
            {"group_name": group_name, "child_name": child_name},
        )
        self.group_name = group_name
        self.child_name = child_name
