"""Error handling utilities for pyfamtree.

Provides exception classes and validation helpers shared by the
tree builder, the layout engine and the command line.
"""

import math


class FamilyTreeError(Exception):
    """Base exception for pyfamtree errors."""

    pass


class ValidationError(FamilyTreeError, ValueError):
    """Exception raised when input validation fails."""

    def __init__(self, field: str, value: object, expected: str) -> None:
        """Initialize validation error.

        Args:
            field: Field name that failed validation
            value: Invalid value
            expected: Expected type/description
        """
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"Validation failed for '{field}': expected {expected}, got {value!r}")


class LayoutError(FamilyTreeError):
    """Exception raised when layout calculation fails."""

    def __init__(self, reason: str) -> None:
        """Initialize layout error.

        Args:
            reason: Reason for failure
        """
        self.reason = reason
        super().__init__(f"Layout calculation failed: {reason}")


class TreeEditError(FamilyTreeError):
    """Exception raised when an edit cannot be applied to the tree."""

    pass


class NodeNotFoundError(TreeEditError, KeyError):
    """Raised when an edit targets an id that is not in the tree."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"No family member with id {node_id!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class DuplicateIdError(TreeEditError):
    """Raised when a new member would reuse an id already in the tree."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Duplicate family member id {node_id!r}")


def validate_positive(value: int | float, name: str = "value") -> None:
    """Validate that a value is a finite number greater than zero.

    Args:
        value: Value to validate
        name: Name of the value for error messages

    Raises:
        ValidationError: If value is not a positive finite number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(name, value, "a number")
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(name, value, "a positive finite number")


def validate_range(value: int | float, min_val: int | float, max_val: int | float, name: str = "value") -> None:
    """Validate that a value is within range.

    Args:
        value: Value to validate
        min_val: Minimum allowed value
        max_val: Maximum allowed value
        name: Name of the value for error messages

    Raises:
        ValidationError: If value is out of range
    """
    if not (min_val <= value <= max_val):
        raise ValidationError(name, value, f"value between {min_val} and {max_val}")
