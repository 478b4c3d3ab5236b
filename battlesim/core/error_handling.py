"""
Error taxonomy and validation helpers.

Fatal validation failures (bad arguments, operations attempted in the wrong
state) raise ValidationError. Soft in-round failures never raise: they are
reported through MoveOutcome values and narrated in the CombatLog.
"""

from typing import Any, Optional

from battlesim.core.logging import log_error


class GameException(Exception):
    """Base class for every error raised by the simulator."""


class ValidationError(GameException, ValueError):
    """Raised when an argument or the current state makes a call invalid."""


# ==============================================================================
# VALIDATION HELPERS
# ==============================================================================
# These helpers log the failure with its context before raising, so that
# rejected calls leave a trace even when the caller swallows the exception.


def require_not_none(
    value: Any, param_name: str, context: Optional[dict[str, Any]] = None
) -> Any:
    """
    Validates that a required value is not None.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        The validated value

    Raises:
        ValidationError: If the value is None
    """
    if value is None:
        log_error(
            f"{param_name} must not be None",
            {**(context or {}), "param_name": param_name},
        )
        raise ValidationError(f"{param_name} must not be None")
    return value


def require_non_blank(
    value: Any, param_name: str, context: Optional[dict[str, Any]] = None
) -> str:
    """
    Validates that a value is a string with at least one non-space character.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        str: The validated string value

    Raises:
        ValidationError: If validation fails
    """
    if not isinstance(value, str) or not value.strip():
        log_error(
            f"{param_name} must be a non-blank string, got: {value!r}",
            {
                **(context or {}),
                "param_name": param_name,
                "type": type(value).__name__,
            },
        )
        raise ValidationError(f"{param_name} must not be blank")
    return value


def require_range(
    value: Any,
    min_val: int,
    max_val: int,
    param_name: str,
    context: Optional[dict[str, Any]] = None,
) -> int:
    """
    Validates that a value is an integer within [min_val, max_val].

    Raises:
        ValidationError: If the value is not an int or is out of range
    """
    if not isinstance(value, int) or isinstance(value, bool) or not min_val <= value <= max_val:
        log_error(
            f"{param_name} must be between {min_val} and {max_val}, got: {value!r}",
            {**(context or {}), "param_name": param_name},
        )
        raise ValidationError(
            f"{param_name} must be between {min_val} and {max_val} (inclusive)"
        )
    return value


def require_non_negative(
    value: Any, param_name: str, context: Optional[dict[str, Any]] = None
) -> int:
    """
    Validates that a value is an integer greater than or equal to zero.

    Raises:
        ValidationError: If the value is negative or not an int
    """
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        log_error(
            f"{param_name} must be a non-negative integer, got: {value!r}",
            {**(context or {}), "param_name": param_name},
        )
        raise ValidationError(f"{param_name} must be >= 0 (was {value!r})")
    return value
