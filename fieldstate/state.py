"""
Field validity states.

A field is always in exactly one of four statuses, each holding the value
it was last created or validated against:

    NotChecked(value)              no check has run since init/reset
    Debouncing(value, live_errors) live checks ran, delayed check pending
    Invalid(value, errors)         at least one check failed
    Valid(value)                   every configured check passed

FieldState is a closed union: consumers match on it and end with
``assert_never`` so a new status shows up as a type error everywhere it
is unhandled.

    match state:
        case Valid(value=v):
            ...
        case Invalid(errors=errs) | Debouncing(live_errors=errs):
            ...
        case NotChecked():
            ...
        case _:
            assert_never(state)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Never, NoReturn, Sequence, TypeAlias

from .types import E, Errors, T


@dataclass(frozen=True, slots=True)
class Valid(Generic[T]):
    """All configured checks passed."""

    value: T


@dataclass(frozen=True, slots=True)
class Invalid(Generic[T, E]):
    """
    At least one check failed.

    ``errors`` is never empty; an empty error sequence is what makes a
    value Valid instead.
    """

    value: T
    errors: Sequence[E]

    def __post_init__(self) -> None:
        errors = tuple(self.errors)
        if not errors:
            raise ValueError("Invalid requires at least one error")
        object.__setattr__(self, "errors", errors)


@dataclass(frozen=True, slots=True)
class Debouncing(Generic[T, E]):
    """Live checks ran (possibly clean); the delayed check has not run yet."""

    value: T
    live_errors: Sequence[E] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "live_errors", tuple(self.live_errors))


@dataclass(frozen=True, slots=True)
class NotChecked(Generic[T]):
    """No check has run against this value."""

    value: T


FieldState: TypeAlias = (
    Valid[Any] | Invalid[Any, Any] | Debouncing[Any, Any] | NotChecked[Any]
)


def _not_a_state(state: Never) -> NoReturn:
    raise TypeError(f"Expected a FieldState, got {type(state).__name__}")


def init(value: T) -> NotChecked[T]:
    """Start tracking a freshly entered value."""
    return NotChecked(value)


def reset(state: FieldState) -> NotChecked[Any]:
    """Drop status and errors, keep the value."""
    return NotChecked(get_value(state))


def get_value(state: FieldState) -> Any:
    match state:
        case (
            Valid(value=value)
            | Invalid(value=value)
            | Debouncing(value=value)
            | NotChecked(value=value)
        ):
            return value
        case _:
            _not_a_state(state)


def get_valid_value(state: FieldState) -> Any | None:
    """
    Return the value only when the field is Valid.

    Returns:
        The stored value for Valid, None for every other status
    """
    match state:
        case Valid(value=value):
            return value
        case Invalid() | Debouncing() | NotChecked():
            return None
        case _:
            _not_a_state(state)


def get_errors(state: FieldState) -> Errors:
    """
    Return every error currently attached to the field.

    Invalid yields its full error list and Debouncing its live errors, so a
    pending field can still show immediate feedback. Valid and NotChecked
    carry no errors.
    """
    match state:
        case Invalid(errors=errors):
            return errors
        case Debouncing(live_errors=live_errors):
            return live_errors
        case Valid() | NotChecked():
            return ()
        case _:
            _not_a_state(state)


def get_one_error(state: FieldState) -> Any | None:
    """
    Return the highest-precedence error, or None.

    Live errors are always listed before delayed ones, so they win when both
    exist.
    """
    errors = get_errors(state)
    return errors[0] if errors else None


def is_valid(state: FieldState) -> bool:
    match state:
        case Valid():
            return True
        case Invalid() | Debouncing() | NotChecked():
            return False
        case _:
            _not_a_state(state)
