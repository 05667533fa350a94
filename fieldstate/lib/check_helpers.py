"""
Helper functions for running checks.

Shared by the pipeline slots and the all_of() combinator so both fold
over checks the same way.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from ..context import is_strict
from ..types import Check, Errors

logger = logging.getLogger(__name__)


def ensure_check(check: Any) -> Check:
    """Return check unchanged, or raise TypeError if it is not callable."""
    if not callable(check):
        raise TypeError(f"Check must be callable, got {type(check).__name__}")
    return check


def run_checks(checks: Iterable[Check], value: Any) -> Errors:
    """Run every check against value, concatenating errors in order."""
    errors: list[Any] = []
    for check in checks:
        errors.extend(as_errors(check, check(value)))
    return tuple(errors)


def as_errors(check: Check, result: Any) -> Errors:
    """
    Normalize what a check returned into an error tuple.

    Lists and tuples are always accepted. Outside strict mode, None means
    pass, a bare str is a single error and any other ordered Sequence is
    kept in order. Unordered or mapping results (set, dict, generators)
    are rejected in both modes.
    """
    if isinstance(result, tuple):
        return result
    if isinstance(result, list):
        return tuple(result)

    if is_strict():
        logger.debug(
            "Rejected %s result from %s", type(result).__name__, check_name(check)
        )
        raise TypeError(
            f"Check {check_name(check)} returned {type(result).__name__}, "
            "expected a list or tuple of errors"
        )

    if result is None:
        return ()
    if isinstance(result, str):
        return (result,)
    if isinstance(result, Sequence):
        return tuple(result)

    raise TypeError(
        f"Check {check_name(check)} returned {type(result).__name__}, "
        "expected a sequence of errors, a str or None"
    )


def check_name(check: Check) -> str:
    return getattr(check, "__qualname__", None) or repr(check)
