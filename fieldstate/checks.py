"""
Built-in checks for fieldstate pipelines.

Provides factory functions that return checks: plain callables mapping a
value to a list of errors, empty when the value passes. Every factory
reports its failure as a single message, overridable with `message=`.
"""

from __future__ import annotations

import re
from typing import Any, Callable

from .lib.check_helpers import ensure_check, run_checks
from .types import Check

_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+\Z")


def NotBlank(message: Any = "required") -> Check:
    """
    Reject None and strings that are empty or whitespace-only.

    Usage:
        NotBlank()
        NotBlank(message="Name is required")
    """

    def check(x: Any) -> list[Any]:
        if x is None or (isinstance(x, str) and not x.strip()):
            return [message]
        return []

    return check


def MinLength(n: int, message: Any = None) -> Check:
    """Reject values shorter than `n`; values without a length fail too."""
    msg = message if message is not None else f"Must be at least {n} characters"

    def check(x: Any) -> list[Any]:
        try:
            return [msg] if len(x) < n else []
        except TypeError:
            return [msg]

    return check


def MaxLength(n: int, message: Any = None) -> Check:
    """Reject values longer than `n`; values without a length fail too."""
    msg = message if message is not None else f"Must be at most {n} characters"

    def check(x: Any) -> list[Any]:
        try:
            return [msg] if len(x) > n else []
        except TypeError:
            return [msg]

    return check


def Matches(pattern: str, message: Any = None) -> Check:
    """
    Validate string matches regex pattern (anchored at the start).

    Usage:
        Matches(r"^[a-z]+$")
        Matches(r"\\d{3}-\\d{4}", message="Use the 555-1234 format")
    """
    compiled = re.compile(pattern)
    msg = message if message is not None else f"Must match pattern: {pattern}"

    def check(x: Any) -> list[Any]:
        if isinstance(x, str) and compiled.match(x) is not None:
            return []
        return [msg]

    return check


def Email(message: Any = "bad email") -> Check:
    """
    Validate a plain `local@domain.tld` address.

    This is a shape check only; use from_pydantic(EmailStr) when the
    email-validator package is available and stricter rules are needed.
    """
    return Matches(_EMAIL.pattern, message=message)


def InSet(values: set | frozenset | list | tuple, message: Any = None) -> Check:
    """
    Validate value is in a set of allowed values.

    Usage:
        InSet({"active", "inactive", "pending"})
    """
    container = frozenset(values)
    allowed = ", ".join(sorted(map(repr, container)))
    msg = message if message is not None else f"Must be one of: {allowed}"

    def check(x: Any) -> list[Any]:
        try:
            return [] if x in container else [msg]
        except TypeError:
            return [msg]

    return check


def Predicate(fn: Callable[[Any], Any], message: Any) -> Check:
    """
    Create a check from an arbitrary predicate function.

    Usage:
        Predicate(str.isalnum, "Letters and digits only")
    """
    ensure_check(fn)

    def check(x: Any) -> list[Any]:
        return [] if fn(x) else [message]

    return check


def all_of(*checks: Check) -> Check:
    """
    Combine checks conjunctively: run all of them, keep every error in order.

    This is the same fold a pipeline slot uses, so
    `validator().with_live(all_of(f, g))` behaves like
    `validator().with_live(f).with_live(g)`.
    """
    for c in checks:
        ensure_check(c)

    def check(x: Any) -> list[Any]:
        return list(run_checks(checks, x))

    return check
