"""
Pydantic interop for fieldstate.

Provides from_pydantic(), which turns any type pydantic can validate into a
check usable in a pipeline slot.
"""

from __future__ import annotations

from typing import Any, Callable

from pydantic import TypeAdapter, ValidationError

from .types import Check


def from_pydantic(
    tp: Any, *, formatter: Callable[[dict[str, Any]], Any] | None = None
) -> Check:
    """
    Build a check from a pydantic-validatable type.

    Args:
        tp: Any type accepted by pydantic.TypeAdapter, typically an
            Annotated[...] carrying Field/StringConstraints metadata
        formatter: Maps one pydantic error dict to a field error. Defaults
            to the error's "msg" text.

    Returns:
        A check returning one error per pydantic error, in pydantic's order

    Usage:
        Username = Annotated[str, StringConstraints(min_length=3)]
        pipeline = validator().with_live(from_pydantic(Username))
    """
    adapter = TypeAdapter(tp)
    fmt = formatter or _default_formatter

    def check(x: Any) -> list[Any]:
        try:
            adapter.validate_python(x)
        except ValidationError as e:
            return [fmt(err) for err in e.errors()]
        return []

    return check


def _default_formatter(err: dict[str, Any]) -> Any:
    return err["msg"]
