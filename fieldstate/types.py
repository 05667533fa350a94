"""
Type definitions for fieldstate.

Provides the generic type variables and the check signature shared by
the state and pipeline modules.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence, TypeVar

T = TypeVar("T")
E = TypeVar("E")

# Type aliases
Check = Callable[[Any], Sequence[Any]]
Errors = tuple[Any, ...]
