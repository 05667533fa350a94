"""
fieldstate - Two-phase (live / delayed) validity tracking for a single field.

Usage:
    from fieldstate import Email, NotBlank, edit, settle, validator

    EMAIL_FIELD = validator().with_live(NotBlank()).with_delayed(Email())

    state = edit(EMAIL_FIELD, "")       # Debouncing("", ("required",))
    state = settle(EMAIL_FIELD, state)  # Invalid("", ("required", "bad email"))
"""

import logging

from .checks import (
    Email,
    InSet,
    Matches,
    MaxLength,
    MinLength,
    NotBlank,
    Predicate,
    all_of,
)
from .context import checking_context, is_strict
from .pipeline import (
    Pipeline,
    edit,
    run_all,
    run_live,
    settle,
    validator,
    with_delayed,
    with_live,
)
from .schema import from_pydantic
from .state import (
    Debouncing,
    FieldState,
    Invalid,
    NotChecked,
    Valid,
    get_errors,
    get_one_error,
    get_valid_value,
    get_value,
    init,
    is_valid,
    reset,
)
from .types import Check

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # States
    "FieldState",
    "Valid",
    "Invalid",
    "Debouncing",
    "NotChecked",
    "init",
    "reset",
    "get_value",
    "get_valid_value",
    "get_errors",
    "get_one_error",
    "is_valid",
    # Pipeline
    "Check",
    "Pipeline",
    "validator",
    "with_live",
    "with_delayed",
    "run_live",
    "run_all",
    "edit",
    "settle",
    # Configuration
    "checking_context",
    "is_strict",
    # Checks
    "NotBlank",
    "MinLength",
    "MaxLength",
    "Matches",
    "Email",
    "InSet",
    "Predicate",
    "all_of",
    # Schema
    "from_pydantic",
]
