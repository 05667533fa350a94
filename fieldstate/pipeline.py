"""
Validator pipeline: composition and execution of live and delayed checks.

A Pipeline is an immutable value. Build it once, typically at module
scope, and share it by reference across every field and thread that
validates the same kind of value:

    EMAIL_FIELD = validator().with_live(NotBlank()).with_delayed(Email())

It holds no per-field data and is never mutated after construction, so
concurrent readers need no locking. The only ambient input is the strict
flag from `checking_context`, which is a ContextVar and therefore local to
each thread or task.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .lib.check_helpers import ensure_check, run_checks
from .state import Debouncing, FieldState, Invalid, Valid, get_value, init
from .types import Check

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, repr=False)
class Pipeline:
    """
    Immutable set of live and delayed checks. Build it with validator()
    and the with_live/with_delayed builders.

    Each slot stores its checks in the order they were added. Running a slot
    folds over them and concatenates every reported error, so adding a check
    never replaces an earlier one. An empty slot means "not configured".
    """

    _live: tuple[Check, ...] = ()
    _delayed: tuple[Check, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "_live", tuple(map(ensure_check, self._live)))
        object.__setattr__(
            self, "_delayed", tuple(map(ensure_check, self._delayed))
        )

    def with_live(self, check: Check) -> Pipeline:
        """Return a new pipeline with `check` appended to the live slot."""
        return Pipeline(
            _live=(*self._live, check),
            _delayed=self._delayed,
        )

    def with_delayed(self, check: Check) -> Pipeline:
        """Return a new pipeline with `check` appended to the delayed slot."""
        return Pipeline(
            _live=self._live,
            _delayed=(*self._delayed, check),
        )

    def run_live(self, state: FieldState) -> FieldState:
        """
        Run live checks only.

        Returns:
            Valid(v)                no live errors, no delayed check
            Debouncing(v, ())       no live errors, delayed check pending
            Invalid(v, live)        live errors, no delayed check
            Debouncing(v, live)     live errors, delayed check pending

        While a delayed check is configured the field stays Debouncing even
        when live errors are already known; only run_all gives the verdict.
        """
        value = get_value(state)
        live = run_checks(self._live, value)

        result: FieldState
        if self._delayed:
            result = Debouncing(value, live)
        elif live:
            result = Invalid(value, live)
        else:
            result = Valid(value)

        logger.debug(
            "run_live -> %s (%d live errors)", type(result).__name__, len(live)
        )
        return result

    def run_all(self, state: FieldState) -> FieldState:
        """
        Run live then delayed checks and return a terminal verdict.

        Does not depend on a prior run_live; live errors are recomputed and
        always precede delayed errors.
        """
        value = get_value(state)
        combined = run_checks(self._live, value) + run_checks(self._delayed, value)

        result: FieldState = Invalid(value, combined) if combined else Valid(value)

        logger.debug("run_all -> %s (%d errors)", type(result).__name__, len(combined))
        return result

    def __repr__(self) -> str:
        return f"Pipeline(live={len(self._live)}, delayed={len(self._delayed)})"


def validator() -> Pipeline:
    """Return a pipeline with no checks configured."""
    return Pipeline()


def with_live(check: Check, pipeline: Pipeline) -> Pipeline:
    return pipeline.with_live(check)


def with_delayed(check: Check, pipeline: Pipeline) -> Pipeline:
    return pipeline.with_delayed(check)


def run_live(pipeline: Pipeline, state: FieldState) -> FieldState:
    return pipeline.run_live(state)


def run_all(pipeline: Pipeline, state: FieldState) -> FieldState:
    return pipeline.run_all(state)


def edit(pipeline: Pipeline, value: Any) -> FieldState:
    """
    Handle an edit event.

    A new value always starts from a fresh NotChecked state, so nothing from
    the previous value's status leaks into the result.
    """
    return pipeline.run_live(init(value))


def settle(pipeline: Pipeline, state: FieldState) -> FieldState:
    """Handle a settle (debounce elapsed) event."""
    return pipeline.run_all(state)

