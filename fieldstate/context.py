"""
Checking configuration scoped to the current thread or task.

The only setting is strict mode, which decides how a pipeline reads what a
check returns. Lenient (default): list, tuple or other ordered sequence of
errors, None for a pass, or a bare str for one error. Strict: a list or
tuple only, anything else raises TypeError naming the check.
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Read by lib.check_helpers.as_errors on every check result
_strict_mode: ContextVar[bool] = ContextVar("strict_mode", default=False)


def is_strict() -> bool:
    """Check if strict mode is currently enabled."""
    return _strict_mode.get()


@contextmanager
def checking_context(*, strict: bool = False):
    """
    Context manager for checking configuration.

    Args:
        strict: If True, every check must return a list or tuple of errors
               and anything else raises TypeError. Otherwise (the default)
               None counts as a pass, a bare string as a single error and
               any other ordered sequence is kept as is, so `str | None`
               style form validators plug in directly.

    Example:
        from fieldstate import checking_context, edit, validator

        def required(v):
            return None if v else "required"

        pipeline = validator().with_live(required)

        # Lenient: "required" becomes a one-element error tuple
        state = edit(pipeline, "")

        # Strict: raises TypeError, the check returned a bare str
        with checking_context(strict=True):
            edit(pipeline, "")
    """
    token = _strict_mode.set(strict)
    try:
        yield
    finally:
        _strict_mode.reset(token)
