from typing import Any, Callable

import pytest

from fieldstate import Pipeline, validator


def _blank(v: Any) -> list[str]:
    return ["required"] if not v else []


def _email(v: Any) -> list[str]:
    return [] if isinstance(v, str) and "@" in v else ["bad email"]


@pytest.fixture(scope="function")
def blank_check() -> Callable[[Any], list[str]]:
    return _blank


@pytest.fixture(scope="function")
def email_check() -> Callable[[Any], list[str]]:
    return _email


@pytest.fixture(scope="function")
def empty_pipeline() -> Pipeline:
    return validator()


@pytest.fixture(scope="function")
def live_only(blank_check) -> Pipeline:
    return validator().with_live(blank_check)


@pytest.fixture(scope="function")
def email_pipeline(blank_check, email_check) -> Pipeline:
    """Blank check while typing, email check once input settles."""
    return validator().with_live(blank_check).with_delayed(email_check)
