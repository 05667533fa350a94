"""
Tests for fieldstate.checks module.
"""

import pytest

from fieldstate import (
    Email,
    InSet,
    Invalid,
    Matches,
    MaxLength,
    MinLength,
    NotBlank,
    Predicate,
    Valid,
    all_of,
    edit,
    settle,
    validator,
)


class TestChecks:
    def test_not_blank(self):
        check = NotBlank()
        assert check("") == ["required"]
        assert check("   ") == ["required"]
        assert check(None) == ["required"]
        assert check("x") == []
        assert check(0) == []

    def test_not_blank_message(self):
        assert NotBlank(message="Name is required")("") == ["Name is required"]

    def test_min_length(self):
        check = MinLength(3)
        assert check("abc") == []
        assert check("ab") == ["Must be at least 3 characters"]
        assert check(42) == ["Must be at least 3 characters"]

    def test_max_length(self):
        check = MaxLength(2, message="too long")
        assert check("ab") == []
        assert check("abc") == ["too long"]
        assert check(None) == ["too long"]

    def test_matches(self):
        check = Matches(r"^[a-z]+$")
        assert check("hello") == []
        assert check("Hello") == ["Must match pattern: ^[a-z]+$"]
        assert check(123) == ["Must match pattern: ^[a-z]+$"]

    @pytest.mark.parametrize("value", ["a@b.com", "first.last@example.co.uk"])
    def test_email_accepts(self, value):
        assert Email()(value) == []

    @pytest.mark.parametrize(
        "value", ["", "a@b", "@b.com", "a b@c.com", "a@@b.com", "a@b.com\n"]
    )
    def test_email_rejects(self, value):
        assert Email()(value) == ["bad email"]

    def test_trailing_newline_never_settles_valid(self):
        pipeline = validator().with_delayed(Email())
        assert settle(pipeline, edit(pipeline, "a@b.com\n")) == Invalid(
            "a@b.com\n", ["bad email"]
        )

    def test_in_set(self):
        check = InSet({"red", "green"})
        assert check("red") == []
        assert check("blue") == ["Must be one of: 'green', 'red'"]
        assert check(["unhashable"]) == ["Must be one of: 'green', 'red'"]

    def test_predicate(self):
        check = Predicate(str.isalnum, "Letters and digits only")
        assert check("abc123") == []
        assert check("abc-123") == ["Letters and digits only"]

    def test_predicate_requires_callable(self):
        with pytest.raises(TypeError):
            Predicate("nope", "msg")  # type: ignore[arg-type]

    def test_opaque_messages(self):
        code = ("username", "too_short")
        assert MinLength(3, message=code)("ab") == [code]


class TestAllOf:
    def test_concatenates_in_order(self):
        check = all_of(NotBlank(), MinLength(3), Email())
        assert check("") == [
            "required",
            "Must be at least 3 characters",
            "bad email",
        ]
        assert check("a@b.com") == []

    def test_same_as_chained_slot(self):
        combined = validator().with_live(all_of(MinLength(3), Email()))
        chained = validator().with_live(MinLength(3)).with_live(Email())
        for value in ["", "ab", "abcd", "a@b.com"]:
            assert edit(combined, value) == edit(chained, value)

    def test_in_pipeline(self):
        pipeline = validator().with_live(all_of(NotBlank(), MaxLength(5)))
        assert edit(pipeline, "abc") == Valid("abc")
        assert edit(pipeline, "abcdef") == Invalid(
            "abcdef", ["Must be at most 5 characters"]
        )

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            all_of(NotBlank(), 3)  # type: ignore[arg-type]
