"""
Test assertions for Validation and Option values.

Expressive assert helpers that produce clear failure messages.

Usage in tests:
    from fpcontainers import ValidationAssertions

    def test_parse():
        value = ValidationAssertions.assert_success(Validation.parse_int("6"))
        assert value == 6

    def test_parse_rejects_words():
        ValidationAssertions.assert_failure_errors(
            Validation.parse_int("six"),
            ['could not parse "six" as an integer'],
        )
"""

from __future__ import annotations

from typing import Any, List, TypeVar

from fpcontainers.option import Option
from fpcontainers.validation import Validation

T = TypeVar("T")


class ValidationAssertions:
    """Expressive test assertions for Validation values."""

    @staticmethod
    def assert_success(validation: Validation[T], message: str = "") -> T:
        """
        Assert the Validation is a Success and return the value.

            value = ValidationAssertions.assert_success(validation)
        """
        context = f" — {message}" if message else ""
        assert validation.is_success(), (
            f"Expected Success but got {validation!r}{context}"
        )
        return validation.get_value().get_or_else(None)  # type: ignore[arg-type]

    @staticmethod
    def assert_failure(validation: Validation[T], message: str = "") -> List[str]:
        """
        Assert the Validation is a Failure and return its error messages.

            errors = ValidationAssertions.assert_failure(validation)
        """
        context = f" — {message}" if message else ""
        assert validation.is_failure(), (
            f"Expected Failure but got {validation!r}{context}"
        )
        return validation.get_errors().get_or_else([])

    @staticmethod
    def assert_failure_errors(validation: Validation[T], expected_errors: List[str]) -> None:
        """Assert the Validation is a Failure carrying exactly these messages, in order."""
        errors = ValidationAssertions.assert_failure(validation)
        assert errors == expected_errors, (
            f"Expected errors {expected_errors!r} but got {errors!r}"
        )

    @staticmethod
    def assert_success_value(validation: Validation[T], expected_value: Any) -> None:
        """Assert the Validation is a Success with the specific value."""
        value = ValidationAssertions.assert_success(validation)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )


class OptionAssertions:
    """Expressive test assertions for Option values."""

    @staticmethod
    def assert_some(option: Option[T], expected_value: Any = None) -> T:
        """Assert the Option is present (optionally with a value) and return the value."""
        assert option.is_present(), f"Expected Some but got {option!r}"
        value = option.get_or_else(None)  # type: ignore[arg-type]
        if expected_value is not None:
            assert value == expected_value, (
                f"Expected Some({expected_value!r}) but got {option!r}"
            )
        return value

    @staticmethod
    def assert_nothing(option: Option[T]) -> None:
        assert option.is_absent(), f"Expected Nothing but got {option!r}"
