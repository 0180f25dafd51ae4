"""
Tests for Validation — error-accumulating container.

Tests cover:
  - Success/Failure creation and introspection
  - map and the four cases of ap
  - get_value / get_errors interop with Option
  - parse_int, parse_and_multiply, map2, all_of
  - Functor laws on the success track
"""

from __future__ import annotations

import operator
from unittest.mock import MagicMock

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fpcontainers import Failure, Nothing, Some, Success, Validation, ValidationAssertions
from fpcontainers.validation import parse_and_multiply

SIX_ERROR = 'could not parse "six" as an integer'
SEVEN_ERROR = 'could not parse "seven" as an integer'


def multiply_curried(x: int):
    return lambda y: x * y


# ═══════════════════════════════════════════════════════════════
# 1. Creation & Introspection
# ═══════════════════════════════════════════════════════════════


class TestCreation:
    def test_success_wraps_value(self):
        validation = Validation.success(6)
        assert validation.is_success()
        assert not validation.is_failure()

    def test_map_to_none_stays_success(self):
        assert Success(6).map(lambda _: None) == Success(None)
        assert Success(6).map(lambda _: None).get_value() == Some(None)

    def test_failure_from_single_message(self):
        validation = Failure("bad")
        assert validation.is_failure()
        assert validation.get_errors() == Some(["bad"])

    def test_failure_from_list(self):
        assert Validation.failure(["a", "b"]).get_errors() == Some(["a", "b"])

    def test_failure_rejects_empty_errors(self):
        with pytest.raises(ValueError, match="at least one"):
            Failure([])

    def test_failure_is_not_aliased_to_caller_list(self):
        errors = ["a"]
        validation = Failure(errors)
        errors.append("b")
        assert validation.get_errors() == Some(["a"])

    def test_repr(self):
        assert repr(Success(42)) == "Success(42)"
        assert repr(Failure(SIX_ERROR)) == "Failure(['could not parse \"six\" as an integer'])"

    def test_equality(self):
        assert Success(1) == Success(1)
        assert Failure(["a", "b"]) == Failure(("a", "b"))
        assert Failure("a") != Failure("b")
        assert Success(1) != Failure("a")


class TestPayloadAccess:
    def test_success_value_is_some(self):
        assert Success(6).get_value() == Some(6)

    def test_success_errors_is_nothing(self):
        assert Success(6).get_errors() == Nothing()

    def test_failure_value_is_nothing(self):
        assert Failure("bad").get_value() == Nothing()

    def test_get_or_else(self):
        assert Success(6).get_or_else(0) == 6
        assert Failure("bad").get_or_else(0) == 0


# ═══════════════════════════════════════════════════════════════
# 2. Transformations
# ═══════════════════════════════════════════════════════════════


class TestMap:
    def test_map_transforms_success(self):
        assert Success(6).map(lambda x: x * 7) == Success(42)

    def test_map_on_failure_keeps_errors_and_skips_mapper(self):
        mapper = MagicMock()
        assert Failure(["a", "b"]).map(mapper) == Failure(["a", "b"])
        mapper.assert_not_called()


class TestAp:
    def test_success_with_success(self):
        assert Success(6).ap(Success(multiply_curried(7))) == Success(42)

    def test_success_with_failure(self):
        assert Success(6).ap(Failure("bad function")) == Failure("bad function")

    def test_failure_with_success(self):
        function = MagicMock()
        assert Failure("bad value").ap(Success(function)) == Failure("bad value")
        function.assert_not_called()

    def test_failure_with_failure_concatenates_self_first(self):
        result = Failure(["v1", "v2"]).ap(Failure(["f1"]))
        ValidationAssertions.assert_failure_errors(result, ["v1", "v2", "f1"])


# ═══════════════════════════════════════════════════════════════
# 3. Parsing & Combination
# ═══════════════════════════════════════════════════════════════


class TestParseInt:
    def test_valid(self):
        ValidationAssertions.assert_success_value(Validation.parse_int("6"), 6)

    def test_invalid_carries_message(self):
        ValidationAssertions.assert_failure_errors(Validation.parse_int("six"), [SIX_ERROR])

    def test_overflow_carries_message(self):
        errors = ValidationAssertions.assert_failure(Validation.parse_int("2147483648"))
        assert errors == ['could not parse "2147483648" as an integer']


class TestParseAndMultiply:
    def test_both_valid(self):
        assert parse_and_multiply("6", "7") == Success(42)

    def test_first_invalid(self):
        assert parse_and_multiply("six", "7") == Failure([SIX_ERROR])

    def test_second_invalid(self):
        assert parse_and_multiply("6", "seven") == Failure([SEVEN_ERROR])

    def test_both_invalid_accumulates_in_input_order(self):
        result = Validation.parse_int("six").ap(
            Validation.parse_int("seven").map(multiply_curried)
        )
        ValidationAssertions.assert_failure_errors(result, [SIX_ERROR, SEVEN_ERROR])
        assert parse_and_multiply("six", "seven") == result


class TestMap2:
    def test_both_valid(self):
        result = Validation.map2(Success(6), Success(7), operator.mul)
        assert result == Success(42)

    def test_argument_order_preserved(self):
        result = Validation.map2(Success(10), Success(4), operator.sub)
        assert result == Success(6)

    def test_errors_of_first_come_first(self):
        result = Validation.map2(Failure("first"), Failure("second"), operator.mul)
        assert result == Failure(["first", "second"])


class TestAllOf:
    def test_all_success(self):
        assert Validation.all_of([Success(1), Success(2)]) == Success([1, 2])

    def test_empty_is_success(self):
        assert Validation.all_of([]) == Success([])

    def test_non_validation_element_is_rejected(self):
        with pytest.raises(TypeError, match="Expected a Validation, got int"):
            Validation.all_of([Success(1), 2])  # type: ignore[list-item]

    def test_every_failure_is_collected(self):
        result = Validation.all_of(
            [Validation.parse_int(t) for t in ("1", "six", "3", "seven")]
        )
        ValidationAssertions.assert_failure_errors(result, [SIX_ERROR, SEVEN_ERROR])


# ═══════════════════════════════════════════════════════════════
# 4. Laws
# ═══════════════════════════════════════════════════════════════


class TestValidationLaws:
    @given(st.integers())
    def test_map_identity(self, v):
        assert Success(v).map(lambda x: x) == Success(v)

    @given(st.integers())
    def test_map_composition(self, v):
        f = lambda x: x + 1  # noqa: E731
        g = lambda x: x * 2  # noqa: E731
        assert Success(v).map(f).map(g) == Success(v).map(lambda x: g(f(x)))

    @given(st.lists(st.text(min_size=1), min_size=1))
    def test_failure_map_identity(self, errors):
        assert Failure(errors).map(lambda x: x) == Failure(errors)

    @given(
        st.lists(st.text(), min_size=1),
        st.lists(st.text(), min_size=1),
    )
    def test_double_failure_keeps_every_error(self, left, right):
        result = Failure(left).ap(Failure(right))
        assert result.get_errors() == Some(left + right)
