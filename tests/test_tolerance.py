"""Tests for tolerance comparisons."""

import pytest

from verdict.expectation import Fail, Pass
from verdict.reasons import Comparison, Custom
from verdict.tolerance import (
    Absolute,
    AbsoluteOrRelative,
    Relative,
    absolute,
    not_within,
    relative,
    validate_tolerance,
    within,
    within_compare,
)


# --- absolute / relative components ---


def test_components():
    assert absolute(Absolute(0.5)) == 0.5
    assert relative(Absolute(0.5)) == 0.0
    assert absolute(Relative(0.1)) == 0.0
    assert relative(Relative(0.1)) == 0.1
    both = AbsoluteOrRelative(absolute=0.5, relative=0.1)
    assert absolute(both) == 0.5
    assert relative(both) == 0.1


# --- within_compare ---


def test_exact_equality_passes_with_zero_tolerance():
    assert within_compare(Absolute(0.0), 1.0, 1.0) is True
    assert within_compare(Relative(0.0), 0.0, 0.0) is True


def test_absolute_band_is_inclusive():
    assert within_compare(Absolute(0.5), 1.0, 1.5) is True
    assert within_compare(Absolute(0.5), 1.0, 0.5) is True
    assert within_compare(Absolute(0.5), 1.0, 1.6) is False


def test_relative_band():
    assert within_compare(Relative(0.1), 100.0, 105.0) is True
    assert within_compare(Relative(0.1), 100.0, 115.0) is False


def test_relative_band_is_symmetric():
    # swapping the operands never changes the answer
    for a, b in [(100.0, 109.0), (100.0, 111.0), (-50.0, -54.0), (1.0, 1.2)]:
        assert within_compare(Relative(0.1), a, b) == within_compare(Relative(0.1), b, a)


def test_relative_band_uses_either_operand():
    # 110 is outside 100 * 9.5% but 100 is inside 110 * 9.5%
    assert within_compare(Relative(0.095), 100.0, 110.0) is True
    assert within_compare(Relative(0.095), 110.0, 100.0) is True


def test_relative_band_for_negative_values():
    assert within_compare(Relative(0.1), -100.0, -95.0) is True
    assert within_compare(Relative(0.1), -100.0, -80.0) is False


def test_absolute_or_relative_is_a_union():
    tol = AbsoluteOrRelative(absolute=1.0, relative=0.01)
    # absolute band holds, relative does not
    assert within_compare(tol, 10.0, 10.9) is True
    # relative band holds, absolute does not
    assert within_compare(tol, 1000.0, 1005.0) is True
    # neither holds
    assert within_compare(tol, 1000.0, 1020.0) is False


def test_zero_reference_only_matches_through_absolute_band():
    assert within_compare(Relative(0.5), 0.0, 0.1) is False
    assert within_compare(Absolute(0.2), 0.0, 0.1) is True


# --- validate_tolerance ---


def test_valid_tolerances():
    assert validate_tolerance(Absolute(0.0)) is None
    assert validate_tolerance(Relative(0.1)) is None
    assert validate_tolerance(AbsoluteOrRelative(0.0, 0.0)) is None


def test_negative_tolerance_messages_are_distinct():
    abs_fail = validate_tolerance(Absolute(-1.0))
    rel_fail = validate_tolerance(Relative(-0.1))
    both_fail = validate_tolerance(AbsoluteOrRelative(-1.0, -0.1))
    assert "negative absolute tolerance" in abs_fail.description
    assert "negative relative tolerance" in rel_fail.description
    assert "negative absolute and relative tolerance" in both_fail.description
    assert len({abs_fail.description, rel_fail.description, both_fail.description}) == 3


def test_one_negative_component_of_a_union():
    result = validate_tolerance(AbsoluteOrRelative(absolute=0.1, relative=-0.1))
    assert "negative relative tolerance" in result.description
    result = validate_tolerance(AbsoluteOrRelative(absolute=-0.1, relative=0.1))
    assert "negative absolute tolerance" in result.description


# --- within ---


def test_within_exact():
    assert within(Absolute(0.0), 1.0, 1.0) == Pass()


def test_within_fails_just_outside_zero_tolerance():
    result = within(Absolute(0.0), 1.0, 1.0001)
    assert result == Fail(
        given=None, description="within", reason=Comparison(expected="1.0", actual="1.0001")
    )


def test_within_relative():
    assert within(Relative(0.1), 100.0, 105.0) == Pass()
    assert isinstance(within(Relative(0.1), 100.0, 115.0), Fail)


def test_within_rejects_negative_tolerance_even_if_values_match():
    result = within(Absolute(-1.0), 1.0, 1.0)
    assert isinstance(result, Fail)
    assert result.reason == Custom()
    assert "negative absolute tolerance" in result.description


def test_within_accepts_ints():
    assert within(Absolute(1), 10, 11) == Pass()


def test_within_uses_renderer():
    result = within(Absolute(0.0), 1.0, 2.0, renderer=lambda v: f"<{v}>")
    assert result.reason == Comparison(expected="<1.0>", actual="<2.0>")


# --- not_within ---


def test_not_within():
    assert not_within(Absolute(0.1), 1.0, 2.0) == Pass()
    result = not_within(Absolute(0.1), 1.0, 1.05)
    assert result == Fail(
        given=None, description="not_within", reason=Comparison(expected="1.0", actual="1.05")
    )


def test_not_within_rejects_negative_tolerance_even_if_values_differ():
    result = not_within(Relative(-0.5), 1.0, 100.0)
    assert result.reason == Custom()
    assert "negative relative tolerance" in result.description


@pytest.mark.parametrize(
    "tol,a,b",
    [
        (Absolute(0.5), 1.0, 1.2),
        (Absolute(0.5), 1.0, 3.0),
        (Relative(0.1), 100.0, 108.0),
        (AbsoluteOrRelative(0.1, 0.1), 5.0, 9.0),
    ],
)
def test_not_within_is_negation_of_within(tol, a, b):
    assert within(tol, a, b).passed != not_within(tol, a, b).passed


def test_repeated_evaluation_is_identical():
    assert within(Relative(0.1), 100.0, 115.0) == within(Relative(0.1), 100.0, 115.0)
