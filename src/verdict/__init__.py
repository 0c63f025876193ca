"""Assertion evaluation: checks that return structured verdicts instead of raising."""

from verdict.comparisons import (
    at_least,
    at_most,
    be_false,
    be_none,
    be_true,
    contain,
    equal,
    greater_than,
    less_than,
    not_contain,
    not_equal,
    not_none,
)
from verdict.diffing import equal_dicts, equal_lists, equal_sets
from verdict.expectation import (
    Expectation,
    Fail,
    Pass,
    all_of,
    fail,
    on_fail,
    pass_,
    with_given,
)
from verdict.reasons import (
    CollectionDiff,
    Comparison,
    Custom,
    Equality,
    FailureReason,
    Invalid,
    InvalidReason,
    ListDiff,
)
from verdict.render import Renderer, make_renderer, render_value
from verdict.tolerance import (
    Absolute,
    AbsoluteOrRelative,
    FloatingPointTolerance,
    Relative,
    not_within,
    within,
    within_compare,
)

__all__ = [
    "Absolute",
    "AbsoluteOrRelative",
    "CollectionDiff",
    "Comparison",
    "Custom",
    "Equality",
    "Expectation",
    "Fail",
    "FailureReason",
    "FloatingPointTolerance",
    "Invalid",
    "InvalidReason",
    "ListDiff",
    "Pass",
    "Relative",
    "Renderer",
    "all_of",
    "at_least",
    "at_most",
    "be_false",
    "be_none",
    "be_true",
    "contain",
    "equal",
    "equal_dicts",
    "equal_lists",
    "equal_sets",
    "fail",
    "greater_than",
    "less_than",
    "make_renderer",
    "not_contain",
    "not_equal",
    "not_none",
    "not_within",
    "on_fail",
    "pass_",
    "render_value",
    "with_given",
    "within",
    "within_compare",
]
