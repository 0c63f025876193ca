"""Evaluate expectations written as plain dicts (e.g. loaded from YAML)."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

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
from verdict.config import ToleranceSpec, parse_expectation
from verdict.diffing import equal_dicts, equal_lists, equal_sets
from verdict.expectation import Expectation, all_of, fail, on_fail, with_given
from verdict.render import Renderer
from verdict.tolerance import not_within, within

_PAIR_CHECKS = {
    "equal": equal,
    "not_equal": not_equal,
    "less_than": less_than,
    "at_most": at_most,
    "greater_than": greater_than,
    "at_least": at_least,
    "equal_lists": equal_lists,
    "equal_dicts": equal_dicts,
    "equal_sets": equal_sets,
}

_TOLERANCE_CHECKS = {
    "within": within,
    "not_within": not_within,
}

_MEMBERSHIP_CHECKS = {
    "contain": contain,
    "not_contain": not_contain,
}

_VALUE_CHECKS = {
    "be_true": be_true,
    "be_false": be_false,
    "be_none": be_none,
    "not_none": not_none,
}

_LABEL_KEYS = ("on_fail", "given")

_KINDS = frozenset(
    [*_PAIR_CHECKS, *_TOLERANCE_CHECKS, *_MEMBERSHIP_CHECKS, *_VALUE_CHECKS, "fail", "all"]
)


def _check_kind(spec: dict[str, Any]) -> str:
    """Return the single check key of ``spec``, ignoring label keys."""
    keys = [k for k in spec if k not in _LABEL_KEYS]
    if len(keys) != 1:
        raise ValueError(f"Expectation must have exactly one check, got {keys}")
    kind = keys[0]
    if kind not in _KINDS:
        raise ValueError(f"Unknown expectation type: '{kind}'")
    return kind


def evaluate_expectation(
    spec: dict[str, Any] | BaseModel,
    *,
    renderer: Renderer | None = None,
    logger: logging.Logger | None = None,
) -> Expectation:
    """Dispatch a declarative expectation to the matching check.

    Supported formats:
        {"equal": {"expected": 1, "actual": 1}}
        {"less_than": {"expected": 10, "actual": 3}}
        {"within": {"expected": 1.0, "actual": 1.05, "tolerance": {"relative": 0.1}}}
        {"equal_sets": {"expected": [1, 2], "actual": [2, 1]}}
        {"contain": {"item": "a", "container": ["a", "b"]}}
        {"be_true": True}
        {"fail": "not implemented yet"}
        {"all": [{...}, {...}]}

    Every format accepts optional ``on_fail`` (relabel the failure) and
    ``given`` (attach the subject label) keys.

    Raises ValueError for empty, ambiguous or unknown expectations. Malformed
    fields raise pydantic's ValidationError, which is also a ValueError.
    """
    if not spec:
        raise ValueError("Empty expectation")

    if not isinstance(spec, BaseModel):
        _check_kind(spec)
        spec = parse_expectation(spec)
    spec = spec.model_dump()

    if logger is None:
        logger = logging.getLogger(__name__)

    # Labels wrap the result; they are not part of the check itself
    message = spec.get("on_fail")
    given = spec.get("given")

    kind = _check_kind(spec)
    value = spec[kind]

    logger.info(f"Evaluating {kind} expectation")

    if kind in _PAIR_CHECKS:
        result = _PAIR_CHECKS[kind](value["expected"], value["actual"], renderer=renderer)
    elif kind in _TOLERANCE_CHECKS:
        tolerance = ToleranceSpec.model_validate(value["tolerance"]).to_tolerance()
        result = _TOLERANCE_CHECKS[kind](
            tolerance, value["expected"], value["actual"], renderer=renderer
        )
    elif kind in _MEMBERSHIP_CHECKS:
        result = _MEMBERSHIP_CHECKS[kind](value["item"], value["container"], renderer=renderer)
    elif kind in _VALUE_CHECKS:
        result = _VALUE_CHECKS[kind](value, renderer=renderer)
    elif kind == "fail":
        result = fail(value)
    else:
        checks = [
            lambda _subject, nested=nested: evaluate_expectation(
                nested, renderer=renderer, logger=logger
            )
            for nested in value
        ]
        result = all_of(checks, None)

    if message is not None:
        result = on_fail(message, result)
    if given is not None:
        result = with_given(given, result)

    logger.info(f"{kind} passed={result.passed}")
    return result
