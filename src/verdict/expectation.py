"""Expectation verdicts and the combinators that build and transform them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Iterable, TypeVar, Union

from verdict.reasons import Custom, FailureReason, Invalid, InvalidReason

logger = logging.getLogger(__name__)

T = TypeVar("T")

EMPTY_ALL_MESSAGE = "all_of requires at least one check, but was given an empty list"


@dataclass(frozen=True)
class Pass:
    """The check succeeded."""

    @property
    def passed(self) -> bool:
        return True


@dataclass(frozen=True)
class Fail:
    """The check failed.

    Attributes:
        given: Label of the subject under test. Absent until a runner or
            ``with_given`` attaches one.
        description: Which check failed. Defaults to the check's name and is
            replaced by ``on_fail``.
        reason: Structured cause of the failure.
    """

    given: str | None
    description: str
    reason: FailureReason

    @property
    def passed(self) -> bool:
        return False


Expectation = Union[Pass, Fail]


def pass_() -> Pass:
    return Pass()


def fail(message: str) -> Fail:
    """Fail unconditionally with ``message`` as the description."""
    return Fail(given=None, description=message, reason=Custom())


def on_fail(message: str, expectation: Expectation) -> Expectation:
    """Relabel a failure with ``message``.

    The structured reason is dropped in favour of ``Custom``, so the label is
    all a report will show.
    """
    if isinstance(expectation, Pass):
        return expectation
    return replace(expectation, description=message, reason=Custom())


def with_given(label: str, expectation: Expectation) -> Expectation:
    """Attach the subject-under-test label to a failure, overwriting any previous one."""
    if isinstance(expectation, Pass):
        return expectation
    return replace(expectation, given=label)


def all_of(checks: Iterable[Callable[[T], Expectation]], subject: T) -> Expectation:
    """Run every check against ``subject`` and stop at the first failure.

    Checks run left to right; any check after the first failing one is never
    called. An empty list of checks is a usage error.
    """
    checks = list(checks)
    if not checks:
        logger.warning("all_of called with no checks")
        return Fail(
            given=None,
            description=EMPTY_ALL_MESSAGE,
            reason=Invalid(InvalidReason.EMPTY_LIST),
        )

    for index, check in enumerate(checks):
        result = check(subject)
        if not isinstance(result, Pass):
            logger.debug(f"all_of stopped at check {index + 1} of {len(checks)}")
            return result
    return Pass()
