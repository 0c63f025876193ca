"""Failure reasons attached to failed expectations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class InvalidReason(str, Enum):
    """Ways an expectation can be misused by the test author."""

    EMPTY_LIST = "empty_list"


@dataclass(frozen=True)
class Custom:
    """No structured data; the failure description is the whole message."""


@dataclass(frozen=True)
class Equality:
    """An equality check failed.

    Attributes:
        expected: Rendered expected value.
        actual: Rendered actual value.
    """

    expected: str
    actual: str


@dataclass(frozen=True)
class Comparison:
    """An ordering or tolerance check failed."""

    expected: str
    actual: str


@dataclass(frozen=True)
class ListDiff:
    """Two sequences differed.

    Both sequences are rendered element by element and surfaced whole so an
    external diff tool can line them up.
    """

    expected: tuple[str, ...]
    actual: tuple[str, ...]


@dataclass(frozen=True)
class CollectionDiff:
    """Two mappings or sets differed.

    Attributes:
        expected: Rendered expected collection.
        actual: Rendered actual collection.
        extra: Rendered elements found in actual but not in expected.
        missing: Rendered elements found in expected but not in actual.
    """

    expected: str
    actual: str
    extra: tuple[str, ...]
    missing: tuple[str, ...]


@dataclass(frozen=True)
class Invalid:
    """The expectation itself was used incorrectly."""

    reason: InvalidReason


FailureReason = Union[Custom, Equality, Comparison, ListDiff, CollectionDiff, Invalid]
