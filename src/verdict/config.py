from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from verdict.render import Renderer, make_renderer
from verdict.tolerance import (
    Absolute,
    AbsoluteOrRelative,
    FloatingPointTolerance,
    Relative,
)
from verdict.verbose import setup_logger


class RenderConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    max_length: int | None = Field(default=None, ge=4)


class EngineConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    render: RenderConfig = RenderConfig()
    log_file: str | None = None
    verbose: bool = False

    def renderer(self) -> Renderer:
        return make_renderer(self.render.max_length)

    def logger(self) -> logging.Logger:
        """The package logger, writing to ``log_file`` when one is configured."""
        if self.log_file is None:
            return logging.getLogger("verdict")
        return setup_logger(Path(self.log_file), verbose=self.verbose)


class ToleranceSpec(BaseModel):
    """Declarative tolerance. Sign is not checked here; ``within`` reports negatives."""

    model_config = ConfigDict(extra="forbid")
    absolute: float | None = None
    relative: float | None = None

    @model_validator(mode="after")
    def needs_a_component(self) -> ToleranceSpec:
        if self.absolute is None and self.relative is None:
            raise ValueError("tolerance needs an absolute or a relative component")
        return self

    def to_tolerance(self) -> FloatingPointTolerance:
        if self.absolute is not None and self.relative is not None:
            return AbsoluteOrRelative(absolute=self.absolute, relative=self.relative)
        if self.absolute is not None:
            return Absolute(self.absolute)
        return Relative(self.relative)


class ValuePair(BaseModel):
    model_config = ConfigDict(extra="forbid")
    expected: Any
    actual: Any


class WithinSpec(ValuePair):
    tolerance: ToleranceSpec


class MembershipSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    item: Any
    container: Any


class _Labelled(BaseModel):
    model_config = ConfigDict(extra="forbid")
    on_fail: str | None = None
    given: str | None = None


class EqualExpectation(_Labelled):
    equal: ValuePair


class NotEqualExpectation(_Labelled):
    not_equal: ValuePair


class LessThanExpectation(_Labelled):
    less_than: ValuePair


class AtMostExpectation(_Labelled):
    at_most: ValuePair


class GreaterThanExpectation(_Labelled):
    greater_than: ValuePair


class AtLeastExpectation(_Labelled):
    at_least: ValuePair


class WithinExpectation(_Labelled):
    within: WithinSpec


class NotWithinExpectation(_Labelled):
    not_within: WithinSpec


class EqualListsExpectation(_Labelled):
    equal_lists: ValuePair


class EqualDictsExpectation(_Labelled):
    equal_dicts: ValuePair


class EqualSetsExpectation(_Labelled):
    equal_sets: ValuePair


class BeTrueExpectation(_Labelled):
    be_true: Any


class BeFalseExpectation(_Labelled):
    be_false: Any


class BeNoneExpectation(_Labelled):
    be_none: Any


class NotNoneExpectation(_Labelled):
    not_none: Any


class ContainExpectation(_Labelled):
    contain: MembershipSpec


class NotContainExpectation(_Labelled):
    not_contain: MembershipSpec


class FailExpectation(_Labelled):
    fail: str


class AllExpectation(_Labelled):
    """An empty list parses; evaluating it reports the misuse as a failure."""

    all: list[ExpectationSpec]


ExpectationSpec = (
    EqualExpectation
    | NotEqualExpectation
    | LessThanExpectation
    | AtMostExpectation
    | GreaterThanExpectation
    | AtLeastExpectation
    | WithinExpectation
    | NotWithinExpectation
    | EqualListsExpectation
    | EqualDictsExpectation
    | EqualSetsExpectation
    | BeTrueExpectation
    | BeFalseExpectation
    | BeNoneExpectation
    | NotNoneExpectation
    | ContainExpectation
    | NotContainExpectation
    | FailExpectation
    | AllExpectation
)

AllExpectation.model_rebuild()

_expectation_adapter: TypeAdapter[ExpectationSpec] = TypeAdapter(ExpectationSpec)


def parse_expectation(raw: dict[str, Any]) -> ExpectationSpec:
    """Validate a declarative expectation dict into its model."""
    return _expectation_adapter.validate_python(raw)


def load_config(path: Path) -> EngineConfig:
    """Load and validate an engine config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = EngineConfig(**raw)

    # Resolve a relative log file against the config file location
    if config.log_file is not None:
        log_path = Path(config.log_file)
        if not log_path.is_absolute():
            config.log_file = str((config_dir / log_path).resolve())

    return config
