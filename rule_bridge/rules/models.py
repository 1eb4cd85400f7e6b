"""Rule dialect models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from rule_bridge.constants import (
    ALWAYS_APPLY_KEY,
    CURSOR_EXTENSION,
    DESCRIPTION_KEY,
    GLOBS_KEY,
    TRIGGER_KEY,
    WINDSURF_EXTENSION,
)

_CURSOR_KEYS = frozenset({ALWAYS_APPLY_KEY, DESCRIPTION_KEY, GLOBS_KEY})
_WINDSURF_KEYS = frozenset({TRIGGER_KEY, DESCRIPTION_KEY, GLOBS_KEY})


class Dialect(str, Enum):
    CURSOR = "cursor"
    WINDSURF = "windsurf"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        if self == Dialect.UNKNOWN:
            return self.value
        return self.value.capitalize()

    @property
    def extension(self) -> str:
        if self == Dialect.CURSOR:
            return CURSOR_EXTENSION
        if self == Dialect.WINDSURF:
            return WINDSURF_EXTENSION
        raise ValueError("Unknown dialect has no file extension")


class Direction(str, Enum):
    CURSOR_TO_WINDSURF = "cw"
    WINDSURF_TO_CURSOR = "wc"

    @property
    def source(self) -> Dialect:
        if self == Direction.CURSOR_TO_WINDSURF:
            return Dialect.CURSOR
        return Dialect.WINDSURF

    @property
    def target(self) -> Dialect:
        if self == Direction.CURSOR_TO_WINDSURF:
            return Dialect.WINDSURF
        return Dialect.CURSOR

    @classmethod
    def from_dialect(cls, dialect: Dialect) -> Direction:
        """Direction that converts *from* the given dialect."""
        if dialect == Dialect.CURSOR:
            return cls.CURSOR_TO_WINDSURF
        if dialect == Dialect.WINDSURF:
            return cls.WINDSURF_TO_CURSOR
        raise ValueError(f"No conversion direction for dialect: {dialect.value}")


class Trigger(str, Enum):
    MANUAL = "manual"
    ALWAYS_ON = "always_on"
    MODEL_DECISION = "model_decision"
    GLOB = "glob"


def _extra(data: Mapping[str, Any], recognized: frozenset[str]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if key not in recognized}


def _emit(out: dict[str, Any], key: str, value: Any) -> None:
    if value:
        out[key] = value


@dataclass(frozen=True)
class CursorFrontMatter:
    """Flag-based view: ``alwaysApply`` / ``description`` / ``globs``.

    ``None`` means the key was absent. ``extra`` keeps every other key in
    its original order.
    """

    description: Any = None
    globs: Any = None
    always_apply: Any = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CursorFrontMatter:
        return cls(
            description=data.get(DESCRIPTION_KEY),
            globs=data.get(GLOBS_KEY),
            always_apply=data.get(ALWAYS_APPLY_KEY),
            extra=_extra(data, _CURSOR_KEYS),
        )

    def to_mapping(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.always_apply is not None:
            out[ALWAYS_APPLY_KEY] = self.always_apply
        _emit(out, DESCRIPTION_KEY, self.description)
        _emit(out, GLOBS_KEY, self.globs)
        for key, value in self.extra.items():
            out.setdefault(key, value)
        return out


@dataclass(frozen=True)
class WindsurfFrontMatter:
    """Trigger-based view: ``trigger`` / ``description`` / ``globs``.

    ``trigger`` keeps the raw value so that unsupported triggers can be
    reported instead of being coerced.
    """

    trigger: Any = None
    description: Any = None
    globs: Any = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> WindsurfFrontMatter:
        return cls(
            trigger=data.get(TRIGGER_KEY),
            description=data.get(DESCRIPTION_KEY),
            globs=data.get(GLOBS_KEY),
            extra=_extra(data, _WINDSURF_KEYS),
        )

    def to_mapping(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.trigger is not None:
            trigger = self.trigger
            out[TRIGGER_KEY] = trigger.value if isinstance(trigger, Trigger) else trigger
        _emit(out, DESCRIPTION_KEY, self.description)
        _emit(out, GLOBS_KEY, self.globs)
        for key, value in self.extra.items():
            out.setdefault(key, value)
        return out


@dataclass(frozen=True)
class RuleDocument:
    front_matter: dict[str, Any]
    body: str
