"""Detect which rule dialect a file is written in."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from rule_bridge.constants import (
    ALWAYS_APPLY_KEY,
    DESCRIPTION_KEY,
    DETECTION_WINDOW,
    GLOBS_KEY,
    TRIGGER_KEY,
    WINDSURF_MARKER,
)
from rule_bridge.rules.models import Dialect
from rule_bridge.rules.parser import parse_rule_text


def detect_dialect(
    text: str, front_matter: Optional[Mapping[str, Any]] = None
) -> Dialect:
    """Classify ``text`` as Cursor, Windsurf or unknown.

    ``trigger`` only exists in Windsurf rules, so it is checked first: on
    the raw text prefix without parsing, then on the parsed keys. Cursor
    has no mandatory key, so its weaker signals are consulted afterwards.
    Pass ``front_matter`` when it was already parsed to skip re-parsing.
    """
    if WINDSURF_MARKER in text[:DETECTION_WINDOW]:
        return Dialect.WINDSURF

    data = front_matter if front_matter is not None else parse_rule_text(text).front_matter

    if TRIGGER_KEY in data:
        return Dialect.WINDSURF
    if isinstance(data.get(ALWAYS_APPLY_KEY), bool):
        return Dialect.CURSOR
    if DESCRIPTION_KEY in data or GLOBS_KEY in data:
        return Dialect.CURSOR
    return Dialect.UNKNOWN
