"""Convert a single rule text between dialects."""

from __future__ import annotations

from typing import Optional

from rule_bridge.errors import FormatDetectionError, FormatMismatchError
from rule_bridge.rules.detector import detect_dialect
from rule_bridge.rules.mappers import map_cursor_to_windsurf, map_windsurf_to_cursor
from rule_bridge.rules.models import (
    CursorFrontMatter,
    Dialect,
    Direction,
    WindsurfFrontMatter,
)
from rule_bridge.rules.parser import parse_rule_text, serialize_rule_text


def convert_rule_content(
    source_text: str,
    direction: Direction,
    force: Optional[Dialect] = None,
    path: Optional[str] = None,
) -> str:
    """Return ``source_text`` rewritten in the target dialect of ``direction``.

    Raises ``ParseError``, ``FormatDetectionError`` or ``MappingError``.
    ``path`` is only used in error messages.
    """
    direction = Direction(direction)
    document = parse_rule_text(source_text, path=path)

    dialect = Dialect(force) if force else detect_dialect(source_text, document.front_matter)
    if dialect == Dialect.UNKNOWN:
        raise FormatDetectionError.undetermined(path)
    if dialect != direction.source:
        raise FormatMismatchError(direction.source.label, dialect.label, path=path)

    if direction == Direction.CURSOR_TO_WINDSURF:
        mapped = map_cursor_to_windsurf(
            CursorFrontMatter.from_mapping(document.front_matter)
        ).to_mapping()
    else:
        mapped = map_windsurf_to_cursor(
            WindsurfFrontMatter.from_mapping(document.front_matter)
        ).to_mapping()

    return serialize_rule_text(mapped, document.body)


def convert_string(
    content: str, direction: Direction, force: Optional[Dialect] = None
) -> str:
    return convert_rule_content(content, direction, force=force)
