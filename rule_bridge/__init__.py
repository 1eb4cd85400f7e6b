"""Convert rule front-matter between Cursor and Windsurf."""

from rule_bridge.errors import (
    ConversionError,
    ErrorCode,
    FormatDetectionError,
    FormatMismatchError,
    MappingError,
    ParseError,
    RuleFileError,
)
from rule_bridge.rules.converter import convert_rule_content, convert_string
from rule_bridge.rules.detector import detect_dialect
from rule_bridge.rules.mappers import map_cursor_to_windsurf, map_windsurf_to_cursor
from rule_bridge.rules.models import (
    CursorFrontMatter,
    Dialect,
    Direction,
    Trigger,
    WindsurfFrontMatter,
)
from rule_bridge.rules.parser import parse_rule_text, serialize_rule_text

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "CursorFrontMatter",
    "Dialect",
    "Direction",
    "ErrorCode",
    "FormatDetectionError",
    "FormatMismatchError",
    "MappingError",
    "ParseError",
    "RuleFileError",
    "Trigger",
    "WindsurfFrontMatter",
    "convert_rule_content",
    "convert_string",
    "detect_dialect",
    "map_cursor_to_windsurf",
    "map_windsurf_to_cursor",
    "parse_rule_text",
    "serialize_rule_text",
]
