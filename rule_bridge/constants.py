from typing import Final


FRONT_MATTER_DELIMITER: Final[str] = "---"

TRIGGER_KEY: Final[str] = "trigger"
ALWAYS_APPLY_KEY: Final[str] = "alwaysApply"
DESCRIPTION_KEY: Final[str] = "description"
GLOBS_KEY: Final[str] = "globs"

# Raw-text prefix scanned for the Windsurf trigger marker before parsing.
DETECTION_WINDOW: Final[int] = 512
WINDSURF_MARKER: Final[str] = f"{TRIGGER_KEY}:"

CURSOR_EXTENSION: Final[str] = ".mdc"
WINDSURF_EXTENSION: Final[str] = ".md"
RULE_EXTENSIONS: Final[tuple[str, ...]] = (WINDSURF_EXTENSION, CURSOR_EXTENSION)
