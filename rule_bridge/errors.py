from enum import Enum
from pathlib import Path
from typing import Optional


class ErrorCode(str, Enum):
    FORMAT_DETECTION = "E01"
    MAPPING = "E02"
    PARSE = "E03"
    FILE_ACCESS = "E003"
    EXTENSION_MISMATCH = "E004"


class ConversionError(Exception):
    """Base error for every failed conversion."""

    code: ErrorCode = ErrorCode.FORMAT_DETECTION

    def __init__(self, message: str, code: Optional[ErrorCode] = None) -> None:
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)


def _for_file(path: Optional[str]) -> str:
    return f" for file {path}" if path else ""


class ParseError(ConversionError):
    code = ErrorCode.PARSE

    def __init__(
        self,
        cause: str,
        detail: str,
        line: Optional[int] = None,
        path: Optional[str] = None,
    ) -> None:
        self.cause = cause
        self.detail = detail
        self.line = line
        self.path = path
        path_info = f" in file {path}" if path else ""
        line_info = f" at line {line}" if line is not None else ""
        super().__init__(
            f"Invalid YAML front-matter{path_info}. {cause}{line_info}. "
            f"Original error: {detail}"
        )


class FormatDetectionError(ConversionError):
    code = ErrorCode.FORMAT_DETECTION

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)

    @classmethod
    def undetermined(cls, path: Optional[str] = None) -> "FormatDetectionError":
        return cls(
            f"Could not determine source format{_for_file(path)}. "
            "Use --force if necessary.",
            path=path,
        )


class FormatMismatchError(FormatDetectionError):
    def __init__(self, expected: str, detected: str, path: Optional[str] = None) -> None:
        self.expected = expected
        self.detected = detected
        super().__init__(
            f"Expected {expected} format but detected {detected}{_for_file(path)}. "
            "Use --force if necessary.",
            path=path,
        )


class MappingError(ConversionError):
    code = ErrorCode.MAPPING

    def __init__(self, message: str, trigger: object, missing_field: Optional[str] = None) -> None:
        self.trigger = trigger
        self.missing_field = missing_field
        super().__init__(message)

    @classmethod
    def missing(cls, trigger: str, field: str) -> "MappingError":
        return cls(
            f"Windsurf '{trigger}' trigger missing '{field}' field.",
            trigger=trigger,
            missing_field=field,
        )

    @classmethod
    def unknown_trigger(cls, trigger: object) -> "MappingError":
        return cls(f"Unknown Windsurf trigger type: {trigger}", trigger=trigger)


class RuleFileError(ConversionError):
    code = ErrorCode.FILE_ACCESS

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class ExtensionMismatchError(RuleFileError):
    code = ErrorCode.EXTENSION_MISMATCH

    def __init__(self, path: Path, expected: str, direction: str) -> None:
        self.expected = expected
        self.direction = direction
        super().__init__(
            path,
            f"File extension {path.suffix or '(none)'} does not match expected input "
            f"extension {expected} for conversion direction '{direction}'.",
        )
