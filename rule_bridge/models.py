from collections import Counter
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from rule_bridge.errors import ConversionError
from rule_bridge.rules.models import Dialect, Direction


class ConversionStatus(str, Enum):
    CONVERTED = "converted"
    PLANNED = "planned"
    SKIPPED = "skipped"
    ERROR = "error"


@dataclass(frozen=True)
class ConvertOptions:
    direction: Optional[Direction] = None
    force: Optional[Dialect] = None
    dry_run: bool = False


@dataclass(frozen=True)
class FileConversion:
    source: Path
    destination: Path
    direction: Direction
    content: str
    written: bool


@dataclass(frozen=True)
class ConversionResult:
    source: Path
    destination: Path
    status: ConversionStatus
    error: Optional[ConversionError] = None
    content: Optional[str] = None


@dataclass(frozen=True)
class ConversionReport:
    converted: int
    planned: int
    skipped: int
    errors: int

    @classmethod
    def from_results(cls, results: list[ConversionResult]) -> "ConversionReport":
        counts = Counter(result.status for result in results)
        return cls(
            converted=counts[ConversionStatus.CONVERTED],
            planned=counts[ConversionStatus.PLANNED],
            skipped=counts[ConversionStatus.SKIPPED],
            errors=counts[ConversionStatus.ERROR],
        )

    @property
    def total(self) -> int:
        return self.converted + self.planned + self.skipped + self.errors
