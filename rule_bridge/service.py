"""Convert rule files and directories on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from rule_bridge.constants import RULE_EXTENSIONS
from rule_bridge.errors import (
    ConversionError,
    ExtensionMismatchError,
    FormatDetectionError,
    RuleFileError,
)
from rule_bridge.models import (
    ConversionResult,
    ConversionStatus,
    ConvertOptions,
    FileConversion,
)
from rule_bridge.rules.converter import convert_rule_content
from rule_bridge.rules.detector import detect_dialect
from rule_bridge.rules.models import Dialect, Direction
from rule_bridge.rules.parser import parse_rule_text
from rule_bridge.utils import read_text, swap_extension, write_text


class RuleConversionService:
    def resolve_direction(
        self, content: str, source: Path, options: ConvertOptions
    ) -> Direction:
        if options.direction is not None:
            return Direction(options.direction)
        if options.force is not None:
            return Direction.from_dialect(Dialect(options.force))

        document = parse_rule_text(content, path=str(source))
        dialect = detect_dialect(content, document.front_matter)
        if dialect == Dialect.UNKNOWN:
            raise FormatDetectionError(
                f"Could not auto-detect format for {source}. "
                "Please specify direction or use --force.",
                path=str(source),
            )
        return Direction.from_dialect(dialect)

    def resolve_destination(
        self, source: Path, direction: Direction, destination: Optional[Path] = None
    ) -> Path:
        extension = direction.target.extension
        if destination is None:
            return swap_extension(source, extension)
        if destination.is_dir():
            return destination / f"{source.stem}{extension}"
        return destination

    def convert_file(
        self,
        source: Path,
        destination: Optional[Path] = None,
        options: ConvertOptions = ConvertOptions(),
    ) -> FileConversion:
        content = read_text(source)
        direction = self.resolve_direction(content, source, options)
        converted = convert_rule_content(
            content, direction, force=options.force, path=str(source)
        )
        target = self.resolve_destination(source, direction, destination)
        if not options.dry_run:
            write_text(target, converted)
        return FileConversion(
            source=source,
            destination=target,
            direction=direction,
            content=converted,
            written=not options.dry_run,
        )

    def discover(self, source_dir: Path) -> list[Path]:
        return sorted(
            path
            for path in source_dir.rglob("*")
            if path.is_file() and path.suffix.lower() in RULE_EXTENSIONS
        )

    def convert_directory(
        self,
        source_dir: Path,
        destination_dir: Path,
        options: ConvertOptions = ConvertOptions(),
    ) -> list[ConversionResult]:
        """Convert every rule file under ``source_dir`` into ``destination_dir``.

        Failures are collected per file; only problems with the directories
        themselves are raised.
        """
        if not source_dir.exists():
            raise RuleFileError(source_dir, f"Input directory not found: {source_dir}")
        if not source_dir.is_dir():
            raise RuleFileError(source_dir, f"Input path is not a directory: {source_dir}")
        if not options.dry_run:
            try:
                destination_dir.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise RuleFileError(
                    destination_dir,
                    f"Could not create output directory {destination_dir}: {exc}",
                ) from exc

        return [
            self._convert_one(source, source_dir, destination_dir, options)
            for source in self.discover(source_dir)
        ]

    def _convert_one(
        self,
        source: Path,
        source_dir: Path,
        destination_dir: Path,
        options: ConvertOptions,
    ) -> ConversionResult:
        relative = source.relative_to(source_dir)
        fallback = destination_dir / relative
        try:
            content = read_text(source)
            direction = self.resolve_direction(content, source, options)
        except ConversionError as exc:
            return ConversionResult(source, fallback, ConversionStatus.ERROR, error=exc)

        expected = direction.source.extension
        if source.suffix.lower() != expected:
            return ConversionResult(
                source,
                fallback,
                ConversionStatus.SKIPPED,
                error=ExtensionMismatchError(source, expected, direction.value),
            )

        target = swap_extension(destination_dir / relative, direction.target.extension)
        try:
            converted = convert_rule_content(
                content, direction, force=options.force, path=str(source)
            )
            if not options.dry_run:
                write_text(target, converted)
        except ConversionError as exc:
            return ConversionResult(source, target, ConversionStatus.ERROR, error=exc)

        status = ConversionStatus.PLANNED if options.dry_run else ConversionStatus.CONVERTED
        return ConversionResult(source, target, status, content=converted)
