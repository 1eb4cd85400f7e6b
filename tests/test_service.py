"""Tests for file and directory conversion."""

from pathlib import Path

import pytest

from rule_bridge.errors import (
    ErrorCode,
    ExtensionMismatchError,
    FormatDetectionError,
    RuleFileError,
)
from rule_bridge.models import ConversionReport, ConversionStatus, ConvertOptions
from rule_bridge.rules.models import Dialect, Direction
from rule_bridge.service import RuleConversionService


# --- convert_file ---


def test_convert_file_next_to_source(tmp_path: Path, write_rule, cursor_glob_rule) -> None:
    source = write_rule(tmp_path / "typescript.mdc", cursor_glob_rule)

    result = RuleConversionService().convert_file(source)

    assert result.destination == tmp_path / "typescript.md"
    assert result.direction == Direction.CURSOR_TO_WINDSURF
    assert result.written is True
    written = result.destination.read_text(encoding="utf-8")
    assert written == result.content
    assert written.startswith("---\ntrigger: glob\n")


def test_convert_file_detects_windsurf(tmp_path: Path, write_rule, windsurf_manual_rule) -> None:
    source = write_rule(tmp_path / "manual.md", windsurf_manual_rule)

    result = RuleConversionService().convert_file(source)

    assert result.destination == tmp_path / "manual.mdc"
    assert result.destination.read_text(encoding="utf-8") == (
        "---\nalwaysApply: false\n---\nOnly when asked.\n"
    )


def test_convert_file_into_existing_directory(tmp_path: Path, write_rule, windsurf_manual_rule) -> None:
    source = write_rule(tmp_path / "manual.md", windsurf_manual_rule)
    out_dir = tmp_path / "out"
    out_dir.mkdir()

    result = RuleConversionService().convert_file(source, out_dir)

    assert result.destination == out_dir / "manual.mdc"
    assert result.destination.exists()


def test_convert_file_creates_parent_directories(tmp_path: Path, write_rule, windsurf_manual_rule) -> None:
    source = write_rule(tmp_path / "manual.md", windsurf_manual_rule)
    target = tmp_path / "nested" / "output" / "converted.mdc"

    RuleConversionService().convert_file(source, target)

    assert target.read_text(encoding="utf-8").startswith("---\nalwaysApply: false\n")


def test_convert_file_overwrites_existing_output(tmp_path: Path, write_rule, windsurf_manual_rule) -> None:
    source = write_rule(tmp_path / "manual.md", windsurf_manual_rule)
    target = write_rule(tmp_path / "manual.mdc", "initial content")

    RuleConversionService().convert_file(source, target)

    assert "initial content" not in target.read_text(encoding="utf-8")


def test_convert_file_dry_run_writes_nothing(tmp_path: Path, write_rule, windsurf_manual_rule) -> None:
    source = write_rule(tmp_path / "manual.md", windsurf_manual_rule)

    result = RuleConversionService().convert_file(
        source, options=ConvertOptions(dry_run=True)
    )

    assert result.written is False
    assert result.content.startswith("---\nalwaysApply: false\n")
    assert not (tmp_path / "manual.mdc").exists()


def test_convert_file_missing_source(tmp_path: Path) -> None:
    with pytest.raises(RuleFileError) as info:
        RuleConversionService().convert_file(tmp_path / "missing.md")

    assert info.value.code == ErrorCode.FILE_ACCESS
    assert "Input file not found" in str(info.value)


def test_convert_file_undetectable(tmp_path: Path, write_rule) -> None:
    source = write_rule(tmp_path / "plain.md", "# Just markdown\n")

    with pytest.raises(FormatDetectionError) as info:
        RuleConversionService().convert_file(source)

    assert "Could not auto-detect format" in str(info.value)


def test_convert_file_force_sets_direction(tmp_path: Path, write_rule) -> None:
    source = write_rule(tmp_path / "plain.mdc", "# Just markdown\n")

    result = RuleConversionService().convert_file(
        source, options=ConvertOptions(force=Dialect.CURSOR)
    )

    assert result.direction == Direction.CURSOR_TO_WINDSURF
    assert result.content == "---\ntrigger: manual\n---\n# Just markdown\n"


# --- convert_directory ---


@pytest.fixture
def rules_tree(
    tmp_path: Path, write_rule, cursor_glob_rule: str, windsurf_manual_rule: str
) -> Path:
    root = tmp_path / "rules"
    write_rule(root / "typescript.mdc", cursor_glob_rule)
    write_rule(root / "manual.md", windsurf_manual_rule)
    write_rule(root / "nested" / "always.mdc", "---\nalwaysApply: true\n---\nAlways.\n")
    write_rule(root / ".hidden.mdc", "---\ndescription: Hidden\n---\n")
    write_rule(root / "notes.txt", "not a rule")
    return root


def _by_name(results) -> dict:
    return {result.source.name: result for result in results}


def test_convert_directory_detects_each_file(tmp_path: Path, rules_tree: Path) -> None:
    out = tmp_path / "out"

    results = RuleConversionService().convert_directory(rules_tree, out)

    by_name = _by_name(results)
    assert set(by_name) == {"typescript.mdc", "manual.md", "always.mdc", ".hidden.mdc"}
    assert all(item.status == ConversionStatus.CONVERTED for item in results)
    assert (out / "typescript.md").exists()
    assert (out / "manual.mdc").exists()
    assert (out / "nested" / "always.md").read_text(encoding="utf-8") == (
        "---\ntrigger: always_on\n---\nAlways.\n"
    )
    assert (out / ".hidden.md").exists()


def test_convert_directory_skips_wrong_extension(tmp_path: Path, rules_tree: Path) -> None:
    results = RuleConversionService().convert_directory(
        rules_tree,
        tmp_path / "out",
        ConvertOptions(direction=Direction.WINDSURF_TO_CURSOR),
    )

    by_name = _by_name(results)
    assert by_name["manual.md"].status == ConversionStatus.CONVERTED
    skipped = by_name["typescript.mdc"]
    assert skipped.status == ConversionStatus.SKIPPED
    assert isinstance(skipped.error, ExtensionMismatchError)
    assert skipped.error.code == ErrorCode.EXTENSION_MISMATCH
    assert not (tmp_path / "out" / "typescript.md").exists()


def test_convert_directory_records_errors_per_file(
    tmp_path: Path, rules_tree: Path, write_rule
) -> None:
    write_rule(rules_tree / "broken.mdc", "---\nbad: [unclosed\n---\n")
    write_rule(rules_tree / "plain.md", "# No front-matter\n")
    write_rule(rules_tree / "bad-glob.md", "---\ntrigger: glob\n---\n")

    results = RuleConversionService().convert_directory(rules_tree, tmp_path / "out")

    by_name = _by_name(results)
    assert by_name["broken.mdc"].error.code == ErrorCode.PARSE
    assert by_name["plain.md"].error.code == ErrorCode.FORMAT_DETECTION
    assert by_name["bad-glob.md"].error.code == ErrorCode.MAPPING
    assert by_name["typescript.mdc"].status == ConversionStatus.CONVERTED

    report = ConversionReport.from_results(results)
    assert report.errors == 3
    assert report.converted == 4
    assert report.total == len(results)


def test_convert_directory_dry_run(tmp_path: Path, rules_tree: Path) -> None:
    out = tmp_path / "out"

    results = RuleConversionService().convert_directory(
        rules_tree, out, ConvertOptions(dry_run=True)
    )

    assert all(item.status == ConversionStatus.PLANNED for item in results)
    assert all(item.content for item in results)
    assert not out.exists()


def test_convert_directory_missing_source(tmp_path: Path) -> None:
    with pytest.raises(RuleFileError) as info:
        RuleConversionService().convert_directory(tmp_path / "nope", tmp_path / "out")

    assert "Input directory not found" in str(info.value)


def test_convert_directory_source_is_file(tmp_path: Path, write_rule, windsurf_manual_rule) -> None:
    source = write_rule(tmp_path / "rule.md", windsurf_manual_rule)

    with pytest.raises(RuleFileError) as info:
        RuleConversionService().convert_directory(source, tmp_path / "out")

    assert "not a directory" in str(info.value)


def test_convert_directory_empty(tmp_path: Path) -> None:
    source = tmp_path / "empty"
    source.mkdir()

    assert RuleConversionService().convert_directory(source, tmp_path / "out") == []
