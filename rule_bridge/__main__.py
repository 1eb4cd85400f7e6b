from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from rule_bridge import __version__
from rule_bridge.errors import ConversionError
from rule_bridge.models import ConvertOptions
from rule_bridge.rules.converter import convert_rule_content
from rule_bridge.rules.models import Dialect, Direction
from rule_bridge.service import RuleConversionService
from rule_bridge.tui import ConsoleUI
from rule_bridge.utils import compact_home_paths_in_text, read_text


FORCE_VALUES = [Dialect.CURSOR.value, Dialect.WINDSURF.value]


class ConversionFailed(click.ClickException):
    exit_code = 1

    def __init__(self, error: ConversionError) -> None:
        self.error = error
        super().__init__(
            f"({error.code.value}) {compact_home_paths_in_text(error.message)}"
        )


def _stream_ui() -> ConsoleUI:
    # stdout carries converted text in streaming modes.
    return ConsoleUI(Console(stderr=True))


def _run_stream(
    content: str,
    direction: Direction,
    force: Optional[Dialect],
    dry_run: bool,
    ui: ConsoleUI,
    path: Optional[Path] = None,
) -> None:
    converted = convert_rule_content(
        content, direction, force=force, path=str(path) if path else None
    )
    if dry_run:
        ui.render_stream_dry_run(converted)
        return
    click.echo(converted, nl=False)


def _run_directory(
    source_dir: Path,
    output_dir: Path,
    reverse: bool,
    force: Optional[Dialect],
    dry_run: bool,
    verbose: bool,
) -> None:
    ui = ConsoleUI(Console())
    # Without -r or --force the direction is detected per file.
    direction: Optional[Direction] = None
    if reverse:
        direction = Direction.WINDSURF_TO_CURSOR
    elif force is not None:
        direction = Direction.from_dialect(force)

    if verbose or dry_run:
        ui.render_mode(
            "directory (dry run)" if dry_run else "directory",
            direction,
            force,
            source=str(source_dir),
            destination=str(output_dir),
        )

    results = RuleConversionService().convert_directory(
        source_dir,
        output_dir,
        ConvertOptions(direction=direction, force=force, dry_run=dry_run),
    )
    report = ui.render_directory_results(results, verbose=verbose or dry_run)
    if report.errors:
        raise click.exceptions.Exit(1)


def _run_file(
    source: Path,
    output: Path,
    direction: Direction,
    force: Optional[Dialect],
    dry_run: bool,
    verbose: bool,
) -> None:
    ui = ConsoleUI(Console())
    if verbose:
        ui.render_mode("file", direction, force, source=str(source), destination=str(output))

    result = RuleConversionService().convert_file(
        source,
        output,
        ConvertOptions(direction=direction, force=force, dry_run=dry_run),
    )
    if verbose or dry_run:
        ui.render_file_result(result)


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Convert rule files between Cursor (.mdc) and Windsurf (.md) formats.",
)
@click.version_option(__version__, prog_name="rule-bridge")
@click.option(
    "-i",
    "--input",
    "input_path",
    type=click.Path(path_type=Path),
    help="Input file path (single file mode). Conflicts with -d/--dir.",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    help="Output file (with -i) or output directory (with -d).",
)
@click.option(
    "-d",
    "--dir",
    "dir_path",
    type=click.Path(path_type=Path),
    help="Input directory for batch conversion. Requires -o/--output.",
)
@click.option(
    "-r",
    "--reverse",
    is_flag=True,
    default=False,
    help="Convert from Windsurf (.md) to Cursor (.mdc).",
)
@click.option(
    "--force",
    type=click.Choice(FORCE_VALUES, case_sensitive=False),
    default=None,
    help="Force the input format instead of detecting it.",
)
@click.option("--dry-run", is_flag=True, default=False, help="Convert without writing files.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show detailed output.")
def cli(
    input_path: Optional[Path],
    output_path: Optional[Path],
    dir_path: Optional[Path],
    reverse: bool,
    force: Optional[str],
    dry_run: bool,
    verbose: bool,
) -> None:
    if input_path is not None and dir_path is not None:
        raise click.UsageError("-i/--input cannot be used together with -d/--dir.")
    if dir_path is not None and output_path is None:
        raise click.UsageError("Output directory (-o) must be specified when using --dir (-d).")
    if input_path is None and dir_path is None and output_path is not None:
        raise click.UsageError(
            "Output option (-o) cannot be used without an input option (-i or -d)."
        )

    direction = Direction.WINDSURF_TO_CURSOR if reverse else Direction.CURSOR_TO_WINDSURF
    forced = Dialect(force.lower()) if force else None

    try:
        if dir_path is not None:
            _run_directory(dir_path, output_path, reverse, forced, dry_run, verbose)
        elif input_path is not None and output_path is not None:
            _run_file(input_path, output_path, direction, forced, dry_run, verbose)
        elif input_path is not None:
            ui = _stream_ui()
            if verbose:
                ui.render_mode("file to stdout", direction, forced, source=str(input_path))
            _run_stream(read_text(input_path), direction, forced, dry_run, ui, path=input_path)
        else:
            ui = _stream_ui()
            if verbose:
                ui.render_mode("stdin to stdout", direction, forced)
            content = click.get_text_stream("stdin").read()
            _run_stream(content, direction, forced, dry_run, ui)
    except ConversionError as exc:
        raise ConversionFailed(exc) from exc


def main() -> int:
    try:
        code = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.exceptions.Abort:
        return 1
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
