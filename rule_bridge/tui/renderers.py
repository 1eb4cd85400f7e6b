from typing import Optional

from rich.console import Console

from rule_bridge.models import ConversionReport, ConversionResult, ConversionStatus, FileConversion
from rule_bridge.rules.models import Dialect, Direction
from rule_bridge.tui.enums import UIStyle
from rule_bridge.tui.sections import UISection
from rule_bridge.tui.tables import ModeTable, ResultsTable
from rule_bridge.utils import compact_home_path


class ConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_mode(
        self,
        mode: str,
        direction: Optional[Direction],
        force: Optional[Dialect] = None,
        source: Optional[str] = None,
        destination: Optional[str] = None,
    ) -> None:
        self.console.print(
            UISection.wrap(
                "conversion",
                ModeTable.summary_block(mode, direction, force, source, destination),
                style=UIStyle.BLUE.value,
            )
        )

    def render_file_result(self, result: FileConversion) -> None:
        source = compact_home_path(result.source)
        destination = compact_home_path(result.destination)
        if result.written:
            body = f"Converted {source} to {destination}"
            style = UIStyle.GREEN.value
        else:
            body = f"Dry run: would convert {source} to {destination}"
            style = UIStyle.CYAN.value
        self.console.print(UISection.note("file", body, style=style))

    def render_stream_dry_run(self, content: str) -> None:
        self.console.print(
            UISection.note(
                "dry run",
                f"Conversion succeeded; {len(content)} characters would be written to stdout.",
                style=UIStyle.CYAN.value,
            )
        )

    def render_directory_results(
        self, results: list[ConversionResult], verbose: bool = False
    ) -> ConversionReport:
        report = ConversionReport.from_results(results)
        if not results:
            self.console.print(
                UISection.note("files", "No rule files found.", style=UIStyle.YELLOW.value)
            )
            return report

        shown = results
        if not verbose:
            shown = [item for item in results if item.status == ConversionStatus.ERROR]
        if shown:
            self.console.print(
                UISection.wrap("files", ResultsTable.results_table(shown), style=UIStyle.CYAN.value)
            )

        style = UIStyle.RED.value if report.errors else UIStyle.GREEN.value
        self.console.print(
            UISection.wrap("summary", ResultsTable.stats_block(report), style=style)
        )
        return report
