from typing import Optional

from rich.markup import escape
from rich.table import Column, Table

from rule_bridge.models import ConversionReport, ConversionResult
from rule_bridge.rules.models import Dialect, Direction
from rule_bridge.tui.enums import CONVERSION_STATUS_STYLE, UIStyle
from rule_bridge.utils import compact_home_path


class ModeTable:
    @staticmethod
    def summary_block(
        mode: str,
        direction: Optional[Direction],
        force: Optional[Dialect] = None,
        source: Optional[str] = None,
        destination: Optional[str] = None,
    ) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Mode", mode)
        if source is not None:
            table.add_row("Input", escape(compact_home_path(source)))
        if destination is not None:
            table.add_row("Output", escape(compact_home_path(destination)))
        if direction is not None:
            table.add_row(
                "Direction",
                f"{direction.value} ({direction.source.label} -> {direction.target.label})",
            )
        else:
            table.add_row("Direction", "detect per file")
        if force is not None:
            table.add_row("Force format", force.value)
        return table


class ResultsTable:
    @staticmethod
    def results_table(results: list[ConversionResult]) -> Table:
        table = Table(
            Column(header="Status", width=10),
            Column(header="Source", overflow="fold"),
            Column(header="Destination", overflow="fold"),
            Column(header="Detail", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for result in results:
            style = CONVERSION_STATUS_STYLE.get(result.status, UIStyle.WHITE.value)
            detail = ""
            if result.error is not None:
                detail = f"({result.error.code.value}) {result.error.message}"
            table.add_row(
                f"[{style}]{result.status.value}[/{style}]",
                escape(compact_home_path(result.source)),
                escape(compact_home_path(result.destination)),
                escape(detail),
            )
        return table

    @staticmethod
    def stats_block(report: ConversionReport) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Converted", f"[green]{report.converted}[/green]")
        if report.planned:
            table.add_row("Planned", f"[cyan]{report.planned}[/cyan]")
        table.add_row("Skipped", f"[yellow]{report.skipped}[/yellow]")
        table.add_row("Errors", f"[red]{report.errors}[/red]")
        return table
