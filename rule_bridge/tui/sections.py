from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from rule_bridge.tui.enums import UIStyle


class UISection:
    @staticmethod
    def wrap(title: str, body: RenderableType, style: str = UIStyle.BLUE.value) -> Panel:
        return Panel(body, title=title, title_align="left", border_style=style, padding=(0, 1))

    @staticmethod
    def note(title: str, message: str, style: str) -> Panel:
        # Messages carry file paths, so they are never read as markup.
        return UISection.wrap(title, Text(message), style=style)
