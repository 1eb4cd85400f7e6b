from rule_bridge.tui.renderers import ConsoleUI

__all__ = ["ConsoleUI"]
