from enum import Enum

from rule_bridge.models import ConversionStatus


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    WHITE = "white"


CONVERSION_STATUS_STYLE = {
    ConversionStatus.CONVERTED: UIStyle.GREEN.value,
    ConversionStatus.PLANNED: UIStyle.CYAN.value,
    ConversionStatus.SKIPPED: UIStyle.YELLOW.value,
    ConversionStatus.ERROR: UIStyle.RED.value,
}
