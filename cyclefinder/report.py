"""Console formatting of cycle search results"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict

from cyclefinder.graph.cycle_finder import CycleResult

RESULT_PREFIX = "The length of the shortest cycle is: "
ONE_DECIMAL = Decimal("0.1")


def format_length(value: float) -> str:
    """``3`` for integral lengths, otherwise one decimal rounded half up (``2.25`` -> ``2.3``)"""
    if float(value).is_integer():
        return str(int(value))
    rounded = Decimal(repr(float(value))).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)
    return str(rounded)


def format_result(result: CycleResult, show_cycle: bool = False) -> str:
    line = RESULT_PREFIX + format_length(result.length)
    if show_cycle and result.found:
        line += "\nCycle: " + " -> ".join(str(v) for v in result.cycle)
    return line


def format_stats(stats: Dict[str, Any]) -> str:
    lines = ["=== Graph Statistics ==="]
    for key, value in stats.items():
        lines.append(f"{key:25s}: {value}")
    lines.append("=== ================ ===")
    return "\n".join(lines)
