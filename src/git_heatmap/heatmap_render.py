from __future__ import annotations

import datetime as dt

from .heatmap_bucket import Calendar
from .models import Window

GLYPH = "\U0001f7e9"  # green square
PLAIN_GLYPHS = ("·", "░", "▒", "▓", "█")
LEVEL_NAMES = ("lowest", "low", "medium", "high", "highest")
# xterm-256 grey ramp, indexed by intensity level
LEVEL_COLORS = (238, 246, 249, 251, 255)
RESET = "\x1b[0m"


def intensity(count: int) -> int:
    if count >= 4:
        return 4
    if count <= 0:
        return 0
    return count


def color_for(count: int) -> int:
    return LEVEL_COLORS[intensity(count)]


def cell(count: int, color: bool = True) -> str:
    if not color:
        return PLAIN_GLYPHS[intensity(count)]
    return f"\x1b[38;5;{color_for(count)}m{GLYPH}{RESET}"


def render_grid(calendar: Calendar, window: Window, color: bool = True) -> str:
    """
    Seven rows, Sunday first; one column per week, oldest on the left.
    Every row, including the last, ends with a newline.
    """
    first_day = window.first_day
    rows: list[str] = []
    for dow in range(7):
        cells: list[str] = []
        for week in range(window.weeks):
            day = first_day + dt.timedelta(days=dow + 7 * week)
            cells.append(cell(calendar.get(day, 0), color=color))
        rows.append("".join(cells) + "\n")
    return "".join(rows)
