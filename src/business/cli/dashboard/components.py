"""Report UI components.

Panels and tables are built as lists of lines whose borders are sized from
the panel width or the column widths, so every line of a block has the same
length and blocks can be placed side by side.
"""

import math

from src.engine.models import ConcentrationLevel

# "┌─── " + title + " " + ... + "┐"
_TITLE_CHROME = 7


def health_bar(percent: float, width: int = 10) -> str:
    """Bar for a 0-100 percentage such as margin health or a sector weight.

    Out-of-range values are clamped; NaN draws an empty bar.

    Example:
        >>> health_bar(75)
        '[███████░░░]'
    """
    if math.isnan(percent):
        percent = 0.0
    clamped = max(0.0, min(100.0, percent))
    filled = int(clamped / 100 * width)
    return f"[{'█' * filled}{'░' * (width - filled)}]"


def concentration_icon(level: ConcentrationLevel | None) -> str:
    icons = {
        ConcentrationLevel.HIGH: "🔴",
        ConcentrationLevel.MODERATE: "🟡",
        ConcentrationLevel.DIVERSIFIED: "🟢",
    }
    return icons.get(level, "⚪")


def top_border(title: str, width: int) -> str:
    """Titled top border exactly ``width`` characters long.

    A title too long for the width is cut so the border keeps two dashes.
    """
    room = width - _TITLE_CHROME - 2
    if len(title) > room:
        title = title[:max(room, 0)]
    padding = width - len(title) - _TITLE_CHROME
    return f"┌─── {title} {'─' * padding}┐"


def bottom_border(width: int) -> str:
    return f"└{'─' * (width - 2)}┘"


def panel(title: str, rows: list[str], width: int, height: int = 0) -> list[str]:
    """Bordered panel of ``width`` characters.

    Rows longer than the inner width are truncated. ``height`` pads the panel
    with blank rows so neighbouring panels line up.
    """
    inner = width - 4  # "│ " + " │"
    lines = [top_border(title, width)]
    for row in rows:
        lines.append(f"│ {row[:inner]:<{inner}} │")
    while len(lines) < height - 1:
        lines.append(f"│ {'':<{inner}} │")
    lines.append(bottom_border(width))
    return lines


def table_width(columns: list[tuple[str, int]]) -> int:
    """Full line length of a table: the cells plus one border per column edge."""
    return sum(w for _, w in columns) + len(columns) + 1


def _is_numeric(value: str) -> bool:
    return value.lstrip("+-").replace(".", "", 1).rstrip("%x").isdigit()


def table_row(values: list[str], columns: list[tuple[str, int]]) -> str:
    """Table data row. Numbers and percentages are right-aligned, text left-aligned."""
    cells = []
    for i, (_, w) in enumerate(columns):
        value = values[i] if i < len(values) else ""
        value = value[:w]
        cells.append(f"{value:>{w}}" if _is_numeric(value) else f"{value:<{w}}")
    return f"│{'│'.join(cells)}│"


def table(title: str, columns: list[tuple[str, int]], rows: list[list[str]]) -> list[str]:
    """Bordered table with a titled top, centred header and one line per row."""
    width = table_width(columns)
    header = "│".join(f"{name:^{w}}" for name, w in columns)
    separator = "┼".join("─" * w for _, w in columns)
    lines = [
        top_border(title, width),
        f"│{header}│",
        f"├{separator}┤",
    ]
    lines.extend(table_row(row, columns) for row in rows)
    lines.append(bottom_border(width))
    return lines


def side_by_side(left: list[str], right: list[str], gap: int = 2) -> list[str]:
    """Place two blocks of lines next to each other."""
    left_width = max((len(line) for line in left), default=0)
    return [
        f"{(left[i] if i < len(left) else ''):<{left_width}}{' ' * gap}"
        f"{right[i] if i < len(right) else ''}"
        for i in range(max(len(left), len(right)))
    ]
