"""Circle drawing for task items.

Terminal cells are roughly twice as tall as they are wide, so a circle
``rows`` cells tall is drawn ``rows * CELL_ASPECT`` cells wide. The label
is word-wrapped into the disc by terminal cell width and centered on each
row it occupies.
"""

from __future__ import annotations

import math

from rich.cells import cell_len
from rich.text import Text

CELL_ASPECT = 2
LABEL_PADDING = 1
ELLIPSIS = "…"


def disc_spans(rows: int) -> list[tuple[int, int]]:
    """Column span covered by the disc on each row.

    Args:
        rows: Height of the circle in rows.

    Returns:
        One ``(start, end)`` pair per row; ``end`` is exclusive.
    """
    width = rows * CELL_ASPECT
    radius = rows / 2
    spans: list[tuple[int, int]] = []
    for r in range(rows):
        dy = (r + 0.5 - radius) / radius
        half = math.sqrt(max(0.0, 1.0 - dy * dy)) * radius * CELL_ASPECT
        start = max(0, round(width / 2 - half))
        end = min(width, round(width / 2 + half))
        spans.append((start, end))
    return spans


def _fit(text: str, limit: int) -> str:
    """Longest prefix of text that fits in ``limit`` cells."""
    used = 0
    for index, char in enumerate(text):
        used += cell_len(char)
        if used > limit:
            return text[:index]
    return text


def _truncate(line: str, limit: int) -> str:
    if cell_len(line) <= limit:
        return line
    if limit <= 0:
        return ""
    if limit == 1:
        return ELLIPSIS
    return _fit(line, limit - 1) + ELLIPSIS


def _wrap(label: str, width: int) -> list[str]:
    """Word-wrap to ``width`` cells, splitting words that are too long."""
    lines: list[str] = []
    current = ""
    for word in label.split():
        while cell_len(word) > width:
            head = _fit(word, width)
            if not head:
                # A double-width character in a single-cell row
                word = word[1:]
                continue
            if current:
                lines.append(current)
                current = ""
            lines.append(head)
            word = word[len(head) :]
        if not word:
            continue
        candidate = f"{current} {word}" if current else word
        if cell_len(candidate) <= width:
            current = candidate
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines


def layout_label(label: str, spans: list[tuple[int, int]]) -> dict[int, tuple[int, str]]:
    """Place a label inside the disc.

    Widths are terminal cells, so double-width characters count twice.

    Args:
        label: Text to place. Whitespace is collapsed for wrapping.
        spans: Row spans from :func:`disc_spans`.

    Returns:
        Mapping of row index to ``(start column, text)``.
    """
    rows = len(spans)
    widest = max((end - start for start, end in spans), default=0)
    wrap_width = widest - 2 * LABEL_PADDING
    if wrap_width <= 0:
        return {}

    lines = _wrap(label, wrap_width)
    if not lines:
        return {}

    max_lines = max(1, rows - 2)
    if len(lines) > max_lines:
        lines = lines[:max_lines]
        lines[-1] = _truncate(lines[-1] + ELLIPSIS, wrap_width)

    placed: dict[int, tuple[int, str]] = {}
    first_row = (rows - len(lines)) // 2
    for offset, line in enumerate(lines):
        row = first_row + offset
        start, end = spans[row]
        line = _truncate(line, end - start - 2 * LABEL_PADDING)
        if not line:
            continue
        placed[row] = (start + (end - start - cell_len(line)) // 2, line)
    return placed


def draw_circle(label: str, fill: str, rows: int, label_style: str = "bold white") -> Text:
    """Render a filled circle with the label centered inside it.

    Args:
        label: Text drawn over the circle.
        fill: Fill color, anything Rich accepts as a color (e.g. ``#FFA726``).
        rows: Height of the circle in rows.
        label_style: Style for the label characters, without background.

    Returns:
        A multi-line Rich Text, ``rows * CELL_ASPECT`` cells wide on every row.
    """
    spans = disc_spans(rows)
    placed = layout_label(label, spans)
    width = rows * CELL_ASPECT
    background = f"on {fill}"
    foreground = f"{label_style} on {fill}"

    text = Text(no_wrap=True, overflow="crop")
    for row, (start, end) in enumerate(spans):
        line_start, line = placed.get(row, (end, ""))
        line_end = line_start + cell_len(line)
        text.append(" " * start)
        if start < line_start:
            text.append(" " * (line_start - start), style=background)
        if line:
            text.append(line, style=foreground)
        if line_end < end:
            text.append(" " * (end - max(line_end, start)), style=background)
        text.append(" " * (width - end))
        if row < rows - 1:
            text.append("\n")
    return text
