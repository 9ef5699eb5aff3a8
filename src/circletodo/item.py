"""A single task rendered as a circle with Edit/Save and Delete buttons."""

from __future__ import annotations

from collections.abc import Callable

from rich.align import Align
from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from circletodo.circle import draw_circle
from circletodo.models import Task

CURSOR = "▌"


class TaskItem:
    """Row state and rendering for one task.

    The staged edit buffer is seeded from the description once, when the
    item is created. Re-entering edit mode later starts from whatever the
    buffer held when the previous session ended.

    Leaving edit mode with the Save toggle does not call ``on_edit``; only
    :meth:`commit` (the keyboard "done" action) writes the buffer back.
    """

    def __init__(
        self,
        task: Task,
        on_delete: Callable[[], None],
        on_edit: Callable[[str], None],
    ) -> None:
        self.task = task
        self._on_delete = on_delete
        self._on_edit = on_edit
        self.editing: bool = False
        self.buffer: str = task.description

    @property
    def toggle_label(self) -> str:
        """Label of the toggle button."""
        return "Save" if self.editing else "Edit"

    def toggle(self) -> None:
        """Tap the Edit/Save button."""
        self.editing = not self.editing

    def type_text(self, text: str) -> None:
        """Replace the staged buffer. Ignored unless editing."""
        if self.editing:
            self.buffer = text

    def commit(self) -> None:
        """Keyboard "done": write the buffer back and leave edit mode."""
        if not self.editing:
            return
        self._on_edit(self.buffer)
        self.editing = False

    def delete(self) -> None:
        """Tap the Delete button."""
        self._on_delete()

    def render(
        self,
        rows: int = 7,
        label_style: str = "bold white",
        delete_style: str = "bold white on red",
    ) -> Panel:
        """Build the item panel: circle, then the two buttons."""
        if self.editing:
            circle = draw_circle(self.buffer + CURSOR, self.task.color.hex, rows, "bold black")
        else:
            circle = draw_circle(self.task.description, self.task.color.hex, rows, label_style)

        buttons = Text()
        buttons.append(f" {self.toggle_label} ", style="bold black on bright_white")
        buttons.append("   ")
        buttons.append(" Delete ", style=delete_style)

        return Panel(
            Group(Align.center(circle), Text(), Align.center(buttons)),
            title=f"[dim]#{self.task.id}[/dim]",
            border_style="yellow" if self.editing else "dim",
        )
