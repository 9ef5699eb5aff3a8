"""Interactive session: draw the screen, read a line, apply the event."""

from __future__ import annotations

import logging
from collections.abc import Callable

from rich.console import Console
from rich.table import Table
from rich.text import Text

from circletodo.events import HELP_TEXT, Event, EventError, EventType, parse_event
from circletodo.item import TaskItem
from circletodo.screen import TaskScreen
from circletodo.store import StoreChange

logger = logging.getLogger(__name__)

PROMPT = "[bold cyan]>[/bold cyan] "


class TaskApp:
    """Drive a TaskScreen from typed lines.

    The screen is redrawn only when something visible changed: a store change
    reported through ``screen.on_change``, or a change to the pending input,
    an item's editing state or buffer, the help or the notice.

    Args:
        screen: The screen to drive.
        console: Console to draw on. Defaults to a new stdout Console.
        read_line: Function that shows a prompt and returns a typed line.
            Defaults to ``console.input``.
        clear_screen: Clear the terminal before each redraw.
    """

    def __init__(
        self,
        screen: TaskScreen,
        console: Console | None = None,
        read_line: Callable[[str], str] | None = None,
        clear_screen: bool = True,
    ) -> None:
        self.screen = screen
        self._console = console or Console()
        self._read_line = read_line or self._console.input
        self._clear_screen = clear_screen
        self._show_help = False
        self.notice: str | None = None
        self.dirty: bool = True
        self._forward_change = screen.on_change
        screen.on_change = self._handle_change

    def run(self) -> None:
        """Run until /quit, end of input or Ctrl-C."""
        exit_message = "Goodbye."
        try:
            while True:
                if self.dirty:
                    self._draw()
                    self.dirty = False
                line = self._read_line(PROMPT)
                if not self.apply_line(line):
                    break
        except (KeyboardInterrupt, EOFError):
            exit_message = "Interrupted. Goodbye."
        finally:
            self.screen.close()
        self._console.print()
        self._console.print(f"[dim]{exit_message}[/dim]")

    def apply_line(self, line: str) -> bool:
        """Parse and apply one typed line, marking the screen dirty if needed.

        Returns:
            False when the line asks to quit, True otherwise.
        """
        before = self._view_state()
        try:
            event = parse_event(line)
        except EventError as e:
            logger.info("Rejected input %r: %s", line, e)
            self.notice = str(e)
        else:
            if event is None:
                return True
            if event.event_type is EventType.QUIT:
                return False
            self.notice = self.handle(event)
        if self._view_state() != before:
            self.dirty = True
        return True

    def _handle_change(self, change: StoreChange) -> None:
        self.dirty = True
        if self._forward_change is not None:
            self._forward_change(change)

    def _view_state(self) -> tuple[object, ...]:
        """Everything drawn on screen that does not live in the store."""
        return (
            self.screen.pending_input,
            self._show_help,
            self.notice,
            tuple((item.task.id, item.editing, item.buffer) for item in self.screen.items),
        )

    # -------------------- event dispatch --------------------
    def handle(self, event: Event) -> str | None:
        """Apply one event to the screen.

        Returns:
            A notice to show under the screen, or None.
        """
        self._show_help = False
        kind = event.event_type

        if kind is EventType.TYPE_TEXT:
            self.screen.type_text(event.text or "")
            return None
        if kind is EventType.ADD:
            if event.text is not None:
                self.screen.type_text(event.text)
            self.screen.press_add()
            return None
        if kind is EventType.CLEAR:
            self.screen.type_text("")
            return None
        if kind is EventType.HELP:
            self._show_help = True
            return None

        assert event.task_id is not None
        item = self.screen.item(event.task_id)
        if item is None:
            return f"No task #{event.task_id}."
        return self._handle_item(item, event)

    def _handle_item(self, item: TaskItem, event: Event) -> str | None:
        kind = event.event_type

        if kind is EventType.TOGGLE:
            item.toggle()
            return None
        if kind is EventType.DELETE:
            item.delete()
            return None

        if not item.editing:
            return f"Task #{item.task.id} is not being edited. Use /edit {item.task.id} first."
        if event.text is not None:
            item.type_text(event.text)
        if kind is EventType.DONE:
            item.commit()
        return None

    # -------------------- drawing --------------------
    def _build_help(self) -> Table:
        table = Table(title="Commands", show_header=False, box=None, padding=(0, 2))
        table.add_column(style="cyan")
        table.add_column(style="dim")
        for usage, description in HELP_TEXT:
            table.add_row(Text(usage), Text(description))
        return table

    def _draw(self) -> None:
        if self._clear_screen:
            self._console.clear()
        self._console.print("[bold cyan]To-do[/bold cyan] [dim]· /help for commands[/dim]")
        self._console.print(self.screen.render())
        if self._show_help:
            self._console.print(self._build_help())
        if self.notice:
            notice = Text()
            notice.append("⚠ ", style="yellow bold")
            notice.append(self.notice)
            self._console.print(notice)
