"""Top-level to-do screen: input row, Add button and the task list."""

from __future__ import annotations

import logging
from collections.abc import Callable

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from circletodo.config import DisplayConfig
from circletodo.item import TaskItem
from circletodo.models import Task
from circletodo.palette import ColorPicker
from circletodo.store import StoreChange, TaskStore

logger = logging.getLogger(__name__)


class TaskScreen:
    """Owns the pending input and the task store, and one TaskItem per task.

    Items are keyed by task id so that their local state (editing flag and
    staged buffer) follows the task through deletions of other tasks.

    ``on_change`` is called after every store change, once the items are in
    sync; the interactive loop uses it to know when to redraw.
    """

    def __init__(
        self,
        store: TaskStore | None = None,
        picker: ColorPicker | None = None,
        display: DisplayConfig | None = None,
        on_change: Callable[[StoreChange], None] | None = None,
    ) -> None:
        self.store = store if store is not None else TaskStore(picker)
        self.display = display or DisplayConfig()
        self.pending_input: str = ""
        self.on_change = on_change
        self._items: dict[int, TaskItem] = {}
        for task in self.store:
            self._items[task.id] = self._make_item(task)
        self._unsubscribe = self.store.subscribe(self._handle_change)

    def close(self) -> None:
        """Detach from the store."""
        self._unsubscribe()

    # -------------------- items --------------------
    def _make_item(self, task: Task) -> TaskItem:
        task_id = task.id
        return TaskItem(
            task,
            on_delete=lambda: self.store.remove(task_id),
            on_edit=lambda text: self.store.edit_description(task_id, text),
        )

    def _handle_change(self, change: StoreChange) -> None:
        if change.kind == "added":
            self._items[change.task.id] = self._make_item(change.task)
        elif change.kind == "removed":
            self._items.pop(change.task.id, None)
        if self.on_change is not None:
            self.on_change(change)

    @property
    def items(self) -> list[TaskItem]:
        """Items in store order."""
        return [self._items[t.id] for t in self.store if t.id in self._items]

    def item(self, task_id: int) -> TaskItem | None:
        """Get the item for a task id."""
        return self._items.get(task_id)

    # -------------------- input row --------------------
    def type_text(self, text: str) -> None:
        """Replace the pending input, as typing into the field does."""
        self.pending_input = text

    def press_add(self) -> Task | None:
        """Tap Add: create a task from the pending input.

        Blank input leaves both the store and the pending input untouched.
        """
        task = self.store.add(self.pending_input)
        if task is not None:
            self.pending_input = ""
        return task

    # -------------------- rendering --------------------
    def _build_input_row(self) -> Panel:
        row = Text()
        if self.pending_input:
            row.append(self.pending_input)
        else:
            row.append(self.display.placeholder, style="dim italic")
        row.append("  ")
        row.append(" Add ", style="bold white on blue")
        return Panel(row, border_style="cyan")

    def render(self) -> RenderableType:
        """Build the whole screen."""
        parts: list[RenderableType] = [self._build_input_row()]
        items = self.items
        if not items:
            parts.append(Text("  No tasks yet", style="dim"))
        for item in items:
            parts.append(
                item.render(
                    rows=self.display.circle_rows,
                    label_style=self.display.label_style,
                    delete_style=self.display.delete_style,
                )
            )
        return Group(*parts)
