"""In-memory task store.

The store is the single owner of the ordered task list. Every successful
mutation is announced to subscribers so the screen can re-render; operations
on ids that are not present are silent no-ops.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Literal

from circletodo.models import Task
from circletodo.palette import ColorPicker

logger = logging.getLogger(__name__)

ChangeKind = Literal["added", "removed", "edited"]


@dataclass(frozen=True)
class StoreChange:
    """A single mutation announced to subscribers."""

    kind: ChangeKind
    task: Task


Listener = Callable[[StoreChange], None]


class TaskStore:
    """Ordered collection of tasks with id allocation and change notification."""

    def __init__(self, picker: ColorPicker | None = None) -> None:
        self._picker = picker or ColorPicker()
        self._tasks: list[Task] = []
        self._next_id: int = 0
        self._listeners: list[Listener] = []

    @property
    def next_id(self) -> int:
        """The id the next added task will receive."""
        return self._next_id

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the tasks in insertion order."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def __contains__(self, task_id: object) -> bool:
        return any(t.id == task_id for t in self._tasks)

    def get(self, task_id: int) -> Task | None:
        """Get a task by id."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    # -------------------- subscriptions --------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener and return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, kind: ChangeKind, task: Task) -> None:
        change = StoreChange(kind=kind, task=task)
        for listener in list(self._listeners):
            listener(change)

    # -------------------- mutations --------------------
    def add(self, description: str) -> Task | None:
        """Append a new task, or do nothing for blank text.

        The description is stored exactly as given; only the blank check
        looks at the stripped text.

        Returns:
            The created task, or None if the description was blank.
        """
        if not description.strip():
            logger.debug("Ignoring blank task description")
            return None

        task = Task(id=self._next_id, description=description, color=self._picker.pick())
        self._next_id += 1
        self._tasks.append(task)
        logger.debug("Added task %d (%s)", task.id, task.color.label)
        self._notify("added", task)
        return task

    def remove(self, task_id: int) -> Task | None:
        """Remove the task with this id. Absent ids are a no-op."""
        task = self.get(task_id)
        if task is None:
            logger.debug("Remove: no task %d", task_id)
            return None

        self._tasks = [t for t in self._tasks if t.id != task_id]
        logger.debug("Removed task %d", task_id)
        self._notify("removed", task)
        return task

    def edit_description(self, task_id: int, description: str) -> Task | None:
        """Replace a task's description in place.

        Blank descriptions are accepted here; only creation is validated.
        """
        task = self.get(task_id)
        if task is None:
            logger.debug("Edit: no task %d", task_id)
            return None

        task.description = description
        logger.debug("Edited task %d", task_id)
        self._notify("edited", task)
        return task
