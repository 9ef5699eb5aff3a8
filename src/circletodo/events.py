"""Parse typed lines into screen events.

Each line entered at the prompt stands for one tap or keystroke on the
screen. Plain text is typed into the new-task field; lines starting with
``/`` are button taps and item actions. A leading ``//`` types a literal
slash.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EventType(Enum):
    """Kinds of screen events."""

    TYPE_TEXT = "type_text"
    """Replace the pending input."""

    ADD = "add"
    """Tap Add, optionally typing text first."""

    CLEAR = "clear"
    """Empty the pending input."""

    TOGGLE = "toggle"
    """Tap an item's Edit/Save button."""

    TYPE_EDIT = "type_edit"
    """Replace an editing item's staged buffer."""

    DONE = "done"
    """Keyboard "done" on an editing item, optionally typing text first."""

    DELETE = "delete"
    """Tap an item's Delete button."""

    HELP = "help"
    QUIT = "quit"


@dataclass
class Event:
    """A parsed screen event."""

    event_type: EventType
    raw_line: str
    task_id: int | None = None
    text: str | None = None


class EventError(ValueError):
    """A line that does not describe a valid event."""


COMMANDS: dict[str, EventType] = {
    "add": EventType.ADD,
    "clear": EventType.CLEAR,
    "edit": EventType.TOGGLE,
    "save": EventType.TOGGLE,
    "type": EventType.TYPE_EDIT,
    "done": EventType.DONE,
    "delete": EventType.DELETE,
    "rm": EventType.DELETE,
    "help": EventType.HELP,
    "quit": EventType.QUIT,
    "exit": EventType.QUIT,
}

ITEM_EVENTS = {EventType.TOGGLE, EventType.TYPE_EDIT, EventType.DONE, EventType.DELETE}
TEXT_ITEM_EVENTS = {EventType.TYPE_EDIT, EventType.DONE}

HELP_TEXT: list[tuple[str, str]] = [
    ("<text>", "Type into the new task field"),
    ("/add [text]", "Tap Add (typing the text first if given)"),
    ("/clear", "Empty the new task field"),
    ("/edit <id>", "Tap Edit/Save on a task (/save is the same button)"),
    ("/type <id> <text>", "Type into a task's edit field"),
    ("/done <id> [text]", "Press done on a task's edit field, saving the text"),
    ("/delete <id>", "Tap Delete on a task (alias /rm)"),
    ("//text", "Type text that starts with a slash"),
    ("/help", "Show this help"),
    ("/quit", "Leave (tasks are not kept)"),
]


def _parse_id(raw: str, command: str) -> int:
    raw = raw.lstrip("#").rstrip(".")
    if not raw.isdigit():
        raise EventError(f"Invalid id for /{command}: {raw!r}")
    return int(raw)


def parse_event(line: str) -> Event | None:
    """Parse one typed line.

    Args:
        line: The line as typed, without the trailing newline.

    Returns:
        The event, or None for an empty line.

    Raises:
        EventError: If a slash command is unknown or malformed.
    """
    if not line.strip():
        return None

    if not line.startswith("/"):
        return Event(EventType.TYPE_TEXT, line, text=line)

    if line.startswith("//"):
        return Event(EventType.TYPE_TEXT, line, text=line[1:])

    head, _, rest = line[1:].partition(" ")
    command = head.lower()
    event_type = COMMANDS.get(command)
    if event_type is None:
        raise EventError(f"Unknown command: /{head}. Type /help for commands.")

    # Only the separator run is dropped; the rest of the text is kept as typed
    rest = rest.lstrip()

    if event_type is EventType.ADD:
        return Event(event_type, line, text=rest if rest.strip() else None)

    if event_type not in ITEM_EVENTS:
        if rest.strip():
            raise EventError(f"/{command} takes no arguments")
        return Event(event_type, line)

    id_part, _, text = rest.partition(" ")
    text = text.lstrip()
    if not id_part:
        raise EventError(f"Usage: /{command} <id>")
    task_id = _parse_id(id_part, command)

    if event_type not in TEXT_ITEM_EVENTS:
        if text.strip():
            raise EventError(f"/{command} takes only an id")
        return Event(event_type, line, task_id=task_id)

    if event_type is EventType.TYPE_EDIT:
        return Event(event_type, line, task_id=task_id, text=text)
    return Event(event_type, line, task_id=task_id, text=text if text else None)
