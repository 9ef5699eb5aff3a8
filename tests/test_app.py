"""Tests for circletodo.app module."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from rich.console import Console

from circletodo.app import TaskApp
from circletodo.events import parse_event
from circletodo.screen import TaskScreen
from circletodo.store import StoreChange, TaskStore


def scripted(lines: list[str], raise_at_end: type[BaseException] = EOFError) -> Callable[[str], str]:
    """Build a read_line that replays lines, then raises."""
    queue = list(lines)

    def read_line(prompt: str) -> str:
        if not queue:
            raise raise_at_end()
        return queue.pop(0)

    return read_line


def make_app(screen: TaskScreen, lines: list[str]) -> tuple[TaskApp, Console]:
    """Build an app that draws to a recording console."""
    console = Console(record=True, width=100, force_terminal=False)
    app = TaskApp(screen, console=console, read_line=scripted(lines), clear_screen=False)
    return app, console


def apply(app: TaskApp, line: str) -> str | None:
    """Parse and handle one line."""
    event = parse_event(line)
    assert event is not None
    return app.handle(event)


class TestHandle:
    """Tests for TaskApp.handle."""

    def test_type_then_add(self, screen: TaskScreen) -> None:
        """Test typing then /add creates a task."""
        app, _ = make_app(screen, [])
        apply(app, "Buy milk")
        apply(app, "/add")

        assert [t.description for t in screen.store] == ["Buy milk"]
        assert screen.pending_input == ""

    def test_add_shorthand(self, screen: TaskScreen) -> None:
        """Test /add <text> types and taps Add."""
        app, _ = make_app(screen, [])
        apply(app, "/add Walk dog")
        assert [t.description for t in screen.store] == ["Walk dog"]

    def test_blank_add_silent(self, screen: TaskScreen) -> None:
        """Test a blank add shows no notice and keeps the field."""
        app, _ = make_app(screen, [])
        apply(app, "   x")
        screen.type_text("   ")
        assert apply(app, "/add") is None
        assert screen.pending_input == "   "
        assert len(screen.store) == 0

    def test_clear(self, screen: TaskScreen) -> None:
        """Test /clear empties the field."""
        app, _ = make_app(screen, [])
        apply(app, "draft")
        apply(app, "/clear")
        assert screen.pending_input == ""

    def test_edit_done_commits(self, screen: TaskScreen) -> None:
        """Test /edit, /type, /done updates the task."""
        app, _ = make_app(screen, [])
        apply(app, "/add Milk")
        apply(app, "/edit 0")
        apply(app, "/type 0 Oat milk")
        apply(app, "/done 0")

        assert screen.store.get(0).description == "Oat milk"  # type: ignore[union-attr]
        assert screen.item(0).editing is False  # type: ignore[union-attr]

    def test_done_with_text(self, screen: TaskScreen) -> None:
        """Test /done <id> <text> types and commits in one go."""
        app, _ = make_app(screen, [])
        apply(app, "/add Milk")
        apply(app, "/edit 0")
        apply(app, "/done 0 Tea")

        assert screen.store.get(0).description == "Tea"  # type: ignore[union-attr]

    def test_save_toggle_does_not_commit(self, screen: TaskScreen) -> None:
        """Test /edit, /type, /save leaves the task unchanged."""
        app, _ = make_app(screen, [])
        apply(app, "/add Milk")
        apply(app, "/edit 0")
        apply(app, "/type 0 Tea")
        apply(app, "/save 0")

        assert screen.store.get(0).description == "Milk"  # type: ignore[union-attr]

    def test_type_requires_editing(self, screen: TaskScreen) -> None:
        """Test typing into a task that is not in edit mode gives a notice."""
        app, _ = make_app(screen, [])
        apply(app, "/add Milk")
        notice = apply(app, "/type 0 Tea")

        assert notice is not None
        assert "/edit 0" in notice
        assert screen.item(0).buffer == "Milk"  # type: ignore[union-attr]

    def test_delete(self, screen: TaskScreen) -> None:
        """Test /delete removes the task."""
        app, _ = make_app(screen, [])
        apply(app, "/add a")
        apply(app, "/add b")
        apply(app, "/delete 0")

        assert [t.id for t in screen.store] == [1]

    def test_unknown_id_notice(self, screen: TaskScreen) -> None:
        """Test actions on unknown ids are no-ops with a notice."""
        app, _ = make_app(screen, [])
        notice = apply(app, "/delete 9")
        assert notice == "No task #9."


class TestRun:
    """Tests for the interactive loop."""

    def test_session(self, screen: TaskScreen) -> None:
        """Test a scripted session adds, edits and quits."""
        app, console = make_app(
            screen,
            ["Buy milk", "/add", "/edit 0", "/done 0 Buy tea", "/quit"],
        )
        app.run()

        assert [t.description for t in screen.store] == ["Buy tea"]
        output = console.export_text()
        assert "Goodbye." in output
        assert "Interrupted" not in output

    def test_bad_command_shows_notice(self, screen: TaskScreen) -> None:
        """Test a malformed line is reported on the next redraw."""
        app, console = make_app(screen, ["/bogus", "/quit"])
        app.run()

        assert "Unknown command" in console.export_text()

    def test_help(self, screen: TaskScreen) -> None:
        """Test /help draws the command list."""
        app, console = make_app(screen, ["/help", "/quit"])
        app.run()

        output = console.export_text()
        assert "Commands" in output
        assert "/delete <id>" in output

    def test_eof_ends_session(self, screen: TaskScreen) -> None:
        """Test end of input ends the loop cleanly."""
        app, console = make_app(screen, ["/add a"])
        app.run()

        assert "Interrupted. Goodbye." in console.export_text()

    def test_keyboard_interrupt(self, screen: TaskScreen) -> None:
        """Test Ctrl-C ends the loop cleanly."""
        console = Console(record=True, width=100)
        app = TaskApp(
            screen,
            console=console,
            read_line=scripted([], raise_at_end=KeyboardInterrupt),
            clear_screen=False,
        )
        app.run()

        assert "Interrupted" in console.export_text()

    def test_run_detaches_screen(self, screen: TaskScreen) -> None:
        """Test the screen stops tracking the store after the session."""
        app, _ = make_app(screen, ["/quit"])
        app.run()

        screen.store.add("after")
        assert screen.item(0) is None

    @pytest.mark.parametrize("line", ["", "   "])
    def test_blank_lines_ignored(self, screen: TaskScreen, line: str) -> None:
        """Test blank lines just redraw."""
        app, _ = make_app(screen, [line, "/quit"])
        app.run()
        assert screen.pending_input == ""


class TestRedraw:
    """Tests for redrawing only when the screen changed."""

    def test_store_change_marks_dirty(self, screen: TaskScreen) -> None:
        """Test a store mutation reported through on_change asks for a redraw."""
        app, _ = make_app(screen, [])
        app.dirty = False

        screen.store.add("from elsewhere")

        assert app.dirty is True

    def test_existing_on_change_still_called(self, store: TaskStore) -> None:
        """Test a hook set before the app was built keeps receiving changes."""
        changes: list[StoreChange] = []
        screen = TaskScreen(store=store, on_change=changes.append)
        app, _ = make_app(screen, [])
        app.dirty = False

        store.add("x")

        assert [c.kind for c in changes] == ["added"]
        assert app.dirty is True

    def test_toggle_marks_dirty(self, screen: TaskScreen) -> None:
        """Test tapping Edit asks for a redraw."""
        app, _ = make_app(screen, [])
        app.apply_line("/add a")
        app.dirty = False

        app.apply_line("/edit 0")

        assert app.dirty is True

    def test_same_text_not_dirty(self, screen: TaskScreen) -> None:
        """Test retyping the current field value does not redraw."""
        app, _ = make_app(screen, [])
        app.apply_line("draft")
        app.dirty = False

        app.apply_line("draft")

        assert app.dirty is False

    def test_blank_add_not_redrawn(self, screen: TaskScreen) -> None:
        """Test a rejected blank add and blank lines leave the screen as drawn."""
        app, console = make_app(screen, ["/add", "   ", "/quit"])
        app.run()

        assert console.export_text().count("To-do") == 1

    def test_add_redrawn(self, screen: TaskScreen) -> None:
        """Test adding a task draws the screen again."""
        app, console = make_app(screen, ["/add a", "/quit"])
        app.run()

        assert console.export_text().count("To-do") == 2

    def test_quit_line(self, screen: TaskScreen) -> None:
        """Test apply_line reports /quit."""
        app, _ = make_app(screen, [])
        assert app.apply_line("/quit") is False
        assert app.apply_line("hello") is True
