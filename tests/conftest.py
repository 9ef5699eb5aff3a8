"""Shared fixtures for circletodo tests."""

from __future__ import annotations

import logging
import os
import random
from collections.abc import Generator
from pathlib import Path

import pytest

from circletodo.models import PaletteColor
from circletodo.palette import ColorPicker
from circletodo.screen import TaskScreen
from circletodo.store import TaskStore


class SequenceRng:
    """Stand-in for random.Random whose choice() walks a fixed color list."""

    def __init__(self, colors: list[PaletteColor]) -> None:
        self._colors = list(colors)
        self._index = 0

    def choice(self, seq):  # noqa: ANN001, ANN201
        color = self._colors[self._index % len(self._colors)]
        self._index += 1
        assert color in seq
        return color


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo handler changes made by setup_logging between tests."""
    yield
    logger = logging.getLogger("circletodo")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def seeded_picker() -> ColorPicker:
    """A picker with a fixed seed."""
    return ColorPicker(random.Random(1234))


@pytest.fixture
def sequence_picker() -> ColorPicker:
    """A picker that hands out orange, green, blue, ... in palette order."""
    return ColorPicker(SequenceRng(list(PaletteColor)))  # type: ignore[arg-type]


@pytest.fixture
def store(sequence_picker: ColorPicker) -> TaskStore:
    """An empty store with predictable colors."""
    return TaskStore(sequence_picker)


@pytest.fixture
def screen(store: TaskStore) -> TaskScreen:
    """A screen over the predictable store."""
    return TaskScreen(store=store)
