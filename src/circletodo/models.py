"""Data models for circletodo."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PaletteColor(Enum):
    """The fixed task palette, as opaque #RRGGBB values."""

    ORANGE = "#FFA726"
    GREEN = "#66BB6A"
    BLUE = "#42A5F5"
    PURPLE = "#AB47BC"
    DEEP_ORANGE = "#FF7043"
    PINK = "#EC407A"
    TEAL = "#26A69A"

    @property
    def hex(self) -> str:
        """The color as a #RRGGBB string."""
        return self.value

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'Deep Orange'."""
        return self.name.replace("_", " ").title()


@dataclass
class Task:
    """A single to-do entry drawn as a colored circle.

    Fields:
        id: Assigned by the store from a strictly increasing counter.
        description: Free text; editable after creation.
        color: Picked once at creation, never changed.
    """

    id: int
    description: str
    color: PaletteColor
