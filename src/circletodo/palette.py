"""Task palette and random color selection.

Each new task gets one of seven fixed colors, chosen uniformly at random.
The generator can be injected so that tests and ``--seed`` runs are
reproducible.
"""

from __future__ import annotations

import random

from circletodo.models import PaletteColor

PALETTE: tuple[PaletteColor, ...] = tuple(PaletteColor)

# Delete button accent, not a palette member
DELETE_COLOR = "#FF0000"


class ColorPicker:
    """Stateless uniform choice over the palette.

    Args:
        rng: Optional random generator. Falls back to the module-level
            ``random`` functions when omitted.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng

    @classmethod
    def seeded(cls, seed: int | None) -> ColorPicker:
        """Build a picker from an optional seed (None means unseeded)."""
        if seed is None:
            return cls()
        return cls(random.Random(seed))

    def pick(self) -> PaletteColor:
        """Return one palette color. Repeats are allowed."""
        if self._rng is None:
            return random.choice(PALETTE)
        return self._rng.choice(PALETTE)


_default_picker = ColorPicker()


def get_random_color() -> PaletteColor:
    """Pick a color with the shared default picker."""
    return _default_picker.pick()
