"""Fill colours for lollipops, resolved per pileup and cached per mutation."""

from __future__ import annotations

from typing import Iterable, Tuple

from matplotlib import colors as mcolors

from ..config import DEFAULT_FILL_PALETTE, FillPalette
from ..model import Pileup
from ..styles import DEFAULT_STYLES, MutationStyles


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert a hex colour string (e.g. ``'#1f77b4'``) to ``(R, G, B)``."""
    try:
        rgb_float = mcolors.to_rgb(hex_color)
        return tuple(int(c * 255) for c in rgb_float)
    except ValueError:
        return (0, 0, 0)


def to_rgba(color: str, alpha: float) -> str:
    """``'#008000'`` -> ``'rgba(0, 128, 0, 0.3)'``."""
    r, g, b = hex_to_rgb(color)
    return f"rgba({r}, {g}, {b}, {alpha})"


class LollipopColorMap:
    """Resolves the fill colour of each pileup.

    The palette is a constant colour, a function of the pileup, or a mapping
    keyed by main mutation type (plus ``'default'``). With a mapping, the
    pileup takes the colour of its dominant main-type group.

    Every member mutation is recorded under its ``mutation_id`` so a single
    mutation can be looked up later.
    """

    def __init__(
        self,
        palette: FillPalette = DEFAULT_FILL_PALETTE,
        styles: MutationStyles = DEFAULT_STYLES,
    ) -> None:
        self.palette = palette
        self.styles = styles
        self._map: dict[str, str] = {}

    @property
    def mapping(self) -> dict[str, str]:
        """Return a copy of the current mutation id -> colour mapping."""
        return dict(self._map)

    def get(self, mutation_id: str, default: str | None = None) -> str | None:
        return self._map.get(mutation_id, default)

    def reset(self) -> None:
        self._map = {}

    def fill_color(self, pileup: Pileup) -> str:
        """Colour of *pileup* under the configured palette."""
        palette = self.palette
        if callable(palette):
            return palette(pileup)
        if isinstance(palette, str):
            return palette

        groups = self.styles.group(pileup.mutations)
        color = palette.get(groups[0].type) if groups else None
        return color if color is not None else palette.get("default")

    def __call__(self, pileups: Iterable[Pileup]) -> dict[str, str]:
        """Resolve colours for *pileups*; returns ``pileup_id -> colour``."""
        pileup_colors = {}
        for pileup in pileups:
            color = self.fill_color(pileup)
            pileup_colors[pileup.pileup_id] = color
            for mutation in pileup.mutations:
                self._map[mutation.mutation_id] = color
        return pileup_colors
