"""Diagram configuration."""

from __future__ import annotations

import dataclasses
import logging
import math
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Tuple, Union

logger = logging.getLogger(__name__)

DEFAULT_FILL_PALETTE = MappingProxyType({
    "missense": "#008000",
    "truncating": "#000000",
    "inframe": "#8B4513",
    "fusion": "#8B00C9",
    "other": "#8B00C9",  # all other mutation types
    "default": "#BB0000",  # used when no main type can be determined
})

# constant colour | per-pileup function | main type -> colour
FillPalette = Union[str, Callable[[Any], str], Mapping[str, str]]

_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")


def _snake(name: str) -> str:
    return _CAMEL.sub("_", name).lower()


@dataclass(frozen=True)
class DiagramOptions:
    """Options controlling scales, labels and colours of a mutation diagram.

    Defaults follow the standard lollipop layout: the x domain is the
    sequence length, the y domain is at least 5 mutations, and only the
    tallest lollipop is labelled.
    """

    min_length_x: float = 0
    max_length_x: float = math.inf
    min_length_y: float = 5
    max_length_y: float = math.inf
    x_axis_tick_intervals: Tuple[float, ...] = (
        100, 200, 400, 500, 1000, 2000, 5000, 10000, 20000, 50000,
    )
    x_axis_ticks: int = 8
    y_axis_tick_intervals: Tuple[float, ...] = (1, 2, 5, 10, 20, 50, 100, 200, 500)
    y_axis_ticks: int = 10
    lollipop_label_count: int = 1
    lollipop_label_threshold: float = 2
    y_axis_auto_adjust: bool = True
    fill_palette: FillPalette = field(default_factory=lambda: DEFAULT_FILL_PALETTE)

    # geometry of the plot area (pixels)
    el_width: int = 740
    el_height: int = 180
    margin_left: int = 45
    margin_right: int = 30
    margin_top: int = 30
    margin_bottom: int = 60

    lollipop_size: int = 30
    lollipop_highlight_size: int = 100
    lollipop_shape_regular: str = "circle"
    lollipop_shape_special: str = "circle"
    animation_duration: int = 1000

    def __post_init__(self) -> None:
        for name in ("x_axis_tick_intervals", "y_axis_tick_intervals"):
            intervals = tuple(getattr(self, name))
            if not intervals:
                raise ValueError(f"{name} must contain at least one interval")
            if any(i <= 0 for i in intervals):
                raise ValueError(f"{name} must be positive, got {intervals}")
            object.__setattr__(self, name, intervals)
        for name in ("x_axis_ticks", "y_axis_ticks"):
            if getattr(self, name) <= 0:
                raise ValueError(
                    f"{name} must be a positive tick count, got {getattr(self, name)}"
                )

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "DiagramOptions":
        """Build options from camelCase (``lollipopLabelCount``) or snake_case keys.

        Unknown keys are ignored with a warning.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        kwargs = {}
        for key, value in options.items():
            name = key if key in known else _snake(key)
            if name not in known:
                logger.warning("Ignoring unknown diagram option %r", key)
                continue
            kwargs[name] = value
        return cls(**kwargs)

    def replace(self, **changes: Any) -> "DiagramOptions":
        """Return a copy with *changes* applied (validated again)."""
        return dataclasses.replace(self, **changes)
