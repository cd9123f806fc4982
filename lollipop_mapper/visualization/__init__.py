"""Colour and label decisions for the lollipop diagram."""

from .colors import LollipopColorMap, hex_to_rgb, to_rgba
from .labels import MAX_ALLOWED_TIE, count_ties, plan_labels

__all__ = [
    "LollipopColorMap",
    "hex_to_rgb",
    "to_rgba",
    "MAX_ALLOWED_TIE",
    "count_ties",
    "plan_labels",
]
