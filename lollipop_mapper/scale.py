"""Axis domains, tick intervals and tick labels for the lollipop diagram.

The x axis spans the protein sequence, the y axis the mutation count of the
tallest pileup. Both are clamped to configured bounds and use the same tick
selection, differing only in how ticks are labelled.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .config import DiagramOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bounds:
    """Plot area in pixels; ``(x, y)`` is the position of the origin."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class AxisScale:
    """A fully derived axis. Recomputed, never patched."""

    domain_max: float
    tick_interval: float
    tick_values: Tuple[float, ...]
    tick_labels: Tuple[str, ...]
    pixel_range: Tuple[float, float]

    def to_pixel(self, value):
        """Map data value(s) from ``[0, domain_max]`` onto ``pixel_range``."""
        start, end = self.pixel_range
        value = np.asarray(value, dtype=float)
        if self.domain_max == 0:
            return np.full_like(value, start) if value.ndim else float(start)
        scaled = start + value * (end - start) / self.domain_max
        return scaled if scaled.ndim else float(scaled)


def calc_bounds(options: DiagramOptions) -> Bounds:
    return Bounds(
        x=options.margin_left,
        y=options.el_height - options.margin_bottom,
        width=options.el_width - (options.margin_left + options.margin_right),
        height=options.el_height - (options.margin_bottom + options.margin_top),
    )


def compute_domain_max(raw_value: float, min_bound: float, max_bound: float) -> float:
    """Clamp *raw_value* into ``[min_bound, max_bound]``."""
    return min(max_bound, max(raw_value, min_bound))


def compute_tick_interval(
    intervals: Sequence[float], domain_max: float, max_tick_count: int
) -> float:
    """Pick the first interval giving fewer than ``max_tick_count - 1`` ticks.

    Falls back to the coarsest interval when none qualifies.

    Raises
    ------
    ValueError
        If *intervals* is empty or *max_tick_count* is not positive.
    """
    if len(intervals) == 0:
        raise ValueError("At least one candidate tick interval is required")
    if max_tick_count <= 0:
        raise ValueError(f"max_tick_count must be positive, got {max_tick_count}")

    if domain_max <= 0:
        return intervals[0]

    for interval in intervals:
        if domain_max / interval < max_tick_count - 1:
            return interval
    return intervals[-1]


def compute_tick_values(
    domain_max: float, interval: float, half_step: bool = False
) -> list:
    """Tick values from 0 up to *domain_max*, which is always appended last.

    The last stepped value may equal *domain_max*, yielding a duplicate.
    """
    if interval <= 0:
        raise ValueError(f"Tick interval must be positive, got {interval}")

    step = interval / 2 if half_step else interval
    values = []
    value = 0
    while value < domain_max:
        values.append(value)
        value += step
    values.append(domain_max)
    return values


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def x_tick_label(value: float, domain_max: float, interval: float) -> str:
    """Label for an x-axis tick.

    The max is always shown with its unit; other major ticks are hidden when
    they sit within a third of an interval of the max.
    """
    if value == domain_max:
        return f"{_format_number(value)} aa"
    if value % interval != 0:
        return ""
    if domain_max - value > interval / 3:
        return _format_number(value)
    return ""


def y_tick_label(value: float, domain_max: float, max_count: float) -> str:
    """Only 0 and the max are labelled; ``'>'`` marks a clipped max."""
    if value == domain_max:
        label = _format_number(value)
        return f">{label}" if max_count > domain_max else label
    if value == 0:
        return "0"
    return ""


def x_axis_scale(sequence_length: float, options: DiagramOptions) -> AxisScale:
    """Derive the position axis from the sequence length."""
    bounds = calc_bounds(options)
    x_max = compute_domain_max(sequence_length, options.min_length_x, options.max_length_x)
    interval = compute_tick_interval(options.x_axis_tick_intervals, x_max, options.x_axis_ticks)
    # half steps approximate minor ticks
    values = compute_tick_values(x_max, interval, half_step=True)
    labels = tuple(x_tick_label(v, x_max, interval) for v in values)

    logger.debug("x axis: max=%s interval=%s ticks=%d", x_max, interval, len(values))
    return AxisScale(
        domain_max=x_max,
        tick_interval=interval,
        tick_values=tuple(values),
        tick_labels=labels,
        pixel_range=(bounds.x, bounds.x + bounds.width),
    )


def calc_max_count(pileups: Sequence) -> int:
    """Count of the tallest pileup (``-1`` when there are none).

    Relies on *pileups* being sorted by descending count.
    """
    return pileups[0].count if len(pileups) > 0 else -1


def y_axis_scale(max_count: float, options: DiagramOptions) -> AxisScale:
    """Derive the count axis from the tallest pileup."""
    bounds = calc_bounds(options)
    y_max = compute_domain_max(max_count, options.min_length_y, options.max_length_y)
    interval = compute_tick_interval(options.y_axis_tick_intervals, y_max, options.y_axis_ticks)
    # doubled interval, half-stepped: whole-number ticks every `interval`
    values = compute_tick_values(y_max, 2 * interval, half_step=True)
    labels = tuple(y_tick_label(v, y_max, max_count) for v in values)

    logger.debug("y axis: max=%s interval=%s max_count=%s", y_max, interval, max_count)
    return AxisScale(
        domain_max=y_max,
        tick_interval=interval,
        tick_values=tuple(values),
        tick_labels=labels,
        pixel_range=(bounds.y, bounds.y - bounds.height),
    )
