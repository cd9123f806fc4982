"""Notifications fired by the diagram after each completed state change."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)


class DiagramEvent(enum.Enum):
    PLOT_UPDATED = "plot_updated"
    PLOT_RESET = "plot_reset"
    SELECTION_CHANGED = "selection_changed"


@dataclass(frozen=True)
class SizeTransition:
    """A lollipop resize, left for the renderer to animate."""

    location: int
    old_size: int
    new_size: int
    duration: int


Listener = Callable[[DiagramEvent, object], None]


class EventBus:
    """Synchronous callback registry keyed by :class:`DiagramEvent`."""

    def __init__(self) -> None:
        self._listeners: Dict[DiagramEvent, List[Listener]] = {}

    def subscribe(self, event: DiagramEvent, listener: Listener) -> None:
        self._listeners.setdefault(event, []).append(listener)

    def unsubscribe(self, event: DiagramEvent, listener: Listener) -> None:
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)

    def emit(self, event: DiagramEvent, payload: object) -> None:
        """Call every listener of *event* with the new state."""
        listeners = list(self._listeners.get(event, []))
        logger.debug("Emitting %s to %d listener(s)", event.value, len(listeners))
        for listener in listeners:
            listener(event, payload)
