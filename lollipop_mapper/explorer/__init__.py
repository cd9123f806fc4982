"""Diagram state controller and its notifications."""

from .diagram import MutationDiagram
from .events import DiagramEvent, EventBus, SizeTransition
from .state import DiagramSnapshot, DiagramState

__all__ = [
    "MutationDiagram",
    "DiagramEvent",
    "EventBus",
    "SizeTransition",
    "DiagramSnapshot",
    "DiagramState",
]
