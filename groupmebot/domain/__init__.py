"""Domain layer — pure Python, no framework dependencies."""

from groupmebot.domain.dispatcher import DispatchOutcome, Dispatcher
from groupmebot.domain.triggers import Handler, TriggerRegistry

__all__ = [
    "DispatchOutcome",
    "Dispatcher",
    "Handler",
    "TriggerRegistry",
]
