"""Trigger registry — regex pattern -> response handler."""

import threading
from typing import Callable, Dict, List, Tuple

from groupmebot.ports.inbound import InboundMessage

# A handler returns the reply text; "" means "say nothing".
Handler = Callable[[InboundMessage], str]


class TriggerRegistry:
    """Mapping of pattern string to handler.

    Patterns are stored verbatim and only compiled when a message is matched,
    so a bad pattern surfaces at dispatch time, not here.

    Iteration follows first-registration order. Registering a pattern that is
    already present swaps its handler but keeps its slot. Writes replace the
    whole mapping under a lock, so readers holding a snapshot never observe a
    half-applied update.
    """

    def __init__(self):
        self._hooks: Dict[str, Handler] = {}
        self._write_lock = threading.Lock()

    def register(self, pattern: str, handler: Handler) -> None:
        with self._write_lock:
            hooks = dict(self._hooks)
            hooks[pattern] = handler
            self._hooks = hooks

    def on(self, pattern: str) -> Callable[[Handler], Handler]:
        """Decorator form of :meth:`register`."""

        def decorator(handler: Handler) -> Handler:
            self.register(pattern, handler)
            return handler

        return decorator

    def snapshot(self) -> List[Tuple[str, Handler]]:
        return list(self._hooks.items())

    def __len__(self) -> int:
        return len(self._hooks)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._hooks
