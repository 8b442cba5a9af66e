"""Dispatcher — runs one inbound message against every trigger and replies."""

import re
import sys
from dataclasses import dataclass
from typing import Optional

from groupmebot.domain.triggers import TriggerRegistry
from groupmebot.ports.inbound import InboundMessage
from groupmebot.ports.outbound import ChatPort, SendResult


def _log(msg: str):
    print(msg, file=sys.stderr)


@dataclass
class DispatchOutcome:
    """What a dispatch selected and, if anything was posted, how it went."""

    response: Optional[str] = None
    result: Optional[SendResult] = None

    @property
    def sent(self) -> bool:
        return self.result is not None


class Dispatcher:
    """Selects at most one reply per message and posts it through ``chat``.

    Every trigger is evaluated with ``re.search`` against the message text.
    Each match overwrites the pending reply, so the last matching trigger in
    registry order wins. A pattern that fails to compile, or a handler that
    raises, is skipped with a warning and the remaining triggers still run.
    """

    def __init__(self, registry: TriggerRegistry, chat: ChatPort):
        self.registry = registry
        self.chat = chat

    def select(self, message: InboundMessage) -> Optional[str]:
        """Return the reply chosen for ``message`` (None when nothing matched)."""
        response: Optional[str] = None
        for pattern, handler in self.registry.snapshot():
            try:
                matched = re.search(pattern, message.text) is not None
            except re.error as e:
                _log(f"⚠️ Error matching trigger {pattern!r}: {e}")
                continue
            if not matched:
                continue
            try:
                response = handler(message)
            except Exception as e:
                _log(f"⚠️ Handler for {pattern!r} raised: {e}")
        return response

    async def dispatch(self, message: InboundMessage) -> DispatchOutcome:
        response = self.select(message)
        if not response:
            return DispatchOutcome(response=response)

        _log(f"Sending message: {response}")
        result = await self.chat.send(response)
        if not result.ok:
            _log(f"❌ Error when sending: {result.error}")
        return DispatchOutcome(response=response, result=result)
