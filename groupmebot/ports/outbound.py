"""Outbound ports — interfaces for the chat service and the audit sink."""

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class OutboundMessage:
    """Payload posted to the bots API on behalf of the bot."""

    bot_id: str
    text: str

    def to_payload(self) -> dict:
        return {"bot_id": self.bot_id, "text": self.text}


@dataclass
class SendResult:
    """Transport-level outcome of a single send.

    ``status`` is whatever HTTP status the chat service answered with; it is
    recorded, not judged. ``error`` is set only when the transport failed.
    """

    status: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@runtime_checkable
class ChatPort(Protocol):
    """Interface for posting a bot message to the chat service."""

    async def send(self, text: str) -> SendResult: ...


@runtime_checkable
class AuditPort(Protocol):
    """Interface for the durable, append-only message record."""

    def append(self, sender_id: str, text: str, name: str) -> None: ...
