"""Inbound port — a single chat event delivered to the webhook."""

from dataclasses import dataclass

# sender_type GroupMe stamps on messages posted by bots (including this one)
BOT_SENDER_TYPE = "bot"


@dataclass(frozen=True)
class InboundMessage:
    """GroupMe callback message, decoupled from the HTTP layer."""

    id: str = ""
    sender_id: str = ""
    sender_type: str = ""
    name: str = ""
    text: str = ""
    avatar_url: str = ""
    user_id: str = ""
    system: bool = False

    @property
    def is_bot(self) -> bool:
        return self.sender_type == BOT_SENDER_TYPE

    @classmethod
    def unparseable(cls) -> "InboundMessage":
        """Placeholder for a body that could not be decoded; always filtered out."""
        return cls(sender_type=BOT_SENDER_TYPE)
