"""Port interfaces (Hexagonal Architecture)."""

from groupmebot.ports.inbound import BOT_SENDER_TYPE, InboundMessage
from groupmebot.ports.outbound import AuditPort, ChatPort, OutboundMessage, SendResult

__all__ = [
    "BOT_SENDER_TYPE",
    "InboundMessage",
    "AuditPort",
    "ChatPort",
    "OutboundMessage",
    "SendResult",
]
