"""GroupMe bot — regex triggers over a GroupMe callback webhook."""

from groupmebot.config import __version__, BotConfig
from groupmebot.app import GroupMeBot
from groupmebot.domain import DispatchOutcome, Dispatcher, Handler, TriggerRegistry
from groupmebot.ports import BOT_SENDER_TYPE, InboundMessage, OutboundMessage, SendResult
from groupmebot.adapters.groupme import GroupMeClient
from groupmebot.adapters.storage import CsvAuditLog

__all__ = [
    "__version__",
    "BotConfig",
    "GroupMeBot",
    "DispatchOutcome",
    "Dispatcher",
    "Handler",
    "TriggerRegistry",
    "BOT_SENDER_TYPE",
    "InboundMessage",
    "OutboundMessage",
    "SendResult",
    "GroupMeClient",
    "CsvAuditLog",
]
