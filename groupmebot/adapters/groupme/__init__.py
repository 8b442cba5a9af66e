"""GroupMe adapter — outbound bot messages."""

from groupmebot.adapters.groupme.client import GROUPME_BOTS_POST_URL, GroupMeClient

__all__ = ["GROUPME_BOTS_POST_URL", "GroupMeClient"]
