"""GroupMe bots API client using aiohttp."""

import asyncio

import aiohttp

from groupmebot.ports.outbound import OutboundMessage, SendResult

GROUPME_BOTS_POST_URL = "https://api.groupme.com/v3/bots/post"


class GroupMeClient:
    """Posts messages as a GroupMe bot (implements ChatPort).

    One POST per call, no retries. The response body and status are not
    interpreted: any answer from the server counts as delivered, only
    transport failures are reported as errors.
    """

    def __init__(self, bot_id: str, api_url: str = GROUPME_BOTS_POST_URL):
        self.bot_id = bot_id
        self.api_url = api_url

    @property
    def is_configured(self) -> bool:
        return bool(self.bot_id)

    async def send(self, text: str) -> SendResult:
        msg = OutboundMessage(bot_id=self.bot_id, text=text)
        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(self.api_url, json=msg.to_payload()) as resp:
                    return SendResult(status=resp.status)
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError, TypeError, ValueError) as e:
            return SendResult(error=str(e) or type(e).__name__)
