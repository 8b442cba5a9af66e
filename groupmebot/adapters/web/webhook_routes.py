"""GroupMe callback route — decode, filter, audit, dispatch."""

import asyncio
import sys
from typing import Optional

from fastapi import APIRouter, Request, Response
from pydantic import BaseModel, ValidationError, field_validator

from groupmebot.domain.dispatcher import DispatchOutcome, Dispatcher
from groupmebot.ports.inbound import InboundMessage
from groupmebot.ports.outbound import AuditPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class InboundPayload(BaseModel):
    """Callback body as GroupMe sends it. Absent fields take zero values."""

    avatar_url: str = ""
    id: str = ""
    name: str = ""
    sender_id: str = ""
    sender_type: str = ""
    system: bool = False
    text: str = ""
    user_id: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _null_is_zero(cls, value, info):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    def to_message(self) -> InboundMessage:
        return InboundMessage(**self.model_dump())


def decode_payload(raw_body: bytes) -> InboundMessage:
    """Parse a callback body; undecodable input becomes a bot-marked message."""
    try:
        return InboundPayload.model_validate_json(raw_body).to_message()
    except ValidationError:
        _log("Couldn't parse the request body")
        return InboundMessage.unparseable()


async def handle_inbound(
    message: InboundMessage,
    audit: AuditPort,
    dispatcher: Dispatcher,
) -> Optional[DispatchOutcome]:
    """Audit then dispatch a human message. Bot messages are dropped (None)."""
    if message.is_bot:
        return None

    _log(f"{message.name}: {message.text} [Type: {message.sender_type}]")
    try:
        await asyncio.to_thread(audit.append, message.sender_id, message.text, message.name)
    except OSError as e:
        _log(f"❌ Couldn't log message from {message.sender_id}: {e}")
        return None

    return await dispatcher.dispatch(message)


def build_webhook_router(
    audit: AuditPort,
    dispatcher: Dispatcher,
    path: str = "/",
) -> APIRouter:
    """Router with the callback on ``path``; every other request is a no-op."""
    router = APIRouter(tags=["GroupMe"])

    @router.post(path)
    async def groupme_callback(request: Request):
        raw_body = await request.body()
        await handle_inbound(decode_payload(raw_body), audit, dispatcher)
        return Response()

    async def ignore(request: Request):
        return Response()

    # plain Starlette route: no method list, so any verb on any path lands here
    router.add_route("/{rest:path}", ignore, include_in_schema=False)

    return router
