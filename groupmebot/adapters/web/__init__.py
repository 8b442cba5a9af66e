"""Web adapter — FastAPI routes."""

from groupmebot.adapters.web.webhook_routes import (
    InboundPayload,
    build_webhook_router,
    decode_payload,
    handle_inbound,
)

__all__ = ["InboundPayload", "build_webhook_router", "decode_payload", "handle_inbound"]
