"""Composition root — wires config, triggers, GroupMe client and audit log."""

import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI

from groupmebot.adapters.groupme.client import GroupMeClient
from groupmebot.adapters.storage.csv_audit_log import CsvAuditLog
from groupmebot.adapters.web.webhook_routes import build_webhook_router
from groupmebot.config import BotConfig
from groupmebot.domain.dispatcher import Dispatcher
from groupmebot.domain.triggers import Handler, TriggerRegistry
from groupmebot.ports.outbound import AuditPort, ChatPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class GroupMeBot:
    """A GroupMe bot: register triggers, then serve the callback endpoint.

    Usage::

        bot = GroupMeBot(BotConfig.from_json("bot_cfg.json"))

        @bot.hook(r"^hello")
        def greet(msg):
            return f"hi {msg.name}"

        bot.run()
    """

    def __init__(
        self,
        config: BotConfig,
        registry: Optional[TriggerRegistry] = None,
        chat: Optional[ChatPort] = None,
        audit: Optional[AuditPort] = None,
    ):
        self.config = config
        self.registry = registry if registry is not None else TriggerRegistry()
        if chat is None:
            chat = GroupMeClient(config.bot_id, config.api_url)
            if not chat.is_configured:
                _log("⚠️ bot_id is empty; replies will be rejected by GroupMe")
        self.chat = chat
        self.audit = audit if audit is not None else CsvAuditLog(config.logfile)
        self.dispatcher = Dispatcher(self.registry, self.chat)

    def add_hook(self, pattern: str, handler: Handler) -> None:
        self.registry.register(pattern, handler)

    def hook(self, pattern: str):
        return self.registry.on(pattern)

    def create_app(self) -> FastAPI:
        app = FastAPI(title="GroupMe Bot")
        app.include_router(
            build_webhook_router(self.audit, self.dispatcher, self.config.callback_path)
        )
        return app

    def run(self, log_level: str = "info") -> None:
        uvicorn.run(
            self.create_app(),
            host=self.config.host,
            port=self.config.port,
            log_level=log_level,
        )
