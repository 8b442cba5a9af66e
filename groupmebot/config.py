"""Bot configuration — loaded once at startup, read-only afterwards."""

__version__ = "0.1.0"

import json
import os
import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from groupmebot.adapters.groupme.client import GROUPME_BOTS_POST_URL

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

# env var -> BotConfig field
ENV_OVERRIDES = {
    "GROUPME_BOT_ID": "bot_id",
    "GROUPME_GROUP_ID": "group_id",
    "GROUPME_HOST": "host",
    "GROUPME_PORT": "port",
    "GROUPME_LOGFILE": "logfile",
}


@dataclass(frozen=True)
class BotConfig:
    """Bot identity plus where to listen and where to keep the audit log."""

    bot_id: str = ""
    group_id: str = ""
    host: str = "0.0.0.0"
    port: int = 8080
    logfile: str = "messages.csv"
    api_url: str = GROUPME_BOTS_POST_URL
    callback_path: str = "/"

    def __post_init__(self):
        # bot_cfg.json traditionally carries the port as a string
        object.__setattr__(self, "port", int(self.port))

    @property
    def server(self) -> str:
        return f"{self.host}:{self.port}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BotConfig":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_json(cls, path: str) -> "BotConfig":
        """Read a bot_cfg.json file (keys: bot_id, group_id, host, port, logfile)."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a JSON object")
        config = cls.from_dict(data)
        _stderr_print(f"Creating bot at {config.server}")
        _stderr_print(f"Logging at {config.logfile}")
        return config

    @classmethod
    def from_env(cls, base: Optional["BotConfig"] = None) -> "BotConfig":
        """Apply GROUPME_* environment variables (and .env) on top of ``base``."""
        load_dotenv()
        overrides = {
            field_name: os.environ[env_name]
            for env_name, field_name in ENV_OVERRIDES.items()
            if os.environ.get(env_name)
        }
        return replace(base or cls(), **overrides)
