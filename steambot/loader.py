"""Load ``config.yaml``, ``.env`` credentials, and wire up a :class:`SteamClient`."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from steambot._log import get_logger
from steambot._yaml import load_yaml_model
from steambot.schema import BotConfig, expand_dotted_keys

if TYPE_CHECKING:
    from steambot.client import SteamClient

logger = get_logger("loader")

_ENV_API_KEY = "STEAM_API_KEY"


class ConfigLoadError(Exception):
    """Raised when configuration or credentials cannot be loaded or validated."""


@dataclass(frozen=True)
class Credentials:
    api_key: str = field(default="", repr=False)
    username: str = ""
    password: str = field(default="", repr=False)
    shared_secret: str = field(default="", repr=False)
    identity_secret: str = field(default="", repr=False)
    session_id: str = field(default="", repr=False)

    @classmethod
    def from_env(cls) -> Credentials:
        return cls(
            api_key=os.environ.get(_ENV_API_KEY, ""),
            username=os.environ.get("STEAM_USERNAME", ""),
            password=os.environ.get("STEAM_PASSWORD", ""),
            shared_secret=os.environ.get("STEAM_SHARED_SECRET", ""),
            identity_secret=os.environ.get("STEAM_IDENTITY_SECRET", ""),
            session_id=os.environ.get("STEAM_SESSION_ID", ""),
        )

    @property
    def can_login(self) -> bool:
        return bool(self.username and self.password)

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigLoadError(
                f"API key not found. Set the {_ENV_API_KEY} environment variable:\n"
                f"  export {_ENV_API_KEY}=your-key-here\n"
                f"Or add it to a .env file in the working directory or ~/.steambot/.env"
            )
        return self.api_key


def load_dotenv_files(base_dir: Path) -> None:
    """Load .env files — local first, then global as fallback.

    Uses ``override=False`` so existing env vars always win.
    Local is loaded before global so project-local values take precedence.
    """
    from dotenv import load_dotenv

    local_env = base_dir / ".env"
    if local_env.is_file():
        load_dotenv(local_env, override=False)
    from steambot.config import get_global_env_path

    global_env = get_global_env_path()
    if global_env.is_file():
        load_dotenv(global_env, override=False)


def load_config(path: Path | None = None) -> BotConfig:
    """Read and validate a config file.

    With no *path*, falls back to ``~/.steambot/config.yaml`` and then to the
    built-in defaults when that file does not exist either.
    """
    if path is None:
        from steambot.config import get_default_config_path

        default = get_default_config_path()
        if not default.is_file():
            logger.debug("No config file at %s, using defaults", default)
            return BotConfig()
        path = default
    return load_yaml_model(path, BotConfig, ConfigLoadError, preprocess=expand_dotted_keys)


def load_credentials(base_dir: Path | None = None) -> Credentials:
    load_dotenv_files(base_dir or Path.cwd())
    return Credentials.from_env()


def build_client(config: BotConfig, credentials: Credentials) -> SteamClient:
    """Build a :class:`SteamClient` with a limiter sized from *config*."""
    from steambot.client import SteamClient
    from steambot.guard import SteamGuard

    guard = None
    if credentials.shared_secret or credentials.identity_secret:
        guard = SteamGuard(
            shared_secret=credentials.shared_secret,
            identity_secret=credentials.identity_secret,
        )

    return SteamClient(
        credentials.api_key,
        guard=guard,
        rate_limit=config.rate_limit,
        session_id=credentials.session_id,
        timeout=config.http.timeout,
    )
