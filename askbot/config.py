import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

import discord
from dotenv import load_dotenv

from .errors import ConfigError

# Discord rejects messages longer than this
DISCORD_MESSAGE_LIMIT = 2000


@dataclass(frozen=True)
class Settings:
    """Runtime configuration, read once from the environment."""

    discord_token: Optional[str]
    openai_api_key: Optional[str]
    chat_model: str = "gpt-5-mini"
    image_model: str = "dall-e-3"
    image_size: str = "1024x1024"
    command_prefix: str = "!"
    message_limit: int = DISCORD_MESSAGE_LIMIT
    # a little under the limit so a chunk never brushes against it
    chunk_limit: int = 1990
    log_level: str = "INFO"


def _int_env(name, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load and cache settings from environment variables (and .env if present).

    Raises:
        ConfigError: if a numeric setting is malformed.
    """
    # Load environment variables from .env file if present
    load_dotenv()

    message_limit = _int_env("ASKBOT_MESSAGE_LIMIT", DISCORD_MESSAGE_LIMIT)
    chunk_limit = _int_env("ASKBOT_CHUNK_LIMIT", min(1990, message_limit))
    if chunk_limit > message_limit:
        raise ConfigError(
            f"ASKBOT_CHUNK_LIMIT ({chunk_limit}) can't exceed ASKBOT_MESSAGE_LIMIT ({message_limit})"
        )

    return Settings(
        discord_token=os.getenv("DISCORD_TOKEN"),
        openai_api_key=os.getenv("OPENAI_API_KEY"),
        chat_model=os.getenv("ASKBOT_CHAT_MODEL", "gpt-5-mini"),
        image_model=os.getenv("ASKBOT_IMAGE_MODEL", "dall-e-3"),
        image_size=os.getenv("ASKBOT_IMAGE_SIZE", "1024x1024"),
        command_prefix=os.getenv("ASKBOT_PREFIX", "!"),
        message_limit=message_limit,
        chunk_limit=chunk_limit,
        log_level=os.getenv("ASKBOT_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(settings: Settings) -> None:
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    # discord.py's own handler/formatter, applied to the root logger
    discord.utils.setup_logging(level=level, root=True)


def build_intents() -> discord.Intents:
    # Prefix commands need to read message text
    intents = discord.Intents.default()
    intents.message_content = True
    return intents
