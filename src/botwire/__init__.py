"""botwire: a typed async client for the Telegram Bot API.

Public API:
    - Bot: token + API URL + shared HTTP client; executes payloads
    - BotConfig: environment-aware configuration
    - payloads: one class per remote method (JSON or multipart)
    - errors: RequestError and friends

Example:
    async with Bot.from_env() as bot:
        me = await bot.get_me()
        await bot.send_message(chat_id, f"Hello from {me.username}")
"""

from __future__ import annotations

import logging

from botwire.api_url import DEFAULT_API_URL, ApiUrl
from botwire.bot import Bot
from botwire.config import BotConfig
from botwire.errors import (
    ApiError,
    BotwireError,
    ConfigurationError,
    InputFileError,
    InternalError,
    InvalidJsonError,
    MigrateToChatIdError,
    NetworkError,
    NetworkTimeoutError,
    PayloadSerializationError,
    RateLimitError,
    RequestError,
    ResultDecodeError,
)
from botwire.payloads import JsonPayload, MultipartPayload, Payload
from botwire.requests import Request
from botwire.types import InputFile

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("botwire")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("botwire").addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_API_URL",
    "ApiError",
    "ApiUrl",
    "Bot",
    "BotConfig",
    "BotwireError",
    "ConfigurationError",
    "InputFile",
    "InputFileError",
    "InternalError",
    "InvalidJsonError",
    "JsonPayload",
    "MigrateToChatIdError",
    "MultipartPayload",
    "NetworkError",
    "NetworkTimeoutError",
    "Payload",
    "PayloadSerializationError",
    "RateLimitError",
    "Request",
    "RequestError",
    "ResultDecodeError",
]
