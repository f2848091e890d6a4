"""Bot: the client identity every request is executed through."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
import logging
from typing import TYPE_CHECKING, Any, Self

from botwire._http import build_sound_client
from botwire.api_url import ApiUrl
from botwire.config import BotConfig
from botwire.encoding import encode_json, to_form
from botwire.errors import RequestError
from botwire.net import request_json, request_multipart
from botwire.payloads.base import JsonPayload, MultipartPayload, Payload
from botwire.requester import Requester

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)


class Bot(Requester):
    """Token, API URL and HTTP client, bundled.

    A ``Bot`` is never mutated after construction. Copies are cheap and share
    one ``httpx.AsyncClient`` (and therefore one connection pool), so pass
    bots around freely between tasks. ``set_api_url`` returns a new ``Bot``;
    existing copies keep their URL.

    Example:
        bot = Bot("123:ABC")
        me = await bot.get_me()
    """

    __slots__ = ("_api_url", "_client", "_token")

    def __init__(
        self,
        token: str,
        *,
        client: httpx.AsyncClient | None = None,
        api_url: ApiUrl | None = None,
    ) -> None:
        """Create a bot.

        Args:
            token: Bot token as issued by the platform.
            client: Shared HTTP client. When omitted, one is built with sound
                defaults (5s connect, 17s total, keep-alive).
            api_url: Endpoint; the platform default when omitted.

        Raises:
            ConfigurationError: If the default HTTP client cannot be built.
        """
        self._token = str(token)
        self._client = client if client is not None else build_sound_client()
        self._api_url = api_url if api_url is not None else ApiUrl.default()

    @classmethod
    def with_client(cls, token: str, client: httpx.AsyncClient) -> Bot:
        """Create a bot on a caller-supplied client.

        No defaults are applied: a client without timeouts suited to long
        uptimes can hang indefinitely on a dead connection.
        """
        return cls(token, client=client)

    @classmethod
    def from_config(
        cls, config: BotConfig, *, client: httpx.AsyncClient | None = None
    ) -> Bot:
        """Create a bot from a ``BotConfig``; *client* overrides ``config.proxy``."""
        # Validate the URL before building a client that would otherwise leak.
        api_url = ApiUrl.from_url(config.api_url) if config.api_url else None
        if client is None:
            client = build_sound_client(proxy=config.proxy)
        return cls(config.token or "", client=client, api_url=api_url)

    @classmethod
    def from_env(cls, *, client: httpx.AsyncClient | None = None) -> Bot:
        """Create a bot from ``BOTWIRE_TOKEN`` / ``BOTWIRE_PROXY`` / ``BOTWIRE_API_URL``.

        Raises:
            ConfigurationError: If ``BOTWIRE_TOKEN`` is not set.
        """
        return cls.from_config(BotConfig(), client=client)

    def set_api_url(self, url: str | httpx.URL) -> Bot:
        """Return a copy of this bot that talks to *url* instead of the default.

        Useful with a self-hosted Bot API server. Only the returned bot is
        affected.
        """
        return type(self)(self._token, client=self._client, api_url=ApiUrl.from_url(url))

    # =========================================================================
    # Getters
    # =========================================================================

    @property
    def token(self) -> str:
        return self._token

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    @property
    def endpoint(self) -> ApiUrl:
        return self._api_url

    @property
    def api_url(self) -> httpx.URL:
        """The API base URL currently in use."""
        return self._api_url.get()

    # =========================================================================
    # Execution
    # =========================================================================

    def execute_json(self, payload: JsonPayload) -> Coroutine[Any, Any, Any]:
        """Send *payload* as JSON.

        The body is encoded immediately, so later changes to *payload* do not
        affect the returned coroutine.

        Raises:
            PayloadSerializationError: Immediately, if *payload* cannot be
                encoded (a payload definition bug).
        """
        body = encode_json(payload)
        return request_json(
            self._client,
            self._token,
            self._api_url,
            payload.NAME,
            body,
            payload.output_adapter(),
        )

    def execute_multipart(self, payload: MultipartPayload) -> Coroutine[Any, Any, Any]:
        """Send *payload* as ``multipart/form-data``.

        The payload is snapshotted now; file contents are read when the
        returned coroutine runs. An unreadable file raises ``InputFileError``.
        """
        return self._send_multipart(payload.model_copy())

    def execute(self, payload: Payload) -> Coroutine[Any, Any, Any]:
        """Send *payload* using the encoding its class declares."""
        if isinstance(payload, MultipartPayload):
            return self.execute_multipart(payload)
        if isinstance(payload, JsonPayload):
            return self.execute_json(payload)
        raise TypeError(
            f"{type(payload).__name__} must subclass JsonPayload or MultipartPayload"
        )

    async def _send_multipart(self, payload: MultipartPayload) -> Any:
        try:
            form = await to_form(payload)
        except RequestError as exc:
            if exc.method is None:
                exc.method = payload.NAME
            raise
        return await request_multipart(
            self._client,
            self._token,
            self._api_url,
            payload.NAME,
            form,
            payload.output_adapter(),
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def aclose(self) -> None:
        """Close the HTTP client. This affects every copy of this bot.

        Cleanup failures are logged, never raised, so they cannot mask the
        error that ended an ``async with`` block.
        """
        try:
            await self._client.aclose()
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            logger.warning("HTTP client cleanup failed: %s", exc)
            return
        logger.debug("HTTP client closed")

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def __copy__(self) -> Bot:
        return type(self)(self._token, client=self._client, api_url=self._api_url)

    def __deepcopy__(self, memo: dict[int, Any]) -> Bot:
        # The client is a shared handle, never duplicated.
        return self.__copy__()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bot):
            return NotImplemented
        return (
            self._token == other._token
            and self._api_url == other._api_url
            and self._client is other._client
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Bot(token=[REDACTED], api_url={str(self.api_url)!r})"
