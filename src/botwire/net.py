"""Send encoded requests and decode their responses.

Exactly one HTTP request per call. Transport failures become
``NetworkError``; everything after a response arrives is the decoder's job.
Cancellation propagates untouched: a cancelled call may or may not have taken
effect on the platform.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from botwire.api_url import redact_url
from botwire.errors import NetworkError, NetworkTimeoutError, redact_token
from botwire.response import decode_response

if TYPE_CHECKING:
    from pydantic import TypeAdapter

    from botwire.api_url import ApiUrl
    from botwire.encoding import JsonBody, MultipartForm

logger = logging.getLogger(__name__)


async def request_json(
    client: httpx.AsyncClient,
    token: str,
    api_url: ApiUrl,
    method_name: str,
    body: JsonBody,
    adapter: TypeAdapter[Any],
) -> Any:
    """POST a JSON body to *method_name* and decode the result."""
    url = api_url.method_url(token, method_name)
    logger.debug("POST %s (json, %d bytes)", redact_url(url), len(body.content))
    response = await _post(
        client,
        url,
        token=token,
        method_name=method_name,
        content=body.content,
        headers={"Content-Type": body.content_type},
    )
    return decode_response(response.content, method=method_name, adapter=adapter)


async def request_multipart(
    client: httpx.AsyncClient,
    token: str,
    api_url: ApiUrl,
    method_name: str,
    form: MultipartForm,
    adapter: TypeAdapter[Any],
) -> Any:
    """POST a multipart form to *method_name* and decode the result."""
    url = api_url.method_url(token, method_name)
    logger.debug(
        "POST %s (multipart, parts=%s)", redact_url(url), ",".join(form.names())
    )
    response = await _post(
        client,
        url,
        token=token,
        method_name=method_name,
        files=form.to_httpx_files(),
    )
    return decode_response(response.content, method=method_name, adapter=adapter)


async def _post(
    client: httpx.AsyncClient,
    url: httpx.URL,
    *,
    token: str,
    method_name: str,
    **kwargs: Any,
) -> httpx.Response:
    try:
        response = await client.post(url, **kwargs)
    except httpx.TimeoutException as exc:
        raise NetworkTimeoutError(
            f"{method_name} timed out: {_describe(exc, token)}",
            method=method_name,
        ) from exc
    except httpx.RequestError as exc:
        raise NetworkError(
            f"{method_name} request failed: {_describe(exc, token)}",
            method=method_name,
        ) from exc
    logger.debug("%s answered HTTP %d", method_name, response.status_code)
    return response


def _describe(exc: BaseException, token: str) -> str:
    text = redact_token(str(exc), token)
    return text or type(exc).__name__
