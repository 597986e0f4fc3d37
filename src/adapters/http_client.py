"""httpx wrapper.

Keeps timeouts, headers and transport-error translation in one place so the
pipeline only deals with `PasteRequest` in and raw bytes out.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings
from core.domain.models import PasteRequest
from core.errors import TransportError
from core.logger import logger


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with the configured timeout and User-Agent."""

    settings = settings or AppSettings()
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers={
            "User-Agent": settings.user_agent,
            "Accept": "application/json",
        },
        transport=transport,
    )


def submit_paste(request: PasteRequest, client: httpx.Client) -> bytes:
    """POST `request` and return the raw response body.

    Status codes are not inspected; pastery.net reports failures in the
    JSON body.
    """

    try:
        response = client.post(request.url, params=request.params, content=request.body)
    except httpx.HTTPError as exc:
        raise TransportError(f"Could not make HTTP request: {exc}") from exc

    logger.debug("pastery.net answered HTTP {} ({} bytes)", response.status_code, len(response.content))
    return response.content
