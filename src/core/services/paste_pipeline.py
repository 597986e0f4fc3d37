"""Paste creation pipeline.

The CLI resolves options and reads the content, then hands a `PasteOptions`
to `create_paste`. The two pure steps, building the request and interpreting
the reply, are exposed on their own so they can be tested without a network.
"""

from __future__ import annotations

import json

import httpx
from pydantic import ValidationError

from adapters.http_client import build_client, submit_paste
from core.config import AppSettings
from core.domain.duration import format_duration
from core.domain.language import AUTODETECT, guess_language
from core.domain.models import (
    PasteFailure,
    PasteOptions,
    PasteOutcome,
    PasteRequest,
    PasteSuccess,
)
from core.errors import MalformedResponseError
from core.logger import logger


def resolve_language(options: PasteOptions) -> str:
    """Explicit language, else a guess from the path, else `autodetect`."""

    if options.language is not None:
        return options.language
    if options.path is not None:
        guessed = guess_language(options.path)
        if guessed is not None:
            return guessed
    return AUTODETECT


def resolve_title(options: PasteOptions) -> str | None:
    """Explicit title, else the file name of the path, else None."""

    if options.title is not None:
        return options.title
    if options.path is not None and options.path.name:
        return options.path.name
    return None


def build_paste_request(options: PasteOptions, *, api_url: str) -> PasteRequest:
    """Translate `options` into the POST that creates the paste.

    `title` and `max_views` are left out of the query entirely when unset.
    """

    params: dict[str, str] = {
        "api_key": options.api_key,
        "duration": str(options.duration),
        "language": resolve_language(options),
    }

    title = resolve_title(options)
    if title is not None:
        params["title"] = title

    if options.max_views is not None:
        params["max_views"] = str(options.max_views)

    return PasteRequest(url=api_url, params=params, body=options.content)


def interpret_response(raw: bytes | str) -> PasteOutcome:
    """Decode a reply into `PasteSuccess` or `PasteFailure`.

    The two shapes carry no tag, so the success shape is tried first and the
    failure shape second.

    Raises:
        MalformedResponseError: the body is not JSON, or matches neither shape.
    """

    try:
        return PasteSuccess.model_validate_json(raw)
    except ValidationError:
        pass

    try:
        return PasteFailure.model_validate_json(raw)
    except ValidationError as exc:
        preview = raw if isinstance(raw, str) else raw.decode("utf-8", errors="replace")
        if len(preview) > 200:
            preview = preview[:200] + "..."
        raise MalformedResponseError(f"Could not parse JSON response: {preview!r}") from exc


def _redacted(params: dict[str, str]) -> str:
    shown = {key: ("***" if key == "api_key" else value) for key, value in params.items()}
    return json.dumps(shown, ensure_ascii=False)


def create_paste(
    options: PasteOptions,
    settings: AppSettings | None = None,
    *,
    client: httpx.Client | None = None,
) -> str:
    """Upload one paste and return its URL.

    A client is created (and closed) here unless the caller passes one.

    Raises:
        TransportError: the request could not be completed.
        MalformedResponseError: the reply matched neither known shape.
        RemoteError: pastery.net refused the paste.
    """

    settings = settings or AppSettings()
    request = build_paste_request(options, api_url=settings.api_url)
    logger.debug(
        "Uploading {} bytes to {} for {} with {}",
        len(request.body),
        request.url,
        format_duration(options.duration),
        _redacted(request.params),
    )

    if client is None:
        with build_client(settings) as owned:
            raw = submit_paste(request, owned)
    else:
        raw = submit_paste(request, client)

    outcome = interpret_response(raw)
    return outcome.into_url()
