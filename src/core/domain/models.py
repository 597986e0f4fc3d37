"""Domain models (Pydantic v2).

These describe *what* a paste is: the resolved options for one upload, the
request that carries it and the two shapes of reply pastery.net can send.
They know nothing about HTTP clients or the CLI.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.duration import MAX_DURATION
from core.domain.language import validate_language
from core.errors import RemoteError


class PasteOptions(BaseModel):
    """Resolved configuration for a single paste.

    Built once from the command line plus the content that was read, then
    consumed once to build a `PasteRequest`.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(
        ...,
        min_length=1,
        description="pastery.net API key.",
    )
    duration: int = Field(
        ...,
        ge=0,
        le=MAX_DURATION,
        description="Lifetime of the paste in minutes (at most 100 years).",
    )
    language: str | None = Field(
        default=None,
        description="Explicit language token; guessed from `path` when absent.",
    )
    title: str | None = Field(
        default=None,
        description="Explicit title; the file name of `path` when absent.",
    )
    max_views: int | None = Field(
        default=None,
        gt=0,
        description="Number of views after which the paste expires.",
    )
    path: Path | None = Field(
        default=None,
        description="File the content was read from (None for standard input).",
    )
    content: bytes = Field(
        default=b"",
        description="Raw bytes uploaded as the paste body.",
    )

    @field_validator("language")
    @classmethod
    def _known_language(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return validate_language(value)


class PasteRequest(BaseModel):
    """Transport-agnostic description of the POST that creates a paste."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., min_length=1, description="Paste creation endpoint.")
    params: dict[str, str] = Field(
        default_factory=dict,
        description="Query parameters, in the order they are sent.",
    )
    body: bytes = Field(default=b"", description="Request body (the paste content).")


class PasteSuccess(BaseModel):
    """Reply for a paste that was created."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    url: str

    def into_url(self) -> str:
        return self.url


class PasteFailure(BaseModel):
    """Reply for a paste the service refused."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    error_msg: str

    def into_url(self) -> str:
        raise RemoteError(self.error_msg)


PasteOutcome = Union[PasteSuccess, PasteFailure]
