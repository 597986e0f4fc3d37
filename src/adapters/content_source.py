"""Reads the text to paste from a file or standard input.

Content is read as bytes and decoded as strict UTF-8, so line endings and a
leading BOM reach the request body unchanged.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO, TextIO

from core.errors import ContentReadError
from core.logger import logger


def _decode(data: bytes | str, source: str) -> str:
    if isinstance(data, str):
        return data
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ContentReadError(f"Could not read {source}: {exc}") from exc


def read_content(path: Path | None, *, stdin: TextIO | BinaryIO | None = None) -> str:
    """Read the whole file at `path` as UTF-8, or standard input when `path` is None.

    `stdin` may be a text or a binary stream; text streams are read through
    their underlying buffer when they have one.
    """

    if path is None:
        stream = stdin if stdin is not None else sys.stdin
        stream = getattr(stream, "buffer", stream)
        try:
            data = stream.read()
        except OSError as exc:
            raise ContentReadError(f"Could not read from stdin: {exc}") from exc
        text = _decode(data, "from stdin")
        logger.debug("Read {} characters from stdin", len(text))
        return text

    try:
        handle = path.open("rb")
    except OSError as exc:
        raise ContentReadError(f"Could not open file `{path}' for reading: {exc.strerror or exc}") from exc

    with handle:
        try:
            data = handle.read()
        except OSError as exc:
            raise ContentReadError(f"Could not read file `{path}': {exc}") from exc

    text = _decode(data, f"file `{path}'")
    logger.debug("Read {} characters from {}", len(text), path)
    return text
