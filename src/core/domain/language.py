"""Syntax-highlighting languages understood by pastery.net.

This module is the single source of truth for language identifiers: the
validator for `--lang` and the extension-based guesser share the same set, so
whatever reaches the request is a value the service accepts.
"""

from __future__ import annotations

import difflib
import os
from pathlib import PurePath

from core.errors import UnknownLanguageError

AUTODETECT = "autodetect"

KNOWN_LANGUAGES: frozenset[str] = frozenset(
    {
        "apacheconf",
        "bash",
        "batch",
        "c",
        "clojure",
        "cmake",
        "coffeescript",
        "common-lisp",
        "cpp",
        "csharp",
        "css",
        "d",
        "dart",
        "diff",
        "django",
        "docker",
        "elixir",
        "elm",
        "erlang",
        "fortran",
        "fsharp",
        "go",
        "groovy",
        "haskell",
        "html",
        "ini",
        "java",
        "javascript",
        "json",
        "julia",
        "kotlin",
        "latex",
        "less",
        "lua",
        "make",
        "markdown",
        "matlab",
        "nasm",
        "nginx",
        "nim",
        "nix",
        "objective-c",
        "ocaml",
        "perl",
        "php",
        "postgresql",
        "powershell",
        "protobuf",
        "python",
        "r",
        "rst",
        "ruby",
        "rust",
        "sass",
        "scala",
        "scheme",
        "scss",
        "sql",
        "swift",
        "tcl",
        "text",
        "toml",
        "typescript",
        "vim",
        "xml",
        "yaml",
        "zig",
    }
)

# Keys are lower-case and matched exactly.
EXTENSIONS: dict[str, str] = {
    "bash": "bash",
    "bat": "batch",
    "c": "c",
    "cc": "cpp",
    "clj": "clojure",
    "cmake": "cmake",
    "coffee": "coffeescript",
    "conf": "ini",
    "cpp": "cpp",
    "cs": "csharp",
    "css": "css",
    "cxx": "cpp",
    "d": "d",
    "dart": "dart",
    "diff": "diff",
    "el": "common-lisp",
    "elm": "elm",
    "erl": "erlang",
    "ex": "elixir",
    "exs": "elixir",
    "f90": "fortran",
    "fs": "fsharp",
    "go": "go",
    "groovy": "groovy",
    "h": "c",
    "hpp": "cpp",
    "hs": "haskell",
    "htm": "html",
    "html": "html",
    "ini": "ini",
    "java": "java",
    "jl": "julia",
    "js": "javascript",
    "json": "json",
    "kt": "kotlin",
    "kts": "kotlin",
    "less": "less",
    "lisp": "common-lisp",
    "lua": "lua",
    "m": "objective-c",
    "md": "markdown",
    "mjs": "javascript",
    "mk": "make",
    "ml": "ocaml",
    "nim": "nim",
    "nix": "nix",
    "patch": "diff",
    "php": "php",
    "pl": "perl",
    "pm": "perl",
    "proto": "protobuf",
    "ps1": "powershell",
    "py": "python",
    "pyi": "python",
    "r": "r",
    "rb": "ruby",
    "rs": "rust",
    "rst": "rst",
    "s": "nasm",
    "sass": "sass",
    "scala": "scala",
    "scm": "scheme",
    "scss": "scss",
    "sh": "bash",
    "sql": "sql",
    "swift": "swift",
    "tcl": "tcl",
    "tex": "latex",
    "toml": "toml",
    "ts": "typescript",
    "tsx": "typescript",
    "txt": "text",
    "vim": "vim",
    "xml": "xml",
    "yaml": "yaml",
    "yml": "yaml",
    "zig": "zig",
    "zsh": "bash",
}


def known_languages() -> list[str]:
    """Return every accepted identifier except the `autodetect` sentinel, sorted."""

    return sorted(KNOWN_LANGUAGES)


def extensions_for(language: str) -> list[str]:
    """Extensions that `guess_language` maps to `language`."""

    return sorted(ext for ext, lang in EXTENSIONS.items() if lang == language)


def guess_language(path: str | os.PathLike[str]) -> str | None:
    """Guess a language identifier from the extension of `path`.

    Returns `None` when the file has no extension or the extension is not in
    the table; callers fall back to `autodetect`.
    """

    suffix = PurePath(path).suffix
    if not suffix:
        return None
    return EXTENSIONS.get(suffix[1:])


def validate_language(token: str) -> str:
    """Return `token` unchanged if pastery.net accepts it.

    Raises:
        UnknownLanguageError: the token is not `autodetect` nor a known
            identifier. The message suggests the closest known identifiers.
    """

    if token == AUTODETECT or token in KNOWN_LANGUAGES:
        return token

    candidates = [AUTODETECT, *known_languages()]
    close = difflib.get_close_matches(token, candidates, n=5)
    if close:
        hint = "did you mean " + ", ".join(f"`{name}'" for name in close) + "?"
    else:
        hint = "run with --list-languages to see every accepted value"
    raise UnknownLanguageError(f"Unknown language `{token}'; {hint}")
