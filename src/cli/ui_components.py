"""CLI UI components (Rich).

Kept apart from the command so that output formatting does not leak into the
option handling.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.language import AUTODETECT, extensions_for, known_languages


def build_languages_table() -> Table:
    """Table of accepted `--lang` values and the extensions guessed as each."""

    table = Table(title="pastery.net languages")
    table.add_column("Language", style="cyan", no_wrap=True)
    table.add_column("Extensions", style="white")

    table.add_row(AUTODETECT, Text("let pastery.net decide", style="dim"))
    for language in known_languages():
        extensions = extensions_for(language)
        table.add_row(language, ", ".join(f".{ext}" for ext in extensions))
    return table


def print_error(console: Console, message: str) -> None:
    """Print `error: <message>` without interpreting markup in the message."""

    console.print(Text.assemble(("error:", "bold red"), " ", message), soft_wrap=True)
