"""patisserie command line.

Wires options, settings, the content source and the paste pipeline together.
This is the only layer that turns errors into exit codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.content_source import read_content
from cli.ui_components import build_languages_table, print_error
from core.config import API_KEY_ENV_VAR, AppSettings
from core.domain.duration import parse_duration
from core.domain.language import validate_language
from core.domain.models import PasteOptions
from core.errors import MissingCredentialError, PatisserieError
from core.logger import configure_logging, logger
from core.services.paste_pipeline import create_paste

app = typer.Typer(add_completion=False)

_console = Console()
_err_console = Console(stderr=True)


def _list_languages(value: bool) -> None:
    if not value:
        return
    _console.print(build_languages_table())
    raise typer.Exit()


def _fail(message: str) -> NoReturn:
    print_error(_err_console, message)
    raise typer.Exit(code=1)


@app.command()
def paste(
    path: Annotated[
        Path | None,
        typer.Argument(
            help="The path of the file to upload. If not provided, the file will be read from standard input.",
            show_default=False,
        ),
    ] = None,
    api_key: Annotated[
        str | None,
        # No envvar=: typer would print the key in --help.
        typer.Option(
            "--api-key",
            help=(
                f"Your pastery API key. If not provided, it will be read from the {API_KEY_ENV_VAR} "
                "environment variable. You can find this at https://www.pastery.net/account/."
            ),
            show_default=False,
        ),
    ] = None,
    duration: Annotated[
        int,
        typer.Option(
            "-d",
            "--duration",
            parser=parse_duration,
            metavar="DURATION",
            help=(
                "The duration that this paste will live for. You can specify a number of minutes "
                "or a value followed by one of: m(inute), h(our), d(ay), w(eek), mo(nth), y(ear)."
            ),
        ),
    ] = "1d",  # type: ignore[assignment]
    language: Annotated[
        str | None,
        typer.Option(
            "-l",
            "--lang",
            parser=validate_language,
            metavar="LANG",
            help=(
                "The language for the paste. If not provided, it is guessed from the file extension. "
                'Use "autodetect" to have pastery detect the language.'
            ),
            show_default=False,
        ),
    ] = None,
    title: Annotated[
        str | None,
        typer.Option(
            "-t",
            "--title",
            help="The title of the paste. If not provided, the name of the file will be used instead.",
            show_default=False,
        ),
    ] = None,
    max_views: Annotated[
        int | None,
        typer.Option(
            "--max-views",
            min=1,
            help="The number of times the paste can be viewed before expiring.",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Log progress to stderr."),
    ] = False,
    list_languages: Annotated[
        bool,
        typer.Option(
            "--list-languages",
            callback=_list_languages,
            is_eager=True,
            help="Print the accepted languages and exit.",
        ),
    ] = False,
) -> None:
    """A CLI for https://www.pastery.net, the sweetest pastebin in the world."""

    configure_logging(verbose=verbose)

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _fail(f"Invalid configuration: {exc}")

    try:
        if api_key is None:
            api_key = settings.api_key
        if not api_key:
            raise MissingCredentialError(
                f"No API key given; pass --api-key or set the {API_KEY_ENV_VAR} environment variable"
            )

        text = read_content(path)
        options = PasteOptions(
            api_key=api_key,
            duration=duration,
            language=language,
            title=title,
            max_views=max_views,
            path=path,
            content=text.encode("utf-8"),
        )
        url = create_paste(options, settings)
    except PatisserieError as exc:
        logger.debug("Paste failed: {!r}", exc)
        _fail(str(exc))

    typer.echo(url)


def run() -> None:
    app()
