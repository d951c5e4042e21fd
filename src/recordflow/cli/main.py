from __future__ import annotations

import logging
from typing import Annotated

import typer

from ..config import resolve_endpoint, resolve_timeout
from ..global_config import DEFAULT_TIMEOUT_S, URL_ENV_VAR
from ..pipeline import Orchestrator
from ..sinks import StdoutSink
from ..sources import HttpSource
from .base import configure_logging, get_logger, handle_errors

app = typer.Typer(
    help="Fetch a record from a JSON endpoint and print it.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.command()
def fetch(
    url: Annotated[
        str | None,
        typer.Option(
            "--url",
            envvar=URL_ENV_VAR,
            show_envvar=True,
            help="Endpoint returning a JSON object with 'name' and 'age'",
        ),
    ] = None,
    timeout: Annotated[
        float,
        typer.Option("--timeout", help="Request timeout in seconds"),
    ] = DEFAULT_TIMEOUT_S,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Log progress to stderr"),
    ] = False,
) -> None:
    """Fetch one record and print it as `name=...` and `age=...` lines.

    Exits 0 on success, 2 on a configuration error and 1 if the record
    cannot be fetched or printed.
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    logger = get_logger(__name__)

    with handle_errors("configuration", logger=logger):
        endpoint = resolve_endpoint(url)
        timeout_s = resolve_timeout(timeout)

    orchestrator = Orchestrator(
        source=HttpSource(endpoint, timeout=timeout_s),
        sink=StdoutSink(),
    )
    with handle_errors("fetch", logger=logger):
        orchestrator.run()


def main() -> None:
    """Main entry point for package CLI.

    Invokes the Typer application, which handles command parsing and
    execution.

    Side Effects:
        - Processes CLI arguments and executes the fetch command.
        - May exit with non-zero code on errors.
    """
    app()


if __name__ == "__main__":
    main()
