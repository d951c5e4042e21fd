from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager

import typer

from ..errors import RecordflowError

_LOGGING_CONFIGURED = False


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure CLI-wide logging.

    The handler and format are installed on the first call only; every
    call sets the root level. Logs go to stderr, so the default
    WARNING level keeps successful runs quiet there.

    Args:
        level: Logging level (defaults to WARNING).

    Side Effects:
        - Configures Python logging module globally.
        - Sets module-level flag to prevent reconfiguration.
    """
    global _LOGGING_CONFIGURED
    if not _LOGGING_CONFIGURED:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        _LOGGING_CONFIGURED = True

    # basicConfig is a no-op when the root logger already has handlers
    logging.getLogger().setLevel(level)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger hooked into the shared CLI configuration.

    Args:
        name: Logger name. Uses the root logger if None.

    Returns:
        Configured Logger instance.
    """
    return logging.getLogger(name)


@contextmanager
def handle_errors(
    operation: str,
    *,
    logger: logging.Logger | None = None,
) -> Generator[None, None, None]:
    """Provide consistent exception handling for CLI operations.

    Context manager that turns pipeline errors into a one-line diagnostic on
    stderr and a non-zero exit. Re-raises typer.Exit to allow normal CLI exit
    flow.

    Args:
        operation: Human-readable operation name for error messages.
        logger: Logger instance. Defaults to module logger if None.

    Yields:
        None (used as context manager).

    Raises:
        typer.Exit: With the error's `exit_code` for RecordflowError, or 1 for
            anything unexpected.

    Logs:
        - DEBUG: "Error during {operation}" with traceback for pipeline errors.
        - ERROR: "Error during {operation}" with traceback for anything else.

    User Output:
        - Prints "✗ {operation} failed: {exc}" in red to stderr.
    """
    logger = logger or get_logger(__name__)
    try:
        yield
    except typer.Exit:
        raise
    except RecordflowError as exc:
        logger.debug("Error during %s", operation, exc_info=True)
        typer.secho(f"✗ {operation} failed: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(exc.exit_code) from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error during %s", operation)
        typer.secho(f"✗ {operation} failed: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc
