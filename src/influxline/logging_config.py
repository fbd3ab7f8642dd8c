import logging as root_logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

SDK_LOGGER_NAME = "influxline"


def _rich_handler(level, console: Optional[Console]) -> root_logging.Handler:
    handler = RichHandler(
        level=level,
        console=console or Console(stderr=True),
        show_time=True,
        show_path=True,
        markup=True,
        rich_tracebacks=True,
        log_time_format="[%X]",
    )
    handler.setFormatter(
        root_logging.Formatter(fmt="[dim white]%(name)s[/dim white]: %(message)s")
    )
    return handler


def _stream_handler() -> root_logging.Handler:
    handler = root_logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        root_logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return handler


def setup_sdk_logging(
    level="INFO",
    pretty: bool = False,
    console: Optional[Console] = None,
    propagate: bool = False,
):
    """
    Routes the `influxline` log records to the terminal.

    Until this is called the package only carries a `NullHandler` and stays
    silent. Calling it again replaces the handler installed by the previous call.

    Args:
        level (str): Threshold of the `influxline` logger ("DEBUG", "INFO", ...).
        pretty (bool): Render records with `rich` (colors, source path,
            rich tracebacks) instead of a plain `time [LEVEL] name: message` line
            on stderr.
        console (Optional[rich.console.Console]): Console the pretty handler
            writes to, e.g. the one already driving a demo's panels. Ignored
            when `pretty` is False.
        propagate (bool): Also hand records to the root logger. Leave it off
            when the application has its own root handlers, or every line
            shows up twice.
    """
    logger = root_logging.getLogger(SDK_LOGGER_NAME)
    logger.handlers.clear()

    if pretty:
        handler = _rich_handler(level, console)
        init_message = f"influxline logging enabled at [bold]{level}[/bold]"
        extra = {"markup": True}
    else:
        handler = _stream_handler()
        init_message = f"influxline logging enabled at {level}"
        extra = {}

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate

    logger.info(init_message, extra=extra)


def get_logger(name: Optional[str] = None) -> root_logging.Logger:
    """
    Returns `name`'s logger, or the package logger when `name` is None.

    Modules pass their `__name__`, so every logger in the package is a child
    of `influxline` and inherits whatever `setup_sdk_logging()` installed.
    """
    return root_logging.getLogger(name if name is not None else SDK_LOGGER_NAME)
