"""Logging helpers shared by every module of the package.

Modules obtain their logger through :func:`get_logger`; only entry points
(the CLI) install handlers through :func:`setup_logging`.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER_NAME = "resx_generator"


def get_logger(name: str) -> logging.Logger:
    """Return a logger that lives under the package logger hierarchy.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Configured ``logging.Logger`` instance.
    """
    if name != PACKAGE_LOGGER_NAME and not name.startswith(PACKAGE_LOGGER_NAME + "."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(
    level: int = logging.WARNING,
    rich_output: bool = True,
    console: Console | None = None,
) -> logging.Logger:
    """Install a single handler on the package logger.

    Args:
        level: Minimum level to emit.
        rich_output: Use a ``RichHandler`` instead of a plain stream handler.
        console: Console for the rich handler (defaults to stderr).

    Returns:
        The package root logger.
    """
    root = logging.getLogger(PACKAGE_LOGGER_NAME)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    if rich_output:
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
    return root
