"""Logging setup for dx_vue_generator.

Library modules only call get_logger(); the CLI calls setup_logging()
once to attach a rich console handler to the package logger.
"""

import logging

from rich.logging import RichHandler

PACKAGE_LOGGER = "dx_vue_generator"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(level: int | str = logging.WARNING, verbose: bool = False) -> None:
    """Attach a RichHandler to the package logger.

    Calling this more than once only updates the level.

    Args:
        level: Base log level.
        verbose: Force DEBUG level.
    """
    global _configured

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else level)

    if _configured:
        return

    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.propagate = False
    _configured = True
