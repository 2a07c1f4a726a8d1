# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "tally"


def configure_logging(verbose: bool = False) -> None:
    """Route the package's diagnostics through rich on stderr."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True), show_time=False, show_path=verbose
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
