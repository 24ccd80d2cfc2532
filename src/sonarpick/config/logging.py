"""Logging setup for the sonarpick command line."""

from __future__ import annotations

import logging

# httpx logs every request at INFO; the fetcher logs its own URLs in debug mode
_CHATTY_LOGGERS = ("httpx", "httpcore")


def configure_logging(*, debug: bool = False, force: bool = False) -> None:
    """Initialise the root logger with a terse CLI format.

    ``debug`` lowers the level to DEBUG and lets the HTTP libraries log too. Pass
    ``force=True`` to reconfigure once the debug flag from ``config.json`` is known.
    """

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if debug else logging.WARNING)
