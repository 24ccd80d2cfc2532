from __future__ import annotations

import logging

import pytest

from sonarpick.config import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    saved = (root.level, list(root.handlers))
    chatty = {name: logging.getLogger(name).level for name in ("httpx", "httpcore")}
    yield
    root.setLevel(saved[0])
    root.handlers[:] = saved[1]
    for name, level in chatty.items():
        logging.getLogger(name).setLevel(level)


def test_default_level_hides_http_request_lines() -> None:
    configure_logging(force=True)

    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING


def test_debug_level_lets_http_libraries_log() -> None:
    configure_logging(debug=True, force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.NOTSET
    assert logging.getLogger("sonarpick.app").getEffectiveLevel() == logging.DEBUG
