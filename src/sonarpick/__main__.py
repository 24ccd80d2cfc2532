from __future__ import annotations

from sonarpick.ui.cli import run

run()
