"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import CatalogFetcher
from .persistence import ConfigSink
from .prompting import SelectionAborted, SelectionPrompt

__all__ = [
    "CatalogFetcher",
    "ConfigSink",
    "SelectionAborted",
    "SelectionPrompt",
]
