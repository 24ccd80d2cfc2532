"""Errors raised while resolving sonarpick settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConfigurationError(RuntimeError):
    """Raised when ``config.json`` or the environment holds unusable values."""


class MissingConfigurationError(ConfigurationError):
    """Raised when required settings are absent, blank or still the template placeholder."""

    def __init__(self, message: str, *, names: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.names = tuple(names)
