"""Port for storing the dashboard settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sonarpick.config.dashboard import DashboardSettings


@runtime_checkable
class ConfigSink(Protocol):
    """Durably stores the whole settings document, or nothing."""

    def save(self, settings: DashboardSettings) -> None: ...


__all__ = ["ConfigSink"]
