"""Public interface for the SonarQube adapter."""

from __future__ import annotations

from .client import (
    SonarQubeAPIError,
    SonarQubeAuthenticationError,
    SonarQubeFetcher,
    SonarQubeProtocolError,
    SonarQubeTransportError,
)
from .schema import ComponentPayload, PagingPayload, SearchProjectsResponse

__all__ = [
    "ComponentPayload",
    "PagingPayload",
    "SearchProjectsResponse",
    "SonarQubeAPIError",
    "SonarQubeAuthenticationError",
    "SonarQubeFetcher",
    "SonarQubeProtocolError",
    "SonarQubeTransportError",
]
