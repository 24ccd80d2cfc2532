"""Shared fixtures for SonarQube adapter tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sonarpick.config.sonarqube import SonarQubeConfig, get_sonarqube_config

if TYPE_CHECKING:
    from sonarpick.config.dashboard import DashboardSettings


@pytest.fixture
def sonarqube_config(settings: DashboardSettings) -> SonarQubeConfig:
    return get_sonarqube_config(settings)


@pytest.fixture
def debug_sonarqube_config(settings: DashboardSettings) -> SonarQubeConfig:
    return get_sonarqube_config(settings, debug=True)
