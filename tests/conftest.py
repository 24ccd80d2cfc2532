from __future__ import annotations

import pytest

from sonarpick.config.dashboard import DashboardSettings
from sonarpick.domain.model import ProjectEntry
from tests.helpers.fakes import MemorySink


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SONAR_URL", "SONAR_TOKEN", "SONARPICK_CONFIG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def catalog() -> tuple[ProjectEntry, ...]:
    return (
        ProjectEntry(key="acme:pay:billing-api:main", name="Billing API"),
        ProjectEntry(key="acme:pay:billing-api:develop", name="Billing API (develop)"),
        ProjectEntry(key="acme:ops:audit-svc:main", name="Audit Service"),
        ProjectEntry(key="zeta:ops:audit-svc:main", name=None),
    )


@pytest.fixture
def settings() -> DashboardSettings:
    return DashboardSettings.model_validate(
        {
            "sonarUrl": "https://sonar.example.com/",
            "token": "squ_test_token",
            "projects": [],
        }
    )


@pytest.fixture
def memory_sink() -> MemorySink:
    return MemorySink()
