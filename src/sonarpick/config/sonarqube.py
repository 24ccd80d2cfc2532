"""SonarQube connection values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from .env import require_values
from .errors import MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig

if TYPE_CHECKING:
    from .dashboard import DashboardSettings

SONARQUBE_SEARCH_PROJECTS_PATH: Final[str] = "/api/components/search_projects"
SONARQUBE_TIMEOUT_SECONDS: Final[float] = 30.0
DEFAULT_PAGE_SIZE: Final[int] = 100
TOKEN_PLACEHOLDER: Final[str] = "COLE_SEU_TOKEN_AQUI"

# Same facets the SonarQube web UI requests on its projects page.
SEARCH_PROJECTS_FACETS: Final[tuple[str, ...]] = (
    "reliability_rating",
    "security_rating",
    "security_review_rating",
    "sqale_rating",
    "coverage",
    "duplicated_lines_density",
    "ncloc",
    "alert_status",
    "languages",
    "tags",
    "qualifier",
)
SEARCH_PROJECTS_FIELDS: Final[tuple[str, ...]] = ("analysisDate", "leakPeriodDate")


@dataclass(frozen=True, slots=True)
class SonarQubeConfig:
    """Holds SonarQube API configuration values."""

    base_url: str
    token: str
    resilience: ResilienceConfig
    debug: bool = False
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def search_projects_url(self) -> str:
        return f"{self.base_url}{SONARQUBE_SEARCH_PROJECTS_PATH}"


def clean_base_url(url: str) -> str:
    return url.strip().rstrip("/")


def get_sonarqube_config(
    settings: DashboardSettings | None = None,
    *,
    debug: bool | None = None,
    resilience: ResilienceConfig | None = None,
) -> SonarQubeConfig:
    """Resolve connection values from the environment, falling back to ``config.json``."""

    fallbacks = {
        "SONAR_URL": settings.sonar_url if settings else None,
        "SONAR_TOKEN": settings.token if settings else None,
    }
    values = require_values(
        ("SONAR_URL", "SONAR_TOKEN"),
        fallbacks=fallbacks,
        source='set them in "config.json" (sonarUrl, token) or the environment',
    )
    token = values["SONAR_TOKEN"]
    if TOKEN_PLACEHOLDER in token:
        raise MissingConfigurationError(
            'Access token is not configured: replace the placeholder token in "config.json"',
            names=("SONAR_TOKEN",),
        )

    base_url = clean_base_url(values["SONAR_URL"])
    effective_debug = debug if debug is not None else bool(settings and settings.debug)
    return SonarQubeConfig(
        base_url=base_url,
        token=token,
        debug=effective_debug,
        resilience=resilience
        or ResilienceConfig(
            name="sonarqube",
            base_url=base_url,
            timeout_seconds=SONARQUBE_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
            default_headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/json",
            },
        ),
    )
