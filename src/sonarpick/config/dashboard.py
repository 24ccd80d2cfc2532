"""Dashboard settings as stored in ``config.json``."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Final

from pydantic import BaseModel, ConfigDict, Field

from sonarpick.domain.colors import ColorPrecedenceTable
from sonarpick.domain.model import SortPolicy

if TYPE_CHECKING:
    from collections.abc import Iterable

DEFAULT_CONFIG_FILENAME: Final[str] = "config.json"
TEMPLATE_CONFIG_FILENAME: Final[str] = "config.template.json"


class DashboardSettings(BaseModel):
    """Typed view of ``config.json``.

    Keys this tool does not know about (settings owned by the dashboard itself) are
    kept in ``model_extra`` and written back untouched.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    sonar_url: str | None = Field(default=None, alias="sonarUrl")
    token: str | None = None
    debug: bool = False
    projects: list[str] = Field(default_factory=list)
    sort_by: SortPolicy = Field(default=SortPolicy.DEFAULT, alias="sortBy")
    project_filter: str | None = Field(default=None, alias="projectFilter")
    colors: ColorPrecedenceTable = Field(default_factory=dict)

    @property
    def prior_selection(self) -> frozenset[str]:
        return frozenset(self.projects)

    @property
    def passthrough(self) -> dict[str, object]:
        return dict(self.model_extra or {})

    def with_projects(self, keys: Iterable[str]) -> DashboardSettings:
        return self.model_copy(update={"projects": sorted(set(keys))})

    def to_document(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def get_config_path(path: str | os.PathLike[str] | None = None) -> Path:
    """Resolve the settings file: explicit path, then ``SONARPICK_CONFIG``, then cwd."""

    if path is not None:
        return Path(path).expanduser()
    env_path = os.getenv("SONARPICK_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return Path.cwd() / DEFAULT_CONFIG_FILENAME
