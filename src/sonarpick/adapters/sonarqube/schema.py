"""Pydantic models describing the SonarQube ``search_projects`` payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sonarpick.domain.model import CatalogPage, Paging, ProjectEntry


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class SonarQubeBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ComponentPayload(SonarQubeBaseModel):
    key: str
    name: str | None = None
    qualifier: str | None = None
    analysis_date: str | None = Field(default=None, alias="analysisDate")

    _normalize_name = field_validator("name", mode="before")(_blank_to_none)

    def to_entry(self) -> ProjectEntry:
        return ProjectEntry(key=self.key, name=self.name)


class PagingPayload(SonarQubeBaseModel):
    page_index: int = Field(default=1, alias="pageIndex")
    page_size: int = Field(default=0, alias="pageSize")
    total: int


class SearchProjectsResponse(SonarQubeBaseModel):
    components: list[ComponentPayload]
    paging: PagingPayload

    def to_catalog_page(self) -> CatalogPage:
        return CatalogPage(
            components=tuple(component.to_entry() for component in self.components),
            paging=Paging(
                page_index=self.paging.page_index,
                page_size=self.paging.page_size,
                total=self.paging.total,
            ),
        )


class ErrorMessage(SonarQubeBaseModel):
    msg: str


class ErrorResponse(SonarQubeBaseModel):
    errors: list[ErrorMessage] = Field(default_factory=list["ErrorMessage"])

    @property
    def message(self) -> str:
        return "; ".join(error.msg for error in self.errors)
