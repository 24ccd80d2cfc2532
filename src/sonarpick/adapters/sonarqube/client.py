"""HTTP client for the SonarQube project search API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, ClassVar

import httpx
from pydantic import ValidationError

from sonarpick.adapters.http_resilience import ResilienceConfig, ResilientClient
from sonarpick.config.sonarqube import (
    SEARCH_PROJECTS_FACETS,
    SEARCH_PROJECTS_FIELDS,
    SonarQubeConfig,
)

from .schema import ErrorResponse, SearchProjectsResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from sonarpick.domain.model import CatalogPage, ProjectEntry

log = getLogger(__name__)

AUTH_FAILURE_STATUSES = frozenset({401, 403})


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class SonarQubeAPIError(RuntimeError):
    """Raised when the SonarQube API cannot be used for this run."""

    hint: ClassVar[str] = ""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        detail: object = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class SonarQubeAuthenticationError(SonarQubeAPIError):
    hint = (
        'Authentication failed. Check that the access token in "config.json" is valid '
        'and has the permissions needed to "Browse" projects.'
    )


class SonarQubeTransportError(SonarQubeAPIError):
    hint = 'Check the SonarQube URL in "config.json" and your network connection.'


class SonarQubeProtocolError(SonarQubeAPIError):
    """A response arrived but does not look like a ``search_projects`` page."""


@dataclass(slots=True)
class SonarQubeFetcher:
    """Fetch every project listed by ``/api/components/search_projects``.

    Pages are requested one after another until the number of collected projects
    reaches the ``paging.total`` reported by the server. A malformed page ends the
    loop early and the projects collected so far are returned; an HTTP or network
    failure aborts the whole fetch.
    """

    config: SonarQubeConfig
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def __call__(self) -> tuple[ProjectEntry, ...]:
        return asyncio.run(self._fetch_all_async())

    async def _fetch_all_async(self) -> tuple[ProjectEntry, ...]:
        entries: list[ProjectEntry] = []
        page = 1
        total = 0

        log.info("Fetching projects from SonarQube at %s", self.config.base_url)
        async with self.client_factory(self.config.resilience) as client:
            while True:
                try:
                    catalog_page = await self._request_page(client=client, page=page)
                except SonarQubeProtocolError as exc:
                    log.error("Unexpected response format from the SonarQube API: %s", exc)  # noqa: TRY400
                    if self.config.debug:
                        log.debug("Response received: %r", exc.detail)
                    break

                entries.extend(catalog_page.components)
                total = catalog_page.paging.total
                page += 1
                if len(entries) >= total:
                    break
                if not catalog_page.components:
                    log.warning(
                        "SonarQube returned an empty page %s with %s of %s projects collected",
                        page - 1,
                        len(entries),
                        total,
                    )
                    break

        log.info("%s projects found", len(entries))
        return tuple(entries)

    async def _request_page(self, *, client: ResilientClient, page: int) -> CatalogPage:
        params = httpx.QueryParams(
            {
                "p": page,
                "ps": self.config.page_size,
                "facets": ",".join(SEARCH_PROJECTS_FACETS),
                "f": ",".join(SEARCH_PROJECTS_FIELDS),
            }
        )
        url = self.config.search_projects_url
        if self.config.debug:
            log.debug("Calling SonarQube API: %s", httpx.URL(url, params=params))

        try:
            response = await client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise _status_error(exc.response) from exc
        except httpx.HTTPError as exc:
            raise SonarQubeTransportError(
                f"Request to {url} failed: {exc}", detail=repr(exc)
            ) from exc

        return _parse_page(response)


def _status_error(response: httpx.Response) -> SonarQubeAPIError:
    status = response.status_code
    message = f"Status: {status} - {response.reason_phrase}"
    server_message = _server_message(response)
    if server_message:
        message = f"{message} ({server_message})"
    error_type = (
        SonarQubeAuthenticationError
        if status in AUTH_FAILURE_STATUSES
        else SonarQubeTransportError
    )
    return error_type(message, status_code=status, detail=response.text)


def _server_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return ""
    if not isinstance(payload, dict):
        return ""
    try:
        return ErrorResponse.model_validate(payload).message
    except ValidationError:
        return ""


def _parse_page(response: httpx.Response) -> CatalogPage:
    try:
        payload = response.json()
    except ValueError as exc:
        raise SonarQubeProtocolError("response body is not JSON", detail=response.text) from exc

    if (
        not isinstance(payload, dict)
        or payload.get("components") is None
        or payload.get("paging") is None
    ):
        raise SonarQubeProtocolError("missing 'components' or 'paging'", detail=payload)

    try:
        parsed = SearchProjectsResponse.model_validate(payload)
    except ValidationError as exc:
        raise SonarQubeProtocolError(
            f"invalid page payload ({exc.error_count()} errors)", detail=payload
        ) from exc
    return parsed.to_catalog_page()
