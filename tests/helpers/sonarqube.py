"""Mock transports standing in for a SonarQube server."""

from __future__ import annotations

from collections.abc import Callable

import httpx

from sonarpick.adapters.http_resilience import ResilienceConfig, ResilientClient

Handler = Callable[[httpx.Request], httpx.Response]


def make_client_factory(
    handler: Handler,
    requests: list[httpx.Request] | None = None,
) -> Callable[[ResilienceConfig], ResilientClient]:
    def recording_handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return handler(request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        return ResilientClient(resilience, transport=httpx.MockTransport(recording_handler))

    return factory


def paged_source(total: int, *, reported_total: int | None = None) -> Handler:
    """Serve ``total`` projects page by page, like ``search_projects`` does."""

    keys = [f"acme:team:svc-{index:03d}:main" for index in range(total)]

    def handler(request: httpx.Request) -> httpx.Response:
        page = int(request.url.params["p"])
        size = int(request.url.params["ps"])
        chunk = keys[(page - 1) * size : page * size]
        return httpx.Response(
            200,
            json={
                "paging": {
                    "pageIndex": page,
                    "pageSize": size,
                    "total": total if reported_total is None else reported_total,
                },
                "components": [{"key": key, "name": key.split(":")[2]} for key in chunk],
            },
        )

    return handler
