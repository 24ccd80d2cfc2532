from __future__ import annotations

import asyncio

import httpx

from sonarpick.adapters.http_resilience import RateLimit, ResilienceConfig, ResilientClient


def test_client_sends_default_headers_through_rate_limiter() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    config = ResilienceConfig(
        name="test",
        base_url="https://sonar.example.com",
        ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
        default_headers={"Authorization": "Bearer abc"},
    )

    async def run() -> list[httpx.Response]:
        async with ResilientClient(config, transport=httpx.MockTransport(handler)) as client:
            return [await client.get("/api/ping", params={"n": n}) for n in range(3)]

    responses = asyncio.run(run())

    assert [response.status_code for response in responses] == [200, 200, 200]
    assert [str(request.url) for request in seen] == [
        f"https://sonar.example.com/api/ping?n={n}" for n in range(3)
    ]
    assert all(request.headers["Authorization"] == "Bearer abc" for request in seen)


def test_error_responses_are_returned_without_retry() -> None:
    calls = 0

    def handler(_request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(503)

    config = ResilienceConfig(name="test", base_url="https://sonar.example.com")

    async def run() -> httpx.Response:
        async with ResilientClient(config, transport=httpx.MockTransport(handler)) as client:
            return await client.get("/api/ping")

    assert asyncio.run(run()).status_code == 503
    assert calls == 1
