"""Tests for the catalog client request building and error mapping."""

from __future__ import annotations

import httpx
import pytest

from icon_finder.config import CatalogSettings
from icon_finder.services.catalog import CatalogClient
from icon_finder.services.exceptions import (
    AuthError,
    ErrorKind,
    HttpError,
    NetworkError,
    RateLimitError,
)
from tests.conftest import catalog_record, search_payload


def _settings(**overrides) -> CatalogSettings:
    values = {"origin": "http://panel.local"}
    values.update(overrides)
    return CatalogSettings(**values)


@pytest.mark.asyncio
async def test_search_builds_proxy_url_and_parses_response():
    seen: list[httpx.Request] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=search_payload(total=250))

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        client = CatalogClient(http, settings=_settings())
        response = await client.search("streamline-light", "arrow", page=1, per_page=100)

    request = seen[0]
    assert request.method == "GET"
    assert request.url.host == "panel.local"
    assert request.url.path == "/api/streamline/search/family/streamline-light"
    assert dict(request.url.params) == {"page": "1", "per_page": "100", "query": "arrow"}
    assert request.headers["accept"] == "application/json"
    assert "x-api-key" not in request.headers
    assert response.pagination.total == 250
    assert response.results[0].hash == "abc123"
    assert response.results[0].category_name == "Interface Essential"


@pytest.mark.asyncio
async def test_search_omits_empty_query():
    params: list[httpx.QueryParams] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        params.append(request.url.params)
        return httpx.Response(200, json=search_payload([]))

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        client = CatalogClient(http, settings=_settings())
        await client.search("streamline-light", "")
        await client.search("streamline-light")

    assert all("query" not in p for p in params)
    assert params[0]["page"] == "1"
    assert params[0]["per_page"] == "100"


@pytest.mark.asyncio
async def test_absolute_base_url_is_used_as_is():
    urls: list[str] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        urls.append(str(request.url))
        return httpx.Response(200, json=search_payload())

    settings = _settings(base_url="https://catalog.example/v1/")
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        await CatalogClient(http, settings=settings).search("flat", "cat", page=2, per_page=20)

    assert urls == ["https://catalog.example/v1/search/family/flat?page=2&per_page=20&query=cat"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status", "error_type", "fragment"),
    [
        (401, AuthError, "Invalid API key"),
        (429, RateLimitError, "Rate limit"),
        (500, HttpError, "500"),
        (404, HttpError, "404"),
    ],
)
async def test_search_maps_status_codes(status, error_type, fragment):
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json={"error": "nope"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        client = CatalogClient(http, settings=_settings())
        with pytest.raises(error_type) as excinfo:
            await client.search("streamline-light", "arrow")

    assert fragment in str(excinfo.value)


@pytest.mark.asyncio
async def test_http_error_carries_status_and_reason():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        with pytest.raises(HttpError) as excinfo:
            await CatalogClient(http, settings=_settings()).search("streamline-light", "x")

    error = excinfo.value
    assert error.status_code == 503
    assert error.kind is ErrorKind.HTTP
    assert str(error) == "API request failed: 503 Service Unavailable"


@pytest.mark.asyncio
async def test_transport_failure_becomes_network_error_with_url():
    async def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        with pytest.raises(NetworkError) as excinfo:
            await CatalogClient(http, settings=_settings()).search("streamline-light", "arrow")

    error = excinfo.value
    assert error.url.startswith("http://panel.local/api/streamline/search/family/streamline-light")
    assert "query=arrow" in error.url
    assert error.url in str(error)
    assert isinstance(error.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_other_exceptions_propagate_unchanged():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"not json")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        with pytest.raises(ValueError):
            await CatalogClient(http, settings=_settings()).search("streamline-light", "arrow")


@pytest.mark.asyncio
async def test_download_requests_exact_path_with_svg_accept():
    seen: list[httpx.Request] = []
    markup = '<svg xmlns="http://www.w3.org/2000/svg"><path d="M0 0"/></svg>'

    async def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text=markup, headers={"Content-Type": "image/svg+xml"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        body = await CatalogClient(http, settings=_settings()).download("abc123")

    assert body == markup
    assert seen[0].url.raw_path == b"/api/streamline/icons/abc123/download/svg?size=48&responsive=false"
    assert seen[0].headers["accept"] == "image/svg+xml"


@pytest.mark.asyncio
async def test_download_failure_reports_status():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        with pytest.raises(HttpError) as excinfo:
            await CatalogClient(http, settings=_settings()).download("missing")

    assert str(excinfo.value) == "Failed to download SVG: 404"
    assert excinfo.value.status_code == 404


@pytest.mark.asyncio
async def test_lenient_record_parsing_fills_optional_fields():
    async def handler(request: httpx.Request) -> httpx.Response:
        payload = search_payload([{"hash": "h1", "name": "Bare"}, catalog_record("h2", "Full")])
        return httpx.Response(200, json=payload)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        response = await CatalogClient(http, settings=_settings()).search("streamline-light", "b")

    bare, full = response.results
    assert bare.image_preview_url is None
    assert bare.family_slug == ""
    assert full.image_preview_url == "https://cdn.example/h2.png"
