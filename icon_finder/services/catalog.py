"""Icon catalog client talking to the same-origin API proxy."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from icon_finder.config import CatalogSettings
from icon_finder.domain.models import SearchResponse
from icon_finder.logging import logger
from icon_finder.services.exceptions import AuthError, HttpError, NetworkError, RateLimitError

JSON_ACCEPT = "application/json"
SVG_ACCEPT = "image/svg+xml"


class CatalogClient:
    """Search and download endpoints of the icon catalog.

    Credentials are attached by the proxy behind ``base_url``; requests sent
    from here never carry them.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: CatalogSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or CatalogSettings()

    @property
    def per_page(self) -> int:
        return self._settings.per_page

    def build_url(self, endpoint: str) -> str:
        base = self._settings.base_url
        if self._settings.is_relative:
            origin = str(self._settings.origin).rstrip("/")
            return f"{origin}/{base.lstrip('/')}{endpoint}" if base else f"{origin}{endpoint}"
        return f"{base}{endpoint}"

    async def search(
        self,
        family: str,
        query: str | None = None,
        page: int = 1,
        per_page: int | None = None,
    ) -> SearchResponse:
        params: dict[str, Any] = {
            "page": str(page),
            "per_page": str(per_page or self._settings.per_page),
        }
        if query:
            params["query"] = query

        url = self.build_url(f"/search/family/{quote(family, safe='')}")
        response = await self._get(url, params=params, accept=JSON_ACCEPT)
        if not response.is_success:
            raise self._status_error(response)
        return SearchResponse.model_validate(response.json())

    async def download(self, icon_hash: str) -> str:
        url = self.build_url(f"/icons/{quote(icon_hash, safe='')}/download/svg")
        params = {"size": str(self._settings.download_size), "responsive": "false"}
        response = await self._get(url, params=params, accept=SVG_ACCEPT)
        if not response.is_success:
            logger.warning("icon_download_failed", icon_hash=icon_hash, status=response.status_code)
            raise HttpError(
                response.status_code,
                response.reason_phrase,
                message=f"Failed to download SVG: {response.status_code}",
            )
        return response.text

    async def _get(self, url: str, *, params: dict[str, Any], accept: str) -> httpx.Response:
        try:
            return await self._client.get(
                url,
                params=params,
                headers={"Accept": accept},
                timeout=self._settings.request_timeout_seconds,
            )
        except httpx.TransportError as exc:
            attempted = str(httpx.URL(url, params=params))
            logger.error("catalog_request_failed", url=attempted, error=str(exc))
            raise NetworkError(attempted, detail=exc.__class__.__name__) from exc

    @staticmethod
    def _status_error(response: httpx.Response) -> Exception:
        status = response.status_code
        logger.warning("catalog_request_rejected", status=status, url=str(response.request.url))
        if status == 401:
            return AuthError()
        if status == 429:
            return RateLimitError()
        return HttpError(status, response.reason_phrase)


__all__ = ["CatalogClient", "JSON_ACCEPT", "SVG_ACCEPT"]
