"""Shared fixtures: fast settings, fake clipboard and catalog payloads."""

from __future__ import annotations

from typing import Any, Callable, Mapping

import httpx
import pytest

from icon_finder.config import CatalogSettings, NotificationSettings, SearchSettings, WidgetSettings

DEBOUNCE = 0.1


class FakeClipboard:
    def __init__(self, *, rich_error: Exception | None = None, text_error: Exception | None = None) -> None:
        self.rich_error = rich_error
        self.text_error = text_error
        self.rich_writes: list[dict[str, bytes]] = []
        self.text_writes: list[str] = []

    async def write(self, representations: Mapping[str, bytes]) -> None:
        if self.rich_error is not None:
            raise self.rich_error
        self.rich_writes.append(dict(representations))

    async def write_text(self, text: str) -> None:
        if self.text_error is not None:
            raise self.text_error
        self.text_writes.append(text)


def catalog_record(hash_: str = "abc123", name: str = "Arrow Right", **extra: Any) -> dict[str, Any]:
    record = {
        "hash": hash_,
        "name": name,
        "imagePreviewUrl": f"https://cdn.example/{hash_}.png",
        "isFree": True,
        "familySlug": "streamline-light",
        "familyName": "Streamline Light",
        "categorySlug": "interface",
        "categoryName": "Interface Essential",
        "subcategorySlug": "arrows",
        "subcategoryName": "Arrows",
    }
    record.update(extra)
    return record


def search_payload(
    records: list[dict[str, Any]] | None = None,
    *,
    query: str = "arrow",
    total: int | None = None,
    offset: int = 0,
) -> dict[str, Any]:
    records = [catalog_record()] if records is None else records
    total = len(records) if total is None else total
    return {
        "query": query,
        "results": records,
        "pagination": {
            "total": total,
            "hasMore": offset + len(records) < total,
            "offset": offset,
            "nextOffset": offset + len(records),
        },
    }


@pytest.fixture
def settings() -> WidgetSettings:
    return WidgetSettings(
        catalog=CatalogSettings(origin="http://panel.local"),
        search=SearchSettings(debounce_seconds=DEBOUNCE),
        notifications=NotificationSettings(success_seconds=0.05, error_seconds=0.1),
    )


@pytest.fixture
def make_http_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    def factory(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory
