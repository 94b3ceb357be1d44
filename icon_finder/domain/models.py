"""Pydantic models shared across service/ui layers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class CatalogIcon(_WireModel):
    """One record of the catalog search endpoint."""

    hash: str
    name: str
    image_preview_url: str | None = None
    is_free: bool = False
    family_slug: str = ""
    family_name: str = ""
    category_slug: str = ""
    category_name: str = ""
    subcategory_slug: str = ""
    subcategory_name: str = ""


class Pagination(_WireModel):
    total: int = 0
    has_more: bool = False
    offset: int = 0
    next_offset: int = 0

    def page_number(self, per_page: int) -> int:
        return self.offset // per_page + 1

    def total_pages(self, per_page: int) -> int:
        return math.ceil(self.total / per_page)


class SearchResponse(_WireModel):
    query: str = ""
    results: list[CatalogIcon] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)


class Icon(BaseModel):
    model_config = ConfigDict(frozen=True)

    hash: str
    name: str
    family: str
    category: str
    svg_url: str | None = None
    tags: tuple[str, ...] = ()

    @classmethod
    def from_catalog(cls, record: CatalogIcon) -> "Icon":
        return cls(
            hash=record.hash,
            name=record.name,
            family=record.family_slug,
            category=record.category_name or record.family_name,
            svg_url=record.image_preview_url or None,
        )


@dataclass(slots=True)
class SearchState:
    """Mutable search state owned by a single SearchController."""

    query: str = ""
    page: int = 1
    is_loading: bool = False
    results: list[Icon] = field(default_factory=list)


__all__ = [
    "CatalogIcon",
    "Icon",
    "Pagination",
    "SearchResponse",
    "SearchState",
]
