"""Results panel view model: idle prompt, grid, empty and error states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Sequence

from icon_finder.domain.models import Icon, Pagination
from icon_finder.i18n import I18nService
from icon_finder.logging import logger
from icon_finder.services.exceptions import ErrorKind, IconFinderError

ActivationHandler = Callable[[str, str], Awaitable[Any]]

_ERROR_TITLE_KEYS = {
    ErrorKind.AUTH: "results.error.auth",
    ErrorKind.RATE_LIMIT: "results.error.rate_limit",
    ErrorKind.HTTP: "results.error.http",
    ErrorKind.NETWORK: "results.error.network",
    ErrorKind.CLIPBOARD: "results.error.clipboard",
}


class PanelKind(str, Enum):
    IDLE = "idle"
    EMPTY = "empty"
    GRID = "grid"
    ERROR = "error"


@dataclass(slots=True, frozen=True)
class IconTile:
    icon: Icon
    title: str


@dataclass(slots=True, frozen=True)
class ErrorPanel:
    kind: ErrorKind | None
    title: str
    message: str


def format_results_count(
    count: int,
    i18n: I18nService,
    *,
    page: int | None = None,
    total_pages: int | None = None,
) -> str:
    if count == 0:
        return i18n.gettext("results.count.none")
    if count == 1:
        return i18n.gettext("results.count.one")
    label = i18n.gettext("results.count.many", count=f"{count:,}")
    if page and total_pages:
        label += i18n.gettext("results.count.page", page=page, total_pages=total_pages)
    return label


class ResultsRenderer:
    def __init__(self, i18n: I18nService | None = None, *, per_page: int = 100) -> None:
        self._i18n = i18n or I18nService()
        self._per_page = per_page
        self._handlers: list[ActivationHandler] = []
        self.panel = PanelKind.IDLE
        self.loading = False
        self.tiles: list[IconTile] = []
        self.message = ""
        self.hint = ""
        self.error: ErrorPanel | None = None
        self.count_label = format_results_count(0, self._i18n)

    def on_activate(self, handler: ActivationHandler) -> Callable[[], None]:
        """Register a tile activation handler; returns its unregister callback."""

        self._handlers.append(handler)

        def _unregister() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return _unregister

    async def activate(self, icon_hash: str) -> list[Any]:
        tile = next((tile for tile in self.tiles if tile.icon.hash == icon_hash), None)
        if tile is None:
            raise KeyError(f"No tile rendered for icon {icon_hash!r}")
        logger.debug("tile_activated", icon_hash=icon_hash, name=tile.icon.name)
        return [await handler(tile.icon.hash, tile.icon.name) for handler in list(self._handlers)]

    def show_idle(self) -> None:
        self._reset(PanelKind.IDLE)
        self.message = self._i18n.gettext("results.idle")

    def show_loading(self) -> None:
        self.loading = True

    def hide_loading(self) -> None:
        self.loading = False

    def show_results(self, icons: Sequence[Icon], pagination: Pagination | None = None) -> None:
        if not icons:
            self._reset(PanelKind.EMPTY)
            self.message = self._i18n.gettext("results.empty.title")
            self.hint = self._i18n.gettext("results.empty.hint")
        else:
            self._reset(PanelKind.GRID)
            self.tiles = [
                IconTile(icon=icon, title=self._i18n.gettext("results.tile.title", name=icon.name))
                for icon in icons
            ]

        if pagination is None:
            self.count_label = format_results_count(len(icons), self._i18n)
        else:
            self.count_label = format_results_count(
                pagination.total,
                self._i18n,
                page=pagination.page_number(self._per_page),
                total_pages=pagination.total_pages(self._per_page),
            )

    def show_error(self, error: BaseException, fallback: str | None = None) -> None:
        kind = getattr(error, "kind", None) if isinstance(error, IconFinderError) else None
        title_key = _ERROR_TITLE_KEYS[kind] if kind is not None else "results.error.unknown"
        message = str(error) or fallback or self._i18n.gettext("search.failed")
        self._reset(PanelKind.ERROR)
        self.error = ErrorPanel(kind=kind, title=self._i18n.gettext(title_key), message=message)
        self.message = message

    def _reset(self, panel: PanelKind) -> None:
        self.panel = panel
        self.tiles = []
        self.message = ""
        self.hint = ""
        self.error = None


__all__ = [
    "ActivationHandler",
    "ErrorPanel",
    "IconTile",
    "PanelKind",
    "ResultsRenderer",
    "format_results_count",
]
