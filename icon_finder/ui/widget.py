"""Widget assembly with an explicit creation/teardown lifetime."""

from __future__ import annotations

import httpx

from icon_finder.config import WidgetSettings, get_settings
from icon_finder.i18n import I18nService
from icon_finder.logging import logger
from icon_finder.services.catalog import CatalogClient
from icon_finder.services.clipboard import ClipboardBackend, ClipboardWriter
from icon_finder.ui.controller import SearchController
from icon_finder.ui.notifications import NotificationPresenter
from icon_finder.ui.results import ResultsRenderer


class IconFinderWidget:
    """Async context manager owning every component of one search panel.

    An HTTP client passed in stays open on exit; one created here is closed.
    """

    def __init__(
        self,
        settings: WidgetSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        clipboard_backend: ClipboardBackend | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._http_client = http_client
        self._owns_client = http_client is None
        self._clipboard_backend = clipboard_backend
        self.i18n = I18nService(default_locale=self.settings.default_language)
        self.renderer = ResultsRenderer(self.i18n, per_page=self.settings.catalog.per_page)
        self.notifier = NotificationPresenter(self.settings.notifications)
        self.controller: SearchController | None = None

    async def __aenter__(self) -> "IconFinderWidget":
        if self._http_client is None:
            self._http_client = httpx.AsyncClient()
        client = CatalogClient(self._http_client, settings=self.settings.catalog)
        clipboard = ClipboardWriter(self._clipboard_backend, i18n=self.i18n)
        self.controller = SearchController(
            client,
            self.renderer,
            self.notifier,
            clipboard,
            settings=self.settings,
            i18n=self.i18n,
        )
        self.renderer.show_idle()
        logger.info(
            "widget_started",
            environment=self.settings.environment,
            family=self.settings.catalog.family_slug,
        )
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self.controller is not None:
            await self.controller.close()
            self.controller = None
        self.notifier.close()
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
        logger.info("widget_stopped")


__all__ = ["IconFinderWidget"]
