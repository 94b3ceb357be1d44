"""Search orchestration: debounce, single-flight dispatch and icon insertion."""

from __future__ import annotations

import asyncio

from icon_finder.config import WidgetSettings
from icon_finder.domain.models import Icon, SearchResponse, SearchState
from icon_finder.i18n import I18nService
from icon_finder.logging import logger
from icon_finder.services.catalog import CatalogClient
from icon_finder.services.clipboard import ClipboardWriter, CopyOutcome
from icon_finder.services.exceptions import IconFinderError
from icon_finder.ui.notifications import NotificationPresenter
from icon_finder.ui.results import ResultsRenderer


class SearchController:
    """Owns the search state of one widget instance.

    At most one search request is in flight; triggers arriving while it is
    outstanding are dropped. Responses carry no correlation token, so a
    completed request always publishes its results.
    """

    def __init__(
        self,
        client: CatalogClient,
        renderer: ResultsRenderer,
        notifier: NotificationPresenter,
        clipboard: ClipboardWriter,
        *,
        settings: WidgetSettings,
        i18n: I18nService | None = None,
    ) -> None:
        self._client = client
        self._renderer = renderer
        self._notifier = notifier
        self._clipboard = clipboard
        self._settings = settings
        self._i18n = i18n or I18nService(default_locale=settings.default_language)
        self.state = SearchState()
        self.text = ""
        self._timer: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task[SearchResponse | None]] = set()
        self._unregister = renderer.on_activate(self.insert_icon)

    @property
    def debounce_pending(self) -> bool:
        return self._timer is not None

    def on_input(self, text: str) -> None:
        self.text = text
        self._cancel_timer()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self._settings.search.debounce_seconds, self._on_quiet)

    async def on_enter(self) -> SearchResponse | None:
        self._cancel_timer()
        return await self.dispatch(self.text)

    async def dispatch(self, query: str) -> SearchResponse | None:
        if self.state.is_loading:
            logger.debug("search_dropped_in_flight", query=query.strip(), pending=self.state.query)
            return None
        query = query.strip()
        if not query:
            self._renderer.show_idle()
            return None

        self.state.is_loading = True
        self.state.query = query
        self.state.page = 1
        self._renderer.show_loading()
        logger.info("search_dispatched", query=query, page=self.state.page)
        try:
            response = await self._client.search(
                self._settings.catalog.family_slug,
                query,
                page=self.state.page,
                per_page=self._client.per_page,
            )
        except IconFinderError as exc:
            logger.warning("search_failed", query=query, kind=exc.kind.value, error=str(exc))
            self._renderer.show_error(exc)
            return None
        except Exception as exc:
            logger.exception("search_crashed", query=query)
            self._renderer.show_error(exc, fallback=self._i18n.gettext("search.failed"))
            return None
        finally:
            self.state.is_loading = False
            self._renderer.hide_loading()

        self.state.results = [Icon.from_catalog(record) for record in response.results]
        self._renderer.show_results(self.state.results, response.pagination)
        logger.info(
            "search_completed",
            query=query,
            returned=len(self.state.results),
            total=response.pagination.total,
        )
        return response

    async def insert_icon(self, icon_hash: str, icon_name: str) -> CopyOutcome | None:
        try:
            markup = await self._client.download(icon_hash)
            outcome = await self._clipboard.copy(markup, icon_name)
        except Exception as exc:
            if not isinstance(exc, IconFinderError):
                logger.exception("icon_copy_crashed", icon_hash=icon_hash)
            self._notifier.error(str(exc) or self._i18n.gettext("copy.failed"))
            return None
        logger.info("icon_copied", icon_hash=icon_hash, kind=outcome.kind)
        self._notifier.success(outcome.message)
        return outcome

    async def close(self) -> None:
        self._cancel_timer()
        self._unregister()
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    async def wait_idle(self) -> None:
        """Wait for searches launched by debounce timers to settle."""

        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def _on_quiet(self) -> None:
        self._timer = None
        task = asyncio.get_running_loop().create_task(self.dispatch(self.text))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None


__all__ = ["SearchController"]
