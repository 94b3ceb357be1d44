"""Transient toast notifications."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Literal

from icon_finder.config import NotificationSettings
from icon_finder.logging import logger

# Slide-in animation injected alongside success toasts.
SLIDE_IN_ASSET = "toast-slide-in"


@dataclass(slots=True, eq=False)
class Toast:
    kind: Literal["success", "error"]
    message: str
    color: str
    lifetime: float
    assets: tuple[str, ...] = ()
    dismissed: bool = False
    _handle: asyncio.TimerHandle | None = field(default=None, repr=False)


class NotificationPresenter:
    """Keeps the visible toasts and the presentation assets they installed."""

    def __init__(self, settings: NotificationSettings | None = None) -> None:
        self._settings = settings or NotificationSettings()
        self.toasts: list[Toast] = []
        self.assets: list[str] = []

    @property
    def current(self) -> Toast | None:
        return self.toasts[-1] if self.toasts else None

    def success(self, message: str) -> Toast:
        toast = Toast(
            kind="success",
            message=message,
            color=self._settings.success_color,
            lifetime=self._settings.success_seconds,
            assets=(SLIDE_IN_ASSET,),
        )
        return self._show(toast)

    def error(self, message: str) -> Toast:
        toast = Toast(
            kind="error",
            message=message,
            color=self._settings.error_color,
            lifetime=self._settings.error_seconds,
        )
        return self._show(toast)

    def dismiss(self, toast: Toast) -> None:
        if toast.dismissed:
            return
        toast.dismissed = True
        if toast._handle is not None:
            toast._handle.cancel()
            toast._handle = None
        if toast in self.toasts:
            self.toasts.remove(toast)
        for asset in toast.assets:
            if asset in self.assets:
                self.assets.remove(asset)

    def close(self) -> None:
        for toast in list(self.toasts):
            self.dismiss(toast)

    def _show(self, toast: Toast) -> Toast:
        loop = asyncio.get_running_loop()
        self.assets.extend(toast.assets)
        self.toasts.append(toast)
        toast._handle = loop.call_later(toast.lifetime, self.dismiss, toast)
        logger.info("toast_shown", kind=toast.kind, message=toast.message)
        return toast


__all__ = ["NotificationPresenter", "SLIDE_IN_ASSET", "Toast"]
