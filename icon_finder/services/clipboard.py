"""Two-tier clipboard export of SVG markup."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Literal, Mapping, Protocol

import pyperclip

from icon_finder.i18n import I18nService
from icon_finder.logging import logger
from icon_finder.services.exceptions import ClipboardError, ClipboardUnsupported

SVG_MIME = "image/svg+xml"
TEXT_MIME = "text/plain"


class ClipboardBackend(Protocol):
    async def write(self, representations: Mapping[str, bytes]) -> None:
        """Place every representation on the clipboard in a single write."""

    async def write_text(self, text: str) -> None:
        """Replace the clipboard content with plain text."""


class SystemClipboard:
    """Qt clipboard for multi-format writes, pyperclip for plain text.

    Multi-format writes need a running Qt GUI application; without one the
    backend reports the capability as unsupported.
    """

    async def write(self, representations: Mapping[str, bytes]) -> None:
        try:
            from PySide6.QtCore import QMimeData
            from PySide6.QtGui import QGuiApplication
        except ImportError as exc:
            raise ClipboardUnsupported("Multi-format clipboard needs PySide6.") from exc

        if QGuiApplication.instance() is None:
            raise ClipboardUnsupported("No Qt application owns the clipboard.")

        mime_data = QMimeData()
        for mime_type, payload in representations.items():
            mime_data.setData(mime_type, payload)
        QGuiApplication.clipboard().setMimeData(mime_data)

    async def write_text(self, text: str) -> None:
        await asyncio.to_thread(pyperclip.copy, text)


@dataclass(slots=True, frozen=True)
class CopyOutcome:
    kind: Literal["rich", "text"]
    message: str


class ClipboardWriter:
    def __init__(
        self,
        backend: ClipboardBackend | None = None,
        i18n: I18nService | None = None,
    ) -> None:
        self._backend = backend or SystemClipboard()
        self._i18n = i18n or I18nService()

    async def copy(self, raw_markup: str, display_name: str) -> CopyOutcome:
        payload = raw_markup.encode("utf-8")
        try:
            await self._backend.write({SVG_MIME: payload, TEXT_MIME: payload})
        except Exception as exc:
            logger.warning(
                "clipboard_rich_write_failed",
                icon=display_name,
                error=str(exc),
                error_type=exc.__class__.__name__,
            )
        else:
            return CopyOutcome("rich", self._i18n.gettext("copy.rich", name=display_name))

        try:
            await self._backend.write_text(raw_markup)
        except Exception as exc:
            logger.error("clipboard_text_write_failed", icon=display_name, error=str(exc))
            raise ClipboardError(str(exc)) from exc
        return CopyOutcome("text", self._i18n.gettext("copy.text", name=display_name))


__all__ = [
    "ClipboardBackend",
    "ClipboardWriter",
    "CopyOutcome",
    "SVG_MIME",
    "SystemClipboard",
    "TEXT_MIME",
]
