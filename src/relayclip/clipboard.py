"""Local clipboard access via pyperclip.

The sync engine only needs two operations on the platform clipboard:
reading the current text before a publish and writing received text.
ClipboardSource and ClipboardSink describe those operations so tests and
other platforms can plug in their own implementation; PyperclipClipboard
is the default one.

pyperclip calls are blocking (on Linux they shell out to xclip, xsel or
wl-clipboard), so async callers run them with asyncio.to_thread().
"""

from __future__ import annotations

import logging
from typing import Protocol

import pyperclip

from relayclip.errors import SinkError, SourceError

logger = logging.getLogger(__name__)


class ClipboardSource(Protocol):
    """Something the clipboard text can be read from."""

    def read_text(self) -> str:
        """Return the current clipboard text. Raises SourceError."""
        ...


class ClipboardSink(Protocol):
    """Something received text can be written into."""

    def write_text(self, text: str) -> None:
        """Replace the clipboard text. Raises SinkError."""
        ...


class PyperclipClipboard:
    """Clipboard source and sink backed by pyperclip."""

    def read_text(self) -> str:
        """Read the clipboard as text.

        Returns:
            The clipboard text, "" when the clipboard is empty or holds
            non-text data.

        Raises:
            SourceError: If no clipboard mechanism is available or the
                read fails.
        """
        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException as e:
            raise SourceError(f"Cannot read clipboard: {e}") from e
        if not isinstance(text, str):
            return ""
        return text

    def write_text(self, text: str) -> None:
        """Write text to the clipboard.

        Raises:
            SinkError: If no clipboard mechanism is available or the write
                fails.
        """
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise SinkError(f"Cannot write clipboard: {e}") from e
        logger.debug("Wrote %d characters to clipboard", len(text))
