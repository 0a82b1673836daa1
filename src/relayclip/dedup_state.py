#!/usr/bin/env python3
"""
Last-applied content tracking for duplicate suppression.

The relay may redeliver a message, and two machines may publish the same
text in quick succession. Remembering the body we last wrote into the
clipboard lets the subscription drop those repeats instead of rewriting
the clipboard with identical content.

The state is read and written from the subscription task, and hotkey
callbacks run on a separate listener thread, so every access goes through
a threading.Lock. apply_if_new() performs the compare and the write as one
step so two racing deliveries of the same body cannot both be applied.
"""
import threading
from dataclasses import dataclass, field


@dataclass
class DedupState:
    """
    Track the body most recently applied to the local clipboard.

    Attributes:
        _last_applied_body: Text last written to the clipboard, "" initially.
        _lock: Guards every read and write of _last_applied_body.
    """

    _last_applied_body: str = ""
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def last_applied_body(self) -> str:
        """Text most recently accepted for the clipboard."""
        with self._lock:
            return self._last_applied_body

    def apply_if_new(self, body: str) -> bool:
        """
        Record body as applied unless it equals the last applied body.

        Args:
            body: Candidate clipboard text.

        Returns:
            True if body was recorded (caller should apply it), False if it
            duplicates the last applied body.
        """
        with self._lock:
            if body == self._last_applied_body:
                return False
            self._last_applied_body = body
            return True
