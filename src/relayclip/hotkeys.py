"""Global hotkey capture via pynput.

The configuration names the hotkey as key symbols ("ctrl", "shift", "x").
pynput's GlobalHotKeys wants a combo string such as "<ctrl>+<shift>+x",
with named keys in angle brackets and single characters bare.

pynput is imported lazily: on Linux importing it opens an X connection,
which fails on headless machines.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Sequence

from relayclip.errors import HotkeyError

if TYPE_CHECKING:
    from pynput.keyboard import GlobalHotKeys

logger = logging.getLogger(__name__)

# Alternative spellings mapped to pynput key names.
KEY_ALIASES: dict[str, str] = {
    "control": "ctrl",
    "option": "alt",
    "win": "cmd",
    "windows": "cmd",
    "super": "cmd",
    "meta": "cmd",
    "command": "cmd",
    "return": "enter",
    "escape": "esc",
    "del": "delete",
}


def to_pynput_combo(keys: Sequence[str]) -> str:
    """Convert key symbols to a pynput hotkey combo string.

    Args:
        keys: Key symbols in press order, e.g. ("ctrl", "shift", "x").

    Returns:
        The combo, e.g. "<ctrl>+<shift>+x".
    """
    parts = []
    for key in keys:
        name = key.strip().lower()
        name = KEY_ALIASES.get(name, name)
        parts.append(name if len(name) == 1 else f"<{name}>")
    return "+".join(parts)


def start_hotkey_listener(
    keys: Sequence[str], callback: Callable[[], None]
) -> GlobalHotKeys:
    """Start a background listener calling callback on each activation.

    The callback runs on the listener thread and must not block.

    Args:
        keys: Key symbols of the hotkey.
        callback: Zero-argument function invoked when the combo is pressed.

    Returns:
        The running listener; call stop() on shutdown.

    Raises:
        HotkeyError: If pynput has no usable backend or the combo is not
            valid.
    """
    try:
        from pynput import keyboard
    except ImportError as e:
        raise HotkeyError(f"Global hotkeys unavailable: {e}") from e

    combo = to_pynput_combo(keys)
    try:
        listener = keyboard.GlobalHotKeys({combo: callback})
    except ValueError as e:
        raise HotkeyError(f"Invalid hotkey {combo!r}: {e}") from e
    listener.start()
    logger.info("Listening for hotkey %s", combo)
    return listener
