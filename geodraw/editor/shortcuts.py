"""Keyboard shortcuts for undo/redo while drawing.

Key strings follow the ``modifier+key`` convention of GUI toolkits
(``"ctrl+z"``, ``"cmd+shift+z"``). Bindings:

    Ctrl/Cmd+Z          undo
    Ctrl/Cmd+Shift+Z    redo
    Ctrl/Cmd+Y          redo
"""

from collections.abc import Callable

from loguru import logger

from geodraw.editor.session import DrawSessionActions

_MODIFIER_ALIASES = {
    "control": "ctrl",
    "ctl": "ctrl",
    "meta": "cmd",
    "command": "cmd",
    "super": "cmd",
    "option": "alt",
}
_MODIFIER_ORDER = ("ctrl", "cmd", "alt", "shift")


def normalize_key(key: str) -> str:
    """Canonical form of a key combination.

    Modifiers are lower-cased, de-aliased and sorted; an upper-case letter
    implies Shift (toolkits report ``ctrl+Z`` for Ctrl+Shift+Z).

    Example:
        >>> normalize_key("Shift+Meta+z")
        'cmd+shift+z'
        >>> normalize_key("ctrl+Z")
        'ctrl+shift+z'
    """
    parts = [p for p in key.strip().split("+") if p]
    if not parts:
        return ""
    *modifiers, base = parts

    mods = {_MODIFIER_ALIASES.get(m.lower(), m.lower()) for m in modifiers}
    if len(base) == 1 and base.isalpha() and base.isupper():
        mods.add("shift")

    ordered = [m for m in _MODIFIER_ORDER if m in mods]
    ordered += sorted(mods - set(_MODIFIER_ORDER))
    return "+".join([*ordered, base.lower()])


class ShortcutDispatcher:
    """Maps key presses to session actions."""

    def __init__(self, actions: DrawSessionActions):
        self.bindings: dict[str, Callable[[], None]] = {}
        for modifier in ("ctrl", "cmd"):
            self.bindings[f"{modifier}+z"] = actions.undo
            self.bindings[f"{modifier}+shift+z"] = actions.redo
            self.bindings[f"{modifier}+y"] = actions.redo

    def handle_key(self, key: str | None) -> bool:
        """Run the action bound to ``key``.

        Returns:
            True if the key was bound (the caller should swallow the event).
        """
        if not key:
            return False
        action = self.bindings.get(normalize_key(key))
        if action is None:
            return False
        logger.debug(f"Shortcut {key} -> {getattr(action, '__name__', action)}")
        action()
        return True
