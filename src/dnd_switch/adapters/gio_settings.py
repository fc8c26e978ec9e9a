"""GSettings adapter backed by PyGObject's Gio.

PyGObject is imported lazily so the core and the tests do not need the
GNOME introspection libraries.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from ..core.subscription import Subscription

logger = logging.getLogger(__name__)


def _gio():
    import gi

    gi.require_version("Gio", "2.0")
    from gi.repository import Gio

    return Gio


class GioPreferenceStore:
    """PreferenceStore over a Gio.Settings instance."""

    def __init__(self, settings):
        self._settings = settings

    def get_bool(self, key: str) -> bool:
        return self._settings.get_boolean(key)

    def set_bool(self, key: str, value: bool) -> None:
        self._settings.set_boolean(key, value)

    def on_change(self, key: str, callback: Callable[[], None]) -> Subscription:
        # Gio passes (settings, key); listeners take no arguments
        def _on_changed(_settings, _key):
            callback()

        handler_id = self._settings.connect(f"changed::{key}", _on_changed)
        return Subscription(key, lambda: self._settings.disconnect(handler_id))


class GioSchemaRegistry:
    """Looks up schemas through Gio.SettingsSchemaSource."""

    def open_from_directory(self, directory: Path, schema_id: str) -> GioPreferenceStore | None:
        Gio = _gio()
        source = Gio.SettingsSchemaSource.new_from_directory(
            str(directory), Gio.SettingsSchemaSource.get_default(), False
        )
        schema = source.lookup(schema_id, False)
        if schema is None:
            logger.warning("Schema %s missing from %s", schema_id, directory)
            return None
        return GioPreferenceStore(Gio.Settings.new_full(schema, None, None))

    def open_installed(self, schema_id: str) -> GioPreferenceStore | None:
        Gio = _gio()
        source = Gio.SettingsSchemaSource.get_default()
        schema = source.lookup(schema_id, True) if source is not None else None
        if schema is None:
            return None
        return GioPreferenceStore(Gio.Settings.new_full(schema, None, None))
