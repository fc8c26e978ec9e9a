"""In-memory preference store and schema registry (tests/headless)."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from ..core.subscription import Subscription


class InMemoryPreferenceStore:
    """Boolean key-value scope that notifies listeners on every write.

    ``defaults`` plays the role of the schema: every key read must be
    declared there, and reading an undeclared key raises KeyError.
    """

    def __init__(self, defaults: dict[str, bool] | None = None):
        self._values: dict[str, bool] = dict(defaults or {})
        self._listeners: dict[str, list[Callable[[], None]]] = {}

    def get_bool(self, key: str) -> bool:
        return self._values[key]

    def set_bool(self, key: str, value: bool) -> None:
        self._values[key] = bool(value)
        # Copy so listeners may cancel themselves while being notified
        for callback in list(self._listeners.get(key, ())):
            callback()

    def on_change(self, key: str, callback: Callable[[], None]) -> Subscription:
        self._listeners.setdefault(key, []).append(callback)
        return Subscription(key, lambda: self._remove_listener(key, callback))

    def listener_count(self, key: str) -> int:
        return len(self._listeners.get(key, ()))

    def _remove_listener(self, key: str, callback: Callable[[], None]) -> None:
        listeners = self._listeners.get(key, [])
        if callback in listeners:
            listeners.remove(callback)


class InMemorySchemaRegistry:
    """Serves in-memory stores for directory and system-wide lookups.

    Every lookup is recorded in ``lookups`` as ``("directory", path, id)`` or
    ``("installed", id)``.
    """

    def __init__(
        self,
        installed: dict[str, InMemoryPreferenceStore] | None = None,
        directories: dict[Path, dict[str, InMemoryPreferenceStore]] | None = None,
    ):
        self._installed = dict(installed or {})
        self._directories = {Path(d): dict(s) for d, s in (directories or {}).items()}
        self.lookups: list[tuple] = []

    def open_from_directory(self, directory: Path, schema_id: str) -> InMemoryPreferenceStore | None:
        directory = Path(directory)
        self.lookups.append(("directory", directory, schema_id))
        return self._directories.get(directory, {}).get(schema_id)

    def open_installed(self, schema_id: str) -> InMemoryPreferenceStore | None:
        self.lookups.append(("installed", schema_id))
        return self._installed.get(schema_id)
