"""Core ports (interfaces) for dnd-switch.

These protocols define the boundaries between the settings facade and the
host preference-storage library. They are intentionally small so the
facade can run against GSettings or an in-memory fake.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from .subscription import Subscription


@runtime_checkable
class PreferenceStore(Protocol):
    """A single scope of named boolean preferences."""

    def get_bool(self, key: str) -> bool:
        """Read a boolean key."""

    def set_bool(self, key: str, value: bool) -> None:
        """Write a boolean key; listeners on the key are notified."""

    def on_change(self, key: str, callback: Callable[[], None]) -> "Subscription":
        """Run callback on every write to key until the subscription is cancelled."""


@runtime_checkable
class SchemaRegistry(Protocol):
    """Opens preference stores by schema id."""

    def open_from_directory(self, directory: Path, schema_id: str) -> PreferenceStore | None:
        """Open a schema from a directory holding gschemas.compiled."""

    def open_installed(self, schema_id: str) -> PreferenceStore | None:
        """Open a schema installed system-wide."""
