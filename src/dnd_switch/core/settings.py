"""Settings facade over the notification and extension preference scopes.

Do not disturb is not stored directly: GNOME keeps the inverse flag
``show-banners`` in ``org.gnome.desktop.notifications``. The conversion
happens only in the two functions below.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from .errors import SchemaNotFoundError
from .ports import PreferenceStore, SchemaRegistry
from .schema import resolve_local_store
from .subscription import Subscription, SubscriptionGroup

logger = logging.getLogger(__name__)

NOTIFICATIONS_SCHEMA_ID = "org.gnome.desktop.notifications"
SHOW_BANNERS_KEY = "show-banners"
SHOW_ICON_KEY = "show-icon"


def do_not_disturb_from_show_banners(show_banners: bool) -> bool:
    """Do not disturb is active exactly when banners are hidden."""
    return not show_banners


def show_banners_from_do_not_disturb(enabled: bool) -> bool:
    """Inverse of do_not_disturb_from_show_banners."""
    return not enabled


class SettingsFacade:
    """Handles all interactions with the extension's settings.

    The local (extension) store is owned by the facade; the shared
    notifications store belongs to the desktop and is only borrowed.
    """

    def __init__(self, local: PreferenceStore, shared: PreferenceStore):
        self._local = local
        self._shared = shared
        self._subscriptions = SubscriptionGroup()

    @classmethod
    def open(
        cls, registry: SchemaRegistry, schema_id: str, schema_dir: Path | str
    ) -> "SettingsFacade":
        """Resolve the extension schema and open the notifications scope.

        Raises:
            SchemaNotFoundError: If the extension schema cannot be resolved.
        """
        local = resolve_local_store(registry, schema_id, schema_dir)
        shared = registry.open_installed(NOTIFICATIONS_SCHEMA_ID)
        if shared is None:
            raise SchemaNotFoundError(NOTIFICATIONS_SCHEMA_ID)
        return cls(local, shared)

    def set_do_not_disturb(self, enabled: bool) -> None:
        """Enable or disable do not disturb mode."""
        logger.debug("Setting do not disturb to %s", enabled)
        self._shared.set_bool(SHOW_BANNERS_KEY, show_banners_from_do_not_disturb(enabled))

    def is_do_not_disturb(self) -> bool:
        return do_not_disturb_from_show_banners(self._shared.get_bool(SHOW_BANNERS_KEY))

    def on_do_not_disturb_changed(self, callback: Callable[[], None]) -> Subscription:
        """Call callback whenever the do not disturb setting is written."""
        return self._subscriptions.add(self._shared.on_change(SHOW_BANNERS_KEY, callback))

    def set_show_icon(self, show: bool) -> None:
        """Show or hide the panel icon while do not disturb is enabled."""
        logger.debug("Setting show icon to %s", show)
        self._local.set_bool(SHOW_ICON_KEY, show)

    def should_show_icon(self) -> bool:
        return self._local.get_bool(SHOW_ICON_KEY)

    def on_show_icon_changed(self, callback: Callable[[], None]) -> Subscription:
        """Call callback whenever the show icon setting is written."""
        return self._subscriptions.add(self._local.on_change(SHOW_ICON_KEY, callback))

    def close(self) -> None:
        """Disconnect every listener registered through this facade."""
        self._subscriptions.cancel_all()

    def __enter__(self) -> "SettingsFacade":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False
