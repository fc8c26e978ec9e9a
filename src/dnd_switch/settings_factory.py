"""Settings facade factory for dnd-switch.

Usage:
    # Facade over GSettings using DND_SCHEMA_ID / DND_SCHEMA_DIR
    settings = create_settings_facade()
    settings.set_do_not_disturb(True)

    # Facade over a custom registry (e.g. in-memory for tests)
    settings = create_settings_facade(registry=InMemorySchemaRegistry(...))
"""

from __future__ import annotations

import logging

from .adapters.config_env import load_app_config
from .core.config_model import AppConfig
from .core.ports import SchemaRegistry
from .core.settings import SettingsFacade


def _enable_debug_logging() -> None:
    """Print dnd_switch debug records unless the host already handles them."""
    logger = logging.getLogger("dnd_switch")
    logger.setLevel(logging.DEBUG)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)


def create_settings_facade(
    app_config: AppConfig | None = None, registry: SchemaRegistry | None = None
) -> SettingsFacade:
    """Build a SettingsFacade from configuration.

    Args:
        app_config: Structured configuration; loaded from the environment if None
        registry: Schema lookup backend; GSettings if None

    Returns:
        SettingsFacade over the resolved stores

    Raises:
        SchemaNotFoundError: If the extension schema cannot be resolved
    """
    if app_config is None:
        app_config = load_app_config()

    if app_config.debug:
        _enable_debug_logging()

    if registry is None:
        from .adapters.gio_settings import GioSchemaRegistry

        registry = GioSchemaRegistry()

    return SettingsFacade.open(registry, app_config.schema_id, app_config.schema_dir)
