"""dnd-switch - Do not disturb settings for the GNOME Shell extension"""

__version__ = "1.0.0"
__description__ = "Do not disturb settings for the GNOME Shell extension"

__all__ = ["SettingsFacade", "SchemaNotFoundError", "create_settings_facade", "__version__"]


def __getattr__(name: str):
    """Lazy import so importing the package does not read the .env file.

    settings_factory pulls in dnd_switch.config, which calls load_dotenv()
    at import time; plain modules like dnd_switch.core.settings stay usable
    without touching the environment.
    """
    if name == "SettingsFacade":
        from .core.settings import SettingsFacade

        return SettingsFacade
    if name == "SchemaNotFoundError":
        from .core.errors import SchemaNotFoundError

        return SchemaNotFoundError
    if name == "create_settings_facade":
        from .settings_factory import create_settings_facade

        return create_settings_facade
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
