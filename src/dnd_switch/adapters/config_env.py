"""Env configuration adapter producing a structured AppConfig."""

from __future__ import annotations

from ..config import config as env_config
from ..core.config_model import AppConfig


def load_app_config() -> AppConfig:
    return AppConfig(
        schema_id=env_config.SCHEMA_ID,
        schema_dir=env_config.SCHEMA_DIR,
        debug=env_config.DEBUG,
    )
