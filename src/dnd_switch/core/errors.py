"""Errors raised while opening the settings scopes."""

from __future__ import annotations


class SettingsError(RuntimeError):
    """Base class for dnd-switch settings errors."""


class SchemaNotFoundError(SettingsError):
    """The requested GSettings schema could not be found."""

    def __init__(self, schema_id: str):
        self.schema_id = schema_id
        super().__init__(f'Schema "{schema_id}" not found.')
