"""Resolution of the extension-local schema."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import SchemaNotFoundError
from .ports import PreferenceStore, SchemaRegistry

logger = logging.getLogger(__name__)

COMPILED_SCHEMAS_FILE = "gschemas.compiled"


def resolve_local_store(
    registry: SchemaRegistry, schema_id: str, schema_dir: Path | str
) -> PreferenceStore:
    """Open the extension schema, preferring a locally compiled bundle.

    Args:
        registry: Schema lookup backend.
        schema_id: Identifier of the extension schema.
        schema_dir: Directory that may contain gschemas.compiled.

    Returns:
        PreferenceStore for the extension schema.

    Raises:
        SchemaNotFoundError: If neither the local bundle nor the system-wide
            schemas provide schema_id.
    """
    schema_dir = Path(schema_dir)

    # Extension installed in the user's data directory
    if (schema_dir / COMPILED_SCHEMAS_FILE).exists():
        logger.debug("Loading schema %s from %s", schema_id, schema_dir)
        store = registry.open_from_directory(schema_dir, schema_id)
        if store is None:
            raise SchemaNotFoundError(schema_id)
        return store

    # Extension installed system-wide
    logger.debug("No compiled schemas in %s, using installed schema %s", schema_dir, schema_id)
    store = registry.open_installed(schema_id)
    if store is None:
        raise SchemaNotFoundError(schema_id)
    return store
