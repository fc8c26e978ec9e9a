"""Configuration for dnd-switch"""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Minimal configuration"""

    # Paths
    BASE_DIR = Path(__file__).parent
    SCHEMA_DIR = Path(os.getenv("DND_SCHEMA_DIR", str(BASE_DIR / "schemas")))

    # Extension schema, looked up in SCHEMA_DIR first, then system-wide
    SCHEMA_ID = os.getenv("DND_SCHEMA_ID", "org.gnome.shell.extensions.kylecorry31-do-not-disturb")

    # Debug logging for dnd_switch (stderr handler added if the host set none)
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"


config = Config()
