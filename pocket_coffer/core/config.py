"""
Configuration for the vault persistence core.
Values come from the environment (optionally a .env file); accessors re-read
the environment so the data directory can be redirected at runtime.
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

APP_IDENTIFIER = "com.pocketcoffer.app"
DEFAULT_DB_NAME = "pocket_coffer.db"

DEBUG = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8765"))

# Version string
VERSION = "0.1.0"


def debug_enabled():
    """Check if debug mode is enabled."""
    return os.getenv("DEBUG", "false").lower() == "true"


def _platform_data_root() -> Path:
    """Per-user application data root for the current platform."""
    if sys.platform.startswith("win"):
        appdata = os.getenv("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.getenv("XDG_DATA_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".local" / "share"


def get_data_dir() -> Path:
    """Application-private data directory (not created here)."""
    override = os.getenv("POCKET_COFFER_DATA_DIR")
    if override:
        return Path(override).expanduser()
    return _platform_data_root() / APP_IDENTIFIER


def get_db_name() -> str:
    return os.getenv("POCKET_COFFER_DB_NAME", DEFAULT_DB_NAME)


def get_db_path(data_dir=None) -> Path:
    """Full path of the database file inside the data directory."""
    base = Path(data_dir) if data_dir is not None else get_data_dir()
    return base / get_db_name()
