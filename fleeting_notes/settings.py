from __future__ import annotations
from pathlib import Path

APP_NAME = "fleeting-notes"
DATA_DIR = Path.home() / f".{APP_NAME}"
LOG_DIR = DATA_DIR / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"
NOTES_DIR = DATA_DIR / "notes"
SETTINGS_PATH = DATA_DIR / f"{APP_NAME}.ini"

AUTOSAVE_DEBOUNCE_MS = 600
