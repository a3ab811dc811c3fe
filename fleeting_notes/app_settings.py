from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from PySide6.QtCore import QSettings

from fleeting_notes.settings import APP_NAME, SETTINGS_PATH

log = logging.getLogger(APP_NAME)

_ON = "on"
_OFF = "off"


@dataclass(frozen=True)
class SettingsKeys:
    USE_COLOR_UI: str = "ui/use_color_ui"
    NOTES_DIR: str = "notes/dir"


def open_settings(path: Path = SETTINGS_PATH) -> QSettings:
    path.parent.mkdir(parents=True, exist_ok=True)
    return QSettings(str(path), QSettings.Format.IniFormat)


def get_str(settings: QSettings, key: str, default: str) -> str:
    try:
        val = settings.value(key, default)
        return str(val) if val is not None else default
    except Exception:
        return default


class PluginSettings:
    """
    Persisted preferences.

    use_color_ui is tri-state: True / False force colors on or off, None
    (key absent) means follow the screen.
    """

    def __init__(self, settings: QSettings, *, has_color_screen: Callable[[], bool] = lambda: False):
        self._settings = settings
        self._has_color_screen = has_color_screen

    def get_use_color_ui(self) -> bool | None:
        raw = get_str(self._settings, SettingsKeys.USE_COLOR_UI, "").strip().lower()
        if raw == _ON:
            return True
        if raw == _OFF:
            return False
        return None

    def set_use_color_ui(self, value: bool | None) -> None:
        if value is None:
            self._settings.remove(SettingsKeys.USE_COLOR_UI)
        else:
            self._settings.setValue(SettingsKeys.USE_COLOR_UI, _ON if value else _OFF)
        self._settings.sync()

    def should_use_color(self) -> bool:
        value = self.get_use_color_ui()
        if value is None:
            try:
                return bool(self._has_color_screen())
            except Exception:
                log.exception("Color screen detection failed")
                return False
        return value

    def get_notes_dir(self) -> Path | None:
        raw = get_str(self._settings, SettingsKeys.NOTES_DIR, "").strip()
        return Path(raw) if raw else None

    def set_notes_dir(self, path: Path | str) -> None:
        self._settings.setValue(SettingsKeys.NOTES_DIR, str(path))
        self._settings.sync()

    def reset(self) -> None:
        self._settings.remove(SettingsKeys.USE_COLOR_UI)
        self._settings.sync()

    def get_all(self) -> dict:
        return {"use_color_ui": self.get_use_color_ui()}
