import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from pathlib import Path

from fleeting_notes.app_settings import PluginSettings, SettingsKeys, open_settings


def _prefs(tmp_path, color_screen=False):
    return PluginSettings(open_settings(tmp_path / "test.ini"), has_color_screen=lambda: color_screen)


def test_defaults_to_auto_detect(tmp_path):
    prefs = _prefs(tmp_path, color_screen=True)
    assert prefs.get_use_color_ui() is None
    assert prefs.should_use_color() is True
    assert _prefs(tmp_path / "other", color_screen=False).should_use_color() is False


def test_forced_values_override_screen(tmp_path):
    prefs = _prefs(tmp_path, color_screen=True)
    prefs.set_use_color_ui(False)
    assert prefs.get_use_color_ui() is False
    assert prefs.should_use_color() is False

    prefs.set_use_color_ui(True)
    assert prefs.should_use_color() is True


def test_value_persists_across_instances(tmp_path):
    _prefs(tmp_path).set_use_color_ui(True)
    assert _prefs(tmp_path).get_use_color_ui() is True


def test_reset_and_get_all(tmp_path):
    prefs = _prefs(tmp_path)
    prefs.set_use_color_ui(True)
    assert prefs.get_all() == {"use_color_ui": True}

    prefs.reset()
    assert prefs.get_all() == {"use_color_ui": None}


def test_none_returns_to_auto(tmp_path):
    prefs = _prefs(tmp_path)
    prefs.set_use_color_ui(False)
    prefs.set_use_color_ui(None)
    assert prefs.get_use_color_ui() is None


def test_garbage_value_reads_as_auto(tmp_path):
    settings = open_settings(tmp_path / "test.ini")
    settings.setValue(SettingsKeys.USE_COLOR_UI, "maybe")
    assert PluginSettings(settings).get_use_color_ui() is None


def test_detection_failure_means_no_color(tmp_path):
    def broken():
        raise RuntimeError("no screen")

    prefs = PluginSettings(open_settings(tmp_path / "test.ini"), has_color_screen=broken)
    assert prefs.should_use_color() is False


def test_notes_dir(tmp_path):
    prefs = _prefs(tmp_path)
    assert prefs.get_notes_dir() is None
    prefs.set_notes_dir(tmp_path / "notes")
    assert prefs.get_notes_dir() == Path(tmp_path / "notes")
