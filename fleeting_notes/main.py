from __future__ import annotations

import argparse
from pathlib import Path

from PySide6.QtWidgets import QApplication

from fleeting_notes.app_settings import PluginSettings, open_settings
from fleeting_notes.logging_setup import SESSION_ID, install_exception_hooks, setup_logging
from fleeting_notes.qt_utils import screen_has_color
from fleeting_notes.settings import APP_NAME, NOTES_DIR
from fleeting_notes.ui.editor_window import EditorWindow
from fleeting_notes.vault.notes import NoteManager
from fleeting_notes.vault.storage import NoteStorage


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog=APP_NAME, description="Quick capture of timestamped Markdown notes")
    p.add_argument(
        "--notes-dir",
        type=Path,
        default=None,
        help="Folder for notes (default: last used, else ~/.fleeting-notes/notes)",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    log = setup_logging()
    install_exception_hooks(log)

    app = QApplication([])
    app.setApplicationName(APP_NAME)

    prefs = PluginSettings(open_settings(), has_color_screen=screen_has_color)
    notes_dir = args.notes_dir or prefs.get_notes_dir() or NOTES_DIR
    notes_dir.parent.mkdir(parents=True, exist_ok=True)

    manager = NoteManager(NoteStorage(notes_dir))
    if not manager.ensure_notes_dir():
        log.error("Notes folder unavailable: %s", notes_dir)
    else:
        prefs.set_notes_dir(notes_dir)

    win = EditorWindow(manager, prefs)
    win.resize(640, 480)
    win.show()
    log.info("Application started, notes_dir=%s, SID=%s", notes_dir, SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
