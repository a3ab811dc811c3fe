from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QTimer
from PySide6.QtGui import QAction, QActionGroup, QTextCursor
from PySide6.QtWidgets import (
    QFileDialog, QHBoxLayout, QMainWindow, QPlainTextEdit, QPushButton,
    QToolBar, QVBoxLayout, QWidget,
)

from fleeting_notes.app_settings import PluginSettings
from fleeting_notes.core.markdown_format import FormatKind
from fleeting_notes.qt_utils import blocked_signals, py_to_qt, qt_to_py
from fleeting_notes.services.editor_session import EditorSession
from fleeting_notes.settings import APP_NAME, AUTOSAVE_DEBOUNCE_MS
from fleeting_notes.ui.notes_browser import NotesBrowser
from fleeting_notes.vault.notes import NoteManager

log = logging.getLogger(APP_NAME)

STATUS_TIMEOUT_MS = 2000

_COLOR_TOOLBAR_CSS = """
QToolBar { background: #fdf6e3; }
QToolButton { color: #1a5fb4; font-weight: bold; }
"""


class EditorWindow(QMainWindow):
    def __init__(self, manager: NoteManager, prefs: PluginSettings):
        super().__init__()
        self.setWindowTitle("Fleeting Note")
        self.manager = manager
        self.prefs = prefs
        self.session = EditorSession(manager)

        self.editor = QPlainTextEdit()
        self.editor.setPlaceholderText("Capture a thought…")

        self.toolbar = QToolBar("Markdown")
        self.addToolBar(self.toolbar)
        self._build_toolbar()

        self.save_button = QPushButton("Save")
        self.cancel_button = QPushButton("Cancel")
        self.save_button.clicked.connect(self.save_and_new)
        self.cancel_button.clicked.connect(self.discard)

        actions = QHBoxLayout()
        actions.addStretch(1)
        actions.addWidget(self.cancel_button)
        actions.addWidget(self.save_button)

        root = QWidget()
        layout = QVBoxLayout(root)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.addWidget(self.editor)
        layout.addLayout(actions)
        self.setCentralWidget(root)

        # Autosave debounce
        self.save_timer = QTimer(self)
        self.save_timer.setInterval(AUTOSAVE_DEBOUNCE_MS)
        self.save_timer.setSingleShot(True)
        self.save_timer.timeout.connect(self._autosave)

        self.editor.textChanged.connect(self._on_text_changed)

        self._build_menu()
        self.apply_color_mode()

    # --- construction ---

    def _build_toolbar(self) -> None:
        buttons = [
            ("**B**", "Bold", lambda: self.apply_format(FormatKind.BOLD)),
            ("*I*", "Italic", lambda: self.apply_format(FormatKind.ITALIC)),
            ("</>", "Code", lambda: self.apply_format(FormatKind.CODE)),
            ("H1", "Heading 1", lambda: self.apply_format(FormatKind.HEADING, level=1)),
            ("H2", "Heading 2", lambda: self.apply_format(FormatKind.HEADING, level=2)),
            ("H3", "Heading 3", lambda: self.apply_format(FormatKind.HEADING, level=3)),
            ("•-", "Bullet list", lambda: self.apply_format(FormatKind.LIST, ordered=False)),
            ("1.", "Numbered list", lambda: self.apply_format(FormatKind.LIST, ordered=True)),
            ("[L]", "Link", self.insert_link),
            ("[[ ]]", "Wiki link", lambda: self.apply_format(FormatKind.WIKI_LINK)),
        ]
        for text, tip, callback in buttons:
            act = QAction(text, self)
            act.setToolTip(tip)
            act.triggered.connect(callback)
            self.toolbar.addAction(act)

    def _build_menu(self) -> None:
        menubar = self.menuBar()
        filem = menubar.addMenu("File")

        act_save = QAction("Save", self)
        act_save.setShortcut("Ctrl+S")
        act_save.triggered.connect(self.save_and_new)

        act_notes = QAction("Notes…", self)
        act_notes.setShortcut("Ctrl+O")
        act_notes.triggered.connect(self.open_browser)

        act_dir = QAction("Notes folder…", self)
        act_dir.triggered.connect(self.choose_notes_dir)

        filem.addAction(act_save)
        filem.addAction(act_notes)
        filem.addSeparator()
        filem.addAction(act_dir)

        viewm = menubar.addMenu("View")
        colorm = viewm.addMenu("Color UI")
        group = QActionGroup(self)
        current = self.prefs.get_use_color_ui()
        for label, value in (("Auto", None), ("On", True), ("Off", False)):
            act = QAction(label, self, checkable=True)
            act.setChecked(current is value)
            act.triggered.connect(lambda _checked=False, v=value: self.set_color_mode(v))
            group.addAction(act)
            colorm.addAction(act)

    # --- color ---

    def set_color_mode(self, value: bool | None) -> None:
        self.prefs.set_use_color_ui(value)
        self.apply_color_mode()

    def apply_color_mode(self) -> None:
        use_color = self.prefs.should_use_color()
        self.toolbar.setStyleSheet(_COLOR_TOOLBAR_CSS if use_color else "")
        log.debug("Color UI: %s", use_color)

    # --- editing ---

    def _pull_editor(self) -> tuple[int, int]:
        """Copy the widget buffer into the session; returns the selection as str indices."""
        text = self.editor.toPlainText()
        cursor = self.editor.textCursor()
        self.session.set_content(text, qt_to_py(text, cursor.position()))
        return qt_to_py(text, cursor.selectionStart()), qt_to_py(text, cursor.selectionEnd())

    def _on_text_changed(self) -> None:
        self._pull_editor()
        self.save_timer.start()

    def _sync_editor(self, start: int, end: int) -> None:
        text = self.session.content
        with blocked_signals(self.editor):
            self.editor.setPlainText(text)
        cursor = self.editor.textCursor()
        cursor.setPosition(py_to_qt(text, start))
        cursor.setPosition(py_to_qt(text, end), QTextCursor.MoveMode.KeepAnchor)
        self.editor.setTextCursor(cursor)
        self.editor.setFocus()
        self.save_timer.start()

    def apply_format(self, kind: FormatKind, *, level: int = 1, ordered: bool = False) -> None:
        sel_start, sel_end = self._pull_editor()
        if sel_start == sel_end:
            sel_start = sel_end = self.session.cursor
        start, end = self.session.apply_format(kind, sel_start, sel_end, level=level, ordered=ordered)
        self._sync_editor(start, end)

    def insert_link(self) -> None:
        self._pull_editor()
        pos = self.session.insert_link()
        self._sync_editor(pos, pos)

    # --- persistence ---

    def _autosave(self) -> None:
        if self.session.autosave():
            self.statusBar().showMessage(f"Auto-saved {self.session.filename}", STATUS_TIMEOUT_MS)

    def _reset_editor(self) -> None:
        with blocked_signals(self.editor):
            self.editor.clear()

    def save_and_new(self) -> None:
        self.save_timer.stop()
        if not self.manager.validate_content(self.session.content):
            self.statusBar().showMessage("Cannot save empty note", STATUS_TIMEOUT_MS)
            return

        note = self.session.save()
        if note is None:
            self.statusBar().showMessage("Failed to save note", STATUS_TIMEOUT_MS)
            return

        log.info("Note saved: %s", note.filename)
        self.session = EditorSession(self.manager)
        self._reset_editor()
        self.statusBar().showMessage(f"Note saved: {note.filename}", STATUS_TIMEOUT_MS)

    def discard(self) -> None:
        self.save_timer.stop()
        self.session.discard()
        self._reset_editor()
        self.statusBar().showMessage("Note discarded", STATUS_TIMEOUT_MS)

    def open_note(self, filename: str) -> None:
        self.save_timer.stop()
        self.session.autosave()
        note = self.manager.get_note(filename)
        if note is None:
            self.statusBar().showMessage(f"Note not found: {filename}", STATUS_TIMEOUT_MS)
            return
        self.session = EditorSession(self.manager)
        self.session.load(note)
        with blocked_signals(self.editor):
            self.editor.setPlainText(note.content)

    def open_browser(self) -> None:
        self.save_timer.stop()
        self.session.autosave()
        dlg = NotesBrowser(
            self, manager=self.manager, use_color=self.prefs.should_use_color(), on_open=self.open_note
        )
        dlg.exec()

    def choose_notes_dir(self) -> None:
        path = QFileDialog.getExistingDirectory(self, "Choose notes folder", str(self.manager.get_notes_dir()))
        if not path:
            return
        self.save_timer.stop()
        self.session.autosave()
        if not self.manager.set_notes_dir(Path(path)):
            self.statusBar().showMessage("Cannot use that folder", STATUS_TIMEOUT_MS)
            return
        self.prefs.set_notes_dir(path)
        self.session = EditorSession(self.manager, self.editor.toPlainText())
        log.info("Notes folder changed: %s", path)

    def closeEvent(self, event):  # type: ignore[override]
        """Flush pending edits; the autosave timer may not have fired yet."""
        try:
            if self.save_timer.isActive():
                self.save_timer.stop()
            self.session.autosave()
        except Exception:
            log.exception("Failed to flush note on close")
        super().closeEvent(event)
