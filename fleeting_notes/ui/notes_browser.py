from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from PySide6.QtWidgets import (
    QDialog, QHBoxLayout, QLabel, QListWidget, QMessageBox, QPushButton,
    QSplitter, QTextBrowser, QVBoxLayout, QWidget,
)

from fleeting_notes.core.wikilinks import extract_wikilink_targets
from fleeting_notes.services.markdown_renderer import MarkdownRenderer
from fleeting_notes.settings import APP_NAME
from fleeting_notes.vault.notes import NoteManager

log = logging.getLogger(APP_NAME)


class NotesBrowser(QDialog):
    """Triage view: list, preview, delete or reopen saved notes."""

    def __init__(self, parent, *, manager: NoteManager, use_color: bool, on_open: Callable[[str], None]):
        super().__init__(parent)
        self.setWindowTitle("Fleeting Notes")
        self.setModal(True)
        self.resize(720, 480)

        self.manager = manager
        self.on_open = on_open
        self.renderer = MarkdownRenderer(use_color=use_color)

        self.listw = QListWidget()
        self.preview = QTextBrowser()
        self.preview.setOpenLinks(False)
        self.meta = QLabel()

        self.open_button = QPushButton("Open")
        self.delete_button = QPushButton("Delete")
        self.open_button.clicked.connect(self._open_current)
        self.delete_button.clicked.connect(self._delete_current)

        right = QVBoxLayout()
        right.addWidget(self.meta)
        right.addWidget(self.preview)
        buttons = QHBoxLayout()
        buttons.addStretch(1)
        buttons.addWidget(self.delete_button)
        buttons.addWidget(self.open_button)
        right.addLayout(buttons)

        splitter = QSplitter()
        splitter.addWidget(self.listw)
        holder = QWidget()
        holder.setLayout(right)
        splitter.addWidget(holder)
        splitter.setStretchFactor(1, 3)

        layout = QVBoxLayout(self)
        layout.addWidget(splitter)

        self.listw.currentTextChanged.connect(self._show)
        self.listw.itemActivated.connect(lambda _it: self._open_current())
        self._reload()

    def _reload(self) -> None:
        self.listw.clear()
        # newest first
        for filename in reversed(self.manager.storage.list_notes()):
            self.listw.addItem(filename)
        if self.listw.count():
            self.listw.setCurrentRow(0)
        else:
            self._show("")

    def _show(self, filename: str) -> None:
        note = self.manager.get_note(filename) if filename else None
        if note is None:
            self.preview.clear()
            self.meta.clear()
            return

        parts = []
        if note.created_at is not None:
            parts.append(datetime.fromtimestamp(note.created_at).strftime("%Y-%m-%d %H:%M:%S"))
        links = sorted(extract_wikilink_targets(note.content))
        if links:
            parts.append("links: " + ", ".join(links))
        self.meta.setText(" · ".join(parts))
        self.preview.setHtml(self.renderer.render_page(note.content))

    def _current(self) -> str | None:
        item = self.listw.currentItem()
        return item.text() if item else None

    def _open_current(self) -> None:
        filename = self._current()
        if not filename:
            return
        self.on_open(filename)
        self.accept()

    def _delete_current(self) -> None:
        filename = self._current()
        if not filename:
            return
        answer = QMessageBox.question(self, "Delete note", f"Delete {filename}?")
        if answer != QMessageBox.StandardButton.Yes:
            return
        if not self.manager.delete_note(filename):
            QMessageBox.warning(self, "Delete note", f"Could not delete {filename}")
            return
        log.info("Deleted from browser: %s", filename)
        self._reload()
