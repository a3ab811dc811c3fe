from __future__ import annotations

import logging
import time

from fleeting_notes.core.filenames import parse_created_at
from fleeting_notes.core.models import Note
from fleeting_notes.settings import APP_NAME
from fleeting_notes.vault.storage import NoteStorage

log = logging.getLogger(APP_NAME)


class NoteManager:
    """Note-level CRUD on top of NoteStorage: validation and metadata."""

    def __init__(self, storage: NoteStorage):
        self.storage = storage

    # --- directory passthrough ---

    def set_notes_dir(self, path) -> bool:
        return self.storage.set_notes_dir(path)

    def get_notes_dir(self):
        return self.storage.get_notes_dir()

    def ensure_notes_dir(self, path=None) -> bool:
        return self.storage.ensure_notes_dir(path)

    # --- validation ---

    @staticmethod
    def validate_content(content: str | None) -> bool:
        """Non-empty after stripping whitespace."""
        if not isinstance(content, str):
            return False
        return bool(content.strip())

    # --- CRUD ---

    def create_note(self, content: str | None, timestamp: float | None = None) -> Note | None:
        if not self.validate_content(content):
            return None

        created_at = int(time.time() if timestamp is None else timestamp)
        filename = self.storage.generate_filename(created_at)

        if not self.storage.save_note(filename, content):
            return None

        log.info("Created note %s", filename)
        return Note(filename=filename, content=content, created_at=created_at, updated_at=created_at)

    def update_note(self, filename: str, content: str | None) -> bool:
        if not filename:
            return False
        if not self.validate_content(content):
            return False
        if not self.storage.exists(filename):
            log.warning("Update skipped, note not found: %s", filename)
            return False
        return self.storage.save_note(filename, content)

    def delete_note(self, filename: str) -> bool:
        if not filename:
            return False
        if not self.storage.exists(filename):
            return False
        return self.storage.delete_note(filename)

    def note_exists(self, filename: str) -> bool:
        return bool(filename) and self.storage.exists(filename)

    def get_note(self, filename: str) -> Note | None:
        if not filename:
            return None
        content = self.storage.load_note(filename)
        if content is None:
            return None
        return self._to_note(filename, content)

    def get_all_notes(self) -> list[Note]:
        notes: list[Note] = []
        for filename in self.storage.list_notes():
            content = self.storage.load_note(filename)
            if content is not None:
                notes.append(self._to_note(filename, content))
        return notes

    @staticmethod
    def _to_note(filename: str, content: str) -> Note:
        created_at = parse_created_at(filename)
        return Note(filename=filename, content=content, created_at=created_at, updated_at=created_at)
