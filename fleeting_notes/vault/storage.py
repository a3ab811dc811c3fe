from __future__ import annotations

import logging
import os
from pathlib import Path

from fleeting_notes.core.filenames import NOTE_EXT, format_timestamp, numbered_filename
from fleeting_notes.settings import APP_NAME

log = logging.getLogger(APP_NAME)


def _is_valid_filename(filename) -> bool:
    if not isinstance(filename, str) or not filename:
        return False
    if filename in (".", ".."):
        return False
    return "/" not in filename and "\\" not in filename


class NoteStorage:
    """
    Flat directory of timestamp-named .md files.

    Every operation reports failure through its return value (False / None);
    filesystem errors are logged, never raised.
    """

    def __init__(self, notes_dir: str | os.PathLike):
        self._notes_dir = Path(notes_dir)

    def __repr__(self) -> str:
        return f"NoteStorage({str(self._notes_dir)!r})"

    # --- directory ---

    def set_notes_dir(self, path) -> bool:
        if not isinstance(path, (str, os.PathLike)) or not os.fspath(path):
            log.warning("Rejected notes directory: %r", path)
            return False
        self._notes_dir = Path(path)
        return self.ensure_notes_dir()

    def get_notes_dir(self) -> Path:
        return self._notes_dir

    def ensure_notes_dir(self, path: str | os.PathLike | None = None) -> bool:
        """Create the directory (one level, parents must exist). Idempotent."""
        target = Path(path) if path else self._notes_dir
        if target.is_dir():
            return True
        try:
            target.mkdir()
        except OSError as e:
            log.warning("Cannot create notes directory %s: %s", target, e)
            return False
        log.info("Created notes directory %s", target)
        return True

    def note_path(self, filename: str) -> Path:
        return self._notes_dir / filename

    # --- naming ---

    def generate_filename(self, timestamp: float | None = None) -> str:
        """
        YYYY-MM-DD-HH-MM-SS.md for timestamp (default now). If that name is
        taken on disk, -1, -2, ... is appended until a free one is found.
        Not safe against concurrent writers.
        """
        stem = format_timestamp(timestamp)
        counter = 0
        filename = numbered_filename(stem, counter)
        while self.note_path(filename).exists():
            counter += 1
            filename = numbered_filename(stem, counter)
        return filename

    # --- content ---

    def save_note(self, filename: str, content: str) -> bool:
        if not _is_valid_filename(filename):
            log.warning("Refusing to save note with invalid filename: %r", filename)
            return False

        self.ensure_notes_dir()
        path = self.note_path(filename)
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content or "")
        except OSError as e:
            log.warning("Failed to save note %s: %s", path, e)
            return False

        log.debug("Saved note %s (%d chars)", path, len(content or ""))
        return True

    def exists(self, filename: str) -> bool:
        """True when the note file is present, whether or not it decodes."""
        return _is_valid_filename(filename) and self.note_path(filename).is_file()

    def load_note(self, filename: str) -> str | None:
        if not _is_valid_filename(filename):
            return None

        path = self.note_path(filename)
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Failed to read note %s: %s", path, e)
            return None

    def list_notes(self) -> list[str]:
        """Visible .md files, ascending (which is chronological for stamp names)."""
        if not self._notes_dir.is_dir():
            return []
        try:
            names = [
                p.name
                for p in self._notes_dir.iterdir()
                if p.name.endswith(NOTE_EXT) and not p.name.startswith(".") and p.is_file()
            ]
        except OSError as e:
            log.warning("Failed to list notes in %s: %s", self._notes_dir, e)
            return []
        return sorted(names)

    def delete_note(self, filename: str) -> bool:
        if not _is_valid_filename(filename):
            return False

        path = self.note_path(filename)
        if not path.is_file():
            return False
        try:
            path.unlink()
        except OSError as e:
            log.warning("Failed to delete note %s: %s", path, e)
            return False

        log.info("Deleted note %s", path)
        return True
