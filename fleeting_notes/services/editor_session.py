from __future__ import annotations

import logging

from fleeting_notes.core.markdown_format import (
    PREFIX_KINDS,
    apply_prefix_to_line,
    apply_to_range,
    clamp_range,
    coerce_kind,
    insert_link,
)
from fleeting_notes.core.models import Note
from fleeting_notes.settings import APP_NAME
from fleeting_notes.vault.notes import NoteManager

log = logging.getLogger(APP_NAME)


class EditorSession:
    """
    Buffer + bookkeeping for one editing session, independent of any widget.

    The first save of meaningful content creates a timestamped note; every
    later save overwrites that same file. Empty or whitespace-only buffers
    are never written.
    """

    def __init__(self, manager: NoteManager, content: str = ""):
        self.manager = manager
        self.content = content or ""
        self.cursor = len(self.content)
        self.filename: str | None = None
        self._created_here = False
        self._last_saved_text = ""

    @property
    def is_dirty(self) -> bool:
        return self.content != self._last_saved_text

    def set_content(self, text: str | None, cursor: int | None = None) -> None:
        self.content = text or ""
        self.cursor = len(self.content) if cursor is None else min(max(cursor, 0), len(self.content))

    def load(self, note: Note) -> None:
        """Continue editing an existing note; later saves overwrite it."""
        self.filename = note.filename
        self._created_here = False
        self._last_saved_text = note.content
        self.set_content(note.content)

    # --- persistence ---

    def autosave(self) -> bool:
        """Save if there is something worth saving. Returns True if written."""
        if not self.manager.validate_content(self.content):
            return False
        if self.filename is not None and not self.is_dirty:
            return False
        return self._persist() is not None

    def save(self) -> Note | None:
        if not self.manager.validate_content(self.content):
            return None
        if self.filename is not None and not self.is_dirty:
            note = self.manager.get_note(self.filename)
            if note is not None:
                return note
        return self._persist()

    def discard(self) -> bool:
        """Drop the buffer and delete the note this session created, if any."""
        deleted = False
        if self.filename is not None and self._created_here:
            deleted = self.manager.delete_note(self.filename)
            log.info("Discarded note %s (deleted=%s)", self.filename, deleted)
        self.filename = None
        self._created_here = False
        self._last_saved_text = ""
        self.set_content("")
        return deleted

    def _persist(self) -> Note | None:
        if self.filename is not None and not self.manager.note_exists(self.filename):
            log.warning("Note %s vanished from disk, saving as a new note", self.filename)
            self.filename = None

        if self.filename is None:
            note = self.manager.create_note(self.content)
            if note is None:
                return None
            self.filename = note.filename
            self._created_here = True
        else:
            if not self.manager.update_note(self.filename, self.content):
                return None
            note = self.manager.get_note(self.filename)

        self._last_saved_text = self.content
        return note

    # --- formatting ---

    def apply_format(
        self,
        kind,
        start: int | None = None,
        end: int | None = None,
        *,
        level: int | None = 1,
        ordered: bool = False,
    ) -> tuple[int, int]:
        """
        Inline kinds toggle [start, end), or the whole buffer when nothing
        is selected. Heading/list kinds prefix the line holding `start`
        (or the cursor). Returns the resulting selection.
        """
        kind = coerce_kind(kind)

        if kind in PREFIX_KINDS:
            position = self.cursor if start is None else start
            self.content, self.cursor = apply_prefix_to_line(
                self.content, kind, position, level=level, ordered=ordered
            )
            return self.cursor, self.cursor

        start, end = clamp_range(len(self.content), start, end)
        if kind is None:
            return start, end
        if start == end:
            start, end = 0, len(self.content)

        old_len = len(self.content)
        self.content = apply_to_range(self.content, kind, start, end)
        end += len(self.content) - old_len
        self.cursor = end
        return start, end

    def insert_link(self, text: str | None = "link text", url: str | None = "url", position: int | None = None) -> int:
        link = insert_link(text, url)
        position = self.cursor if position is None else min(max(position, 0), len(self.content))
        before, after = self.content[:position], self.content[position:]
        if before and not before[-1].isspace():
            link = " " + link
        self.content = before + link + after
        self.cursor = position + len(link)
        return self.cursor
