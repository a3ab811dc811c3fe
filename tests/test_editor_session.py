import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from fleeting_notes.core.markdown_format import FormatKind
from fleeting_notes.services.editor_session import EditorSession
from fleeting_notes.vault.notes import NoteManager
from fleeting_notes.vault.storage import NoteStorage


@pytest.fixture
def manager(tmp_path):
    return NoteManager(NoteStorage(tmp_path))


def test_autosave_skips_empty_content(manager):
    session = EditorSession(manager)
    session.set_content("   \n")
    assert not session.autosave()
    assert session.filename is None
    assert manager.storage.list_notes() == []


def test_first_autosave_creates_note_then_overwrites(manager):
    session = EditorSession(manager)
    session.set_content("h")
    assert session.autosave()
    filename = session.filename
    assert filename is not None

    session.set_content("hello")
    assert session.autosave()
    assert session.filename == filename
    assert manager.storage.list_notes() == [filename]
    assert manager.storage.load_note(filename) == "hello"


def test_autosave_skips_unchanged(manager):
    session = EditorSession(manager, "note")
    assert session.autosave()
    assert not session.is_dirty
    assert not session.autosave()


def test_autosave_recreates_vanished_note(manager):
    session = EditorSession(manager, "note")
    session.autosave()
    manager.storage.delete_note(session.filename)

    session.set_content("note again")
    assert session.autosave()
    assert manager.get_note(session.filename).content == "note again"


def test_save_returns_note(manager):
    session = EditorSession(manager, "# Idea")
    note = session.save()
    assert note.content == "# Idea"
    assert note.filename == session.filename
    assert session.save() == manager.get_note(session.filename)


def test_save_empty_returns_none(manager):
    assert EditorSession(manager, "").save() is None


def test_discard_deletes_autosaved_note(manager):
    session = EditorSession(manager, "temp")
    session.autosave()
    assert session.discard()
    assert manager.storage.list_notes() == []
    assert session.content == ""
    assert session.filename is None


def test_discard_keeps_loaded_note(manager):
    note = manager.create_note("keep me")
    session = EditorSession(manager)
    session.load(note)
    session.set_content("keep me, edited")

    assert not session.discard()
    assert manager.get_note(note.filename).content == "keep me"


def test_loaded_note_is_overwritten(manager):
    note = manager.create_note("v1")
    session = EditorSession(manager)
    session.load(note)
    assert not session.is_dirty

    session.set_content("v2")
    assert session.autosave()
    assert session.filename == note.filename
    assert manager.storage.list_notes() == [note.filename]


def test_apply_format_selection(manager):
    session = EditorSession(manager, "hello world")
    assert session.apply_format(FormatKind.BOLD, 0, 5) == (0, 9)
    assert session.content == "**hello** world"

    assert session.apply_format("bold", 0, 9) == (0, 5)
    assert session.content == "hello world"


def test_apply_format_without_selection_uses_whole_text(manager):
    session = EditorSession(manager, "hello world")
    session.apply_format("italic", 3, 3)
    assert session.content == "*hello world*"


def test_apply_heading_to_cursor_line(manager):
    session = EditorSession(manager, "first\nsecond")
    session.apply_format("heading", 8, level=2)
    assert session.content == "first\n## second"
    assert session.cursor == 11


def test_apply_list_uses_cursor(manager):
    session = EditorSession(manager, "a\nb")
    session.cursor = 0
    session.apply_format("list", ordered=True)
    assert session.content == "1. a\nb"


def test_apply_unknown_kind(manager):
    session = EditorSession(manager, "text")
    assert session.apply_format("nope", 0, 2) == (0, 2)
    assert session.content == "text"


def test_insert_link(manager):
    session = EditorSession(manager, "see")
    pos = session.insert_link()
    assert session.content == "see [link text](url)"
    assert pos == len(session.content)

    session.set_content("", 0)
    session.insert_link("Docs", "https://example.com")
    assert session.content == "[Docs](https://example.com)"
