import sys
import os
from datetime import datetime

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fleeting_notes.core.filenames import (
    format_timestamp,
    is_note_filename,
    numbered_filename,
    parse_created_at,
)


def _local_ts(*fields):
    return int(datetime(*fields).timestamp())


def test_format_timestamp_local_time():
    assert format_timestamp(_local_ts(2026, 1, 14, 16, 56, 30)) == "2026-01-14-16-56-30"


def test_format_timestamp_defaults_to_now():
    assert is_note_filename(format_timestamp() + ".md")


def test_numbered_filename():
    assert numbered_filename("2026-01-14-16-56-30") == "2026-01-14-16-56-30.md"
    assert numbered_filename("2026-01-14-16-56-30", 3) == "2026-01-14-16-56-30-3.md"


def test_is_note_filename():
    assert is_note_filename("2026-01-14-16-56-30.md")
    assert is_note_filename("2026-01-14-16-56-30-12.md")
    assert not is_note_filename("notes.md")
    assert not is_note_filename("2026-01-14-16-56-30.txt")
    assert not is_note_filename("")
    assert not is_note_filename(None)


def test_parse_created_at_round_trip():
    ts = _local_ts(2026, 1, 14, 10, 0, 0)
    assert parse_created_at("2026-01-14-10-00-00.md") == ts
    assert parse_created_at("2026-01-14-10-00-00-2.md") == ts


def test_parse_created_at_rejects_non_matching():
    assert parse_created_at("shopping.md") is None
    assert parse_created_at("") is None
    assert parse_created_at(None) is None


def test_parse_created_at_rejects_impossible_date():
    assert parse_created_at("2026-13-40-10-00-00.md") is None
