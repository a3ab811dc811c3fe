from .filenames import format_timestamp, is_note_filename, numbered_filename, parse_created_at
from .markdown_format import FormatKind, apply_prefix_to_line, apply_to_range, toggle, wrap
from .models import Note

__all__ = ["format_timestamp",
           "is_note_filename",
           "numbered_filename",
           "parse_created_at",
           "FormatKind",
           "apply_prefix_to_line",
           "apply_to_range",
           "toggle",
           "wrap",
           "Note",
           ]
