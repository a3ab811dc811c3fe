from .notes import NoteManager
from .storage import NoteStorage

__all__ = ["NoteManager", "NoteStorage"]
