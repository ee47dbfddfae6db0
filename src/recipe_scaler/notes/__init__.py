"""Adapters between the recipe transformation and the notes it edits."""

from .store import (
    FileNoteStore,
    InMemoryNoteStore,
    NoteStore,
    NoteStoreError,
    scale_note,
)

__all__ = [
    "NoteStore",
    "NoteStoreError",
    "InMemoryNoteStore",
    "FileNoteStore",
    "scale_note",
]
