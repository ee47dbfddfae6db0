"""Note storage adapters for applying the recipe transformation in a host."""

import logging
import pathlib
from abc import ABC, abstractmethod
from typing import Union

from recipe_scaler.scaling import transform

logger = logging.getLogger(__name__)


class NoteStoreError(RuntimeError):
    """Raised when a note cannot be read from or written to its store."""


class NoteStore(ABC):
    """Abstract base class for wherever the host keeps the note text."""

    @abstractmethod
    def get_document_text(self) -> str:
        """Return the current note text."""
        pass

    @abstractmethod
    def set_document_text(self, text: str) -> None:
        """Replace the note text."""
        pass


class InMemoryNoteStore(NoteStore):
    """A note held in memory, e.g. the contents of an open editor buffer."""

    def __init__(self, text: str = ""):
        self.text = text

    def get_document_text(self) -> str:
        return self.text

    def set_document_text(self, text: str) -> None:
        self.text = text


class FileNoteStore(NoteStore):
    """A note stored as a plain text file.

    Newlines are read and written untranslated so CRLF notes keep their line
    separators.

    Attributes:
        path: Path to the note file
        encoding: Text encoding of the file
    """

    def __init__(self, path: Union[str, pathlib.Path], encoding: str = "utf-8"):
        self.path = pathlib.Path(path)
        self.encoding = encoding

    def get_document_text(self) -> str:
        try:
            with self.path.open("r", encoding=self.encoding, newline="") as f:
                return f.read()
        except OSError as e:
            logger.error(f"Failed to read note {self.path}: {e}")
            raise NoteStoreError(f"Cannot read note {self.path}") from e

    def set_document_text(self, text: str) -> None:
        try:
            with self.path.open("w", encoding=self.encoding, newline="") as f:
                f.write(text)
        except OSError as e:
            logger.error(f"Failed to write note {self.path}: {e}")
            raise NoteStoreError(f"Cannot write note {self.path}") from e


def scale_note(store: NoteStore) -> bool:
    """Scale the note held by `store` and write it back if anything changed.

    Args:
        store: Where the note text is read from and written to.

    Returns:
        True if the scaled note was written back, False if it was unchanged.

    Raises:
        NoteStoreError: If the store cannot be read or written.
    """
    text = store.get_document_text()
    scaled = transform(text)
    if scaled == text:
        logger.info("Note unchanged after scaling, nothing to write")
        return False

    store.set_document_text(scaled)
    logger.info("Note content updated with scaled recipe")
    return True
