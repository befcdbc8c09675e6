"""Whole-file text storage behind a small interface.

The store only ever reads a file in full, replaces it in full, or appends to
it. ``FileStorage`` does that on disk; ``MemoryStorage`` keeps the same
contract in a dict so callers can swap it in.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class Storage(ABC):
    @abstractmethod
    def read_text(self, path: str) -> str:
        """Return the full contents of ``path``."""

    @abstractmethod
    def write_text(self, path: str, text: str) -> None:
        """Replace the contents of ``path`` with ``text``."""

    @abstractmethod
    def append_text(self, path: str, text: str) -> None:
        """Append ``text`` to ``path``, creating it if needed."""


class FileStorage(Storage):
    """UTF-8 files, no newline translation, no locking, not atomic."""

    encoding = "utf-8"

    def read_text(self, path: str) -> str:
        with open(path, "r", encoding=self.encoding, newline="") as fh:
            return fh.read()

    def write_text(self, path: str, text: str) -> None:
        with open(path, "w", encoding=self.encoding, newline="") as fh:
            fh.write(text)
        logger.debug("wrote %d chars to %s", len(text), path)

    def append_text(self, path: str, text: str) -> None:
        with open(path, "a", encoding=self.encoding, newline="") as fh:
            fh.write(text)
        logger.debug("appended %d chars to %s", len(text), path)


class MemoryStorage(Storage):
    """In-process storage keyed by path string."""

    def __init__(self, files: Optional[Dict[str, str]] = None) -> None:
        self.files: Dict[str, str] = dict(files or {})

    def read_text(self, path: str) -> str:
        try:
            return self.files[str(path)]
        except KeyError:
            raise FileNotFoundError(f"no such file: {path!r}") from None

    def write_text(self, path: str, text: str) -> None:
        self.files[str(path)] = text

    def append_text(self, path: str, text: str) -> None:
        key = str(path)
        self.files[key] = self.files.get(key, "") + text
