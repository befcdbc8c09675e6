"""CRUD operations over a product catalog CSV file.

Every call is a stateless read-modify-write cycle: the whole file is read,
changed in memory, and written back. Nothing is cached between calls.

Lookup semantics differ on purpose and are kept as observed:
- ``get`` and ``delete`` match ids loosely (``"1"`` matches ``1``)
- ``update`` matches ids strictly and silently ignores misses
"""

from __future__ import annotations
import logging
from typing import List, Optional

from .errors import DuplicateKeyError, NotFoundError
from .records import (
    LINE_SEP,
    Key,
    Record,
    key_of,
    loose_equals,
    parse_line,
    render_record,
    strict_equals,
)
from .storage import FileStorage, Storage

logger = logging.getLogger(__name__)


class RecordStore:
    """Product records in a flat ``id,name,price`` file."""

    def __init__(self, storage: Optional[Storage] = None) -> None:
        self.storage = storage if storage is not None else FileStorage()

    def _read_lines(self, path: str) -> List[str]:
        # "a\n".split("\n") keeps the trailing "" so rewrites round-trip
        return self.storage.read_text(path).split(LINE_SEP)

    def _write_lines(self, path: str, lines: List[str]) -> None:
        self.storage.write_text(path, LINE_SEP.join(lines))

    def add(self, path: str, rec_id: Key, name: object, price: object) -> None:
        """Append a new record.

        Raises:
            DuplicateKeyError: if ``get`` already finds ``rec_id``.
        """
        if self.get(path, rec_id) is not None:
            raise DuplicateKeyError(rec_id)
        self.storage.append_text(path, render_record(rec_id, name, price) + LINE_SEP)
        logger.debug("added %r to %s", rec_id, path)

    def get(self, path: str, rec_id: Key) -> Optional[Record]:
        """Return the first record whose id loosely equals ``rec_id``, or None."""
        for line in self._read_lines(path):
            if loose_equals(key_of(line), rec_id):
                # an empty line can match ("" == 0) but holds no record
                if not line:
                    return None
                return parse_line(line)
        return None

    def update(self, path: str, rec_id: Key, name: object, price: object) -> None:
        """Rewrite every line whose id strictly equals ``rec_id``.

        A miss is not an error; the file is rewritten unchanged.
        """
        lines = self._read_lines(path)
        hits = 0
        for i, line in enumerate(lines):
            field = key_of(line)
            if strict_equals(field, rec_id):
                lines[i] = render_record(field, name, price)
                hits += 1
        self._write_lines(path, lines)
        if hits:
            logger.debug("updated %r in %s", rec_id, path)
        else:
            logger.debug("update of %r in %s matched nothing", rec_id, path)

    def delete(self, path: str, rec_id: Key) -> None:
        """Remove the first line whose id loosely equals ``rec_id``.

        Raises:
            NotFoundError: if no line matches.
        """
        lines = self._read_lines(path)
        for i, line in enumerate(lines):
            if loose_equals(key_of(line), rec_id):
                del lines[i]
                break
        else:
            raise NotFoundError(rec_id)
        self._write_lines(path, lines)
        logger.debug("deleted %r from %s", rec_id, path)


default_store = RecordStore()


def add(path: str, rec_id: Key, name: object, price: object) -> None:
    default_store.add(path, rec_id, name, price)


def get(path: str, rec_id: Key) -> Optional[Record]:
    return default_store.get(path, rec_id)


def update(path: str, rec_id: Key, name: object, price: object) -> None:
    default_store.update(path, rec_id, name, price)


def delete(path: str, rec_id: Key) -> None:
    default_store.delete(path, rec_id)
