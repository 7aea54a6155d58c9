"""Resizable ordered list of owned strings with search helpers."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import TextIO

from stringlist_py.core import app_config
from stringlist_py.core.app_config import GROWTH_INCREMENT
from stringlist_py.core.errors import PreconditionError, require
from stringlist_py.core.filename_policy import (
    FilenamePolicy,
    compare_string,
    compare_string_insensitive,
)
from stringlist_py.core.parse_utils import decode_bytes, iter_raw_lines

logger = logging.getLogger(__name__)

Comparator = Callable[[str, str], bool]


class StringList:
    """Ordered container that owns its strings.

    Backing storage grows by ``growth_increment`` slots whenever an append
    finds every slot occupied, and is only released by :meth:`delete`.
    A list that was deleted, or consumed as the source of :func:`combine`,
    rejects every further call.
    """

    __slots__ = ("_items", "_count", "_growth_increment", "_policy", "_live")

    def __init__(
        self,
        *,
        growth_increment: int = GROWTH_INCREMENT,
        policy: FilenamePolicy | None = None,
    ) -> None:
        require(growth_increment >= 1, "growth increment must be positive")
        self._items: list[str | None] = []
        self._count = 0
        self._growth_increment = growth_increment
        self._policy = policy if policy is not None else FilenamePolicy.host()
        self._live = True

    # construction ---------------------------------------------------------

    @classmethod
    def from_args(
        cls,
        args: Iterable[str] | None,
        *,
        growth_increment: int = GROWTH_INCREMENT,
        policy: FilenamePolicy | None = None,
    ) -> StringList:
        require(args is not None, "argument sequence is required")
        result = cls(growth_increment=growth_increment, policy=policy)
        for arg in args:  # type: ignore[union-attr]
            result.add(arg)
        return result

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        encoding: str | None = None,
        growth_increment: int | None = None,
        policy: FilenamePolicy | None = None,
    ) -> StringList | None:
        """Read one entry per non-blank line of *path*, or ``None`` if unreadable.

        Trailing whitespace is stripped from every line before the blank check;
        leading whitespace is kept.
        """
        cfg = app_config.load()
        try:
            raw = Path(path).read_bytes()
        except OSError as exc:
            logger.debug("Cannot open list file %s: %s", path, exc)
            return None
        result = cls(
            growth_increment=(
                growth_increment
                if growth_increment is not None
                else cfg.growth_increment
            ),
            policy=policy if policy is not None else FilenamePolicy.from_config(cfg),
        )
        text = decode_bytes(raw, encoding or cfg.default_encoding)
        for line in iter_raw_lines(text):
            line = line.rstrip()
            if line:
                result.add(line)
        logger.debug("Loaded %d entries from %s", result._count, path)
        return result

    # state ----------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return len(self._items)

    @property
    def growth_increment(self) -> int:
        return self._growth_increment

    @property
    def policy(self) -> FilenamePolicy:
        return self._policy

    @property
    def is_live(self) -> bool:
        return self._live

    def _check_live(self) -> None:
        if not self._live:
            raise PreconditionError("string list was deleted or consumed")

    # mutation -------------------------------------------------------------

    def add(self, item: str) -> None:
        self._check_live()
        if not isinstance(item, str):
            raise TypeError(f"StringList items must be str, not {type(item).__name__}")
        if self._count == len(self._items):
            self._items.extend([None] * self._growth_increment)
        self._items[self._count] = item
        self._count += 1

    def remove_last(self) -> None:
        self._check_live()
        require(self._count > 0, "remove_last() on an empty string list")
        self._count -= 1
        self._items[self._count] = None

    def clear(self) -> None:
        self._check_live()
        for i in range(self._count):
            self._items[i] = None
        self._count = 0

    def delete(self) -> None:
        """Drop every entry and the backing storage; safe to repeat."""
        if not self._live:
            return
        self.clear()
        self._items = []
        self._live = False

    def combine(self, source: StringList) -> None:
        combine(self, source)

    def remove_extension(self, extension: str) -> bool:
        where = self.index(extension, self._policy.comparator)
        if where == -1:
            return False
        del self._items[where]
        self._items.append(None)
        self._count -= 1
        return True

    # query ----------------------------------------------------------------

    def count(self) -> int:
        self._check_live()
        return self._count

    def item(self, index: int) -> str:
        self._check_live()
        require(0 <= index < self._count, f"index {index} out of range")
        return self._items[index]  # type: ignore[return-value]

    def last(self) -> str:
        self._check_live()
        require(self._count > 0, "last() on an empty string list")
        return self._items[self._count - 1]  # type: ignore[return-value]

    def index(self, text: str, comparator: Comparator) -> int:
        """Return the first index whose entry satisfies *comparator*, else -1."""
        self._check_live()
        require(text is not None, "search text is required")
        require(comparator is not None, "comparator is required")
        for i in range(self._count):
            if comparator(text, self._items[i]):  # type: ignore[arg-type]
                return i
        return -1

    def has(self, text: str) -> bool:
        return self.index(text, compare_string) != -1

    def has_insensitive(self, text: str) -> bool:
        return self.index(text, compare_string_insensitive) != -1

    def has_test(self, predicate: Callable[[str], object]) -> bool:
        self._check_live()
        require(predicate is not None, "predicate is required")
        return any(predicate(value) for value in self)

    def extension_matched(self, extension: str) -> bool:
        return self.index(extension, self._policy.comparator) != -1

    def file_matched(self, file_name: str) -> bool:
        self._check_live()
        return any(self._policy.name_matches(pattern, file_name) for pattern in self)

    def print(self, file: TextIO | None = None) -> None:
        """Write the entries as ``a, b, c`` with no trailing newline."""
        self._check_live()
        out = file if file is not None else sys.stdout
        out.write(", ".join(self))

    def to_list(self) -> list[str]:
        return list(self)

    # python protocol ------------------------------------------------------

    def __len__(self) -> int:
        return self.count()

    def __getitem__(self, index: int) -> str:
        if index < 0:
            index += self.count()
        return self.item(index)

    def __iter__(self) -> Iterator[str]:
        self._check_live()
        for i in range(self._count):
            yield self._items[i]  # type: ignore[misc]

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and self.has(text)

    def __repr__(self) -> str:
        if not self._live:
            return "StringList(<deleted>)"
        return f"StringList({self.to_list()!r})"


def new(
    *, growth_increment: int = GROWTH_INCREMENT, policy: FilenamePolicy | None = None
) -> StringList:
    return StringList(growth_increment=growth_increment, policy=policy)


def combine(destination: StringList | None, source: StringList | None) -> None:
    """Move every entry of *source* onto *destination*, then delete *source*."""
    require(destination is not None, "combine() needs a destination list")
    require(source is not None, "combine() needs a source list")
    require(destination is not source, "cannot combine a list into itself")
    destination._check_live()
    source._check_live()
    moved = source._count
    for i in range(moved):
        destination.add(source._items[i])  # type: ignore[arg-type]
        source._items[i] = None
    source._count = 0
    source.delete()
    logger.debug("Combined %d entries into list of %d", moved, destination._count)


def delete(current: StringList | None) -> None:
    if current is not None:
        current.delete()
