"""Filename comparison policy shared by extension and pattern lookups."""

from __future__ import annotations

import fnmatch
import string
from collections.abc import Callable
from dataclasses import dataclass

from stringlist_py.core.app_config import AppConfig, host_case_insensitive_filenames


def compare_string(text: str, item: str) -> bool:
    return text == item


_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def compare_string_insensitive(text: str, item: str) -> bool:
    """Compare ignoring ASCII letter case only; other characters must match exactly."""
    return text.translate(_ASCII_LOWER) == item.translate(_ASCII_LOWER)


@dataclass(frozen=True, slots=True)
class FilenamePolicy:
    """How extensions and file names are compared on this host.

    ``case_insensitive`` picks the comparator for extension lookups and for the
    exact-name fallback; ``glob_matching`` turns shell-style pattern matching on.
    Pattern matching itself is always case-sensitive.
    """

    case_insensitive: bool = False
    glob_matching: bool = True

    @classmethod
    def host(cls) -> FilenamePolicy:
        return cls(case_insensitive=host_case_insensitive_filenames())

    @classmethod
    def from_config(cls, cfg: AppConfig) -> FilenamePolicy:
        case_insensitive = cfg.case_insensitive_filenames
        if case_insensitive is None:
            case_insensitive = host_case_insensitive_filenames()
        return cls(case_insensitive=case_insensitive, glob_matching=cfg.glob_matching)

    @property
    def comparator(self) -> Callable[[str, str], bool]:
        if self.case_insensitive:
            return compare_string_insensitive
        return compare_string

    def name_matches(self, pattern: str, file_name: str) -> bool:
        if self.glob_matching:
            return fnmatch.fnmatchcase(file_name, pattern)
        return self.comparator(pattern, file_name)
