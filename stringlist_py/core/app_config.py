"""Application configuration loading utilities for repository-local settings."""

from __future__ import annotations

import codecs
import importlib
import os
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path
from types import ModuleType
from typing import Any

tomllib: ModuleType | None
try:  # Python 3.11+
    tomllib = importlib.import_module("tomllib")
except ModuleNotFoundError:  # pragma: no cover
    tomllib = None

GROWTH_INCREMENT = 10
MAX_GROWTH_INCREMENT = 1024


def host_case_insensitive_filenames() -> bool:
    """Return the host default for filename case folding (Windows only)."""
    return os.name == "nt"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Store list growth, decoding and filename matching settings."""

    growth_increment: int = GROWTH_INCREMENT
    default_encoding: str = "utf-8"
    case_insensitive_filenames: bool | None = None  # None: follow host
    glob_matching: bool = True


def _candidate_roots(root: Path | None) -> list[Path]:
    roots = [Path.cwd()]
    if root is not None:
        roots.append(root)
    seen: set[Path] = set()
    out: list[Path] = []
    for entry in roots:
        entry = entry.resolve()
        if entry in seen:
            continue
        seen.add(entry)
        out.append(entry)
    return out


def _load_toml(path: Path) -> dict[str, Any]:
    if tomllib is None or not path.exists():
        return {}
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except (OSError, tomllib.TOMLDecodeError):
        return {}


def _normalize_growth_increment(value: Any, *, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return max(1, min(parsed, MAX_GROWTH_INCREMENT))


def _normalize_encoding(value: Any, *, default: str) -> str:
    if not isinstance(value, str) or not value.strip():
        return default
    name = value.strip()
    try:
        codecs.lookup(name)
    except LookupError:
        return default
    return name


def _normalize_flag(value: Any, *, default: bool | None) -> bool | None:
    return value if isinstance(value, bool) else default


@lru_cache(maxsize=8)
def load(root: Path | None = None) -> AppConfig:
    """Load and merge app configuration from `config/app.toml` candidates."""
    cfg = AppConfig()
    for base in _candidate_roots(root):
        data = _load_toml(base / "config" / "app.toml")
        lists = data.get("list", {})
        if isinstance(lists, dict):
            cfg = replace(
                cfg,
                growth_increment=_normalize_growth_increment(
                    lists.get("growth_increment"), default=cfg.growth_increment
                ),
                default_encoding=_normalize_encoding(
                    lists.get("default_encoding"), default=cfg.default_encoding
                ),
            )
        filenames = data.get("filenames", {})
        if isinstance(filenames, dict):
            glob_matching = _normalize_flag(
                filenames.get("glob_matching"), default=cfg.glob_matching
            )
            cfg = replace(
                cfg,
                case_insensitive_filenames=_normalize_flag(
                    filenames.get("case_insensitive"),
                    default=cfg.case_insensitive_filenames,
                ),
                glob_matching=bool(glob_matching),
            )
    return cfg
