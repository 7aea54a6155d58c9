"""CLI entry-point for StringList-Py: load list files and query them."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from stringlist_py import __version__
from stringlist_py.core import app_config
from stringlist_py.core.filename_policy import FilenamePolicy
from stringlist_py.core.string_list import StringList, combine


def _load_all(paths: list[Path], policy: FilenamePolicy) -> StringList | None:
    merged = StringList(
        growth_increment=app_config.load().growth_increment, policy=policy
    )
    for path in paths:
        loaded = StringList.from_file(path, policy=policy)
        if loaded is None:
            print(f"stringlist-py: cannot open {path}", file=sys.stderr)
            merged.delete()
            return None
        combine(merged, loaded)
    return merged


def _answer(found: bool) -> int:
    print("yes" if found else "no")
    return 0 if found else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="stringlist-py",
        description="Load one-entry-per-line list files and print or query them.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="list files, merged in order")
    query = parser.add_mutually_exclusive_group()
    query.add_argument("--has", metavar="TEXT", help="exact membership test")
    query.add_argument(
        "--extension", metavar="EXT", help="extension membership test (host case rule)"
    )
    query.add_argument(
        "--match", metavar="NAME", help="test NAME against entries as glob patterns"
    )
    parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="compare extensions and fallback names case-insensitively",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    policy = FilenamePolicy.from_config(app_config.load())
    if args.ignore_case:
        policy = replace(policy, case_insensitive=True)

    entries = _load_all(args.files, policy)
    if entries is None:
        return 2
    try:
        if args.has is not None:
            return _answer(entries.has(args.has))
        if args.extension is not None:
            return _answer(entries.extension_matched(args.extension))
        if args.match is not None:
            return _answer(entries.file_matched(args.match))
        entries.print()
        sys.stdout.write("\n")
        return 0
    finally:
        entries.delete()


if __name__ == "__main__":
    raise SystemExit(main())
