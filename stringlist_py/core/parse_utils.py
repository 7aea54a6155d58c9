from __future__ import annotations

import codecs
from collections.abc import Iterator


def _resolve_encoding(encoding: str, raw: bytes) -> tuple[str, int]:
    enc = encoding.lower().replace("_", "-")
    if enc in {"utf-8", "utf8"} and raw.startswith(codecs.BOM_UTF8):
        return "utf-8", 3
    if enc in {"utf-16", "utf16"} and raw.startswith(b"\xff\xfe"):
        return "utf-16-le", 2
    if enc in {"utf-16", "utf16"} and raw.startswith(b"\xfe\xff"):
        return "utf-16-be", 2
    if enc in {"utf-16", "utf16"}:
        if not raw:
            return "utf-16-le", 0
        even_zeros = sum(1 for i in range(0, len(raw), 2) if raw[i] == 0)
        odd_zeros = sum(1 for i in range(1, len(raw), 2) if raw[i] == 0)
        if odd_zeros > even_zeros:
            return "utf-16-le", 0
        if even_zeros > odd_zeros:
            return "utf-16-be", 0
        return "utf-16-le", 0
    return encoding, 0


def _decode_text(data: bytes, encoding: str) -> str:
    text = data.decode(encoding, errors="replace")
    if text.startswith("\ufeff"):
        return text[1:]
    return text


def decode_bytes(raw: bytes, encoding: str) -> str:
    """Decode a whole file payload, honouring and dropping any BOM."""
    resolved, bom_len = _resolve_encoding(encoding, raw)
    return _decode_text(raw[bom_len:], resolved)


def iter_raw_lines(text: str) -> Iterator[str]:
    """Yield each line of *text* without its ``\\n`` terminator.

    Only ``\\n`` ends a line, so a ``\\r`` stays in the line it belongs to. A
    trailing terminator does not produce an extra empty line.
    """
    start = 0
    while start < len(text):
        end = text.find("\n", start)
        if end < 0:
            yield text[start:]
            return
        yield text[start:end]
        start = end + 1
