"""Test module for parse utils."""

from __future__ import annotations

from stringlist_py.core.parse_utils import (
    _decode_text,
    _resolve_encoding,
    decode_bytes,
    iter_raw_lines,
)


def test_resolve_encoding_detects_utf8_bom() -> None:
    """Verify resolve encoding strips UTF-8 BOM length."""
    assert _resolve_encoding("utf-8", b"\xef\xbb\xbfabc") == ("utf-8", 3)


def test_resolve_encoding_detects_utf16_boms() -> None:
    """Verify resolve encoding identifies UTF-16 BOM variants."""
    assert _resolve_encoding("utf-16", b"\xff\xfeA\x00") == ("utf-16-le", 2)
    assert _resolve_encoding("utf-16", b"\xfe\xff\x00A") == ("utf-16-be", 2)


def test_resolve_encoding_handles_utf16_without_bom() -> None:
    """Verify resolve encoding falls back to UTF-16 heuristics."""
    assert _resolve_encoding("utf-16", b"") == ("utf-16-le", 0)
    assert _resolve_encoding("utf-16", b"A\x00B\x00") == ("utf-16-le", 0)
    assert _resolve_encoding("utf-16", b"\x00A\x00B") == ("utf-16-be", 0)


def test_resolve_encoding_preserves_other_encodings() -> None:
    """Verify resolve encoding returns requested non-UTF16 encoding."""
    assert _resolve_encoding("cp1251", b"raw bytes") == ("cp1251", 0)


def test_decode_text_strips_decoded_bom_character() -> None:
    """Verify decode text removes BOM code point from decoded text."""
    assert _decode_text(b"\xef\xbb\xbfhello", "utf-8") == "hello"
    assert _decode_text(b"plain", "utf-8") == "plain"


def test_decode_bytes_handles_bom_and_bad_bytes() -> None:
    """Verify whole-payload decoding drops BOMs and replaces bad bytes."""
    assert decode_bytes(b"\xef\xbb\xbfa\nb", "utf-8") == "a\nb"
    assert decode_bytes("x\ny".encode("utf-16"), "utf-16") == "x\ny"
    assert decode_bytes(b"ok\xff", "utf-8") == "ok\ufffd"


def test_iter_raw_lines_splits_only_on_newline() -> None:
    """Verify only LF ends a line and carriage returns stay in the line."""
    assert list(iter_raw_lines("a\nb\r\nc\rd")) == ["a", "b\r", "c\rd"]


def test_iter_raw_lines_keeps_blank_lines_and_drops_final_terminator() -> None:
    """Verify blank lines survive and a trailing newline adds nothing."""
    assert list(iter_raw_lines("a\n\nb  \n")) == ["a", "", "b  "]
    assert list(iter_raw_lines("")) == []
    assert list(iter_raw_lines("\n")) == [""]
