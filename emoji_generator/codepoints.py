"""Conversion between emoji-data ``unified`` strings and text."""

import re

from .errors import DecodeError

_HEX = re.compile(r"[0-9A-Fa-f]+")


def _scalar(token: str) -> str:
    if not _HEX.fullmatch(token):
        raise DecodeError(f"invalid codepoint {token!r}")
    cp = int(token, 16)
    if 0xD800 <= cp <= 0xDFFF or cp > 0x10FFFF:
        raise DecodeError(f"codepoint U+{cp:04X} is not a unicode scalar value")
    return chr(cp)


def decode(unified: str) -> str:
    """Decode ``"1F468-200D-2764"`` style sequences into the text they spell."""
    return "".join(_scalar(token) for token in unified.split("-"))
