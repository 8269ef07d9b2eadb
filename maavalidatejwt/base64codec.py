"""Standard base64 encoding and strict decoding."""

from __future__ import annotations

import base64

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_PAD = "="
_DECODE_TABLE = {char: index for index, char in enumerate(_ALPHABET)}


class Base64Error(ValueError):
    """Raised for malformed base64 input."""


def encode(data: bytes) -> str:
    """Encode bytes as padded standard base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")


def decode(text: str) -> bytes:
    """Decode padded standard base64 text.

    The length must be a multiple of four. Decoding stops at the first
    padding character, which may only stand in one of the last two places.
    """
    if len(text) % 4:
        raise Base64Error("Invalid base64 length!")

    out = bytearray()
    for start in range(0, len(text), 4):
        value = 0
        for offset, char in enumerate(text[start:start + 4]):
            value <<= 6
            if char == _PAD:
                remaining = len(text) - start - offset
                if remaining == 1:
                    out.extend(((value >> 16) & 0xFF, (value >> 8) & 0xFF))
                    return bytes(out)
                if remaining == 2:
                    out.append((value >> 10) & 0xFF)
                    return bytes(out)
                raise Base64Error("Invalid padding in base64!")
            try:
                value |= _DECODE_TABLE[char]
            except KeyError:
                raise Base64Error("Invalid character in base64!") from None
        out.extend(value.to_bytes(3, "big"))
    return bytes(out)