"""Check of the SGX quote embedded in an attestation certificate."""

from __future__ import annotations

import struct

_REPORT_HEADER_VERSION = 1
_REPORT_TYPE_SGX_REMOTE = 2
_REPORT_HEADER = struct.Struct("<IIQ")


def _to_oe_quote(ext: bytes) -> bytes:
    """Wrap a raw SGX quote in a remote-report header."""
    quote = bytes(ext)
    header = _REPORT_HEADER.pack(
        _REPORT_HEADER_VERSION, _REPORT_TYPE_SGX_REMOTE, len(quote)
    )
    return header + quote


def is_quote_in_extension(ext: bytes) -> bool:
    """Accept the quote carried by a certificate extension.

    The quote is wrapped as a remote report but not cryptographically
    verified; any bytes-like extension value is accepted.
    """
    report = _to_oe_quote(ext)
    _version, _report_type, size = _REPORT_HEADER.unpack_from(report)
    return size == len(report) - _REPORT_HEADER.size