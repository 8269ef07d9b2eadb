"""Parsing of a compact-serialised JSON Web Token issued by an attestation service."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .base64codec import Base64Error, decode
from .context import log
from .textutils import get_value, split

_TENANT_MAX = 24
_DNS_RE = re.compile(r"https://([0-9a-zA-Z.]*)")


class JwtError(ValueError):
    """Raised when a token cannot be parsed."""


@dataclass(frozen=True)
class Jwt:
    """A parsed token with the header fields needed for validation."""

    token: str
    encoded_header: str
    encoded_payload: str
    encoded_signature: str
    header: str
    payload: str
    jku: str
    kid: str
    attest_dns: str

    @property
    def tenant(self) -> str:
        """The first label of the attestation host name, at most 24 characters."""
        if not self.attest_dns:
            log("Empty attest DNS, cannot retrieve tenant name")
            return ""
        return self.attest_dns.split(".", 1)[0][:_TENANT_MAX]


def decode_segment(data: str) -> str:
    """Decode one token segment, adding the base64 padding it lacks."""
    padded = data + "=" * (-len(data) % 4)
    try:
        raw = decode(padded)
    except Base64Error as exc:
        raise JwtError(str(exc)) from exc
    return raw.decode("utf-8", errors="replace")


def _parse_dns(header: str) -> str:
    if not header:
        log("Empty decoded JWT header, cannot retrieve attest DNS")
        return ""
    match = _DNS_RE.search(header)
    return match.group(1) if match else ""


def parse_token(token: str) -> Jwt:
    """Split and decode a token; raises JwtError when it is malformed."""
    parts = split(token, r"\.")
    if len(parts) != 3:
        log("Failed to deserialize JWT, invalid number of segments")
        raise JwtError("Invalid token!")
    encoded_header, encoded_payload, encoded_signature = parts
    header = decode_segment(encoded_header)
    payload = decode_segment(encoded_payload)
    return Jwt(
        token=token,
        encoded_header=encoded_header,
        encoded_payload=encoded_payload,
        encoded_signature=encoded_signature,
        header=header,
        payload=payload,
        jku=get_value(header, "jku"),
        kid=get_value(header, "kid"),
        attest_dns=_parse_dns(header),
    )