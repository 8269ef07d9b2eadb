"""JSON Web Key sets as served by an attestation service."""

from __future__ import annotations

from dataclasses import dataclass, field

from .context import log
from .textutils import get_array, get_value, split


@dataclass
class Jwk:
    """A JSON Web Key: key id, key type and X.509 certificate chain."""

    kid: str = ""
    kty: str = ""
    x5c: list[str] = field(default_factory=list)


def parse_jwk(text: str) -> Jwk:
    """Read the fields of one key from its JSON text."""
    return Jwk(
        kid=get_value(text, "kid"),
        kty=get_value(text, "kty"),
        x5c=get_array(text, "x5c"),
    )


class Jwks:
    """A set of keys indexed by key id; a later key replaces an earlier one."""

    def __init__(self, text: str) -> None:
        self.keys: dict[str, Jwk] = {}
        for raw_key in split(text, "\\}[ \n\r]*,"):
            key = parse_jwk(raw_key)
            self.keys[key.kid] = key

    def get_certs(self, kid: str) -> list[str]:
        """Return the certificate chain of key ``kid``; raises KeyError if absent."""
        try:
            return list(self.keys[kid].x5c)
        except KeyError:
            log(f"Could not find key: {kid}")
            raise KeyError(kid) from None