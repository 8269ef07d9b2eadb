"""Extraction of extensions from an X.509 attestation certificate."""

from __future__ import annotations

from cryptography import x509

from .base64codec import Base64Error, decode
from .context import log
from .textutils import remove_spaces

QUOTE_EXTENSION_OID = "1.3.6.1.4.1.311.105.1"


def _extension_bytes(value: x509.ExtensionType) -> bytes:
    if isinstance(value, x509.UnrecognizedExtension):
        return value.value
    try:
        return value.public_bytes()
    except (AttributeError, NotImplementedError):
        return str(value).encode("utf-8")


class X509QuoteExt:
    """The extensions of one certificate, keyed by dotted OID."""

    def __init__(self, cert_str: str | None = None) -> None:
        self.extensions: dict[str, bytes] = {}
        if cert_str is not None:
            self.deserialize(cert_str)

    def deserialize(self, cert_str: str) -> None:
        """Load a base64 DER certificate body and collect its extensions.

        Any extensions held before are discarded. Raises ValueError when the
        certificate cannot be parsed.
        """
        self.extensions = {}
        log("Raw cert string value:")
        log(cert_str)
        try:
            der = decode(remove_spaces(cert_str))
            cert = x509.load_der_x509_certificate(der)
            extensions = list(cert.extensions)
        except (Base64Error, ValueError) as exc:
            log("Failed to deserialize one of the extensions")
            raise ValueError(f"invalid certificate: {exc}") from exc

        for extension in extensions:
            self.extensions.setdefault(
                extension.oid.dotted_string, _extension_bytes(extension.value)
            )

        for oid, value in self.extensions.items():
            log(oid)
            log(value)
            log("========================================")

    def find_extension(self, extension_oid: str) -> bytes:
        """Return the value of the extension ``extension_oid``, or empty bytes."""
        return self.extensions.get(extension_oid, b"")