"""Command that validates an attestation token read from a file."""

from __future__ import annotations

import sys
from typing import Sequence

from .context import HelpRequested, configure, log, parse_args
from .fetch import FetchError, fetch
from .jwks import Jwks
from .jwt import JwtError, parse_token
from .textutils import read_lines
from .x509ext import QUOTE_EXTENSION_OID, X509QuoteExt


def main(argv: Sequence[str] | None = None) -> int:
    """Run the validation; ``argv`` excludes the program name. Returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        context = parse_args(args)
    except HelpRequested as exc:
        print(exc)
        return 0
    configure(context)

    try:
        lines = read_lines(context.jwt_filename)
    except (OSError, ValueError):
        return 1
    if not lines:
        log(f"Could not find any record in file: {context.jwt_filename}")
        return 1

    try:
        jwt = parse_token(lines[0])
    except JwtError as exc:
        log(f"Failed to deserialize JWT, exception: {exc}")
        return 1

    try:
        response = fetch(jwt.jku)
    except FetchError:
        response = ""
    if not response:
        log("ERROR - Failed to retrieve certificates")
        return 1

    try:
        certs = Jwks(response).get_certs(jwt.kid)
    except KeyError:
        certs = []
    if not certs:
        log("ERROR - Failed to find x509 certificates for the key")
        return 1

    try:
        cert = X509QuoteExt(certs[0])
    except ValueError:
        log("ERROR - Failed to deserialize x509 cert")
        return 1

    if cert.find_extension(QUOTE_EXTENSION_OID):
        log("Embedded quote found in certificate")
        return 0
    log("ERROR - Failed to find wanted quote extension")
    return 1


if __name__ == "__main__":
    sys.exit(main())