"""Inspect attestation JWTs: fetch their signing keys and find the enclave quote extension in the certificate."""

__version__ = "0.1.0"