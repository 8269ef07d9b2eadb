import base64
import datetime
import json

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID

from maavalidatejwt.cli import main
from maavalidatejwt.x509ext import QUOTE_EXTENSION_OID


def _make_cert(with_quote: bool) -> str:
    key = ec.generate_private_key(ec.SECP256R1())
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "example.com")])
    builder = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(7)
        .not_valid_before(datetime.datetime(2020, 1, 1))
        .not_valid_after(datetime.datetime(2030, 1, 1))
    )
    if with_quote:
        builder = builder.add_extension(
            x509.UnrecognizedExtension(x509.ObjectIdentifier(QUOTE_EXTENSION_OID), b"quote"),
            critical=False,
        )
    cert = builder.sign(key, hashes.SHA256())
    return base64.b64encode(cert.public_bytes(serialization.Encoding.DER)).decode("ascii")


def _segment(obj) -> str:
    raw = json.dumps(obj, separators=(",", ":")).encode()
    return base64.b64encode(raw).decode("ascii").rstrip("=")


def _setup(tmp_path, *, with_quote=True, kid="k1", token_kid="k1"):
    jwks_file = tmp_path / "jwks.json"
    jwks = {"keys": [{"kid": kid, "kty": "RSA", "x5c": [_make_cert(with_quote)]}]}
    jwks_file.write_text(json.dumps(jwks))
    header = {"alg": "RS256", "jku": jwks_file.as_uri(), "kid": token_kid, "typ": "JWT"}
    token = f"{_segment(header)}.{_segment({'x': 1})}.c2ln"
    token_file = tmp_path / "token.jwt"
    token_file.write_text(token + "\n")
    return str(token_file)


def test_success(tmp_path):
    assert main([_setup(tmp_path)]) == 0


def test_success_verbose_logs(tmp_path, capsys):
    assert main(["-v", _setup(tmp_path)]) == 0
    assert "Embedded quote found in certificate" in capsys.readouterr().out


def test_missing_quote_extension(tmp_path, capsys):
    assert main(["--verbose", _setup(tmp_path, with_quote=False)]) == 1
    assert "ERROR - Failed to find wanted quote extension" in capsys.readouterr().out


def test_unknown_key(tmp_path, capsys):
    assert main(["-v", _setup(tmp_path, token_kid="other")]) == 1
    assert "ERROR - Failed to find x509 certificates for the key" in capsys.readouterr().out


def test_missing_token_file(tmp_path):
    assert main([str(tmp_path / "absent.jwt")]) == 1


def test_malformed_token(tmp_path):
    token_file = tmp_path / "token.jwt"
    token_file.write_text("only.two\n")
    assert main([str(token_file)]) == 1


def test_unreachable_key_set(tmp_path, capsys):
    header = {"jku": (tmp_path / "absent.json").as_uri(), "kid": "k1"}
    token_file = tmp_path / "token.jwt"
    token_file.write_text(f"{_segment(header)}.{_segment({})}.c2ln\n")
    assert main(["-v", str(token_file)]) == 1
    assert "ERROR - Failed to retrieve certificates" in capsys.readouterr().out


@pytest.mark.parametrize("args", [["-h"], ["--HELP"], []])
def test_help(args, capsys):
    assert main(args) == 0
    assert "Usage: maavalidatejwt [options] file" in capsys.readouterr().out