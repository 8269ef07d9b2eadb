# maavalidatejwt

A command-line tool and small library for inspecting an attestation JSON Web Token (JWT) and the certificate that signed it.

Given a file that holds a token, the `maavalidatejwt` command:

1. Reads the token from the first line of the file.
2. Decodes the header and takes `jku`, the URL of the signing keys, and `kid`, the key ID.
3. Downloads the JSON Web Key Set from `jku` (following redirects) and finds the X.509 certificate chain (`x5c`) for `kid`.
4. Loads the first certificate of the chain and checks that it has the quote extension `1.3.6.1.4.1.311.105.1`.

The command exits with status 0 if every step succeeds. It also exits with status 0 when help is shown. It exits with status 1 if any step fails.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Command-line usage

```
maavalidatejwt [options] file
```

| Option | Meaning |
| --- | --- |
| `-mrsigner <value>` | Record an expected MRSIGNER value |
| `-mrenclave <value>` | Record an expected MRENCLAVE value |
| `-productid <value>` | Record an expected PRODUCTID value |
| `-svn <value>` | Record an expected SVN value |
| `-isdebuggable <value>` | Record an expected ISDEBUGGABLE value (any non-empty value is stored as 1) |
| `-v`, `--verbose` | Print progress messages and HTTP debug output |
| `-h`, `--help` | Print help and exit |

Option names are case-insensitive. The command prints the help text and exits with status 0 in any of these cases:

- no arguments are given;
- an option is missing its value;
- more than one file is given.

To see each step as it runs:

```
maavalidatejwt -v token.txt
```

## Library usage

```python
from maavalidatejwt.textutils import read_lines
from maavalidatejwt.jwt import parse_token
from maavalidatejwt.fetch import fetch
from maavalidatejwt.jwks import Jwks
from maavalidatejwt.x509ext import QUOTE_EXTENSION_OID, X509QuoteExt

jwt = parse_token(read_lines("token.txt")[0])   # raises JwtError if malformed
print(jwt.jku, jwt.kid, jwt.tenant)

keys = Jwks(fetch(jwt.jku))                      # fetch raises FetchError
certs = keys.get_certs(jwt.kid)                  # raises KeyError if kid is unknown
cert = X509QuoteExt(certs[0])                    # raises ValueError if unparsable
quote = cert.find_extension(QUOTE_EXTENSION_OID) # b"" when absent
```

### Modules

- `maavalidatejwt.jwt`
  - `parse_token` returns a frozen `Jwt` with these fields: the encoded and decoded header and payload, the signature, `jku`, `kid` and `attest_dns`.
  - `Jwt.tenant` is the first label of the attestation host name, cut to 24 characters.
  - `decode_segment` decodes one unpadded segment.
- `maavalidatejwt.jwks`
  - `Jwks` indexes keys by `kid`.
  - `Jwk` holds `kid`, `kty` and `x5c`.
  - `parse_jwk` reads one key.
- `maavalidatejwt.fetch`
  - `fetch(url, headers="")` makes an HTTP(S) GET and accepts one optional `Name: value` header.
  - The body of an error status is returned as well.
- `maavalidatejwt.x509ext`
  - `X509QuoteExt` loads a base64 DER certificate body. Whitespace in the body is ignored.
  - It keeps the extension values in `extensions`, keyed by dotted OID.
- `maavalidatejwt.verify`
  - `is_quote_in_extension` wraps a quote in a remote-report header and accepts it.
- `maavalidatejwt.context`
  - `parse_args` turns arguments into a `Context`. `usage` returns the help text.
  - `configure` and `current` set and read the settings for the process.
  - `log` prints only when verbose. `always_log` always prints.
- `maavalidatejwt.textutils`
  - `get_value` and `get_array` look up fields in JSON-like text by regular expression.
  - The module also has `split`, `remove_spaces` and `read_lines`.
- `maavalidatejwt.base64codec`
  - `encode`, and a strict `decode` that raises `Base64Error`.
- `maavalidatejwt.ansi`
  - The `Style` enum, whose `str()` gives the escape sequence.
  - `color_n`, `color_bg_n`, `color_rgb` and `color_bg_rgb` build colour sequences.

## What it does not do

- It does not verify the token's signature.
- It does not check the token's expiry or other claims.
- The `-mrsigner`, `-mrenclave`, `-productid`, `-svn` and `-isdebuggable` values are parsed and stored. Nothing compares them with the token or the quote.
- It does not cryptographically verify the embedded quote. The command only checks that the quote extension is present, and `is_quote_in_extension` accepts any value.
- It does not validate the certificate chain.
- `fetch` does not verify the server's TLS certificate. TLS 1.2 is the lowest version it allows.