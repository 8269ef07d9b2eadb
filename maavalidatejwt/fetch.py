"""Retrieval of a document over HTTP(S) or from a file URL."""

from __future__ import annotations

import ssl
import urllib.error
import urllib.request

from .context import current, log


class FetchError(Exception):
    """Raised when a document cannot be retrieved."""


def _ssl_context() -> ssl.SSLContext:
    context = ssl.create_default_context()
    # The peer certificate is not verified; TLS 1.2 is the lowest version offered.
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    context.minimum_version = ssl.TLSVersion.TLSv1_2
    return context


def _parse_header(header: str) -> tuple[str, str]:
    name, sep, value = header.partition(":")
    if not sep or not name.strip():
        raise ValueError(f"malformed header: {header!r}")
    return name.strip(), value.strip()


def fetch(url: str, headers: str = "") -> str:
    """GET ``url`` following redirects and return the body as text.

    ``headers`` is one optional ``Name: value`` header line. The body is
    cut at its first NUL byte. The body of an error status is returned as
    well. Raises FetchError when no response can be obtained.
    """
    if not url:
        log("Failed to send get request, input url is empty")
        raise FetchError("input url is empty")
    extra = _parse_header(headers) if headers else None

    handler = urllib.request.HTTPSHandler(
        debuglevel=1 if current().verbose else 0, context=_ssl_context()
    )
    opener = urllib.request.build_opener(handler)
    try:
        request = urllib.request.Request(url)
        if extra is not None:
            request.add_header(*extra)
        with opener.open(request) as response:
            body = response.read()
    except urllib.error.HTTPError as exc:
        body = exc.read()
    except (urllib.error.URLError, OSError, ValueError) as exc:
        log(f"Request failed: {exc}")
        raise FetchError(str(exc)) from exc

    log(f"Received {len(body)} bytes")
    return body.split(b"\0", 1)[0].decode("utf-8", errors="replace")