"""Webhook payload signature verification."""

import hashlib
import hmac

from ..errors import TransportError

ALGORITHMS = {"sha1": hashlib.sha1, "sha256": hashlib.sha256}


def sign(app_secret: str, body: bytes, method: str = "sha1") -> str:
    """Compute an X-Hub-Signature header value for a body."""
    digest = hmac.new(app_secret.encode(), body, ALGORITHMS[method]).hexdigest()
    return f"{method}={digest}"


def verify_signature(app_secret: str, body: bytes, signature: str | None) -> None:
    """
    Check a `<method>=<hex digest>` header against the raw body.

    Raises:
        TransportError: 403 when the header is missing, malformed or wrong.
    """
    if not signature:
        raise TransportError("Missing request signature", status_code=403)

    method, _, received = signature.partition("=")
    if method not in ALGORITHMS or not received:
        raise TransportError("Malformed request signature", status_code=403)

    expected = sign(app_secret, body, method).partition("=")[2]
    if not hmac.compare_digest(expected, received):
        raise TransportError("Couldn't validate the request signature", status_code=403)
