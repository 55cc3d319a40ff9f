"""Magic header checks and transport-corruption fingerprints."""
from __future__ import annotations

from png_core.protocol import PNG_MARKER, PNG_NAME, PNG_TRAILER
from .const import ERRORS

# Ordered: first prefix match on bytes 4..7 wins.
EOL_FINGERPRINTS = (
    (b"\n\x1a", "DOS->unix"),
    (b"\r\x1a", "DOS->Mac"),
    (b"\r\r\x1a", "unix->Mac"),
    (b"\n\n\x1a", "Mac-unix"),
    (b"\r\n\x1a\r", "unix->DOS"),
    (b"\r\r\n\x1a", "unix->DOS"),
)


def eol_fingerprint(magic: bytes) -> str | None:
    """Guess which line-ending conversion mangled the signature trailer.

    Advisory strings carry their own leading indentation for display.
    """
    trailer = magic[4:8]
    for prefix, label in EOL_FINGERPRINTS:
        if trailer.startswith(prefix):
            return f" It seems to have suffered {label} conversion"
    if trailer != PNG_TRAILER:
        return " It seems to have suffered EOL conversion"
    return None


def channel_fingerprint(magic: bytes) -> str | None:
    if magic[0] == 9:
        return " It was probably transmitted through a 7bit channel"
    if magic[0] != PNG_MARKER:
        return "  It was probably transmitted in text mode"
    return None


def check_signature(magic: bytes) -> list[dict]:
    """Return fatal findings for an 8-byte header; empty means acceptable."""
    if magic[1:4] != PNG_NAME:
        return [{"code": "E_NOT_PNG", "message": ERRORS["E_NOT_PNG"]}]
    if magic[0] == PNG_MARKER and magic[4:8] == PNG_TRAILER:
        return []
    advisories = [a for a in (eol_fingerprint(magic), channel_fingerprint(magic)) if a]
    return [{
        "code": "E_SIG_CORRUPT",
        "message": ERRORS["E_SIG_CORRUPT"],
        "signature": magic.hex(),
        "advisories": advisories,
    }]
