"""Password reset token format: ``<random>_<unix-timestamp>``.

The issue time is embedded in the token itself, so expiry can be checked
without a lookup. The random part may itself contain underscores; the
timestamp is whatever follows the last one.
"""

import re

TOKEN_SEPARATOR = "_"
_TIMESTAMP_PATTERN = re.compile(r"[0-9]+", re.ASCII)


def build_password_reset_token(random_part: str, issued_at: int) -> str:
    return f"{random_part}{TOKEN_SEPARATOR}{issued_at}"


def parse_issued_at(token: str | None) -> int | None:
    """Return the embedded issue timestamp, or None if the token is malformed."""
    if not token:
        return None
    _, separator, suffix = token.rpartition(TOKEN_SEPARATOR)
    if not separator or not _TIMESTAMP_PATTERN.fullmatch(suffix):
        return None
    return int(suffix)


def is_password_reset_token_valid(
    token: str | None,
    expire_seconds: int,
    now: int,
) -> bool:
    """Check a token against a single reading of the current time.

    Fails closed: empty or malformed tokens are never valid.
    """
    issued_at = parse_issued_at(token)
    if issued_at is None:
        return False
    return issued_at + expire_seconds >= now
