"""Token helpers shared by services that carry auth tokens in their messages.

Only structural checks live here. Claims are read without verifying the
signature; verification stays with the auth service that owns the key.
"""
from datetime import datetime, timezone
from typing import Optional

from jose import jwt, JWTError

from .utils.logger_util import get_logger

logger = get_logger(__name__)


def validate_token_format(token: object) -> bool:
    """True if ``token`` looks like a compact JWS: three segments and a decodable header."""
    if not isinstance(token, str):
        return False
    segments = token.split(".")
    if len(segments) != 3 or not all(segments):
        return False
    try:
        jwt.get_unverified_header(token)
    except JWTError:
        return False
    return True


def _unverified_claims(token: str) -> Optional[dict]:
    if not validate_token_format(token):
        return None
    try:
        return jwt.get_unverified_claims(token)
    except JWTError:
        logger.debug("token claims could not be decoded")
        return None


def is_token_expired(token: str, now: Optional[datetime] = None, leeway: int = 0) -> bool:
    """Check the ``exp`` claim.

    Malformed tokens count as expired. Tokens without ``exp`` never expire.
    """
    claims = _unverified_claims(token)
    if claims is None:
        return True
    exp = claims.get("exp")
    if exp is None:
        return False
    if not isinstance(exp, (int, float)) or isinstance(exp, bool):
        return True
    now = now or datetime.now(timezone.utc)
    return now.timestamp() > exp + leeway


def token_subject(token: str) -> Optional[str]:
    claims = _unverified_claims(token)
    if claims is None:
        return None
    sub = claims.get("sub")
    return sub if isinstance(sub, str) else None
