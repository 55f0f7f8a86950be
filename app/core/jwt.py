"""Identity token issue / verify utilities"""
from datetime import datetime, timedelta, timezone
from typing import Dict, Any
import logging
import jwt

from app.config.settings import get_settings

logger = logging.getLogger(__name__)


def _build_payload(uid: str, expires_minutes: int, extra_claims: Dict[str, Any] | None = None) -> Dict[str, Any]:
    auth = get_settings().auth
    now = datetime.now(timezone.utc)
    payload = {
        "sub": uid,
        "iat": now,
        "exp": now + timedelta(minutes=expires_minutes),
    }
    if auth.audience:
        payload["aud"] = auth.audience
    if auth.issuer:
        payload["iss"] = auth.issuer
    payload.update(extra_claims or {})
    return payload


def create_id_token(uid: str, expires_minutes: int | None = None, extra_claims: Dict[str, Any] | None = None) -> str:
    auth = get_settings().auth
    ttl = expires_minutes if expires_minutes is not None else auth.token_ttl_minutes
    return jwt.encode(_build_payload(uid, ttl, extra_claims), auth.token_secret, algorithm=auth.algorithm)


def verify_id_token(token: str) -> Dict[str, Any] | None:
    """Return the verified claims, or None when the token is unusable."""
    auth = get_settings().auth
    options = {"verify_aud": auth.audience is not None}
    try:
        return jwt.decode(
            token,
            auth.token_secret,
            algorithms=[auth.algorithm],
            audience=auth.audience,
            issuer=auth.issuer,
            options=options,
        )
    except jwt.PyJWTError as e:
        logger.debug(f"Identity token rejected: {e}")
        return None


def uid_from_claims(claims: Dict[str, Any] | None) -> str | None:
    if not claims:
        return None
    uid = claims.get("sub") or claims.get("uid")
    if not isinstance(uid, str) or not uid:
        return None
    return uid


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]
