from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from folio.core.config import Settings
from folio.core.exceptions import AuthenticationError

# Identity claims carried next to `sub` in access tokens.
IDENTITY_CLAIMS = ("email", "first_name", "last_name", "profile_image_url")


def create_access_token(
    settings: Settings,
    subject: str,
    claims: Optional[Dict[str, Any]] = None,
    expires_delta: timedelta = None,
) -> str:
    """
    Crea un token de acceso JWT para el usuario `subject`.
    """
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )
    to_encode = {"exp": expire, "sub": str(subject)}
    for key in IDENTITY_CLAIMS:
        if claims and claims.get(key) is not None:
            to_encode[key] = claims[key]
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(settings: Settings, token: str) -> Dict[str, Any]:
    """
    Validate signature and expiry and return the token claims.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as exc:
        raise AuthenticationError() from exc
    if not payload.get("sub"):
        raise AuthenticationError()
    return payload
