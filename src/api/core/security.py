import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional
from jose import JWTError, jwt
from fastapi import (
    Depends,
    Security,
    status,
)
from fastapi.security import (
    HTTPAuthorizationCredentials,
    HTTPBearer,
)

from src.config import ACCESS_TOKEN_EXPIRE_MINUTES, SECRET_KEY
from src.api.core.response import api_response

ALGORITHM = "HS256"

logger = logging.getLogger(__name__)


def create_access_token(
    user_data: dict,
    refresh: Optional[bool] = False,
    expires: Optional[timedelta] = None,
):

    if refresh:
        expire = datetime.now(timezone.utc) + timedelta(days=30)
    else:
        expire = datetime.now(timezone.utc) + (
            expires or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
        )
    payload = {
        "user": user_data,
        "exp": expire,
        "refresh": refresh,
    }
    token = jwt.encode(
        payload,
        SECRET_KEY,
        algorithm=ALGORITHM,
    )
    return token


def decode_token(
    token: str,
) -> Optional[Dict]:
    try:
        decode = jwt.decode(
            token,
            SECRET_KEY,
            algorithms=[ALGORITHM],
            options={"verify_exp": True},  # Ensure expiration is verified
        )

        return decode

    except JWTError as e:
        logger.info("token decoding failed: %s", e)
        return None


def require_signin(
    credentials: HTTPAuthorizationCredentials = Security(HTTPBearer()),
) -> Dict:
    token = credentials.credentials  # Extract token from Authorization header

    payload = decode_token(token)
    if payload is None:
        api_response(status.HTTP_401_UNAUTHORIZED, "Invalid token")

    user = payload.get("user")
    if not user:
        api_response(
            status.HTTP_401_UNAUTHORIZED,
            "Invalid token: no user data",
        )

    if payload.get("refresh") is True:
        api_response(
            401,
            "Refresh token is not allowed for this route",
        )

    return user  # contains {"id": ..., "email": ..., "role": ...}


def require_role(*roles):
    # Flatten roles - handle both requireRole("a", "b") and requireRole(["a", "b"])
    allowed = []
    for r in roles:
        if isinstance(r, (list, tuple)):
            allowed.extend(r)
        else:
            allowed.append(r)

    def role_checker(user: dict = Depends(require_signin)):
        if user.get("role") in allowed:
            return user

        logger.warning(
            "role denied for user %s: required %s, has %s",
            user.get("email"),
            allowed,
            user.get("role"),
        )
        api_response(status.HTTP_403_FORBIDDEN, "Unauthorized")

    return role_checker
