import logging
import time
from typing import Any, Dict, Iterable, Optional

import jwt
from fastapi import HTTPException

from app.config.settings import settings
from app.modules.rbac.models import as_name

logger = logging.getLogger(__name__)


class TokenService:
    """Issues and verifies the signed tokens carrying a principal's role claims."""

    def __init__(self, secret: str, algorithm: str = "HS256", expiry_seconds: int = 24 * 60 * 60):
        self.secret = secret
        self.algorithm = algorithm
        self.expiry_seconds = expiry_seconds

    @classmethod
    def from_settings(cls) -> "TokenService":
        return cls(settings.jwt_secret, settings.jwt_algorithm, settings.jwt_expiry_seconds)

    def issue_token(
        self,
        user_id: str,
        email: str,
        role: Optional[str] = None,
        roles: Optional[Iterable] = None,
        permissions: Optional[Iterable] = None,
        expires_in: Optional[int] = None,
    ) -> str:
        """Build a token in the issuer's format: ``role`` as a string, ``roles``/``permissions`` only when given"""
        now = int(time.time())
        payload: Dict[str, Any] = {
            "sub": user_id,
            "email": email,
            "iat": now,
            "exp": now + (self.expiry_seconds if expires_in is None else expires_in),
        }
        if role is not None:
            payload["role"] = as_name(role)
        if roles is not None:
            payload["roles"] = [as_name(r) for r in roles]
        if permissions is not None:
            payload["permissions"] = [as_name(p) for p in permissions]
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """Verify signature and expiry; returns the raw claims"""
        try:
            return jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired token")
            raise HTTPException(status_code=401, detail="Token has expired")
        except jwt.InvalidTokenError as e:
            logger.warning(f"Rejected invalid token: {e}")
            raise HTTPException(status_code=401, detail="Invalid or expired token")
