from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import HTTPException, status
from jose import JWTError, jwt
from pydantic import BaseModel

from bakery.config.settings import get_settings


class Principal(BaseModel):
    """Caller identity taken from a verified access token."""

    subject: str
    role: str | None = None
    customer_id: UUID | None = None

    def has_role(self, role: str) -> bool:
        return self.role is not None and self.role.lower() == role.lower()


class TokenService:
    """
    Verifies JWT access tokens issued by the authentication service.

    `create_access_token` exists for tooling and tests; this service does not
    run a login flow.
    """

    ACCESS_TOKEN_EXPIRE_MINUTES = 60

    def __init__(self):
        self.settings = get_settings()
        self.SECRET_KEY = self.settings.JWT_SECRET_KEY
        self.ALGORITHM = self.settings.JWT_ALGORITHM

    def create_access_token(self, data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
        """
        Encode a signed access token.

        Args:
            data: Claims (at least "sub"; "role" and "customer_id" are read back)
            expires_delta: Lifetime, one hour by default
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.ACCESS_TOKEN_EXPIRE_MINUTES))
        to_encode.update({"exp": expire, "iat": now, "token_type": "access"})
        return jwt.encode(to_encode, self.SECRET_KEY, algorithm=self.ALGORITHM)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """
        Decode and verify a token (signature and expiry).

        Raises:
            HTTPException: 401 when the token is invalid or expired
        """
        try:
            return jwt.decode(token, self.SECRET_KEY, algorithms=[self.ALGORITHM])
        except JWTError as e:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=f"Invalid token: {e}",
                headers={"WWW-Authenticate": "Bearer"},
            ) from e

    def get_principal(self, token: str) -> Principal:
        payload = self.decode_token(token)
        subject = payload.get("sub")
        if not subject:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token has no subject",
                headers={"WWW-Authenticate": "Bearer"},
            )

        customer_id = payload.get("customer_id")
        try:
            customer_uuid = UUID(str(customer_id)) if customer_id else None
        except ValueError:
            customer_uuid = None

        return Principal(subject=str(subject), role=payload.get("role"), customer_id=customer_uuid)
