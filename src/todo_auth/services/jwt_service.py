"""Signed access tokens (HS256)."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from todo_auth.exceptions import InvalidTokenError
from todo_auth.schemas import Token, TokenPayload


class JWTService:
    """Issue and check the bearer tokens handed out at login.

    Claims: ``sub`` (user id), ``email``, ``type`` (always ``"access"``),
    ``iat`` and ``exp``.

    Examples
    --------
    >>> service = JWTService(secret_key="change-me")
    >>> token = service.create_access_token(user_id, "ada@example.com")
    >>> service.verify_token(token.access_token).email
    'ada@example.com'
    """

    ALGORITHM = "HS256"
    ACCESS_TOKEN_TYPE = "access"

    def __init__(self, secret_key: str, access_token_expire_hours: int = 24):
        """
        Parameters
        ----------
        secret_key
            HMAC key; an empty key is refused.
        access_token_expire_hours
            Lifetime of tokens created without an explicit ``expires_delta``.
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._lifetime = timedelta(hours=access_token_expire_hours)

    def create_access_token(
        self,
        user_id: UUID,
        email: str,
        expires_delta: timedelta | None = None,
    ) -> Token:
        lifetime = expires_delta or self._lifetime
        issued_at = datetime.now(tz=timezone.utc)

        claims = {
            "sub": str(user_id),
            "email": email,
            "type": self.ACCESS_TOKEN_TYPE,
            "iat": issued_at,
            "exp": issued_at + lifetime,
        }

        return Token(
            access_token=jwt.encode(claims, self._secret_key, algorithm=self.ALGORITHM),
            expires_in=int(lifetime.total_seconds()),
            created_at=issued_at,
        )

    def verify_token(self, token: str) -> TokenPayload:
        """Check signature and expiry, then decode the claims.

        Raises
        ------
        InvalidTokenError
            Expired, badly signed, or missing a required claim.
        """
        try:
            claims = jwt.decode(token, self._secret_key, algorithms=[self.ALGORITHM])
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        try:
            return TokenPayload(
                user_id=UUID(claims["sub"]),
                email=claims["email"],
                exp=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
                token_type=claims.get("type", self.ACCESS_TOKEN_TYPE),
            )
        except (KeyError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
