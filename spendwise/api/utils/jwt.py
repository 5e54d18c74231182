from datetime import UTC, datetime, timedelta
from typing import Callable, Optional
from uuid import UUID

from jose import JWTError, jwt

from spendwise.app.services.token_codec import ISessionTokenCodec


def _aware_utc_now() -> datetime:
    return datetime.now(UTC)


class JwtSessionTokenCodec(ISessionTokenCodec):
    """
    JWT implementation of ISessionTokenCodec

    Args:
        secret: Signing key, loaded once from configuration
        algorithm: JWS algorithm (HS256)
        ttl: Token lifetime (7 days)
        clock: Returns the current timezone-aware UTC time
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(days=7),
        clock: Callable[[], datetime] = _aware_utc_now,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.ttl = ttl
        self.clock = clock

    def issue(self, user_id: UUID) -> str:
        """
        Generate session token

        Args:
            user_id: User UUID

        Returns:
            JWT token string carrying user_id, iat and exp claims
        """
        now = self.clock()
        payload = {
            "user_id": str(user_id),
            "exp": now + self.ttl,
            "iat": now,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Optional[str]:
        """
        Verify and decode session token

        Args:
            token: JWT token string

        Returns:
            user_id claim, or None if the token is forged, malformed or expired
        """
        try:
            # Expiry is checked below against the injected clock
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError:
            return None

        exp = payload.get("exp")
        if not isinstance(exp, (int, float)) or isinstance(exp, bool):
            return None
        if self.clock().timestamp() >= exp:
            return None

        user_id = payload.get("user_id")
        if not isinstance(user_id, str) or not user_id:
            return None

        return user_id
