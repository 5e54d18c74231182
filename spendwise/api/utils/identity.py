from typing import Optional
from uuid import UUID

from fastapi.security import HTTPAuthorizationCredentials

from spendwise.app.services.token_codec import ISessionTokenCodec


class RequestIdentityResolver:
    """
    Resolves the user behind the bearer credentials of an inbound request.

    Credentials come from HTTPBearer(auto_error=False), which yields None for a
    missing header, a non-Bearer scheme or an empty token.
    """

    def __init__(self, token_codec: ISessionTokenCodec):
        self.token_codec = token_codec

    def resolve(self, credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[UUID]:
        if credentials is None or not credentials.credentials:
            return None

        user_id = self.token_codec.verify(credentials.credentials)
        if user_id is None:
            return None

        try:
            return UUID(user_id)
        except ValueError:
            return None
