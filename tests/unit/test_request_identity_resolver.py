from uuid import uuid4

from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt

from spendwise.api.utils.identity import RequestIdentityResolver
from spendwise.api.utils.jwt import JwtSessionTokenCodec


def bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


def test_resolve_returns_user_id_for_valid_token(token_codec):
    user_id = uuid4()
    resolver = RequestIdentityResolver(token_codec)

    assert resolver.resolve(bearer(token_codec.issue(user_id))) == user_id


def test_resolve_without_credentials_returns_none(token_codec):
    assert RequestIdentityResolver(token_codec).resolve(None) is None


def test_resolve_empty_token_returns_none(token_codec):
    assert RequestIdentityResolver(token_codec).resolve(bearer("")) is None


def test_resolve_invalid_token_returns_none(token_codec):
    assert RequestIdentityResolver(token_codec).resolve(bearer("not.a.token")) is None


def test_resolve_non_uuid_claim_returns_none():
    token_codec = JwtSessionTokenCodec(secret="resolver-secret")
    token = jwt.encode(
        {"user_id": "alice", "exp": 4102444800, "iat": 1700000000},
        "resolver-secret",
        algorithm="HS256",
    )

    assert RequestIdentityResolver(token_codec).resolve(bearer(token)) is None
