from datetime import UTC, datetime, timedelta
from uuid import uuid4

from jose import jwt

from spendwise.api.utils.jwt import JwtSessionTokenCodec

SECRET = "codec-test-secret"
ISSUED_AT = datetime(2026, 1, 1, 12, 0, 0, tzinfo=UTC)


class FrozenClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def make_codec(clock: FrozenClock, secret: str = SECRET) -> JwtSessionTokenCodec:
    return JwtSessionTokenCodec(secret=secret, clock=clock)


def tamper(token: str) -> str:
    """Flip one character in the payload segment"""
    header, payload, signature = token.split(".")
    index = len(payload) // 2
    replacement = "B" if payload[index] != "B" else "C"
    payload = payload[:index] + replacement + payload[index + 1:]
    return ".".join([header, payload, signature])


def test_issue_then_verify_returns_user_id(token_codec):
    user_id = uuid4()

    token = token_codec.issue(user_id)

    assert token_codec.verify(token) == str(user_id)


def test_token_expires_seven_days_after_issuance():
    clock = FrozenClock(ISSUED_AT)
    codec = make_codec(clock)
    token = codec.issue(uuid4())

    claims = jwt.get_unverified_claims(token)

    assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())


def test_token_valid_just_before_expiry():
    user_id = uuid4()
    clock = FrozenClock(ISSUED_AT)
    codec = make_codec(clock)
    token = codec.issue(user_id)

    clock.now = ISSUED_AT + timedelta(days=7) - timedelta(seconds=1)

    assert codec.verify(token) == str(user_id)


def test_token_invalid_when_expiry_equals_now():
    clock = FrozenClock(ISSUED_AT)
    codec = make_codec(clock)
    token = codec.issue(uuid4())

    clock.now = ISSUED_AT + timedelta(days=7)

    assert codec.verify(token) is None


def test_token_invalid_after_expiry():
    clock = FrozenClock(ISSUED_AT)
    codec = make_codec(clock)
    token = codec.issue(uuid4())

    clock.now = ISSUED_AT + timedelta(days=30)

    assert codec.verify(token) is None


def test_tampered_token_is_invalid(token_codec):
    token = token_codec.issue(uuid4())

    assert token_codec.verify(tamper(token)) is None


def test_token_signed_with_other_secret_is_invalid():
    clock = FrozenClock(datetime.now(UTC))
    forged = make_codec(clock, secret="attacker-secret").issue(uuid4())

    assert make_codec(clock).verify(forged) is None


def test_malformed_tokens_are_invalid(token_codec):
    for token in ["", "garbage", "a.b.c", "a.b"]:
        assert token_codec.verify(token) is None


def test_token_without_exp_is_invalid():
    token = jwt.encode({"user_id": str(uuid4())}, SECRET, algorithm="HS256")

    assert JwtSessionTokenCodec(secret=SECRET).verify(token) is None


def test_token_without_user_id_is_invalid():
    exp = datetime.now(UTC) + timedelta(days=1)
    token = jwt.encode({"exp": exp}, SECRET, algorithm="HS256")

    assert JwtSessionTokenCodec(secret=SECRET).verify(token) is None


def test_unsigned_token_is_invalid():
    exp = datetime.now(UTC) + timedelta(days=1)
    segments = jwt.encode({"user_id": str(uuid4()), "exp": exp}, SECRET, algorithm="HS256").split(".")
    unsigned = ".".join([segments[0], segments[1], ""])

    assert JwtSessionTokenCodec(secret=SECRET).verify(unsigned) is None
