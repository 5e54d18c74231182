import bcrypt

from spendwise.app.services.password_hasher import (
    IPasswordHasher,
    MAX_PASSWORD_BYTES,
    exceeds_max_password_bytes,
)


class BcryptPasswordHasher(IPasswordHasher):
    """
    bcrypt implementation of IPasswordHasher.

    Args:
        rounds: bcrypt cost factor (log2 of the iteration count)
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self._dummy_hash = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))

    def hash(self, password: str) -> str:
        if exceeds_max_password_bytes(password):
            raise ValueError(f"Password exceeds {MAX_PASSWORD_BYTES} bytes")
        password_hash = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(self.rounds))
        return password_hash.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        if exceeds_max_password_bytes(password):
            # Nothing that long was ever hashed
            self.dummy_verify(password)
            return False
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            # Malformed or non-bcrypt stored hash
            return False

    def dummy_verify(self, password: str) -> None:
        bcrypt.checkpw(password.encode("utf-8")[:MAX_PASSWORD_BYTES], self._dummy_hash)
