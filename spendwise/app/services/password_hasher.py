from abc import ABC, abstractmethod

# bcrypt ignores everything past its first 72 input bytes
MAX_PASSWORD_BYTES = 72


def exceeds_max_password_bytes(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


class IPasswordHasher(ABC):
    """
    Password hashing interface - application layer.

    Implementations must salt every digest and use a deliberately slow
    algorithm. verify() must return False for digests it cannot parse.
    Passwords longer than MAX_PASSWORD_BYTES are never hashed, so two
    different passwords can never share a digest.
    """

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a plain text password for storage, ValueError if it is too long"""
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plain text password against a stored hash"""
        pass

    @abstractmethod
    def dummy_verify(self, password: str) -> None:
        """Spend the cost of a verify() when there is no stored hash to check"""
        pass
