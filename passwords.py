"""
Password hashing for API accounts.

bcrypt accepts at most 72 bytes, so passwords are truncated to that many
UTF-8 bytes before hashing and before checking.
"""

import bcrypt

import config

BCRYPT_MAX_BYTES = 72


def _truncate_password(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash a password with a fresh salt; the salt is embedded in the result."""
    salt = bcrypt.gensalt(rounds=config.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_truncate_password(password), salt).decode("ascii")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(_truncate_password(password), hashed.encode("ascii"))
    except ValueError:
        # malformed stored hash
        return False
