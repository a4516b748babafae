"""Password hashing utilities.

Passwords are pre-hashed with SHA-256 so inputs longer than bcrypt's 72-byte
limit are not silently truncated.
"""

import hashlib

import bcrypt


def _pre_hash_password(password: str) -> bytes:
    """Pre-hash a password to a 32-byte digest."""
    return hashlib.sha256(password.encode("utf-8")).digest()


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password for storage.

    Args:
        password: Plain-text password
        rounds: bcrypt work factor

    Returns:
        bcrypt hash as a string (``$2b$...``)
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_pre_hash_password(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain-text password against a stored hash."""
    try:
        return bcrypt.checkpw(
            _pre_hash_password(password), password_hash.encode("utf-8")
        )
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
