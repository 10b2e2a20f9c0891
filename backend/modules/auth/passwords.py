"""
Password hashing and verification.

Uses bcrypt: every hash embeds its own random salt and cost factor,
and checkpw compares in constant time.
"""

import bcrypt

DEFAULT_ROUNDS = 10

# bcrypt only reads the first 72 bytes of a secret
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a password with a fresh salt."""
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored hash. Never raises."""
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False
