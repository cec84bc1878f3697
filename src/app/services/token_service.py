"""
Token and credential hashing.

Reset tokens are stored only as their SHA-256 digest; passwords only as bcrypt hashes.
"""

import hashlib
import secrets

import bcrypt

from config import ApplicationConfig

TOKEN_BYTES = 32


def generate_token() -> str:
    """Random reset token, 256 bits as 64 hex characters"""
    return secrets.token_hex(TOKEN_BYTES)


def hash_token(raw_token: str) -> str:
    """SHA-256 hex digest used to store and look up a reset token"""
    return hashlib.sha256(raw_token.encode()).hexdigest()


def hash_password(password: str, rounds: int = None) -> str:
    rounds = rounds or ApplicationConfig.BCRYPT_ROUNDS
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
