import hmac

import bcrypt

from src.core.config import BCRYPT_ROUNDS

_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


def get_password_hash(password: str) -> str:
    # bcrypt only looks at the first 72 bytes
    password_bytes = password.encode("utf-8")[:72]
    hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    return hashed.decode("utf-8")


def is_password_hash(stored: str) -> bool:
    return stored.startswith(_BCRYPT_PREFIXES)


def verify_password(plain_password: str, stored: str) -> bool:
    """
    Check a password against the stored credential.

    Accounts created before hashing was introduced still hold the plain text
    password; those are compared in constant time so they keep working until
    migrated.
    """
    if not stored:
        return False
    if is_password_hash(stored):
        password_bytes = plain_password.encode("utf-8")[:72]
        return bcrypt.checkpw(password_bytes, stored.encode("utf-8"))
    return hmac.compare_digest(plain_password.encode("utf-8"), stored.encode("utf-8"))
