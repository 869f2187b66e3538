# app/core/security.py
import hashlib

from passlib.context import CryptContext

# 1. Configuration
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# 2. Password Handling
def _pre_hash_password(password: str) -> str:
    """
    bcrypt only looks at the first 72 bytes of its input.
    Longer passwords are reduced to their SHA-256 hexdigest (64 chars)
    so every byte of the original still counts.
    """
    if len(password.encode("utf-8")) <= 72:
        return password

    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def hash_password(password: str) -> str:
    return pwd_context.hash(_pre_hash_password(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not hashed_password:
        return False
    return pwd_context.verify(_pre_hash_password(plain_password), hashed_password)
