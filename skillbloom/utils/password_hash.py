# password_hash.py
from passlib.context import CryptContext


# pbkdf2_sha256 needs no native backend, so it behaves the same everywhere.
_pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return _pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    try:
        return _pwd_context.verify(password, hashed)
    except (ValueError, TypeError):
        # Malformed or foreign hash in the users table.
        return False
