from passlib.context import CryptContext
import logging

logger = logging.getLogger(__name__)

# Salted, iterated PBKDF2; avoids the external bcrypt backend issues in some environments
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Constant-time check of a password against a stored hash; malformed hashes never match."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        logger.warning("Stored password hash could not be parsed")
        return False


def dummy_verify() -> None:
    """Spend the same hashing time as a real check when there is no stored hash."""
    pwd_context.dummy_verify()
