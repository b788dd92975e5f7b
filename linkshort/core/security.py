from passlib.context import CryptContext

from linkshort.core.errors import Unauthorized

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class SecretVerifier:
    """Holds the hash of the shared secret; the plain value is not kept."""

    def __init__(self, secret: str):
        self._hashed = pwd_context.hash(secret)

    def verify(self, candidate: str) -> bool:
        return pwd_context.verify(candidate or "", self._hashed)

    def require(self, candidate: str):
        if not self.verify(candidate):
            raise Unauthorized()
