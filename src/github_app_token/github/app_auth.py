import time

import jwt
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from github_app_token.errors import SigningError

# Окно действия JWT: iat в прошлом из-за рассинхрона часов, exp в пределах лимита GitHub
ISSUED_AT_SKEW = 60
EXPIRES_IN = 180


class AppJwtSigner:
    def __init__(self, private_key: RSAPrivateKey):
        self.private_key = private_key

    def claims(self, app_id: str, now: int) -> dict:
        return {"iss": app_id, "iat": now - ISSUED_AT_SKEW, "exp": now + EXPIRES_IN}

    def sign(self, app_id: str, now: int | None = None) -> str:
        """Подписать JWT приложения. Вызывается заново перед каждым запросом."""
        if now is None:
            now = int(time.time())
        try:
            return jwt.encode(self.claims(app_id, now), self.private_key, algorithm="RS256")
        except (jwt.PyJWTError, ValueError, TypeError) as e:
            raise SigningError(f"cannot sign app JWT: {e}") from e
