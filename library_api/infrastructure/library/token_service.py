"""
Adapter: JWT bearer tokens.

Implements TokenIssuer port using Authlib's JOSE implementation.
Tokens are HS256-signed and carry the customer id and email.
"""

import logging
import time

from authlib.jose import JoseError, JsonWebToken

from library_api.domain.library.entities import CustomerProfile, TokenIdentity
from library_api.domain.library.errors import UnauthorizedError
from library_api.domain.library.ports import TokenIssuer

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
DEFAULT_EXPIRES_IN_SECONDS = 24 * 60 * 60
INVALID_TOKEN = "Invalid or expired token"

_jwt = JsonWebToken([ALGORITHM])


class JwtTokenService(TokenIssuer):
    """Issues and verifies bearer tokens for authenticated customers.

    Args:
        secret: HMAC signing secret.
        issuer: Value of the ``iss`` claim, required on verification.
        audience: Value of the ``aud`` claim, required on verification.
        expires_in_seconds: Token lifetime.
    """

    def __init__(
        self,
        secret: str,
        issuer: str,
        audience: str,
        expires_in_seconds: int = DEFAULT_EXPIRES_IN_SECONDS,
    ) -> None:
        self._secret = secret
        self._issuer = issuer
        self._audience = audience
        self._expires_in_seconds = expires_in_seconds

    def issue(self, customer: CustomerProfile) -> str:
        now = int(time.time())
        payload = {
            "iss": self._issuer,
            "aud": self._audience,
            "sub": str(customer.id),
            "iat": now,
            "exp": now + self._expires_in_seconds,
            "customerId": customer.id,
            "email": customer.email,
        }
        header = {"alg": ALGORITHM, "typ": "JWT"}
        token = _jwt.encode(header, payload, self._secret)
        return token.decode() if isinstance(token, bytes) else token

    def verify(self, token: str) -> TokenIdentity:
        claims_options = {
            "iss": {"essential": True, "value": self._issuer},
            "aud": {"essential": True, "value": self._audience},
            "exp": {"essential": True},
            "customerId": {"essential": True},
            "email": {"essential": True},
        }
        try:
            claims = _jwt.decode(token, self._secret, claims_options=claims_options)
            claims.validate()
            identity = TokenIdentity(
                customer_id=int(claims["customerId"]), email=str(claims["email"])
            )
        except (JoseError, TypeError, ValueError) as exc:
            logger.warning("Rejected bearer token: %s", type(exc).__name__)
            raise UnauthorizedError(INVALID_TOKEN) from exc

        return identity
