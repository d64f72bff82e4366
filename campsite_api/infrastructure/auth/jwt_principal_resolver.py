"""
JWT Principal Resolver
======================

Verifies bearer JWTs issued by the user service and loads the user they name.
The admin flag comes from the stored user record, not from the token.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import jwt

from campsite_api.core.config import Settings
from campsite_api.domain.auth.principal_resolver import PrincipalResolver
from campsite_api.domain.exceptions import UnauthenticatedError
from campsite_api.domain.models.principal import Principal
from campsite_api.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

# Tokens from the legacy login flow carry the user id in "_id"
USER_ID_CLAIMS = ("sub", "_id")


@dataclass(frozen=True)
class JwtConfig:
    signing_key: str
    algorithm: str = "HS256"
    issuer: Optional[str] = None
    audience: Optional[str] = None
    leeway_seconds: int = 30

    @classmethod
    def from_settings(cls, settings: Settings) -> "JwtConfig":
        return cls(
            signing_key=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            leeway_seconds=settings.jwt_leeway_seconds,
        )


class JwtPrincipalResolver(PrincipalResolver):
    """Bearer JWT -> user record -> Principal."""

    def __init__(self, config: JwtConfig, user_repository: UserRepository):
        if not config.signing_key:
            raise ValueError("JWT signing key is required")
        self._config = config
        self._users = user_repository

    def _decode(self, token: str) -> dict:
        options = {
            "verify_signature": True,
            "verify_exp": True,
            "verify_nbf": True,
            "verify_iss": self._config.issuer is not None,
            "verify_aud": self._config.audience is not None,
        }
        try:
            return jwt.decode(
                token,
                self._config.signing_key,
                algorithms=[self._config.algorithm],
                issuer=self._config.issuer,
                audience=self._config.audience,
                options=options,
                leeway=self._config.leeway_seconds,
            )
        except jwt.ExpiredSignatureError:
            raise UnauthenticatedError("Token has expired")
        except jwt.PyJWTError as e:
            logger.info(f"Rejected bearer token: {e}")
            raise UnauthenticatedError("Invalid bearer token")

    def resolve(self, token: Optional[str]) -> Principal:
        if not token:
            raise UnauthenticatedError("Authentication required")

        claims = self._decode(token)
        user_id = next((str(claims[c]) for c in USER_ID_CLAIMS if claims.get(c)), None)
        if not user_id:
            raise UnauthenticatedError("Token does not identify a user")

        user = self._users.find_by_id(user_id)
        if user is None:
            logger.info(f"Token names unknown user {user_id}")
            raise UnauthenticatedError("Unknown user")

        return Principal(user_id=user.id, is_admin=user.admin)
