"""
Actor Authentication Service

Tokens are issued by the account service; this service only verifies them
and rebuilds the Actor from the claims (no DB query).
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, Mapping, Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.seating.domain.entity.actor_entity import Actor


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES

    def create_jwt_token(
        self,
        *,
        actor_id: str,
        restaurants: Mapping[str, Iterable[str]],
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': actor_id,
            'exp': now + (expires_delta or timedelta(minutes=self.token_expire_minutes)),
            'iat': now,
            'restaurants': {
                restaurant_id: sorted(capabilities)
                for restaurant_id, capabilities in restaurants.items()
            },
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise AuthenticationError('Token expired')
        except jwt.PyJWTError:
            raise AuthenticationError('Invalid token')

    def get_actor_from_jwt(self, token: Optional[str]) -> Actor:
        if not token:
            raise AuthenticationError('Not authenticated')

        payload = self.decode_jwt_token(token)

        actor_id = payload.get('sub')
        restaurants = payload.get('restaurants', {})
        if not isinstance(actor_id, str) or not isinstance(restaurants, dict):
            raise AuthenticationError('Invalid token')
        if not all(isinstance(caps, list) for caps in restaurants.values()):
            raise AuthenticationError('Invalid token')

        actor = Actor(id=actor_id, restaurants=restaurants)
        actor.validate_exists()
        return actor
