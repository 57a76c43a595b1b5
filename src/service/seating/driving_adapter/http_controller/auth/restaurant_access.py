from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Cookie, Depends
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.service.seating.domain.entity.actor_entity import Actor
from src.service.seating.domain.enum.restaurant_capability import SEATING_AREA_CAPABILITIES
from src.service.seating.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


@inject
async def get_current_actor(
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    token: Optional[str] = Cookie(None, alias=settings.AUTH_COOKIE_NAME),
) -> Actor:
    """Actor from the JWT cookie (stateless, no DB query)"""
    return jwt_auth.get_actor_from_jwt(token)


async def require_seating_area_access(
    restaurant_id: str,
    actor: Actor = Depends(get_current_actor),
) -> Actor:
    """Actor must hold `tables` or `apps` on the restaurant in the path"""
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span(
        'auth.require_seating_area_access',
        attributes={
            'actor.id': actor.id,
            'restaurant.id': restaurant_id,
        },
    ):
        actor.require_any_capability(
            restaurant_id=restaurant_id, capabilities=SEATING_AREA_CAPABILITIES
        )
        return actor
