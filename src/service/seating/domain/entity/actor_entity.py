from typing import Iterable, Mapping

import attrs

from src.platform.exception.exceptions import AuthenticationError, ForbiddenError


def _to_capability_map(value: Mapping[str, Iterable[str]]) -> dict[str, frozenset[str]]:
    return {str(restaurant_id): frozenset(caps) for restaurant_id, caps in value.items()}


@attrs.define(frozen=True)
class Actor:
    """Authenticated caller and the capabilities it holds per restaurant"""

    id: str
    restaurants: dict[str, frozenset[str]] = attrs.field(
        factory=dict, converter=_to_capability_map
    )

    def validate_exists(self) -> None:
        if not self.id:
            raise AuthenticationError('Actor not found')

    def capabilities_for(self, restaurant_id: str) -> frozenset[str]:
        return self.restaurants.get(restaurant_id, frozenset())

    def require_any_capability(self, *, restaurant_id: str, capabilities: Iterable[str]) -> None:
        required = frozenset(capabilities)
        if not self.capabilities_for(restaurant_id) & required:
            raise ForbiddenError(
                f'Access denied: requires one of {sorted(required)} on restaurant {restaurant_id}'
            )
