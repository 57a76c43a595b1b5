class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    kind: str = 'error'

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ValidationError(CustomBaseError):
    """Input document does not have the required shape (missing field, wrong type)."""

    kind = 'validation'

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message, 400)


class AuthenticationError(CustomBaseError):
    kind = 'authentication'

    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class ForbiddenError(CustomBaseError):
    """Actor lacks the required capability on the restaurant."""

    kind = 'authorization'

    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    kind = 'not_found'

    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class RateLimitExceededError(CustomBaseError):
    kind = 'rate_limit'

    def __init__(self, message: str, *, retry_after_ms: int = 0) -> None:
        self.retry_after_ms = retry_after_ms
        super().__init__(message, 429)


class PersistenceError(CustomBaseError):
    """
    Storage layer failure while writing a seating area or syncing booking snapshots.

    `message` is safe to show to callers; `detail` holds the low-level storage
    error text and is meant for operators (logs), not for end users.
    """

    kind = 'persistence'

    def __init__(
        self,
        message: str,
        *,
        restaurant_id: str,
        actor_id: str,
        seating_area_id: str | None = None,
        detail: str = '',
    ) -> None:
        self.restaurant_id = restaurant_id
        self.actor_id = actor_id
        self.seating_area_id = seating_area_id
        self.detail = detail
        super().__init__(message, 500)

    @property
    def context(self) -> str:
        parts = [f'restaurant_id: {self.restaurant_id}']
        if self.seating_area_id:
            parts.append(f'seating_area_id: {self.seating_area_id}')
        parts.append(f'actor_id: {self.actor_id}')
        return ' '.join(parts)

    def __str__(self) -> str:
        return f'{self.message} ({self.context}): {self.detail}'


# Alias matching the error taxonomy used by API consumers
AuthorizationError = ForbiddenError
