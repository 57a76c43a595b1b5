"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.seating.driven_adapter.rate_limit.sliding_window_rate_limiter import (
    SlidingWindowRateLimiter,
)
from src.service.seating.driven_adapter.repo.seating_area_query_repo_impl import (
    SeatingAreaQueryRepoImpl,
)
from src.service.seating.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (event-loop-aware AsyncEngineManager behind a session provider)
    database = providers.Singleton(Database)

    # Unit of Work - one per use-case call (owns session + transaction)
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session
    )

    # Repositories (stateless - use session_factory per-request)
    seating_area_query_repo = providers.Singleton(
        SeatingAreaQueryRepoImpl, session_factory=database.provided.session
    )

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)

    # In-process limiter shared by every request of this worker
    seating_area_insert_rate_limiter = providers.Singleton(
        SlidingWindowRateLimiter,
        limit=config_service.provided.SEATING_AREA_INSERT_RATE_LIMIT,
        window_ms=config_service.provided.SEATING_AREA_INSERT_RATE_WINDOW_MS,
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
