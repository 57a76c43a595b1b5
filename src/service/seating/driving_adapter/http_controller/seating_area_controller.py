from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.command.insert_seating_area_use_case import (
    InsertSeatingAreaUseCase,
)
from src.service.seating.app.command.update_seating_area_use_case import (
    UpdateSeatingAreaUseCase,
)
from src.service.seating.app.query.get_seating_area_use_case import GetSeatingAreaUseCase
from src.service.seating.app.query.list_seating_areas_use_case import ListSeatingAreasUseCase
from src.service.seating.domain.entity.actor_entity import Actor
from src.service.seating.domain.entity.seating_area_entity import SeatingArea
from src.service.seating.driving_adapter.http_controller.auth.restaurant_access import (
    require_seating_area_access,
)
from src.service.seating.driving_adapter.schema.seating_area_schema import (
    SeatingAreaCreatedResponse,
    SeatingAreaDocRequest,
    SeatingAreaResponse,
    SeatingAreaUpdatedResponse,
)


router = APIRouter()


def _to_response(seating_area: SeatingArea) -> SeatingAreaResponse:
    return SeatingAreaResponse(
        id=seating_area.id,
        restaurant_id=seating_area.restaurant_id,
        name=seating_area.name,
        bookable=seating_area.bookable,
        bookable_online=seating_area.bookable_online,
        booking_priority=seating_area.booking_priority,
        note=seating_area.note,
        internal_note=seating_area.internal_note,
        created_by=seating_area.created_by,
        created_at=seating_area.created_at,
        updated_by=seating_area.updated_by,
        updated_at=seating_area.updated_at,
    )


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def insert_seating_area(
    restaurant_id: str,
    request: SeatingAreaDocRequest,
    actor: Actor = Depends(require_seating_area_access),
    use_case: InsertSeatingAreaUseCase = Depends(InsertSeatingAreaUseCase.depends),
) -> SeatingAreaCreatedResponse:
    seating_area_id = await use_case.execute(
        restaurant_id=restaurant_id,
        doc=request.model_dump(by_alias=True),
        actor_id=actor.id,
    )
    return SeatingAreaCreatedResponse(id=seating_area_id)


@router.put('/{seating_area_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_seating_area(
    restaurant_id: str,
    seating_area_id: str,
    request: SeatingAreaDocRequest,
    actor: Actor = Depends(require_seating_area_access),
    use_case: UpdateSeatingAreaUseCase = Depends(UpdateSeatingAreaUseCase.depends),
) -> SeatingAreaUpdatedResponse:
    result = await use_case.execute(
        restaurant_id=restaurant_id,
        seating_area_id=seating_area_id,
        doc=request.model_dump(by_alias=True),
        actor_id=actor.id,
    )
    return SeatingAreaUpdatedResponse(
        matched_count=result.matched_count,
        modified_count=result.modified_count,
        synced_booking_count=result.synced_booking_count,
        synced_table_count=result.synced_table_count,
    )


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_seating_areas(
    restaurant_id: str,
    actor: Actor = Depends(require_seating_area_access),
    use_case: ListSeatingAreasUseCase = Depends(ListSeatingAreasUseCase.depends),
) -> List[SeatingAreaResponse]:
    seating_areas = await use_case.execute(restaurant_id=restaurant_id)
    return [_to_response(seating_area) for seating_area in seating_areas]


@router.get('/{seating_area_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_seating_area(
    restaurant_id: str,
    seating_area_id: str,
    actor: Actor = Depends(require_seating_area_access),
    use_case: GetSeatingAreaUseCase = Depends(GetSeatingAreaUseCase.depends),
) -> SeatingAreaResponse:
    seating_area = await use_case.execute(
        restaurant_id=restaurant_id, seating_area_id=seating_area_id
    )
    return _to_response(seating_area)
