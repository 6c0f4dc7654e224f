"""Wednesday navigation routes."""

from datetime import date

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from midweek.application.usecase.calendar import (
    ExtendWednesdaysRequest,
    ExtendWednesdaysUseCase,
    GetWednesdaysRequest,
    GetWednesdaysUseCase,
    WednesdaysResponse,
)
from midweek.domain.error import ValidationError

router = APIRouter(prefix="/wednesdays", tags=["calendar"], route_class=DishkaRoute)


@router.get("", response_model=WednesdaysResponse)
async def get_wednesdays(
    use_case: FromDishka[GetWednesdaysUseCase],
    count: int | None = Query(default=None, ge=0, le=52),
) -> WednesdaysResponse:
    """Get the initial window of Wednesdays.

    Half of the window lies before the current Wednesday, the rest starts
    at it (or at the next one when today is not a Wednesday).

    Args:
        use_case: Get wednesdays use case (injected)
        count: Window size, defaults to VOTING__WINDOW_SIZE

    Example:
        GET /wednesdays?count=8
    """
    return await use_case.execute(GetWednesdaysRequest(count=count))


@router.get("/past", response_model=WednesdaysResponse)
async def get_past_wednesdays(
    use_case: FromDishka[ExtendWednesdaysUseCase],
    before: date,
    count: int | None = Query(default=None, ge=1, le=52),
) -> WednesdaysResponse:
    """Load Wednesdays preceding ``before``.

    Example:
        GET /wednesdays/past?before=2026-09-23&count=4

    Raises:
        HTTPException: 400 if ``before`` is not a Wednesday
    """
    request = ExtendWednesdaysRequest(direction="past", from_date=before, count=count)
    return await _extend(use_case, request)


@router.get("/future", response_model=WednesdaysResponse)
async def get_future_wednesdays(
    use_case: FromDishka[ExtendWednesdaysUseCase],
    after: date,
    count: int | None = Query(default=None, ge=1, le=52),
) -> WednesdaysResponse:
    """Load Wednesdays following ``after``.

    Example:
        GET /wednesdays/future?after=2026-11-11&count=4

    Raises:
        HTTPException: 400 if ``after`` is not a Wednesday
    """
    request = ExtendWednesdaysRequest(direction="future", from_date=after, count=count)
    return await _extend(use_case, request)


async def _extend(
    use_case: ExtendWednesdaysUseCase, request: ExtendWednesdaysRequest
) -> WednesdaysResponse:
    try:
        return await use_case.execute(request)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
