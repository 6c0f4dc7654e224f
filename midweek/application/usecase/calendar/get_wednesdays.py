"""Wednesday navigation use cases."""

import logfire
from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

from midweek.application.usecase.base import BaseUseCase
from midweek.domain.service import CalendarService


class WednesdayItem(BaseModel):
    """A Wednesday as shown in the date navigation."""

    vote_date: date
    is_past: bool
    is_today: bool
    is_anchor: bool  # The Wednesday the page opens on


class WednesdaysResponse(BaseModel):
    """A run of Wednesdays in ascending order."""

    today: date
    anchor: date
    wednesdays: list[WednesdayItem]


class GetWednesdaysRequest(BaseModel):
    """Get the initial window of Wednesdays."""

    count: int | None = Field(default=None, ge=0, le=52)  # None: configured size


class ExtendWednesdaysRequest(BaseModel):
    """Get more Wednesdays before or after a known one."""

    direction: Literal["past", "future"]
    from_date: date
    count: int | None = Field(default=None, ge=1, le=52)  # None: configured size


def _build_response(
    calendar_service: CalendarService, days: list[date]
) -> WednesdaysResponse:
    anchor = calendar_service.anchor()
    return WednesdaysResponse(
        today=calendar_service.today(),
        anchor=anchor,
        wednesdays=[
            WednesdayItem(
                vote_date=day,
                is_past=calendar_service.is_past_date(day),
                is_today=calendar_service.is_today_date(day),
                is_anchor=day == anchor,
            )
            for day in days
        ],
    )


class GetWednesdaysUseCase(BaseUseCase[GetWednesdaysRequest, WednesdaysResponse]):
    """Use case for the initial date navigation window."""

    def __init__(self, calendar_service: CalendarService) -> None:
        self.calendar_service = calendar_service

    async def execute(self, request: GetWednesdaysRequest) -> WednesdaysResponse:
        """Execute get wednesdays flow.

        Returns:
            Past Wednesdays followed by the current one and those after it
        """
        with logfire.span("get_wednesdays.execute", count=request.count):
            days = self.calendar_service.wednesday_window(request.count)
            return _build_response(self.calendar_service, days)


class ExtendWednesdaysUseCase(
    BaseUseCase[ExtendWednesdaysRequest, WednesdaysResponse]
):
    """Use case for loading more history or more future dates."""

    def __init__(self, calendar_service: CalendarService) -> None:
        self.calendar_service = calendar_service

    async def execute(self, request: ExtendWednesdaysRequest) -> WednesdaysResponse:
        """Execute extend wednesdays flow.

        Returns:
            Wednesdays strictly before (past) or after (future) ``from_date``,
            ascending

        Raises:
            ValidationError: If ``from_date`` is not a Wednesday
        """
        with logfire.span(
            "extend_wednesdays.execute",
            direction=request.direction,
            from_date=request.from_date.isoformat(),
            count=request.count,
        ):
            if request.direction == "past":
                days = self.calendar_service.more_past(request.from_date, request.count)
            else:
                days = self.calendar_service.more_future(
                    request.from_date, request.count
                )
            return _build_response(self.calendar_service, days)
