"""Calendar use cases."""

from .get_wednesdays import (
    ExtendWednesdaysRequest,
    ExtendWednesdaysUseCase,
    GetWednesdaysRequest,
    GetWednesdaysUseCase,
    WednesdayItem,
    WednesdaysResponse,
)

__all__ = [
    "ExtendWednesdaysRequest",
    "ExtendWednesdaysUseCase",
    "GetWednesdaysRequest",
    "GetWednesdaysUseCase",
    "WednesdayItem",
    "WednesdaysResponse",
]
