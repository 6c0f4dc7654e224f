"""Domain services."""

from .base import Service, require_event_date
from .calendar_service import CalendarService, Clock
from .comment_service import CommentService
from .vote_service import VoteService

__all__ = [
    "CalendarService",
    "Clock",
    "CommentService",
    "Service",
    "VoteService",
    "require_event_date",
]
