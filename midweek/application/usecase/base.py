"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One request/response interaction, orchestrating domain services.

    Requests arrive already validated by pydantic; domain errors raised by
    services propagate to the interface layer unchanged.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
