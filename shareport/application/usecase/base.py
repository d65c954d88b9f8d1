"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case for orchestrating domain services.

    Use cases translate between API-shaped request/response models and
    domain services; they hold no business rules of their own.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
