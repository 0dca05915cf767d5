"""
Base use case class.

Each use case encapsulates a single user-facing operation behind a typed
request/response contract, independent of how it is driven (studio
session, scripts, tests).

Example:
    >>> class RecommendConcepts(UseCase[RecommendationRequest, List[Concept]]):
    ...     async def execute(self, request: RecommendationRequest) -> List[Concept]:
    ...         ...
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class UseCase(ABC, Generic[RequestT, ResponseT]):
    """
    Base use case abstract class.

    Type Parameters:
        RequestT: Type of the input request object
        ResponseT: Type of the output response object
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        """
        Execute the use case and return a response.

        Raises:
            ShortsMindError subclasses (ValidationError, SchemaError, ...).
            Converting them to user-visible notices is the caller's job.
        """
        pass
