"""
Base use case class following Clean Architecture principles.

Each use case encapsulates a single business operation and is independent
of HTTP details. Routes translate HTTP input into a command object, call
`execute`, and translate the result (or the raised application error) back.

Example:
    >>> use_case = GenerationUseCase(store, orchestrator)
    >>> accepted = await use_case.execute(command)
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class UseCase(ABC, Generic[RequestT, ResponseT]):
    """
    Base use case abstract class.

    Type Parameters:
        RequestT: Type of the input command object
        ResponseT: Type of the output response object
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        """
        Execute the use case and return a response.

        Raises:
            Application errors from app.core.exceptions (NotFoundError,
            MissingKeysError, ...). HTTP exceptions are NOT raised here;
            converting errors to responses is the route layer's job.
        """
        pass
