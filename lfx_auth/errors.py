"""Error types raised by the service, split into client and server faults."""

from __future__ import annotations


class ServiceError(Exception):
    """Base error carrying a message and any underlying causes."""

    def __init__(self, message: str, *args: BaseException | None) -> None:
        self.message = message
        self.errors: tuple[BaseException, ...] = tuple(e for e in args if e is not None)
        super().__init__(str(self))
        if self.errors:
            self.__cause__ = self.errors[0]

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        joined = "\n".join(str(e) for e in self.errors)
        return f"{self.message}: {joined}"


class ValidationError(ServiceError):
    """The input did not pass validation."""


class NotFoundError(ServiceError):
    """The requested resource does not exist."""


class ConflictError(ServiceError):
    """The request conflicts with the current state of a resource."""


class UnexpectedError(ServiceError):
    """An unexpected failure on the server side."""


class ServiceUnavailableError(ServiceError):
    """A dependency of the service is unavailable."""