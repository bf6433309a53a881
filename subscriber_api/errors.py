# subscriber_api/errors.py

from typing import Optional

REQUIRED_FIELDS_MESSAGE = "Name and subscribedChannel are required"
NOT_FOUND_MESSAGE = "Subscriber not found"


class SubscriberError(Exception):
    """Base class for every failure the service reports to callers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailure(SubscriberError):
    def __init__(self, message: str = REQUIRED_FIELDS_MESSAGE):
        super().__init__(message)


class NotFound(SubscriberError):
    def __init__(self, message: str = NOT_FOUND_MESSAGE):
        super().__init__(message)


class StoreFailure(SubscriberError):
    """
    The record store raised while reading or writing.

    ``cause`` keeps the original driver exception so its text can be
    surfaced in the response body and in the logs.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause

    @property
    def detail(self) -> str:
        return str(self.cause) if self.cause is not None else self.message
