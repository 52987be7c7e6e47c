"""Result classes for lookup operations.

A lookup either succeeds with a value or fails with a message. The two
variants are plain frozen dataclasses joined by the ``LookupResult`` alias,
so callers can dispatch with ``match``::

    match client.lookup("78701"):
        case Success(value=city_state):
            print(city_state.display_format())
        case Failure(message=message):
            print(f"lookup failed: {message}")
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from ryandata_applicant_utils.models.errors import UnwrappedFailureError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful result holding a non-None value."""

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise TypeError("Success value cannot be None")

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def error_message(self) -> str | None:
        return None

    def get_value(self) -> T:
        return self.value

    def get_value_or_default(self, default: T) -> T:
        return self.value

    def map(self, mapper: Callable[[T], U]) -> LookupResult[U]:
        """Transform the value, capturing any exception raised by ``mapper``."""
        try:
            return success(mapper(self.value))
        except Exception as exc:
            return failure(exc)

    def flat_map(self, mapper: Callable[[T], LookupResult[U]]) -> LookupResult[U]:
        """Chain another result-returning operation onto this value."""
        try:
            return mapper(self.value)
        except Exception as exc:
            return failure(exc)

    def if_success(self, consumer: Callable[[T], Any]) -> Success[T]:
        consumer(self.value)
        return self

    def if_failure(self, consumer: Callable[[str], Any]) -> Success[T]:
        return self


@dataclass(frozen=True)
class Failure:
    """Failed result holding a non-None error message."""

    message: str

    def __post_init__(self) -> None:
        if self.message is None:
            raise TypeError("Failure message cannot be None")

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def error_message(self) -> str | None:
        return self.message

    def get_value(self) -> Any:
        raise UnwrappedFailureError(f"Cannot get value from failed result: {self.message}")

    def get_value_or_default(self, default: T) -> T:
        return default

    def map(self, mapper: Callable[[Any], Any]) -> Failure:
        return self

    def flat_map(self, mapper: Callable[[Any], Any]) -> Failure:
        return self

    def if_success(self, consumer: Callable[[Any], Any]) -> Failure:
        return self

    def if_failure(self, consumer: Callable[[str], Any]) -> Failure:
        consumer(self.message)
        return self


LookupResult = Union[Success[T], Failure]


def success(value: T) -> Success[T]:
    """Create a successful result."""
    return Success(value)


def failure(error: str | BaseException) -> Failure:
    """Create a failed result from a message or an exception.

    Exceptions with an empty message fall back to the exception's class name
    so a Failure always carries some text.
    """
    if isinstance(error, BaseException):
        return Failure(str(error) or type(error).__name__)
    return Failure(error)
