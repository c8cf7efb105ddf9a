"""Explicit success/failure outcome for operations that can fail.

Operations such as ``duration.subtract`` never raise on an expected failure;
they hand back a :class:`Result` the caller has to inspect.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, cast

from cronos.errors import CronosError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a fallible operation.

    Attributes:
        value: The produced value if successful, None if failed
        error: The error describing the failure, None if successful
    """

    value: T | None
    error: CronosError | None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError(
                f"Result needs exactly one of value or error, "
                f"got value={self.value!r}, error={self.error!r}"
            )

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value=value, error=None)

    @classmethod
    def err(cls, error: CronosError) -> "Result[T]":
        return cls(value=None, error=error)

    @property
    def success(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the carried error if the operation failed."""
        if self.error is not None:
            raise self.error
        return cast(T, self.value)
