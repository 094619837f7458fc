# model.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, Mapping, NoReturn, Optional, TypeVar, Union

JobId = Hashable
DependencyMap = Mapping[JobId, Optional[JobId]]

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True)
class Job:
    """
    A job declaration: a name plus the single job that must run BEFORE it.

    `needs` is None when the job has no dependency.
    """
    name: str
    needs: str | None = None


@dataclass(frozen=True)
class Success(Generic[T]):
    """Outcome of a call that completed."""
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Outcome of a call stopped by a permissible (expected) error."""
    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Union[Success[T], Failure[E]]
