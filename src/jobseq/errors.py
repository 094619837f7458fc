# errors.py
from __future__ import annotations

from typing import Hashable, Optional, Sequence


class JobSeqError(Exception):
    """
    Base error with enough context for:
      - clean CLI output
      - telling the caller which job broke the sequence
    """
    MESSAGE = "Jobs could not be sequenced"

    def __init__(
        self,
        message: str | None = None,
        *,
        job: Optional[Hashable] = None,
        dependency: Optional[Hashable] = None,
    ):
        self.message = message or self.MESSAGE
        self.job = job
        self.dependency = dependency
        super().__init__(self.message)

    def __str__(self) -> str:
        context = []
        if self.job is not None:
            context.append(f"job={self.job}")
        if self.dependency is not None:
            context.append(f"dependency={self.dependency}")
        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"


class SequencingError(JobSeqError):
    """Permissible error raised while ordering jobs."""


class SelfDependencyError(SequencingError):
    """A job declares itself as its own dependency."""
    MESSAGE = "Jobs cannot depend on themselves"


class CircularReferenceError(SequencingError):
    """Following a job's dependency chain leads back into the chain."""
    MESSAGE = "Jobs cannot have circular dependencies"

    def __init__(
        self,
        message: str | None = None,
        *,
        job: Optional[Hashable] = None,
        dependency: Optional[Hashable] = None,
        chain: Sequence[Hashable] = (),
    ):
        super().__init__(message, job=job, dependency=dependency)
        self.chain = list(chain)

    def __str__(self) -> str:
        base = super().__str__()
        if not self.chain:
            return base
        return f"{base}: {' -> '.join(str(j) for j in self.chain)}"


class JobsFormatError(JobSeqError, ValueError):
    """Job declarations could not be parsed."""
    MESSAGE = "Job declarations must be empty or in the format 'job => dependency'"


class UnknownJobError(JobSeqError, ValueError):
    """A dependency names a job that was never declared."""
    MESSAGE = "Dependency refers to a job that was not declared"
