# sequencer.py
from __future__ import annotations

from typing import List, Optional

from .errors import CircularReferenceError, SelfDependencyError, SequencingError, UnknownJobError
from .model import DependencyMap, Failure, JobId, Result, Success


def _has_dependency(dependency: Optional[JobId]) -> bool:
    # "" is accepted as the empty marker next to None
    return dependency is not None and dependency != ""


def check_pair(jobs: DependencyMap, job: JobId, dependency: Optional[JobId]) -> List[JobId]:
    """
    Validate one (job, dependency) pair against the whole map.

    Walks the chain dependency -> jobs[dependency] -> ... until a job with no
    dependency is reached. The walk visits at most len(jobs) keys: every step
    either reaches a new key or stops with an error.

    Returns:
      the resolved chain, root first and ending with `dependency`
      (empty when `dependency` is absent)

    Raises:
      SelfDependencyError: job == dependency, or a visited job names itself
      CircularReferenceError: the walk comes back to `job` or to a visited job
      UnknownJobError: a visited id is not a key of `jobs`
    """
    if not _has_dependency(dependency):
        return []

    if dependency == job:
        raise SelfDependencyError(job=job, dependency=dependency)

    walked: List[JobId] = [dependency]
    seen = {job, dependency}
    referrer, current = job, dependency

    for _ in range(len(jobs)):
        if current not in jobs:
            raise UnknownJobError(job=referrer, dependency=current)

        parent = jobs[current]
        if not _has_dependency(parent):
            walked.reverse()
            return walked

        if parent == current:
            raise SelfDependencyError(job=current, dependency=parent)
        if parent in seen:
            raise CircularReferenceError(
                job=job,
                dependency=dependency,
                chain=[job, *walked, parent],
            )

        seen.add(parent)
        walked.append(parent)
        referrer, current = current, parent

    raise CircularReferenceError(job=job, dependency=dependency, chain=[job, *walked])


def dependency_chain(jobs: DependencyMap, job: JobId) -> List[JobId]:
    """Root-first list of everything `job` transitively depends on."""
    if job not in jobs:
        raise UnknownJobError(job=job)
    return check_pair(jobs, job, jobs[job])


def _splice(jobs: DependencyMap) -> List[JobId]:
    ordered: List[JobId] = []

    for job, dependency in jobs.items():
        chain = check_pair(jobs, job, dependency)

        if job in ordered:
            # already placed as someone's dependency: its own chain goes right before it
            idx = ordered.index(job)
            ordered[idx:idx] = chain
        else:
            ordered.extend(chain)
            ordered.append(job)

    # first occurrence wins
    return list(dict.fromkeys(ordered))


def sequence(jobs: DependencyMap) -> Result[List[JobId], SequencingError]:
    """
    Order jobs so that every job comes after the job it depends on.

    Jobs without interdependencies keep the map's iteration order:

        sequence({"a": None, "b": "c", "c": None})  -> Success(["a", "c", "b"])
        sequence({"a": None, "b": "b"})             -> Failure(SelfDependencyError)

    Self-dependencies and circular references come back as Failure and stop
    the whole call. UnknownJobError is a broken precondition and is raised.
    """
    try:
        return Success(_splice(jobs))
    except SequencingError as e:
        return Failure(e)
