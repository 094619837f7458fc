# service.py
from __future__ import annotations

import runpy
from collections.abc import Hashable, Mapping
from pathlib import Path
from typing import Dict, List, Optional

from . import settings
from .dsl import build_map
from .errors import CircularReferenceError, JobSeqError, JobsFormatError, SelfDependencyError
from .model import DependencyMap, Failure, Job, JobId, Result, Success
from .parser import parse_jobs
from .sequencer import sequence
from .ui.console import get_console

# Errors the caller is expected to report; anything else propagates.
PERMISSIBLE_ERRORS = (SelfDependencyError, CircularReferenceError, JobsFormatError)


def _handle_error(error: Exception) -> Failure:
    if not isinstance(error, PERMISSIBLE_ERRORS):
        raise error
    return Failure(error)


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def parse(text: str) -> Result[Dict[str, Optional[str]], JobsFormatError]:
    """Parse declarations; format problems come back as Failure."""
    try:
        jobs = parse_jobs(text)
    except JobSeqError as e:
        return _handle_error(e)

    get_console().print_debug(f"Parsed {len(jobs)} job(s)")
    return Success(jobs)


def _validate(jobs: object) -> None:
    if not isinstance(jobs, Mapping):
        raise JobsFormatError(
            f"Jobs must be a mapping of job -> dependency, got {type(jobs).__name__}"
        )
    for job, dependency in jobs.items():
        if dependency is not None and not isinstance(dependency, Hashable):
            raise JobsFormatError(
                f"Dependency of job {job!r} must be a job id, got {type(dependency).__name__}"
            )


def sequence_jobs(jobs: DependencyMap) -> Result[List[JobId], JobSeqError]:
    """
    Validate a dependency map and sequence it.

    Returns:
      Success(list of job ids) or Failure(permissible error)

    Raises:
      UnknownJobError: a dependency was never declared as a job
    """
    try:
        _validate(jobs)
    except JobSeqError as e:
        return _handle_error(e)

    result = sequence(jobs)
    console = get_console()
    if result.is_success:
        console.print_debug(f"Sequenced {len(result.value)} job(s): {result.value}")
    else:
        console.print_debug(f"Sequencing stopped: {type(result.error).__name__}")
    return result


def sequence_text(text: str) -> Result[List[JobId], JobSeqError]:
    """Parse declarations and sequence them in one go."""
    parsed = parse(text)
    if parsed.is_failure:
        return parsed
    return sequence_jobs(parsed.value)


def render(order: List[JobId], separator: str | None = None) -> str:
    """Join a sequence for display; "" gives the compact form ("afcbde")."""
    if separator is None:
        separator = settings.SEPARATOR
    return separator.join(str(j) for j in order)


# ----------------------------------------------------------------------
# Job file loading (text file or python module)
# ----------------------------------------------------------------------

def load_jobs_file(path: str | Path) -> Dict[JobId, Optional[JobId]]:
    """
    Load job declarations from a file.

    A .py file must define either:
      - workflow() -> List[Job] | Mapping
      - JOBS = [Job, ...] | {job: dependency}

    Anything else is read as text declarations ("a => b" per line).

    Raises:
      FileNotFoundError, JobsFormatError, TypeError
    """
    jobs_path = Path(path).expanduser().resolve()
    if not jobs_path.exists():
        raise FileNotFoundError(f"Jobs file not found: {jobs_path}")

    if jobs_path.suffix != ".py":
        return parse_jobs(jobs_path.read_text(encoding="utf-8"))

    module_name = f"jobseq_jobs_{jobs_path.stem}"
    globals_dict = runpy.run_path(str(jobs_path), run_name=module_name)

    jobs = None
    if "workflow" in globals_dict and callable(globals_dict["workflow"]):
        try:
            jobs = globals_dict["workflow"]()
        except TypeError as e:
            if "positional arguments but" in str(e) and "was given" in str(e):
                raise TypeError(
                    "Your workflow() is being called with arguments (name collision with the helper). "
                    "Use the 'wf' helper instead: `from jobseq import wf, job` then "
                    "`def workflow(): return wf(job(...), job(...))`"
                ) from e
            raise
    elif "JOBS" in globals_dict:
        jobs = globals_dict["JOBS"]

    if isinstance(jobs, Mapping):
        return dict(jobs)
    if isinstance(jobs, list) and all(isinstance(j, Job) for j in jobs):
        return build_map(jobs)

    raise TypeError(
        "Jobs file must return/define a List[Job] or a job -> dependency mapping. "
        "Define workflow() -> List[Job] or JOBS = [Job, ...]."
    )
