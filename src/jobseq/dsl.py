# src/jobseq/dsl.py
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .model import Job


# ---------------------------------------------------------------------
# Functional Job helper
# ---------------------------------------------------------------------

def job(name: str, needs: Optional[str] = None) -> Job:
    """Declare a job, optionally depending on one other job."""
    if not name:
        raise ValueError("job() needs a non-empty name")
    return Job(name=name, needs=needs or None)


# ---------------------------------------------------------------------
# Builder API
# ---------------------------------------------------------------------

class JobBuilder:
    def __init__(self, name: str):
        self.name = name
        self._needs: Optional[str] = None

    def depends_on(self, job_name: str):
        # a job has at most one direct dependency
        if self._needs is not None and self._needs != job_name:
            raise ValueError(
                f"Job '{self.name}' already depends on '{self._needs}', "
                f"cannot also depend on '{job_name}'"
            )
        self._needs = job_name
        return self

    def build(self) -> Job:
        return job(self.name, needs=self._needs)


def build(name: str) -> JobBuilder:
    """Convenience: build('test').depends_on('lint').build()"""
    return JobBuilder(name)


# ---------------------------------------------------------------------
# Workflow helper (single-file story)
# ---------------------------------------------------------------------

def wf(*jobs: Job) -> List[Job]:
    """
    Workflow definition helper.

    Users can write:
        from jobseq import wf, job

        def workflow():
            return wf(
                job("a"),
                job("b", needs="a"),
            )

    Or use JOBS directly:
        JOBS = wf(job(...), job(...))
    """
    return list(jobs)


workflow = wf  # alias (avoid naming your own function workflow if you use it)


def build_map(jobs: Iterable[Job]) -> Dict[str, Optional[str]]:
    """
    Turn Job declarations into a dependency map, keeping declaration order.

    Requires:
      - job.name: str (unique)
      - job.needs: name of the job that must run BEFORE this job, or None
    """
    jobs = list(jobs)
    names = [j.name for j in jobs]
    if len(set(names)) != len(names):
        dupes = sorted({n for n in names if names.count(n) > 1})
        raise ValueError(f"Duplicate job names found: {dupes}")

    return {j.name: j.needs for j in jobs}
