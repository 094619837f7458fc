# example_jobs.py
# Sample jobs file: `jobseq sequence --file example_jobs.py`
from __future__ import annotations
from jobseq import wf, job


def workflow():
    return wf(
        job("lint"),
        job("test", needs="format-check"),
        job("format-check", needs="lint"),
        job("package", needs="test"),
        job("publish", needs="package"),
    )
