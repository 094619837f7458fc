from __future__ import annotations
import os


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


SEPARATOR = os.environ.get("JOBSEQ_SEPARATOR", "")
DEBUG = _flag(os.environ.get("JOBSEQ_DEBUG", ""))
