# parser.py
from __future__ import annotations

import re
from typing import Dict, List, Optional

from .errors import JobsFormatError

# Declarations are separated by newlines, by a literal "\n" (as typed inside
# single quotes on a shell) or by commas.
SEPARATOR = re.compile(r"\r?\n|\\n|,")
DECLARATION = re.compile(r"^\s*(\w+)\s*=>\s*(\w*)\s*$")


def split_declarations(text: str) -> List[str]:
    """Split raw text into non-blank declarations."""
    return [part.strip() for part in SEPARATOR.split(text) if part.strip()]


def parse_jobs(text: str) -> Dict[str, Optional[str]]:
    """
    Parse job declarations into a job -> dependency mapping.

    Each declaration looks like `job => dependency` or `job =>` for a job
    without dependency:

        parse_jobs("a =>\\nb => c\\nc =>")  -> {"a": None, "b": "c", "c": None}

    Raises:
      JobsFormatError: on non-string input, a malformed declaration or a job
      declared twice
    """
    if not isinstance(text, str):
        raise JobsFormatError(
            f"Job declarations must be a string, got {type(text).__name__}"
        )

    jobs: Dict[str, Optional[str]] = {}
    for declaration in split_declarations(text):
        match = DECLARATION.match(declaration)
        if match is None:
            raise JobsFormatError(
                f"Invalid job declaration {declaration!r}, expected 'job => dependency'"
            )

        job, dependency = match.group(1), match.group(2)
        if job in jobs:
            raise JobsFormatError(f"Job {job!r} is declared more than once")
        jobs[job] = dependency or None

    return jobs
