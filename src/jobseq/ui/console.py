"""Console output formatting utilities for jobseq."""

from __future__ import annotations

import sys
from typing import Mapping, Optional, Sequence

from ..errors import CircularReferenceError, JobSeqError, JobsFormatError, SelfDependencyError, UnknownJobError

# user-facing title + suggestion per error kind
ERROR_HINTS = {
    SelfDependencyError: (
        "Self dependency",
        "Remove the job from its own dependency, e.g. change 'b => b' to 'b =>'.",
    ),
    CircularReferenceError: (
        "Circular dependency",
        "Break the cycle by removing one of the dependencies in the chain.",
    ),
    JobsFormatError: (
        "Invalid job declarations",
        "Declare one job per line as 'job => dependency' or 'job =>'.",
    ),
    UnknownJobError: (
        "Unknown job",
        "Declare every job that appears as a dependency, e.g. 'c =>'.",
    ),
}


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show detailed output including stack traces
        """
        self.debug = debug

    def print_sequence(self, rendered: str) -> None:
        """Print a rendered job sequence."""
        print(rendered)

    def print_map(self, jobs: Mapping) -> None:
        """Print a dependency map, one declaration per line."""
        for job, dependency in jobs.items():
            print(f"{job} => {dependency or ''}".rstrip())

    def print_error(
        self,
        title: str,
        message: str,
        details: Optional[Sequence[str]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Print structured error message.

        Args:
            title: Error title
            message: Main error message
            details: Optional list of detail lines
            suggestion: Optional suggestion for user
        """
        print(f"\nERROR: {title}", file=sys.stderr)
        print(f"{message}", file=sys.stderr)
        if details:
            for detail in details:
                print(f"  {detail}", file=sys.stderr)
        if suggestion:
            print(f"\n{suggestion}", file=sys.stderr)

    def print_failure(self, error: JobSeqError) -> None:
        """Print a permissible error with its title and hint."""
        title, suggestion = "Sequencing failed", None
        for kind, hint in ERROR_HINTS.items():
            if isinstance(error, kind):
                title, suggestion = hint
                break

        details = []
        chain = getattr(error, "chain", None)
        if chain:
            details.append("Chain: " + " -> ".join(str(j) for j in chain))
        self.print_error(title, str(error), details=details, suggestion=suggestion)

    def print_exception(self, exc: Exception) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exc()
        else:
            print(f"Error: {exc}", file=sys.stderr)

    def print_info(self, message: str) -> None:
        """Print informational message."""
        print(message)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        from .. import settings
        _console = Console(debug=settings.DEBUG)
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
