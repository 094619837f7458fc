from .dsl import job, wf, workflow, JobBuilder, build, build_map
from .errors import (
    CircularReferenceError,
    JobSeqError,
    JobsFormatError,
    SelfDependencyError,
    SequencingError,
    UnknownJobError,
)
from .model import Failure, Job, Success
from .parser import parse_jobs
from .sequencer import dependency_chain, sequence
from .service import render, sequence_jobs, sequence_text

__all__ = [
    "job", "wf", "workflow", "JobBuilder", "build", "build_map",
    "Job", "Success", "Failure",
    "JobSeqError", "SequencingError", "SelfDependencyError", "CircularReferenceError",
    "JobsFormatError", "UnknownJobError",
    "parse_jobs", "sequence", "dependency_chain",
    "sequence_jobs", "sequence_text", "render",
]
