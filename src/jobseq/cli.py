# cli.py
from __future__ import annotations

import sys

import click

from jobseq import service, settings
from jobseq.errors import JobSeqError
from jobseq.model import Failure, Result, Success
from jobseq.ui.console import Console, set_console, get_console


def read_jobs(declarations: str | None, jobs_file: str | None) -> Result:
    """
    Resolve the job map from an argument, a file or stdin.

    Args:
        declarations: Declarations text, "-" or None to read stdin
        jobs_file: Optional path to a text or .py jobs file

    Returns:
        Success(job map) or Failure(JobsFormatError)
    """
    if declarations is not None and jobs_file is not None:
        raise click.UsageError("Pass declarations or --file, not both.")

    if jobs_file is not None:
        try:
            return Success(service.load_jobs_file(jobs_file))
        except JobSeqError as e:
            return Failure(e)

    if declarations is None or declarations == "-":
        declarations = sys.stdin.read()

    return service.parse(declarations)


def _fail(exc: Exception) -> None:
    console = get_console()
    if isinstance(exc, JobSeqError):
        console.print_failure(exc)
    else:
        console.print_exception(exc)
    sys.exit(1)


@click.group()
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and detailed output)",
)
def cli(debug):
    """jobseq: order jobs so every job runs after its dependency."""
    debug = debug or settings.DEBUG
    console = Console(debug=debug)
    set_console(console)


@cli.command(name="sequence")
@click.argument("declarations", required=False)
@click.option(
    "--file",
    "jobs_file",
    default=None,
    help="Jobs file: 'job => dependency' lines, or a .py file defining workflow()/JOBS",
)
@click.option("--separator", default=None, help="Separator between jobs in the output (default: JOBSEQ_SEPARATOR or none)")
def sequence_cmd(declarations, jobs_file, separator):
    """Print the jobs in an order that respects their dependencies."""
    console = get_console()

    try:
        loaded = read_jobs(declarations, jobs_file)
        if loaded.is_failure:
            _fail(loaded.error)

        result = service.sequence_jobs(loaded.value)
        if result.is_failure:
            _fail(result.error)

        console.print_sequence(service.render(result.value, separator))

    except click.UsageError:
        raise
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        _fail(e)


@cli.command(name="parse")
@click.argument("declarations", required=False)
@click.option("--file", "jobs_file", default=None, help="Jobs file to parse instead of DECLARATIONS")
def parse_cmd(declarations, jobs_file):
    """Parse declarations and print the resulting job -> dependency map."""
    console = get_console()

    try:
        loaded = read_jobs(declarations, jobs_file)
        if loaded.is_failure:
            _fail(loaded.error)

        console.print_map(loaded.value)

    except click.UsageError:
        raise
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        _fail(e)


if __name__ == "__main__":
    cli()
