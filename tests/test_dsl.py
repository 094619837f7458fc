import pytest

from jobseq.dsl import JobBuilder, build, build_map, job, wf, workflow
from jobseq.model import Job


def test_job_defaults_to_no_dependency() -> None:
    j = job("a")
    assert j == Job(name="a", needs=None)
    assert j.needs is None


def test_job_empty_needs_normalized() -> None:
    assert job("a", needs="").needs is None


def test_job_requires_name() -> None:
    with pytest.raises(ValueError):
        job("")


def test_builder_depends_on() -> None:
    j = build("test").depends_on("lint").build()
    assert j == Job(name="test", needs="lint")


def test_builder_rejects_second_dependency() -> None:
    builder = JobBuilder("test").depends_on("lint")
    builder.depends_on("lint")  # same job again is fine
    with pytest.raises(ValueError) as ei:
        builder.depends_on("format")
    assert "already depends on 'lint'" in str(ei.value)


def test_wf_and_build_map_keep_order() -> None:
    jobs = wf(job("a"), job("b", needs="c"), job("c"))
    assert workflow is wf
    assert list(build_map(jobs).items()) == [("a", None), ("b", "c"), ("c", None)]


def test_build_map_duplicate_names() -> None:
    with pytest.raises(ValueError) as ei:
        build_map([job("a"), job("b"), job("a")])
    assert "['a']" in str(ei.value)
