"""Tests for the document model: parsing, aliases, display keys."""

import pytest

from yamlci.errors import DocumentError
from yamlci.model import Job, PipelineDocument, ProcessorResult, RunSpec, Step, StepResult


class TestStep:
    def test_plain_run(self):
        step = Step.from_dict({"name": "build", "run": "make\n\nmake install\n"})
        assert step.run == "make\n\nmake install\n"
        assert step.commands() == ["make", "make install"]

    def test_structured_run(self):
        step = Step.from_dict({"name": "s", "run": {"script": "echo a", "lang": "sh", "return": False, "default": 3}})
        assert isinstance(step.run, RunSpec)
        assert step.run.lang == "sh"
        assert step.run.surfaces_output is False
        assert step.run.default == 3
        assert step.commands() == ["echo a"]

    def test_structured_run_return_absent_surfaces(self):
        spec = RunSpec.from_dict({"script": "echo a"})
        assert spec.surfaces_output is True

    def test_structured_run_return_null_suppresses(self):
        spec = RunSpec.from_dict({"script": "echo a", "return": None})
        assert spec.surfaces_output is False

    def test_no_run(self):
        step = Step.from_dict({"name": "noop", "description": "nothing"})
        assert step.run is None
        assert step.commands() == []

    def test_with_values_are_strings(self):
        step = Step.from_dict({"name": "s", "with": {"N": 3, "FLAG": True}})
        assert step.with_ == {"N": "3", "FLAG": "True"}

    def test_with_must_be_mapping(self):
        with pytest.raises(DocumentError):
            Step.from_dict({"name": "s", "with": ["a"]})

    def test_display_key(self):
        step = Step(name="build", description="compile it")
        assert step.display_key("name") == "build"
        assert step.display_key("description") == "compile it"
        assert step.display_key("run") is None
        assert step.display_key("__class__") is None


class TestPipelineDocument:
    def test_jobs_keep_declaration_order(self):
        doc = PipelineDocument.from_dict({
            "name": "p",
            "jobs": {"z": {"steps": []}, "a": {"steps": [{"name": "x"}]}, "m": None},
        })
        assert [j.name for j in doc.jobs] == ["z", "a", "m"]
        assert doc.jobs[1].steps == [Step(name="x")]
        assert doc.jobs[2] == Job(name="m")

    def test_var_alias(self):
        doc = PipelineDocument.from_dict({"name": "p", "var": {"A": "1"}, "jobs": {}})
        assert doc.variables == {"A": "1"}

    def test_variables_win_over_var(self):
        doc = PipelineDocument.from_dict({"name": "p", "var": {"A": "1"}, "variables": {"A": "2"}})
        assert doc.variables == {"A": "2"}

    def test_missing_fields(self):
        doc = PipelineDocument.from_dict({})
        assert doc.name is None
        assert doc.jobs == []

    def test_jobs_must_be_mapping(self):
        with pytest.raises(DocumentError):
            PipelineDocument.from_dict({"name": "p", "jobs": ["a"]})


class TestStepResult:
    def test_truthiness(self):
        assert not StepResult(title=None, output="")
        assert StepResult(title="a", output="")
        assert StepResult(title=None, output="x")


class TestMalformedDocument:
    def test_job_must_be_mapping(self):
        with pytest.raises(DocumentError, match="job 'j' must be a mapping"):
            PipelineDocument.from_dict({"name": "p", "jobs": {"j": "echo hi"}})

    def test_step_must_be_mapping(self):
        with pytest.raises(DocumentError, match="each step must be a mapping"):
            PipelineDocument.from_dict({"name": "p", "jobs": {"j": {"steps": ["echo hi"]}}})

    def test_variables_must_be_mapping(self):
        with pytest.raises(DocumentError, match="'variables' must be a mapping"):
            PipelineDocument.from_dict({"name": "p", "variables": "oops", "jobs": {}})

    @pytest.mark.parametrize("name", [False, 0, ""])
    def test_falsy_name_is_not_coerced(self, name):
        assert PipelineDocument.from_dict({"name": name}).name is None


class TestProcessorResult:
    def test_ok(self):
        assert ProcessorResult(output="x").ok
        assert ProcessorResult(output="").ok
        assert not ProcessorResult(error="No job found").ok
