# model.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import DocumentError


@dataclass(frozen=True)
class RunSpec:
    """
    Structured form of a step's `run`:

        run:
          script: |
            ./build.sh
          lang: sh
          return: false
          default: built

    `lang` is kept for documents that set it, commands always go through
    the argv splitter.
    """
    script: str = ""
    lang: str | None = None
    returns: bool | None = True
    default: Any = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> RunSpec:
        return cls(
            script=str(data.get("script") or ""),
            lang=data.get("lang"),
            # absent -> surfaced, explicit null -> suppressed
            returns=data["return"] if "return" in data else True,
            default=data.get("default"),
        )

    @property
    def surfaces_output(self) -> bool:
        return self.returns is not False and self.returns is not None


@dataclass(frozen=True)
class Step:
    """A single unit of work inside a job."""
    name: str
    description: str | None = None
    with_: Dict[str, str] = field(default_factory=dict)
    run: str | RunSpec | None = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Step:
        raw_run = data.get("run")
        if isinstance(raw_run, dict):
            run: str | RunSpec | None = RunSpec.from_dict(raw_run)
        elif raw_run is None:
            run = None
        else:
            run = str(raw_run)

        bindings = data.get("with") or {}
        if not isinstance(bindings, dict):
            raise DocumentError(f"step {data.get('name')!r}: 'with' must be a mapping")

        description = data.get("description")
        return cls(
            name="" if data.get("name") is None else str(data["name"]),
            description=None if description is None else str(description),
            with_={str(k): "" if v is None else str(v) for k, v in bindings.items()},
            run=run,
        )

    @property
    def script(self) -> str:
        if isinstance(self.run, RunSpec):
            return self.run.script
        return self.run or ""

    def commands(self) -> List[str]:
        """Non-empty command lines of the step, in order."""
        return [line for line in self.script.split("\n") if line.strip()]

    def display_key(self, key: str) -> Optional[str]:
        """Value of the field named `key`, used as the step's display label."""
        if key == "name":
            return self.name
        if key == "description":
            return self.description
        return None


@dataclass(frozen=True)
class Job:
    """A named, ordered list of steps."""
    name: str
    steps: List[Step] = field(default_factory=list)

    @classmethod
    def from_dict(cls, name: str, data: Dict[str, Any] | None) -> Job:
        if data is not None and not isinstance(data, dict):
            raise DocumentError(f"job {name!r} must be a mapping with 'steps', got {type(data).__name__}")
        raw_steps = (data or {}).get("steps") or []
        if not isinstance(raw_steps, list):
            raise DocumentError(f"job {name!r}: 'steps' must be a list")
        for s in raw_steps:
            if s is not None and not isinstance(s, dict):
                raise DocumentError(f"job {name!r}: each step must be a mapping, got {type(s).__name__}")
        return cls(name=name, steps=[Step.from_dict(s or {}) for s in raw_steps])


@dataclass(frozen=True)
class PipelineDocument:
    """
    Root of a pipeline document.

    Canonical variables key: `variables`
    Backwards-compatible alias: `var`
    """
    name: str | None
    variables: Dict[str, Any] = field(default_factory=dict)
    jobs: List[Job] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> PipelineDocument:
        variables = data.get("variables")
        if variables is None:
            variables = data.get("var")

        if not isinstance(variables or {}, dict):
            raise DocumentError(f"'variables' must be a mapping, got {type(variables).__name__}")

        raw_jobs = data.get("jobs") or {}
        if not isinstance(raw_jobs, dict):
            raise DocumentError("'jobs' must be a mapping of job name to job")

        name = data.get("name")
        return cls(
            # falsy names (null, false, 0, "") stay None so validation rejects them
            name=str(name) if name else None,
            variables=dict(variables or {}),
            # dicts keep YAML declaration order
            jobs=[Job.from_dict(str(k), v) for k, v in raw_jobs.items()],
        )


# ----------------------------------------------------------------------
# Results
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class StepResult:
    """Display label and captured output of one step."""
    title: str | None
    output: str = ""

    def __bool__(self) -> bool:
        return bool(self.title) or bool(self.output)


@dataclass(frozen=True)
class ProcessorResult:
    """Outcome of a pipeline run: exactly one of the two fields is set."""
    output: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
