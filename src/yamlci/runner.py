# runner.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import partial
from typing import Any, Iterable, List, Mapping

from . import executor
from .config import RunOptions
from .loader import load_document
from .model import Job, PipelineDocument, ProcessorResult, RunSpec, Step, StepResult
from .scope import Scope, prepare_command, resolve_scope
from .taskgroup import run_all
from .ui.console import get_console
from .ui.formatter import format_results
from .validate import validate


# ----------------------------------------------------------------------
# Steps
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class PreparedStep:
    """A step whose command lines are already interpolated into argv."""
    step: Step
    title: str | None
    commands: List[List[str]]


def prepare_step(step: Step, scope: Scope) -> PreparedStep:
    """
    Interpolate every command line of `step`.

    Raises UndefinedVariableError before anything has been executed.
    """
    title = step.display_key(scope.output.prefix) if scope.output.prefix else None
    commands = [
        prepare_command(line, scope, step.with_, step=step.name)
        for line in step.commands()
    ]
    return PreparedStep(step=step, title=title, commands=commands)


def execute_step(prepared: PreparedStep, scope: Scope) -> StepResult:
    step = prepared.step
    if step.run is None:
        return StepResult(title=prepared.title, output="")

    get_console().print_debug(f"step: {step.name}")

    output = ""
    for argv in prepared.commands:
        output += executor.execute(argv, cwd=scope.cwd) + "\n"

    if isinstance(step.run, RunSpec) and not step.run.surfaces_output:
        default = step.run.default
        output = "" if default is None else str(default)

    return StepResult(title=prepared.title, output=output)


def run_step(step: Step, scope: Scope) -> StepResult:
    """Run one step's commands in order and collect its output."""
    return execute_step(prepare_step(step, scope), scope)


# ----------------------------------------------------------------------
# Jobs
# ----------------------------------------------------------------------

def run_job(job: Job, scope: Scope, max_workers: int | None = None) -> List[StepResult]:
    """
    Run all steps of `job` concurrently; results keep declaration order.

    Every step is prepared first, so a bad variable anywhere in the job
    stops it before any of its commands start.
    """
    get_console().print_debug(f"job: {job.name} ({len(job.steps)} step(s))")
    prepared = [prepare_step(step, scope) for step in job.steps]
    return run_all([partial(execute_step, p, scope) for p in prepared], max_workers=max_workers)


def flatten(results: Iterable[Any]) -> List[StepResult]:
    """Flatten nested result lists, dropping empty entries."""
    flat: List[StepResult] = []
    for item in results:
        if isinstance(item, (list, tuple)):
            flat.extend(flatten(item))
        elif item:
            flat.append(item)
    return flat


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def run_pipeline(data: Mapping[str, Any] | PipelineDocument, options: RunOptions) -> ProcessorResult:
    """
    Validate, resolve the scope, run jobs one after another and render.

    Validation problems come back in `ProcessorResult.error`; any other
    failure (malformed section, undefined variable, failing command) is
    raised.
    """
    valid, error = validate(data)
    if not valid:
        return ProcessorResult(output=None, error=error)

    doc = data if isinstance(data, PipelineDocument) else PipelineDocument.from_dict(dict(data))

    scope = resolve_scope(doc, options)

    job_results = []
    for job in doc.jobs:
        job_results.append(run_job(job, scope, max_workers=options.max_workers))

    return ProcessorResult(
        output=format_results(flatten(job_results), scope.output),
        error=None,
    )


def run_file(options: RunOptions) -> ProcessorResult:
    """Load `options.filename` (relative to `options.pwd`) and run it."""
    path = os.path.join(options.pwd, options.filename)
    return run_pipeline(load_document(path), options)
