# validate.py
from __future__ import annotations

from typing import Any, Mapping, NamedTuple

from .model import PipelineDocument


class ValidationResult(NamedTuple):
    valid: bool
    error: str | None


def validate(doc: PipelineDocument | Mapping[str, Any]) -> ValidationResult:
    """
    Check the minimal structure needed before anything runs.

    Accepts the raw document mapping as well, so `name: false` or a
    malformed `jobs` value is judged before any type coercion.
    """
    if isinstance(doc, PipelineDocument):
        name, jobs = doc.name, doc.jobs
    else:
        name, jobs = doc.get("name"), doc.get("jobs")

    if not name:
        return ValidationResult(False, "Please provide name")
    if not jobs:
        return ValidationResult(False, "No job found")
    return ValidationResult(True, None)
