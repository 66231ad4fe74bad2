# errors.py
from __future__ import annotations

from dataclasses import dataclass, field


class YamlCIError(Exception):
    """Base class for every error raised by yamlci."""


@dataclass
class DocumentError(YamlCIError):
    """A document section has the wrong shape, e.g. a job that is not a mapping."""
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class UndefinedVariableError(YamlCIError):
    """A `$name` in a command refers to a variable that is not in scope."""
    key: str
    step: str | None = None

    def __str__(self) -> str:
        where = f" (step '{self.step}')" if self.step else ""
        return f"undefined variable: ${self.key}{where}"


@dataclass
class ExecutionError(YamlCIError):
    """
    A command exited non-zero or could not be started.

    The message is the captured stderr of the command (trimmed), or a
    generic fallback when nothing was written to stderr.
    """
    message: str
    argv: list[str] = field(default_factory=list)
    exit_code: int | None = None

    def __str__(self) -> str:
        return self.message


@dataclass
class ConfigParseError(YamlCIError):
    """The pipeline document could not be read or parsed."""
    path: str
    reason: str

    def __str__(self) -> str:
        return f"Cannot load {self.path}: {self.reason}"
