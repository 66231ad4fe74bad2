# scope.py
from __future__ import annotations

import os
import re
import shlex
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, List, Mapping

from .config import OutputOptions, RunOptions
from .errors import ExecutionError, UndefinedVariableError
from .model import PipelineDocument

_VAR_RE = re.compile(r"\$(\w+)")

# ./x.sh, ../../lib/x.tar.gz, also inside a token such as --file=./a.txt
_REL_PATH_RE = re.compile(r"(?<![\w./-])(?:\.\.?/)+(?:[\w.-]+/)*[\w-]+(?:\.\w+)+(?![\w/-])")


@dataclass(frozen=True)
class Scope:
    """
    Read-only variable namespace shared by every step of a run.

    `pwd` is the resolved document directory used for `$pwd` and path
    rewriting; `cwd` is the caller directory commands are started in.
    """
    values: Mapping[str, Any]
    output: OutputOptions
    pwd: str
    cwd: str

    def lookup(self, key: str, bindings: Mapping[str, str] | None = None, step: str | None = None) -> str:
        """Resolve `key` from the step's `with` bindings first, then the scope."""
        if bindings and key in bindings:
            return str(bindings[key])
        if key in self.values:
            return str(self.values[key])
        raise UndefinedVariableError(key=key, step=step)


# ----------------------------------------------------------------------
# Scope resolution
# ----------------------------------------------------------------------

def _pick(override, declared, default):
    if override is not None:
        return override
    if declared is not None:
        return declared
    return default


def resolve_output(doc: PipelineDocument, options: RunOptions) -> OutputOptions:
    declared = doc.variables.get("output") or {}
    if not isinstance(declared, dict):
        declared = {}
    return OutputOptions(
        prefix=str(_pick(options.prefix or None, declared.get("prefix") or None, "")),
        pretty=bool(_pick(options.pretty, declared.get("pretty"), False)),
        colored=bool(_pick(options.colored, declared.get("colored"), False)),
        table=bool(_pick(options.table, declared.get("table"), False)),
        title=doc.name or "",
    )


def resolve_pwd(caller_pwd: str, declared: Any = None) -> str:
    """
    Join the caller's directory with the document's `pwd`.

    A declared `/sub` is taken relative to the caller directory, the same
    as `sub`.
    """
    rel = str(declared or "").lstrip("/") or "."
    return os.path.normpath(os.path.join(os.path.abspath(caller_pwd), rel))


def resolve_scope(doc: PipelineDocument, options: RunOptions) -> Scope:
    output = resolve_output(doc, options)
    pwd = resolve_pwd(options.pwd, doc.variables.get("pwd"))

    values = dict(doc.variables)
    values["output"] = MappingProxyType(output.to_dict())
    values["pwd"] = pwd
    return Scope(
        values=MappingProxyType(values),
        output=output,
        pwd=pwd,
        cwd=os.path.abspath(options.pwd),
    )


# ----------------------------------------------------------------------
# Command preparation
# ----------------------------------------------------------------------

def interpolate(token: str, scope: Scope, bindings: Mapping[str, str] | None = None, step: str | None = None) -> str:
    return _VAR_RE.sub(lambda m: scope.lookup(m.group(1), bindings, step), token)


def rewrite_paths(token: str, pwd: str) -> str:
    return _REL_PATH_RE.sub(lambda m: os.path.normpath(os.path.join(pwd, m.group(0))), token)


def tokenize(line: str) -> List[str]:
    try:
        return shlex.split(line)
    except ValueError as e:
        raise ExecutionError(f"exec: cannot parse command {line!r}: {e}") from e


def prepare_command(
    line: str,
    scope: Scope,
    bindings: Mapping[str, str] | None = None,
    step: str | None = None,
) -> List[str]:
    """
    Turn one command line into argv.

    The line is split into shell words first; each word is then interpolated
    and path-rewritten on its own, so a value containing spaces stays a
    single argument.
    """
    argv = []
    for token in tokenize(line):
        token = interpolate(token, scope, bindings, step)
        argv.append(rewrite_paths(token, scope.pwd))
    return argv
