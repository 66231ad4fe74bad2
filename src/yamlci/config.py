# config.py
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_FILENAME = "runner.yaml"


@dataclass(frozen=True)
class OutputOptions:
    """Effective output settings, after merging caller and document values."""
    prefix: str = ""
    pretty: bool = False
    colored: bool = False
    table: bool = False
    title: str = ""

    def to_dict(self) -> dict:
        return {
            "prefix": self.prefix,
            "pretty": self.pretty,
            "colored": self.colored,
            "table": self.table,
            "title": self.title,
        }


@dataclass(frozen=True)
class RunOptions:
    """
    Caller-supplied settings for one run.

    `pwd` is the caller's working directory, read once by the front-end and
    passed down; the engine never looks at the process cwd itself.
    Output fields left as None fall back to the document's
    `variables.output`, then to OutputOptions defaults.
    """
    pwd: str
    filename: str = DEFAULT_FILENAME
    prefix: str | None = None
    pretty: bool | None = None
    colored: bool | None = None
    table: bool | None = None
    max_workers: int | None = None
