# loader.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

from .errors import ConfigParseError


def load_document(path: str | Path) -> Dict[str, Any]:
    """
    Read a pipeline YAML file into a plain mapping.

    An empty file loads as {} so that validation reports what is missing.
    """
    doc_path = Path(path)
    try:
        raw = doc_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigParseError(str(doc_path), e.strerror or str(e)) from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigParseError(str(doc_path), f"invalid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError(str(doc_path), f"expected a mapping, got {type(data).__name__}")
    return data
