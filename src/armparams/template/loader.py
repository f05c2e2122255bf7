from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from ..core.errors import TemplateNotFoundError, TemplateParseError

DEFAULT_TEMPLATE_NAME = "azuredeploy.json"

Template = dict[str, Any]


def default_template_path(script: str | Path | None = None) -> Path:
    """Return ``azuredeploy.json`` beside the invoking script."""
    origin = script if script is not None else sys.argv[0]
    if not origin:
        return Path.cwd() / DEFAULT_TEMPLATE_NAME
    return Path(origin).resolve().parent / DEFAULT_TEMPLATE_NAME


def load_template(path: str | Path) -> Template:
    template_path = Path(path)
    if not template_path.exists():
        raise TemplateNotFoundError(f"template not found: {template_path}")
    if not template_path.is_file():
        raise TemplateNotFoundError(f"template path is not a file: {template_path}")
    try:
        text = template_path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise TemplateParseError(f"template is not UTF-8 text: {template_path}") from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TemplateParseError(
            f"invalid template JSON in {template_path} at line {exc.lineno} column {exc.colno}: {exc.msg}"
        ) from exc
    except RecursionError as exc:
        raise TemplateParseError(f"template JSON is nested too deeply to parse: {template_path}") from exc
    if not isinstance(payload, dict):
        raise TemplateParseError(
            f"template root must be a JSON object, got {type(payload).__name__}: {template_path}"
        )
    return payload
