from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema

from ..core.errors import InputNotFoundError, InputParseError, ParameterFileValidationError

# What `generate` emits: the 2019-04-01 URI and one empty `value` slot per parameter.
SCAFFOLD_SCHEMA = "parameter-file-scaffold.schema.json"
# Any deployment parameter file: older `$schema` URIs and Key Vault `reference` entries too.
DEPLOYMENT_PARAMETERS_SCHEMA = "deployment-parameters.schema.json"


def load_parameter_file_schema(name: str = SCAFFOLD_SCHEMA) -> dict[str, Any]:
    text = resources.files("armparams").joinpath("schemas").joinpath(name).read_text(encoding="utf-8")
    return json.loads(text)


def validate_parameter_file(document: Any, schema_name: str = SCAFFOLD_SCHEMA) -> None:
    schema = load_parameter_file_schema(schema_name)
    try:
        jsonschema.validate(document, schema)
    except jsonschema.ValidationError as exc:
        pointer = "/".join(str(p) for p in exc.absolute_path)
        loc = pointer or "<root>"
        raise ParameterFileValidationError(f"parameter file validation failed at {loc}: {exc.message}") from exc


def validate_parameter_file_path(path: str | Path) -> dict[str, Any]:
    file_path = Path(path)
    if not file_path.is_file():
        raise InputNotFoundError(f"parameter file not found: {file_path}")
    try:
        document = json.loads(file_path.read_text(encoding="utf-8-sig"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InputParseError(f"invalid parameter file JSON in {file_path}: {exc}") from exc
    except RecursionError as exc:
        raise InputParseError(f"parameter file JSON is nested too deeply to parse: {file_path}") from exc
    validate_parameter_file(document, DEPLOYMENT_PARAMETERS_SCHEMA)
    return document
