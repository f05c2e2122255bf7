"""Report and error payload rendering for CLI commands."""

from __future__ import annotations

import json

from .context import RunContext

ERROR_SCHEMA_NAME = "armparams.error.v1"


def emit(payload: dict[str, object], as_json: bool) -> None:
    # Reports are diffable: keys sorted, indented unless a single JSON line was asked for.
    print(json.dumps(payload, sort_keys=True, indent=None if as_json else 2))


def build_base_payload(ctx: RunContext, status: str = "ok") -> dict[str, object]:
    return {
        "schema_version": 1,
        "tool": "armparams",
        "status": status,
        "run_id": ctx.run_id,
        "format": ctx.output_format,
    }


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error", run_id: str = "") -> str:
    if not as_json:
        return message
    envelope = {
        "schema_name": ERROR_SCHEMA_NAME,
        "schema_version": 1,
        "tool": "armparams",
        "status": "error",
        "run_id": run_id,
        "errors": [{"code": code, "kind": kind, "message": message}],
    }
    return json.dumps(envelope, sort_keys=True)
