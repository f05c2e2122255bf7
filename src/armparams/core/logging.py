from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING

from .clock import utc_now_iso

if TYPE_CHECKING:
    from .context import RunContext


def _text_value(value: object) -> str:
    text = str(value)
    if not text or any(ch.isspace() for ch in text) or '"' in text:
        return json.dumps(text)
    return text


def log_event(ctx: RunContext, level: str, component: str, action: str, **fields: object) -> None:
    """Write one diagnostic event to stderr; stdout carries only command output."""
    if not ctx.emit_diagnostics:
        return
    event = f"{component}.{action}"
    if ctx.log_json:
        payload = {
            "ts": utc_now_iso(),
            "level": level,
            "tool": "armparams",
            "run_id": ctx.run_id,
            "event": event,
            "component": component,
            "action": action,
            **fields,
        }
        sys.stderr.write(json.dumps(payload, sort_keys=True) + "\n")
        return
    extras = "".join(f" {key}={_text_value(value)}" for key, value in sorted(fields.items()))
    sys.stderr.write(f"{utc_now_iso()} {level.upper():<5} {event} run_id={ctx.run_id}{extras}\n")
