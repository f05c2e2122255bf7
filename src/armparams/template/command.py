from __future__ import annotations

import argparse
from pathlib import Path

from ..core.output import build_base_payload, emit
from ..core.context import RunContext
from ..core.exit_codes import OK
from ..core.logging import log_event
from .classify import is_expression_call, is_mandatory, is_non_referenced
from .extract import extract_parameters
from .loader import Template, default_template_path, load_template


def add_template_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--path",
        help="template to read (default: $ARMPARAMS_TEMPLATE or azuredeploy.json beside the invoking script)",
    )


def resolve_template_path(ctx: RunContext, raw: str | None) -> Path:
    if raw:
        return Path(raw)
    if ctx.template_path:
        return Path(ctx.template_path)
    return default_template_path()


def read_template(ctx: RunContext, raw: str | None) -> tuple[Path, Template]:
    path = resolve_template_path(ctx, raw)
    template = load_template(path)
    log_event(ctx, "info", "template", "load", path=str(path), bytes=path.stat().st_size)
    return path, template


def configure_inspect_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("inspect", help="list template parameters and how they are classified")
    add_template_path_argument(p)
    p.add_argument("--json", action="store_true", help="emit JSON output")


def _describe_default(value: object) -> str:
    if value is None:
        return "-"
    if is_expression_call(value):
        return "expression"
    return "literal"


def run_inspect_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    path, template = read_template(ctx, ns.path)
    parameters = extract_parameters(template)
    log_event(ctx, "info", "template", "extract", count=len(parameters))
    rows = [
        {
            "name": p.name,
            "type": p.type,
            "has_default": p.has_default,
            "default_kind": _describe_default(p.default_value),
            "mandatory": is_mandatory(p),
            "non_referenced": is_non_referenced(p),
        }
        for p in parameters
    ]
    as_json = ctx.output_format == "json" or bool(ns.json)
    if as_json:
        emit({**build_base_payload(ctx), "template": str(path), "parameters": rows}, as_json=True)
        return OK
    if not rows:
        print(f"{path}: no parameters declared")
        return OK
    width = max(len(row["name"]) for row in rows)
    for row in rows:
        flags = ",".join(key for key in ("mandatory", "non_referenced") if row[key]) or "-"
        print(f"{row['name']:<{width}}  type={row['type'] or '-'} default={row['default_kind']} flags={flags}")
    return OK
