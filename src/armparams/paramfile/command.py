from __future__ import annotations

import argparse

from ..core.output import build_base_payload, emit
from ..core.context import RunContext
from ..core.exit_codes import OK
from ..core.logging import log_event
from ..template.command import add_template_path_argument, read_template
from .builder import ParameterFileGenerator, selection_name
from .schema import validate_parameter_file, validate_parameter_file_path
from .serialize import serialize_parameter_file


def configure_generate_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("generate", help="print a parameter file scaffold for a template")
    add_template_path_argument(p)
    p.add_argument(
        "--only-mandatory-parameter",
        action="store_true",
        help="only parameters without a usable default (wins over --only-non-referenced-parameter)",
    )
    p.add_argument(
        "--only-non-referenced-parameter",
        action="store_true",
        help="only parameters whose default is missing or a literal rather than an expression call",
    )
    p.add_argument("--compact", action="store_true", help="emit compact JSON instead of indented JSON")
    p.add_argument("--validate", action="store_true", help="validate the scaffold against the bundled schema first")


def configure_validate_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("validate", help="validate a parameter file against the bundled schema")
    p.add_argument("--file", required=True, help="parameter file to validate")
    p.add_argument("--json", action="store_true", help="emit JSON output")


def run_generate_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    _, template = read_template(ctx, ns.path)
    generator = ParameterFileGenerator.from_template(template)
    log_event(ctx, "info", "paramfile", "extract", count=len(generator.all_parameters))
    log_event(
        ctx,
        "info",
        "paramfile",
        "classify",
        mandatory=len(generator.mandatory_parameters),
        non_referenced=len(generator.non_referenced_parameters),
    )
    only_mandatory = bool(ns.only_mandatory_parameter)
    only_non_referenced = bool(ns.only_non_referenced_parameter)
    document = generator.build(only_mandatory, only_non_referenced)
    log_event(
        ctx,
        "info",
        "paramfile",
        "build",
        selection=selection_name(only_mandatory, only_non_referenced),
        count=len(document["parameters"]),
    )
    if ns.validate:
        validate_parameter_file(document)
    print(serialize_parameter_file(document, compact=bool(ns.compact)))
    return OK


def run_validate_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    document = validate_parameter_file_path(ns.file)
    log_event(ctx, "info", "paramfile", "validate", path=ns.file)
    as_json = ctx.output_format == "json" or bool(ns.json)
    if as_json:
        emit(
            {**build_base_payload(ctx), "file": ns.file, "parameters": len(document["parameters"])},
            as_json=True,
        )
    else:
        print(f"ok: {ns.file} ({len(document['parameters'])} parameters)")
    return OK
