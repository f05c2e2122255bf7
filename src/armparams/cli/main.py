from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..core.context import RunContext
from ..core.errors import ScriptError
from ..core.exit_codes import ERR_INTERNAL, ERR_USAGE
from ..core.logging import log_event
from ..core.output import render_error
from ..paramfile.command import configure_generate_parser, configure_validate_parser, run_generate_command, run_validate_command
from ..template.command import configure_inspect_parser, run_inspect_command

COMMANDS = {
    "generate": run_generate_command,
    "inspect": run_inspect_command,
    "validate": run_validate_command,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="armparams", description="Generate ARM deployment parameter files from templates.")
    p.add_argument("--version", action="version", version=f"armparams {__version__}")
    p.add_argument("--run-id", help="run identifier used in log events")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format for reports and errors")
    p.add_argument("--log-json", action="store_true", help="emit log events as JSON lines on stderr")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="emit log events on stderr")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    sub = p.add_subparsers(dest="cmd", required=True)
    configure_generate_parser(sub)
    configure_inspect_parser(sub)
    configure_validate_parser(sub)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    ctx = RunContext.from_args(ns.run_id, ns.format, ns.verbose, ns.quiet, ns.log_json)
    try:
        log_event(ctx, "info", "cli", "start", cmd=ns.cmd, fmt=ctx.output_format)
        handler = COMMANDS.get(ns.cmd)
        if handler is None:
            raise ScriptError(f"unknown command: {ns.cmd}", ERR_USAGE, "usage_error")
        rc = handler(ctx, ns)
        log_event(ctx, "info", "cli", "finish", cmd=ns.cmd, rc=rc)
        return rc
    except ScriptError as exc:
        print(
            render_error(
                as_json=(ctx.output_format == "json"),
                message=str(exc),
                code=exc.code,
                kind=exc.kind,
                run_id=ctx.run_id,
            ),
            file=sys.stderr,
        )
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(
            render_error(
                as_json=(ctx.output_format == "json"),
                message=f"internal error: {exc}",
                code=ERR_INTERNAL,
                kind="internal_error",
                run_id=ctx.run_id,
            ),
            file=sys.stderr,
        )
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
