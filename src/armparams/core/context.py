from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .clock import utc_stamp
from .env import getenv, getenv_flag

OutputFormat = Literal["text", "json"]


@dataclass(frozen=True)
class RunContext:
    run_id: str
    output_format: OutputFormat
    verbose: bool
    quiet: bool
    log_json: bool
    template_path: str | None

    @property
    def emit_diagnostics(self) -> bool:
        return self.verbose and not self.quiet

    @classmethod
    def from_args(
        cls,
        run_id: str | None = None,
        output_format: OutputFormat | None = None,
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
    ) -> "RunContext":
        resolved_run_id = run_id or getenv("ARMPARAMS_RUN_ID") or f"armparams-{utc_stamp()}"
        env_format = getenv("ARMPARAMS_FORMAT")
        resolved_format: OutputFormat = output_format or ("json" if env_format == "json" else "text")
        return cls(
            run_id=resolved_run_id,
            output_format=resolved_format,
            verbose=verbose,
            quiet=quiet,
            log_json=log_json or getenv_flag("ARMPARAMS_LOG_JSON"),
            template_path=getenv("ARMPARAMS_TEMPLATE") or None,
        )
