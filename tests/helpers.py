from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
GOLDENS_ROOT = ROOT / "tests/goldens"


def run_armparams(*args: str, cwd: Path | None = None, env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    merged = os.environ.copy()
    for name in ("ARMPARAMS_TEMPLATE", "ARMPARAMS_FORMAT", "ARMPARAMS_LOG_JSON", "ARMPARAMS_RUN_ID"):
        merged.pop(name, None)
    existing = merged.get("PYTHONPATH", "")
    src_path = str(ROOT / "src")
    merged["PYTHONPATH"] = f"{src_path}{os.pathsep}{existing}" if existing else src_path
    merged["PYTHONIOENCODING"] = "utf-8"
    merged.update(env or {})
    return subprocess.run(
        [sys.executable, "-m", "armparams", *args],
        cwd=(cwd or ROOT),
        env=merged,
        text=True,
        encoding="utf-8",
        capture_output=True,
        check=False,
    )


def golden_text(name: str) -> str:
    return (GOLDENS_ROOT / name).read_text(encoding="utf-8")
