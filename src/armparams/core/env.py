"""Centralized environment variable helpers."""

from __future__ import annotations

import os

TRUTHY = {"1", "true", "yes", "on"}


def getenv(name: str, default: str | None = None) -> str | None:
    return os.environ.get(name, default)


def getenv_flag(name: str) -> bool:
    return (getenv(name, "") or "").strip().lower() in TRUTHY
