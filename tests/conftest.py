from __future__ import annotations

import json
import shutil
import socket
from pathlib import Path

import pytest
from hypothesis import settings

_ALLOWED_MARKERS = {"unit", "integration"}

FIXTURES = Path(__file__).resolve().parent / "fixtures"

settings.register_profile("armparams", deadline=None, max_examples=60)
settings.load_profile("armparams")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def no_network_for_unit(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    if request.node.get_closest_marker("integration"):
        return

    def _blocked(*_args: object, **_kwargs: object) -> socket.socket:
        raise RuntimeError("network disabled in unit tests")

    monkeypatch.setattr(socket, "create_connection", _blocked)


@pytest.fixture(autouse=True)
def clean_armparams_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ARMPARAMS_TEMPLATE", "ARMPARAMS_FORMAT", "ARMPARAMS_LOG_JSON", "ARMPARAMS_RUN_ID"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def scenario_template(tmp_path: Path) -> Path:
    target = tmp_path / "scenario.json"
    shutil.copyfile(FIXTURES / "scenario.json", target)
    return target


@pytest.fixture
def azuredeploy_template(tmp_path: Path) -> Path:
    target = tmp_path / "azuredeploy.json"
    shutil.copyfile(FIXTURES / "azuredeploy.json", target)
    return target


@pytest.fixture
def write_template(tmp_path: Path):
    def _write(payload: object, name: str = "template.json") -> Path:
        target = tmp_path / name
        target.write_text(json.dumps(payload), encoding="utf-8")
        return target

    return _write
