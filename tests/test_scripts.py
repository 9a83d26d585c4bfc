from __future__ import annotations

import importlib.util
import json
from pathlib import Path
from types import ModuleType

import pytest

from tablekeys.config import LOG_LEVEL_ENV

SCRIPTS = Path(__file__).resolve().parents[1] / "scripts"


def _load(name: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(name, SCRIPTS / f"{name}.py")
    assert spec and spec.loader
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


@pytest.fixture(autouse=True)
def _quiet_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # keep a developer .env out of script runs
    monkeypatch.setattr("tablekeys.config.load_dotenv", lambda **kwargs: False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


def test_split_keys_plain(capsys: pytest.CaptureFixture[str]) -> None:
    _load("split_keys").main(["file10.txt", "42"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["other:file\tdigits:10\tother:.txt", "digits:42"]


def test_split_keys_json(capsys: pytest.CaptureFixture[str]) -> None:
    _load("split_keys").main(["a1", "--json"])
    got = json.loads(capsys.readouterr().out)
    assert got == [{"text": "a", "kind": "other"}, {"text": "1", "kind": "digits"}]


def test_split_keys_reads_lines() -> None:
    mod = _load("split_keys")
    assert mod.read_inputs([], ["a1\n", "b2\r\n"]) == ["a1", "b2"]


def test_date_fields(capsys: pytest.CaptureFixture[str]) -> None:
    mod = _load("date_fields")
    mod.main(["2024-03-15", "1999-12-31", "--field", "day"])
    assert capsys.readouterr().out.splitlines() == ["2024-03-15: 15", "1999-12-31: 31"]

    mod.main(["2024-03-15"])
    assert capsys.readouterr().out.strip() == "2024-03-15: year=2024 month=3 day=15"


def test_date_fields_bad_input() -> None:
    with pytest.raises(SystemExit, match="Not an ISO date"):
        _load("date_fields").main(["15/03/2024"])
