"""Tests for the mtwister.tools.draw command-line entry point."""

from __future__ import annotations

import json

import pytest

from mtwister.runtime import context
from mtwister.tools.draw import main


@pytest.fixture(autouse=True)
def _clean_context(monkeypatch):
    monkeypatch.delenv(context.SEED_ENV_VAR, raising=False)
    context.reset()
    yield
    context.reset()


def _lines(capsys) -> list[str]:
    return capsys.readouterr().out.split()


class TestDrawCli:
    def test_default_config_prints_reference_words(self, capsys):
        main(["--count", "2"])
        assert _lines(capsys) == ["3499211612", "581869302"]

    def test_seed_flag(self, capsys):
        main(["--seed", "5489", "--count", "3"])
        assert _lines(capsys) == ["3499211612", "581869302", "3890346734"]

    def test_double_kind(self, capsys):
        main(["--seed", "5489", "--count", "1", "--kind", "double"])
        assert float(_lines(capsys)[0]) == 0.8147236863931789

    def test_int_kind(self, capsys):
        main(["--seed", "5489", "--count", "50", "--kind", "int"])
        values = [int(v) for v in _lines(capsys)]
        assert len(values) == 50
        assert all(0 <= v < 2**31 - 1 for v in values)

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / "run.json"
        path.write_text(json.dumps({"key": [0x123, 0x234, 0x345, 0x456]}), encoding="utf-8")
        main(["--config", str(path), "--count", "1"])
        assert _lines(capsys) == ["1067595299"]

    def test_seed_flag_overrides_config_file(self, tmp_path, capsys):
        path = tmp_path / "run.json"
        path.write_text(json.dumps({"seed": 1}), encoding="utf-8")
        main(["--config", str(path), "--seed", "5489", "--count", "1"])
        assert _lines(capsys) == ["3499211612"]

    def test_missing_config_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--config", str(tmp_path / "nope.json")])
        assert exc.value.code == 1
        assert "config not found" in capsys.readouterr().err
