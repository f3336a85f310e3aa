"""
Tests for the command line driver.
"""

import json

import pytest

import cli


@pytest.fixture
def run(tmp_path):
    def _run(*args):
        return cli.main(["--data-dir", str(tmp_path), *args])
    return _run


class TestBracketCommands:
    """Tests for building and picking a bracket from the command line."""

    def test_init_writes_bracket(self, run, tmp_path, capsys):
        assert run("init") == 0
        data = json.loads((tmp_path / "bracket.json").read_text(encoding="utf-8"))
        assert sum(len(data[r]) for r in data) == 63
        assert "63 matchups" in capsys.readouterr().out

    def test_pick_and_show(self, run, tmp_path, capsys):
        run("init")
        assert run("pick", "0", "auburn") == 0
        data = json.loads((tmp_path / "bracket.json").read_text(encoding="utf-8"))
        assert data["2"][0]["teamA"] == {"seed": 1, "name": "Auburn"}

        assert run("show", "--round", "2") == 0
        out = capsys.readouterr().out
        assert "SECOND ROUND" in out
        assert "(1) Auburn" in out

    def test_bad_pick_reports_error(self, run, capsys):
        run("init")
        assert run("pick", "0", "Duke") == 1
        assert "ERROR" in capsys.readouterr().out

    def test_commands_need_a_bracket(self, run, capsys):
        assert run("validate") == 0
        assert "init" in capsys.readouterr().out

    def test_autofill_then_validate(self, run, capsys):
        run("init")
        assert run("validate") == 0
        assert "First Round" in capsys.readouterr().out

        assert run("autofill", "--strategy", "favorites") == 0
        assert "Champion: (1) Houston" in capsys.readouterr().out

        run("validate")
        assert "ready to submit" in capsys.readouterr().out

    def test_clear(self, run, tmp_path):
        run("init")
        fresh = (tmp_path / "bracket.json").read_text(encoding="utf-8")
        run("autofill", "--strategy", "random", "--seed", "4")
        assert run("clear") == 0
        assert json.loads((tmp_path / "bracket.json").read_text(encoding="utf-8")) == json.loads(fresh)


class TestResultCommands:
    """Tests for tracking the real tournament."""

    def test_result_and_status(self, run, tmp_path, capsys):
        run("init")
        run("autofill")
        assert run("result", "0", "ALST/SFC") == 0
        data = json.loads((tmp_path / "results.json").read_text(encoding="utf-8"))
        assert data["teams"]["Auburn"]["eliminated"] is True

        capsys.readouterr()
        assert run("status") == 0
        out = capsys.readouterr().out
        assert "Auburn" in out
        assert "Busted" in out

    def test_complete_round_rejected_when_undecided(self, run, capsys):
        assert run("complete-round", "1") == 1
        assert "undecided" in capsys.readouterr().out
