"""
Tests for the management command parser.
"""
import pytest

from buffalo_dashboard import cli


def test_reseed_aborts_without_confirmation(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "n")

    def fail():
        raise AssertionError("reseed must not run")

    monkeypatch.setattr(cli, "run_reseed", fail)

    assert cli.main(["reseed"]) == 1
    assert "Aborted" in capsys.readouterr().out


def test_unknown_command_exits():
    with pytest.raises(SystemExit):
        cli.main(["migrate"])
