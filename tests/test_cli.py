"""Tests for the command-line interface."""

import getpass
import json
import string
import sys

import pytest

from password_analyzer.cli import main


@pytest.fixture
def config_path(tmp_path):
    return str(tmp_path / "config.json")


def test_check_json(config_path, capsys):
    assert main(["check", "Tr0ub4dor&3", "--json", "-q", "--config", config_path]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["score"] == 4
    assert payload["label"] == "Very Strong"
    assert payload["percentage"] == 100
    assert payload["feedback"] == []
    assert payload["crack_time"].endswith("millennia")


def test_check_prompts_when_password_omitted(config_path, capsys, monkeypatch):
    monkeypatch.setattr(getpass, "getpass", lambda prompt="": "a" * 12)

    assert main(["check", "--config", config_path]) == 0

    out = capsys.readouterr().out
    assert "Score:      2" in out
    assert "Strength:   Weak (50%)" in out
    assert "Avoid repeated characters (e.g., 'aaa')" in out


def test_check_common_password(config_path, capsys):
    assert main(["check", "LetMeIn", "--config", config_path]) == 0

    out = capsys.readouterr().out
    assert "Crack time: Instantly" in out
    assert "This is a commonly used password" in out


def test_generate(config_path, capsys):
    assert main(["generate", "-l", "12", "-n", "3", "--no-symbols", "--config", config_path]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    for line in lines:
        assert len(line) == 12
        assert set(line) <= set(string.ascii_letters + string.digits)


def test_generate_fallback(config_path, capsys):
    args = ["generate", "--no-lowercase", "--no-uppercase", "--no-numbers", "--no-symbols"]
    assert main(args + ["--config", config_path]) == 0

    password = capsys.readouterr().out.strip()
    assert len(password) == 16
    assert set(password) <= set(string.ascii_lowercase)


def test_generate_with_check(config_path, capsys):
    assert main(["generate", "-l", "20", "--check", "--config", config_path]) == 0
    assert "Crack time:" in capsys.readouterr().out


def test_generate_uses_config_file(config_path, capsys):
    with open(config_path, "w") as f:
        json.dump({"length": 10, "include_symbols": False, "include_uppercase": False}, f)

    assert main(["generate", "--config", config_path]) == 0

    password = capsys.readouterr().out.strip()
    assert len(password) == 10
    assert set(password) <= set(string.ascii_lowercase + string.digits)


def test_save_config(config_path):
    assert main(["generate", "-l", "20", "--no-numbers", "--save-config", "-q", "--config", config_path]) == 0

    with open(config_path) as f:
        saved = json.load(f)
    assert saved["length"] == 20
    assert saved["include_numbers"] is False
    assert saved["include_symbols"] is True


def test_negative_count_fails(config_path):
    assert main(["generate", "-n", "-1", "-q", "--config", config_path]) == 1


def test_bad_config_fails(config_path, capsys):
    with open(config_path, "w") as f:
        f.write("{broken")

    assert main(["check", "x", "--config", config_path]) == 1
    assert "Error" in capsys.readouterr().err


def test_audit(config_path, tmp_path, capsys):
    wordlist = tmp_path / "words.txt"
    wordlist.write_text("password\nTr0ub4dor&3\n")

    assert main(["audit", str(wordlist), "--no-progress", "--config", config_path]) == 0

    out = capsys.readouterr().out
    assert "Entries:            2" in out
    assert "Common passwords:   1" in out
    assert "Tr0ub4dor&3" not in out


def test_audit_missing_wordlist(config_path, tmp_path):
    assert main(["audit", str(tmp_path / "missing.txt"), "-q", "--config", config_path]) == 1


def test_no_arguments_prints_examples(capsys):
    assert main([]) == 1
    assert "password-analyzer check" in capsys.readouterr().out


def test_no_arguments_from_console_script(capsys, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["password-analyzer"])
    assert main() == 1
    assert "Audit a wordlist:" in capsys.readouterr().out


def test_unknown_command_rejected(config_path):
    with pytest.raises(SystemExit):
        main(["frobnicate", "--config", config_path])


def test_config_with_string_boolean_fails(config_path, capsys):
    with open(config_path, "w") as f:
        json.dump({"include_symbols": "false"}, f)

    assert main(["generate", "--config", config_path]) == 1
    assert "include_symbols" in capsys.readouterr().err
