import io
import json
import sys
from pathlib import Path

import pytest

import main
from cli import AskOptions, parse_cli
from lineprompt.__main__ import main as entry_point


def _stdin(monkeypatch, text: str) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def test_parse_cli_defaults_to_ask() -> None:
    command, options = parse_cli(["--prompt", "Name: "])
    assert command == "ask"
    assert isinstance(options, AskOptions)
    assert options.prompt == "Name: "
    assert options.type_name == "str"


def test_ask_prints_value_on_stdout(capsys, monkeypatch) -> None:
    _stdin(monkeypatch, "abc\n200\n45\n")

    exit_code = main.main(["ask", "--prompt", "Enter age: ", "--type", "int", "--max", "119"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == "45\n"
    assert captured.err.count("Enter age: ") == 3
    assert "Error: invalid input" in captured.err
    assert "Error: expected at most 119" in captured.err


def test_ask_uses_default_for_empty_input(capsys, monkeypatch) -> None:
    _stdin(monkeypatch, "\n")

    exit_code = main.main(["ask", "--type", "int", "--default", "0"])

    assert exit_code == 0
    assert capsys.readouterr().out == "0\n"


def test_ask_choices_and_custom_messages(capsys, monkeypatch) -> None:
    _stdin(monkeypatch, "purple\nred\n")

    exit_code = main.main(
        ["ask", "--choice", "red", "--choice", "green", "--validator-error", "Pick red or green"]
    )

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == "red\n"
    assert "Pick red or green" in captured.err


def test_ask_rejects_min_for_non_numeric_type(capsys) -> None:
    exit_code = main.main(["ask", "--type", "str", "--min", "1"])

    assert exit_code == 2
    assert "need a numeric --type" in capsys.readouterr().err


def test_ask_rejects_unparsable_default(capsys) -> None:
    exit_code = main.main(["ask", "--type", "int", "--default", "lots"])

    assert exit_code == 2
    assert "Invalid value for --default" in capsys.readouterr().err


def test_ask_unknown_type(capsys) -> None:
    exit_code = main.main(["ask", "--type", "complex"])

    assert exit_code == 2
    assert "Unknown type" in capsys.readouterr().err


def test_ask_closed_input_exits_one(capsys, monkeypatch) -> None:
    _stdin(monkeypatch, "")

    exit_code = main.main(["ask", "--prompt", "Name: "])

    assert exit_code == 1
    assert "Input stream closed" in capsys.readouterr().err


@pytest.mark.parametrize("answer, expected", [("yes\n", 0), ("N\n", 1), ("\n", 1)])
def test_confirm_exit_codes(monkeypatch, answer, expected) -> None:
    _stdin(monkeypatch, answer)
    assert main.main(["confirm", "Proceed?"]) == expected


def test_confirm_error_message(capsys, monkeypatch) -> None:
    _stdin(monkeypatch, "maybe\ny\n")

    exit_code = main.main(["confirm", "Proceed?", "--error", "Please answer yes or no"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Proceed? [y/N] " in captured.err
    assert "Please answer yes or no" in captured.err


def test_config_missing(capsys, tmp_path: Path) -> None:
    exit_code = main.main(["confirm", "Proceed?", "--config", str(tmp_path / "missing.json")])

    assert exit_code == 2
    assert "Config path not found" in capsys.readouterr().err


def test_config_is_directory(capsys, tmp_path: Path) -> None:
    exit_code = main.main(["ask", "--config", str(tmp_path)])

    assert exit_code == 2
    assert "Config path must be a file" in capsys.readouterr().err


def test_config_invalid_json(capsys, tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{", encoding="utf-8")

    exit_code = main.main(["ask", "--config", str(path)])

    assert exit_code == 2
    assert "Failed to load config" in capsys.readouterr().err


def test_config_changes_type_error_message(capsys, monkeypatch, tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"messages": {"type_error": "Numbers only, please"}}), encoding="utf-8")
    _stdin(monkeypatch, "x\n5\n")

    exit_code = main.main(["ask", "--type", "int", "--config", str(path)])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == "5\n"
    assert "Numbers only, please" in captured.err


def test_log_level_flag_enables_debug(capsys, monkeypatch) -> None:
    _stdin(monkeypatch, "7\n")

    exit_code = main.main(["ask", "--type", "int", "--log-level", "debug"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "[debug]" in captured.err


def test_guess_plays_a_round(capsys, monkeypatch) -> None:
    _stdin(monkeypatch, "0\nn\n")

    exit_code = main.main(["guess", "--max", "1", "--seed", "5"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "You got it!" in out
    assert "between 0 and 1" in out


def test_guess_rejects_non_positive_max(capsys) -> None:
    assert main.main(["guess", "--max", "0"]) == 2


def test_unreadable_env_config_does_not_block_prompts(capsys, monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LINEPROMPT_CONFIG", str(tmp_path / "missing.json"))
    _stdin(monkeypatch, "x\n5\n")

    exit_code = main.main(["ask", "--type", "int"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == "5\n"
    assert "using packaged defaults" in captured.err
    assert "Error: invalid input" in captured.err


def test_console_script_entry_point_runs_main() -> None:
    assert entry_point is main.main
