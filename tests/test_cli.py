# tests/test_cli.py

import logging

import pytest

from strkit.cli import main


def run(capsys, *argv):
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out.strip(), captured.err.strip()


def test_capitalize(capsys):
    assert run(capsys, "capitalize", "  hello world ") == (0, "Hello world", "")


def test_digits(capsys):
    assert run(capsys, "digits", "12.34") == (0, "1234", "")


def test_expiry_valid_and_invalid(capsys):
    assert run(capsys, "expiry", "12/99") == (0, "valid", "")
    code, out, _ = run(capsys, "expiry", "13/25")
    assert code == 1
    assert out == 'invalid: Invalid format. Should be like "01/26" or "11/30" in "MM/YY"'


def test_truncate_uses_configured_default(capsys, tmp_path):
    assert run(capsys, "truncate", "12345678901234567890") == (0, "1234567890...", "")

    path = tmp_path / "short.yaml"
    path.write_text("truncate:\n  max_length: 3\n", encoding="utf-8")
    assert run(capsys, "--config", str(path), "truncate", "abcdef") == (0, "abc...", "")
    assert run(capsys, "-c", str(path), "truncate", "abcdef", "--limit", "0") == (0, "...", "")


def test_group_formats(capsys, tmp_path):
    assert run(capsys, "group", "123456789") == (0, "12,34,56,789", "")
    assert run(capsys, "group", "123456789", "--format", "international") == (0, "123,456,789", "")
    assert run(capsys, "group", "1234567", "-s", " ") == (0, "12 34 567", "")

    path = tmp_path / "intl.yaml"
    path.write_text("digits:\n  format: international\n  separator: _\n", encoding="utf-8")
    assert run(capsys, "-c", str(path), "group", "1234567") == (0, "1_234_567", "")


def test_helper_errors_go_to_stderr(capsys):
    code, out, err = run(capsys, "group", "12a4")
    assert code == 1
    assert out == ""
    assert err == "Error: Not all characters are digits"

    code, _, err = run(capsys, "capitalize", "   ")
    assert code == 1
    assert err == "Error: String not provided"


def test_missing_config_file(capsys, tmp_path):
    code, _, err = run(capsys, "-c", str(tmp_path / "absent.yaml"), "digits", "1")
    assert code == 2
    assert "could not load configuration" in err


def test_no_command_prints_help(capsys):
    code, out, _ = run(capsys)
    assert code == 1
    assert "usage: strkit" in out


def test_verbose_enables_debug_logging(capsys):
    code, out, err = run(capsys, "-v", "expiry", "01/00")
    assert code == 1
    assert out == "invalid: Already Expired"
    assert logging.getLogger().level == logging.DEBUG
    assert "[strkit.card_expiry]" in err


def test_log_file(capsys, tmp_path):
    log_file = tmp_path / "strkit.log"
    path = tmp_path / "logged.yaml"
    path.write_text(
        f"logging:\n  level: DEBUG\n  file: {log_file}\n",
        encoding="utf-8",
    )
    assert run(capsys, "-c", str(path), "truncate", "Hello World", "-n", "5")[:2] == (0, "Hello...")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "Truncating 11 characters to 5" in log_file.read_text(encoding="utf-8")


def test_unknown_format_choice_is_rejected_by_argparse(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["group", "123", "--format", "roman"])
    assert exc_info.value.code == 2


@pytest.mark.parametrize("yaml_text, command", [
    ("digits:\n  separator:\n", ["group", "1234"]),
    ("digits:\n  separator: 5\n", ["group", "1234"]),
    ("digits:\n  format: roman\n", ["group", "1234"]),
    ("digits:\n  format: [indian]\n", ["group", "1234"]),
    ("truncate:\n  max_length: -1\n", ["truncate", "Hello World"]),
    ("truncate:\n  max_length: ten\n", ["truncate", "Hello World"]),
    ("truncate:\n  max_length: true\n", ["truncate", "Hello World"]),
    ("logging: verbose\n", ["digits", "a1"]),
])
def test_bad_config_values_exit_with_2(capsys, tmp_path, yaml_text, command):
    path = tmp_path / "bad.yaml"
    path.write_text(yaml_text, encoding="utf-8")
    code, out, err = run(capsys, "-c", str(path), *command)
    assert code == 2
    assert out == ""
    assert err.startswith("Error: could not load configuration:")


def test_bad_config_is_reported_for_every_command(capsys, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("digits:\n  separator:\n", encoding="utf-8")
    code, _, err = run(capsys, "-c", str(path), "capitalize", "hello")
    assert code == 2
    assert "digits.separator" in err
