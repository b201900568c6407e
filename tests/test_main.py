import json
import logging
from pathlib import Path

import pytest

from optionsparser.__main__ import get_cli_parser, main, split_arguments

SCHEMA = """\
header: Demo tool
options:
  - id: help
    arg: h
    long_arg: help
    type: boolean
    help: Display this help text and exit
  - id: name
    arg: n
    long_arg: name
  - id: count
    arg: c
    type: integer
    required: true
"""


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def schema(tmp_path) -> Path:
    path = tmp_path / "options.yaml"
    path.write_text(SCHEMA, encoding="UTF-8")
    return path


def test_split_arguments():
    assert split_arguments(["a", "--", "-x", "--", "y"]) == (["a"], ["-x", "--", "y"])
    assert split_arguments(["a", "-v"]) == (["a", "-v"], [])
    assert split_arguments([]) == ([], [])


def test_cli_parser_requires_schema():
    parser = get_cli_parser()
    assert parser.parse_arguments([]) is False
    assert parser.get_error_message() == "Argument is required: schema"
    assert parser.get_opt_string("log_mode") == "cli"


def test_main_help(capsys):
    assert main(["-h"]) == 0
    out = capsys.readouterr().out
    assert "usage: optionsparser" in out
    assert "--lenient" in out
    assert "--log-file" in out


def test_main_missing_schema_argument(capsys):
    assert main([]) == 2
    assert "Argument is required: schema" in capsys.readouterr().err


def test_main_schema_does_not_exist(tmp_path, capsys):
    assert main([str(tmp_path / "missing.yaml")]) == 2
    assert "Path does not exist" in capsys.readouterr().err


def test_main_invalid_log_mode(schema, capsys):
    assert main([str(schema), "--log-mode", "xml"]) == 2
    assert "Invalid log mode" in capsys.readouterr().err


def test_main_invalid_schema(tmp_path, capsys):
    path = tmp_path / "options.yaml"
    path.write_text("options:\n  - id: x\n    type: list\n", encoding="UTF-8")
    assert main([str(path)]) == 2
    assert "Invalid schema" in capsys.readouterr().err


def test_main_success(schema, capsys):
    assert main([str(schema), "--", "-n", "alice", "-c", "3"]) == 0
    out = capsys.readouterr().out
    assert "Parsed options" in out
    assert "alice" in out


def test_main_parse_failure(schema, capsys):
    assert main([str(schema), "--", "-n", "alice"]) == 1
    assert "Argument is required: c" in capsys.readouterr().err


def test_main_unknown_option_strict(schema, capsys):
    assert main([str(schema), "--", "-c", "1", "--bogus"]) == 1
    assert "Unknown option: --bogus" in capsys.readouterr().err


def test_main_unknown_option_lenient(schema, capsys):
    assert main(["--lenient", str(schema), "--", "-c", "1", "--bogus"]) == 0
    assert "Ignoring unknown option: --bogus" in capsys.readouterr().err


def test_main_schema_help(schema, capsys):
    assert main([str(schema), "--", "-h", "-c", "1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Demo tool")
    assert "Display this help text and exit" in out


def test_main_json_console_log(schema, capsys):
    args = ["--log-mode", "json", "--lenient", str(schema), "--", "-c", "1", "--bogus"]
    assert main(args) == 0
    err = capsys.readouterr().err
    records = [json.loads(line) for line in err.splitlines() if line.startswith("{")]
    assert len(records) == 1
    assert records[0]["name"] == "optionsparser"
    assert records[0]["levelname"] == "WARNING"
    assert records[0]["message"] == "Ignoring unknown option: --bogus"


def test_main_log_file(schema, tmp_path):
    log_file = tmp_path / "run.log"
    assert main(["--log-file", str(log_file), str(schema), "--", "-c", "1"]) == 0
    lines = log_file.read_text(encoding="UTF-8").splitlines()
    assert lines[0].endswith(
        "[optionsparser] [DEBUG] Logging initialized in 'cli' mode."
    )
    assert any("Option 'count' set to '1' by '-c'." in line for line in lines)


def test_main_json_log_file(schema, tmp_path):
    log_file = tmp_path / "run.jsonl"
    args = ["--log-file", str(log_file), "--json-log-file", str(schema)]
    args += ["--", "-c", "1"]
    assert main(args) == 0
    records = [
        json.loads(line)
        for line in log_file.read_text(encoding="UTF-8").splitlines()
    ]
    assert records[0]["levelname"] == "DEBUG"
    assert records[0]["message"] == "Logging initialized in 'cli' mode."
    assert all(record["name"] == "optionsparser" for record in records)


def test_main_log_file_unwritable(schema, tmp_path, capsys):
    log_file = tmp_path / "missing" / "run.log"
    assert main(["--log-file", str(log_file), str(schema)]) == 2
    assert "No such file or directory" in capsys.readouterr().err
