"""Tests for the command line interface."""
import json

import pytest
from click.testing import CliRunner

from schema_projector import __version__
from schema_projector.__main__ import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _write(tmp_path, name, data) -> str:
    path = tmp_path / name
    path.write_text(json.dumps(data))
    return str(path)


def test_type_command(runner, tmp_path):
    descriptor = _write(tmp_path, "descriptor.json", {"dataType": "array", "elementType": {"dataType": "datetime"}})

    result = runner.invoke(cli, ["--quiet-advisories", "-l", "WARNING", "type", descriptor])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"type": "array", "items": {"type": "string", "format": "date-time"}}


def test_type_command_strict_objects(runner, tmp_path):
    descriptor = _write(tmp_path, "descriptor.json", {"dataType": "object"})

    result = runner.invoke(
        cli, ["--quiet-advisories", "--no-implicit-additional-properties", "-l", "ERROR", "type", descriptor]
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"type": "object", "additionalProperties": False}


def test_type_command_rejects_unknown_tag(runner, tmp_path):
    descriptor = _write(tmp_path, "descriptor.json", {"dataType": "tuple"})

    result = runner.invoke(cli, ["-l", "ERROR", "type", descriptor])

    assert result.exit_code == 1
    assert "Invalid type descriptor" in result.output


def test_type_command_rejects_malformed_json(runner, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    result = runner.invoke(cli, ["-l", "ERROR", "type", str(path)])

    assert result.exit_code == 1
    assert "is not valid JSON" in result.output


def test_type_command_rejects_invalid_utf8(runner, tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"dataType": "\xff"}')

    result = runner.invoke(cli, ["-l", "ERROR", "type", str(path)])

    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert "is not valid JSON" in result.output


def test_operation_command_rejects_invalid_utf8(runner, tmp_path):
    path = tmp_path / "method.json"
    path.write_bytes(b"\xff\xfe")

    result = runner.invoke(cli, ["-l", "ERROR", "operation", "UsersController", str(path)])

    assert result.exit_code == 1
    assert "is not valid JSON" in result.output


def test_invalid_log_level_from_env(runner, monkeypatch):
    monkeypatch.setenv("SCHEMA_PROJECTOR_LOGGING__LEVEL", "verbose")

    result = runner.invoke(cli, ["version"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, AttributeError)
    assert "Error loading configuration" in result.output


def test_operation_command(runner, tmp_path):
    method = _write(tmp_path, "method.json", {
        "name": "getUsers",
        "responses": [
            {"name": "200", "description": "ok", "schema": {"dataType": "enum", "enums": [1, "two"]}},
            {"name": "204", "description": "empty", "schema": {"dataType": "void"}},
        ],
    })

    result = runner.invoke(cli, ["-l", "ERROR", "operation", "UsersController", method])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "operationId": "GetUsers",
        "produces": ["application/json"],
        "responses": {
            "200": {"description": "ok", "schema": {"type": "string", "enum": ["1", "two"]}},
            "204": {"description": "empty"},
        },
    }


def test_operation_command_rejects_invalid_method(runner, tmp_path):
    method = _write(tmp_path, "method.json", {"responses": []})

    result = runner.invoke(cli, ["-l", "ERROR", "operation", "UsersController", method])

    assert result.exit_code == 1
    assert "Invalid method descriptor" in result.output


def test_config_file_option(runner, tmp_path):
    config_file = _write(tmp_path, "config.json", {
        "no_implicit_additional_properties": True,
        "suppress_advisory_warnings": True,
        "logging": {"level": "ERROR"},
    })
    descriptor = _write(tmp_path, "descriptor.json", {"dataType": "object"})

    result = runner.invoke(cli, ["-c", config_file, "type", descriptor])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"type": "object", "additionalProperties": False}


def test_invalid_config_file(runner, tmp_path):
    config_file = _write(tmp_path, "config.json", {"logging": {"level": 5, "format": []}})

    result = runner.invoke(cli, ["-c", config_file, "version"])

    assert result.exit_code == 1
    assert "Error loading configuration" in result.output


def test_config_show(runner):
    result = runner.invoke(cli, ["--no-implicit-additional-properties", "-l", "ERROR", "config-show"])

    assert result.exit_code == 0, result.output
    shown = json.loads(result.stdout)
    assert shown["no_implicit_additional_properties"] is True
    assert shown["suppress_advisory_warnings"] is False
    assert shown["logging"]["level"] == "ERROR"


def test_version(runner):
    result = runner.invoke(cli, ["-l", "ERROR", "version"])

    assert result.exit_code == 0
    assert result.stdout.strip() == f"schema-projector v{__version__}"
