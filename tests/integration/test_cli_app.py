from __future__ import annotations

"""
Integration tests for the CLI Application Controller.

Runs the controller in-process against registry documents written to a
temporary directory and checks exit codes and JSON output.
"""

import json
from pathlib import Path

import pytest

from openapi_map.infra.logging import reset_logging
from openapi_map.interface.cli.app import (
    EXIT_BUILD_ERROR,
    EXIT_INPUT_ERROR,
    EXIT_OK,
    main,
)


@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def registry_file(tmp_path: Path, raw_registry) -> Path:
    path = tmp_path / "registry.json"
    path.write_text(json.dumps(raw_registry), encoding="utf-8")
    return path


def test_builds_tree_to_stdout(registry_file: Path, capsys) -> None:
    code = main([str(registry_file), "--spec-url", "https://x.org/spec.md"])

    assert code == EXIT_OK
    data = json.loads(capsys.readouterr().out)
    assert data["name"] == "OpenAPI Object"
    assert data["documentationUrl"] == "https://x.org/spec.md#openAPIObject"
    assert [c["name"] for c in data["children"]][-1] == "^x-"


def test_writes_output_file(registry_file: Path, tmp_path: Path) -> None:
    out = tmp_path / "out" / "tree.json"
    code = main([str(registry_file), "--root", "Info Object", "-o", str(out), "--indent", "0"])

    assert code == EXIT_OK
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["type"] == "Info Object"
    assert [c["name"] for c in data["children"]] == ["title", "description", "contact"]


def test_config_file_supplies_defaults(registry_file: Path, tmp_path: Path, capsys) -> None:
    conf = tmp_path / "conf.json"
    conf.write_text(json.dumps({
        "registry_path": str(registry_file),
        "root_type": "Contact Object",
    }), encoding="utf-8")

    assert main(["-c", str(conf)]) == EXIT_OK
    assert json.loads(capsys.readouterr().out)["type"] == "Contact Object"


def test_unknown_root_is_a_build_error(registry_file: Path) -> None:
    assert main([str(registry_file), "--root", "Missing Object"]) == EXIT_BUILD_ERROR


def test_malformed_expression_is_a_build_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({
        "OpenAPI Object": {"fields": [{"name": "x", "type": "List<string>"}]},
    }), encoding="utf-8")
    assert main([str(path)]) == EXIT_BUILD_ERROR


def test_missing_registry_file(tmp_path: Path) -> None:
    assert main([str(tmp_path / "nope.json")]) == EXIT_INPUT_ERROR


def test_registry_argument_is_required(capsys) -> None:
    assert main([]) == EXIT_INPUT_ERROR
    assert "registry document is required" in capsys.readouterr().err


def test_invalid_registry_document(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")
    assert main([str(path)]) == EXIT_INPUT_ERROR

    path.write_text('{"A": {"fields": [{"type": "string"}]}}', encoding="utf-8")
    assert main([str(path)]) == EXIT_INPUT_ERROR


def test_dump_config(capsys) -> None:
    assert main(["--dump-config", "--root", "Info Object"]) == EXIT_OK
    conf = json.loads(capsys.readouterr().out)
    assert conf["root_type"] == "Info Object"
    assert conf["indent"] == 2
