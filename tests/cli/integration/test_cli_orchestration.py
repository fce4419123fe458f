"""CLI orchestration integration tests."""

from __future__ import annotations

import json
import uuid
from pathlib import Path

import pytest
from click.testing import CliRunner
from openpyxl import load_workbook
from request_schema.cli import cli, main
from request_schema.schema_documentation import OPERATIONS_SHEET_NAME

_REQUEST_MODULE = '''
from dataclasses import dataclass

from request_schema import schema_field


@dataclass
class Paging:
    page: int = schema_field(json="page,omitempty", default="1")


@dataclass
class SearchRequest:
    paging: Paging = schema_field(embedded=True)
    query: str = schema_field(json="query", description="search text")
    sort: str = schema_field(json="sort,omitempty", enum="relevance,date")
    debug: bool = schema_field(json="-")


@dataclass
class CollidingRequest:
    paging: Paging = schema_field(embedded=True)
    page: int = schema_field(json="page")
'''


def _write_request_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    module_name = f"cli_requests_{uuid.uuid4().hex}"
    (tmp_path / f"{module_name}.py").write_text(_REQUEST_MODULE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return module_name


def _write_config(tmp_path: Path, module_name: str, request_class: str = "SearchRequest") -> Path:
    config = {
        "operations": [
            {
                "name": "search",
                "request": f"{module_name}:{request_class}",
                "description": "Full text search",
            }
        ],
        "output": {"indent": 4},
    }
    path = tmp_path / "operations.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    return path


def test_generate_command_prints_schema(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    module_name = _write_request_module(tmp_path, monkeypatch)
    runner = CliRunner()

    result = runner.invoke(cli, ["generate", "--request", f"{module_name}:SearchRequest"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "type": "object",
        "properties": {
            "page": {"type": "integer", "default": 1},
            "query": {"type": "string", "description": "search text"},
            "sort": {"type": "string", "enum": ["relevance", "date"]},
        },
        "required": ["query"],
    }


def test_export_command_writes_schema_document(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    module_name = _write_request_module(tmp_path, monkeypatch)
    config_path = _write_config(tmp_path, module_name)
    output_path = tmp_path / "out" / "schemas.json"
    runner = CliRunner()

    result = runner.invoke(
        cli, ["export", "--config", str(config_path), "--output", str(output_path)]
    )

    assert result.exit_code == 0
    assert result.output.strip() == str(output_path.resolve())
    text = output_path.read_text(encoding="utf-8")
    document = json.loads(text)
    assert document["search"]["description"] == "Full text search"
    assert document["search"]["input_schema"]["required"] == ["query"]
    assert '\n    "search"' in text


def test_document_command_writes_workbook(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    module_name = _write_request_module(tmp_path, monkeypatch)
    config_path = _write_config(tmp_path, module_name)
    output_path = tmp_path / "schemas.xlsx"
    runner = CliRunner()

    result = runner.invoke(
        cli, ["document", "--config", str(config_path), "--output", str(output_path)]
    )

    assert result.exit_code == 0
    workbook = load_workbook(output_path)
    assert workbook.sheetnames == [OPERATIONS_SHEET_NAME, "search"]


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    output_path = tmp_path / "operations.yaml"
    runner = CliRunner()

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert output_path.exists()

    second = runner.invoke(cli, ["generate-config", "--output", str(output_path)])
    assert second.exit_code != 0


def test_schema_errors_surface_as_exit_code_one(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    module_name = _write_request_module(tmp_path, monkeypatch)
    config_path = _write_config(tmp_path, module_name, request_class="CollidingRequest")

    exit_code = main(
        ["export", "--config", str(config_path), "--output", str(tmp_path / "schemas.json")]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Duplicate property name 'page'" in captured.err
    assert not (tmp_path / "schemas.json").exists()
