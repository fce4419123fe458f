"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from request_schema.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["export", "--output", "/tmp/out.json"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--config" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["generate", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_request_reference_returns_domain_error(capsys) -> None:
    exit_code = main(["generate", "--request", "not-a-reference"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Invalid request reference" in captured.err
    assert "Traceback" not in captured.err


def test_missing_configuration_returns_domain_error(tmp_path: Path, capsys) -> None:
    exit_code = main(
        ["export", "--config", str(tmp_path / "missing.yaml"), "--output", str(tmp_path / "o")]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err
