"""Tests for the typer CLI."""

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner

from xiaoju_eval.cli.main import app

FIXTURES = Path(__file__).parent.parent / "fixtures"

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    # The run command points structlog at the runner's captured stderr.
    yield
    structlog.reset_defaults()


class TestScorersCommand:
    def test_lists_every_scorer(self) -> None:
        result = runner.invoke(app, ["scorers"])

        assert result.exit_code == 0
        for name in ["intent", "toolCall", "relevance", "tone", "length", "context"]:
            assert name in result.output

    def test_marks_defaults(self) -> None:
        result = runner.invoke(app, ["scorers"])

        lines = result.output.splitlines()
        assert any(line.startswith("* intent") for line in lines)
        assert any(line.startswith("  context") for line in lines)


class TestRunCommand:
    def test_json_output(self) -> None:
        result = runner.invoke(
            app,
            [
                "run",
                str(FIXTURES / "valid_config.yaml"),
                "--log-format",
                "json",
                "--json",
            ],
        )

        assert result.exit_code == 0, result.output
        assert '"dataset_name": "xiaoju_basic"' in result.output
        assert '"passed_count": 5' in result.output
        assert '"pass_rate": 1.0' in result.output

    def test_text_report(self) -> None:
        result = runner.invoke(
            app,
            ["run", str(FIXTURES / "valid_config.yaml"), "--log-format", "json"],
        )

        assert result.exit_code == 0, result.output
        assert "Evaluation report" in result.output
        assert "Passed    5 (100.0%)" in result.output
        assert "toolCall  100.0%" in result.output

    def test_config_error_exits_non_zero(self) -> None:
        result = runner.invoke(
            app,
            ["run", str(FIXTURES / "unknown_refs_config.yaml"), "--log-format", "json"],
        )

        assert result.exit_code == 1
        assert "Failed to validate config" in result.output

    def test_missing_config_exits_non_zero(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["run", str(tmp_path / "absent.yaml"), "--log-format", "json"]
        )

        assert result.exit_code == 1
        assert "file not found" in result.output

    def test_bad_executor_target_exits_non_zero(self, tmp_path: Path) -> None:
        config = tmp_path / "config.yaml"
        config.write_text(
            (FIXTURES / "valid_config.yaml")
            .read_text(encoding="utf-8")
            .replace("xiaoju_oracle", "missing_executor"),
            encoding="utf-8",
        )

        result = runner.invoke(app, ["run", str(config), "--log-format", "json"])

        assert result.exit_code == 1
        assert "Failed to import executor" in result.output

    def test_invalid_log_format(self) -> None:
        result = runner.invoke(
            app, ["run", str(FIXTURES / "valid_config.yaml"), "--log-format", "xml"]
        )

        assert result.exit_code == 1
        assert "Invalid log format" in result.output
