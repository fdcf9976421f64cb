"""Tests for the CLI entry point (typer app).

Validates that both subcommands are registered, produce JSON and terminal
reports from a chain file, and map domain errors to exit code 1.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from Gamma_Exposure.cli import app

runner = CliRunner()


@pytest.fixture()
def chain_file(tmp_path: Path, tradier_payload: dict[str, object]) -> Path:
    path = tmp_path / "spy.json"
    path.write_text(json.dumps(tradier_payload), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Command registration
# ---------------------------------------------------------------------------


class TestCommandRegistration:
    """Tests that all expected commands are registered on the app."""

    def test_direct_command_exists(self) -> None:
        result = runner.invoke(app, ["direct", "--help"])
        assert result.exit_code == 0
        assert "quoted gamma" in result.output.lower()

    def test_aggregate_command_exists(self) -> None:
        result = runner.invoke(app, ["aggregate", "--help"])
        assert result.exit_code == 0
        assert "--as-of" in result.output


# ---------------------------------------------------------------------------
# direct
# ---------------------------------------------------------------------------


class TestDirectCommand:
    def test_json_output(self, chain_file: Path) -> None:
        result = runner.invoke(app, ["direct", str(chain_file), "--json", "--quiet"])
        assert result.exit_code == 0, result.output

        data = json.loads(result.stdout)
        # Only the 590 call carries greeks
        assert data["prices"] == [{"price": "590.00", "gamma_exposure": pytest.approx(398.4)}]

    def test_terminal_output(self, chain_file: Path) -> None:
        result = runner.invoke(app, ["direct", str(chain_file), "--quiet"])
        assert result.exit_code == 0, result.output
        assert "Gamma Exposure Report" in result.stdout
        assert "590.00" in result.stdout

    def test_strict_fails_on_one_sided_chain(self, chain_file: Path) -> None:
        result = runner.invoke(app, ["direct", str(chain_file), "--strict", "--quiet"])
        assert result.exit_code == 1
        assert "weighted_average_negative_price" in result.output


# ---------------------------------------------------------------------------
# aggregate
# ---------------------------------------------------------------------------


class TestAggregateCommand:
    def test_json_output_covers_grid(self, chain_file: Path) -> None:
        result = runner.invoke(
            app,
            ["aggregate", str(chain_file), "--as-of", "2025-01-15", "--json", "--quiet"],
        )
        assert result.exit_code == 0, result.output

        data = json.loads(result.stdout)
        assert [entry["price"] for entry in data["prices"]] == ["585.00", "590.00"]
        assert all(entry["gamma_exposure"] > 0 for entry in data["prices"])

    def test_invalid_as_of_rejected(self, chain_file: Path) -> None:
        result = runner.invoke(app, ["aggregate", str(chain_file), "--as-of", "15/01/2025"])
        assert result.exit_code == 2

    def test_after_expiry_every_exposure_is_zero(self, chain_file: Path) -> None:
        result = runner.invoke(
            app,
            ["aggregate", str(chain_file), "--as-of", "2025-03-01", "--quiet"],
        )
        assert result.exit_code == 1
        assert "Error" in result.output


# ---------------------------------------------------------------------------
# Error handling and options
# ---------------------------------------------------------------------------


class TestErrors:
    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["direct", str(tmp_path / "absent.json"), "--quiet"])
        assert result.exit_code == 1
        assert "Cannot read" in result.output

    def test_malformed_chain(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(
            json.dumps([{"strike": "x", "expiration_date": "2025-01-01", "option_type": "call"}]),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["direct", str(path), "--quiet"])
        assert result.exit_code == 1
        assert "Malformed contract at index 0" in result.output

    def test_config_file_applies_guard(self, tmp_path: Path) -> None:
        chain = [
            {
                "strike": 10,
                "expiration_date": "2025-02-14",
                "option_type": "call",
                "open_interest": 10,
                "greeks": {"gamma": 1.5, "mid_iv": 0.3},
            },
            {
                "strike": 12,
                "expiration_date": "2025-02-14",
                "option_type": "put",
                "open_interest": 10,
                "greeks": {"gamma": 0.5, "mid_iv": 0.3},
            },
        ]
        chain_path = tmp_path / "chain.json"
        chain_path.write_text(json.dumps(chain), encoding="utf-8")
        config_path = tmp_path / "settings.json"
        config_path.write_text(json.dumps({"gamma_guard_threshold": 2.0}), encoding="utf-8")

        default = runner.invoke(app, ["direct", str(chain_path), "--json", "--quiet"])
        relaxed = runner.invoke(
            app,
            ["direct", str(chain_path), "--json", "--quiet", "--config", str(config_path)],
        )

        assert default.exit_code == 0, default.output
        assert relaxed.exit_code == 0, relaxed.output
        assert json.loads(default.stdout)["maximum"] == 0.0
        assert json.loads(relaxed.stdout)["maximum"] == pytest.approx(15.0)

    def test_oversized_strike_exits_cleanly(self, tmp_path: Path) -> None:
        path = tmp_path / "huge.json"
        path.write_text(
            json.dumps(
                [
                    {
                        "strike": "1e30",
                        "expiration_date": "2025-02-14",
                        "option_type": "call",
                        "open_interest": 1,
                        "greeks": {"gamma": 0.01, "mid_iv": 0.2},
                    }
                ]
            ),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["direct", str(path), "--quiet"])
        assert result.exit_code == 1
        assert "Error" in result.output
