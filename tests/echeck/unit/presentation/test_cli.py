"""Tests for the echeck CLI."""

import json
import logging

import pytest
from typer.testing import CliRunner

from echeck.presentation.cli.app import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """The CLI reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


VALID_ARGS = [
    "validate",
    "--first-name",
    "Steve",
    "--last-name",
    "Smith",
    "--account-number",
    "12345678",
    "--routing-number",
    "111000025",
    "--echeck-type",
    "ccd",
]


class TestValidateCommand:
    """Test `echeck validate`."""

    def test_valid_account_exits_zero(self, runner):
        result = runner.invoke(app, VALID_ARGS)

        assert result.exit_code == 0
        assert "XXXX5678" in result.stdout
        assert "valid" in result.stdout

    def test_invalid_account_exits_one(self, runner):
        result = runner.invoke(app, ["validate", "--first-name", "Steve"])

        assert result.exit_code == 1
        assert "last_name" in result.stdout
        assert "cannot be empty" in result.stdout

    def test_json_output(self, runner):
        result = runner.invoke(app, [*VALID_ARGS, "--type", "SAVINGS", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["valid"] is True
        assert data["account_type"] == "savings"
        assert data["display_number"] == "XXXX5678"

    def test_json_output_for_invalid_account(self, runner):
        result = runner.invoke(
            app,
            [*VALID_ARGS, "--routing-number", "1234567ff", "--json"],
        )

        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["errors"] == {
            "routing_number": ["should be 9 digits", "is invalid"],
        }

    def test_bogus_account(self, runner):
        result = runner.invoke(
            app,
            [
                "validate",
                "--first-name",
                "Steve",
                "--last-name",
                "Smith",
                "--account-number",
                "1",
                "--type",
                "bogus",
            ],
        )

        assert result.exit_code == 0


class TestMaskCommand:
    """Test `echeck mask`."""

    def test_masks_all_but_last_four(self, runner):
        result = runner.invoke(app, ["mask", "1111222233331234"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "XXXXXXXXXXXX1234"

    def test_strips_separators_first(self, runner):
        result = runner.invoke(app, ["mask", "1111-2222-3333-1234"])

        assert result.stdout.strip() == "XXXXXXXXXXXX1234"

    def test_short_numbers_are_not_masked(self, runner):
        result = runner.invoke(app, ["mask", "123"])

        assert result.stdout.strip() == "123"
