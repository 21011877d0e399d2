"""
Tests for cli.py - fields / derive / classify commands
"""
import pytest
import yaml
from typer.testing import CliRunner

from legalfields.cli import app

runner = CliRunner()


@pytest.fixture
def records_file(tmp_path):
    path = tmp_path / "records.yaml"
    path.write_text(
        "- Text: The employer shall ensure\n"
        "- Text: Schedule 1\n",
        encoding="utf-8",
    )
    return path


class TestFieldsCommand:

    def test_lists_fields(self):
        result = runner.invoke(app, ["fields"])
        assert result.exit_code == 0
        assert "uk_key" in result.output
        assert "dutyholder" in result.output


class TestDeriveCommand:

    def test_yaml_output(self, records_file):
        result = runner.invoke(app, ["derive", "--field", "dutyholder", "--records", str(records_file)])
        assert result.exit_code == 0
        records = yaml.safe_load(result.output)
        assert records[0] == {"Text": "The employer shall ensure", "dutyholder": "Employer"}
        assert records[1]["dutyholder"] == ""

    def test_only_values(self, records_file):
        result = runner.invoke(
            app, ["derive", "--field", "dutyholder", "--records", str(records_file), "--only"]
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == ["Employer", ""]

    def test_unknown_field(self, records_file):
        result = runner.invoke(app, ["derive", "--field", "nope", "--records", str(records_file)])
        assert result.exit_code != 0

    def test_bad_records_file(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("42", encoding="utf-8")
        result = runner.invoke(app, ["derive", "--field", "url", "--records", str(path)])
        assert result.exit_code != 0


class TestClassifyCommand:

    def test_default_table(self):
        result = runner.invoke(app, ["classify", "The employer and every worker shall"])
        assert result.exit_code == 0
        assert result.output.strip() == "Employer, Worker"

    def test_popimar_table(self):
        result = runner.invoke(app, ["classify", "Keep the licence under review.", "--table", "popimar"])
        assert result.exit_code == 0
        assert result.output.strip() == '"Permit, Authorisation, License", Review'

    def test_unknown_table(self):
        result = runner.invoke(app, ["classify", "text", "--table", "nope"])
        assert result.exit_code != 0


class TestLogLevelSetting:

    def test_lowercase_level_accepted(self, monkeypatch):
        """LEGALFIELDS_LOG_LEVEL is case-insensitive"""
        import importlib
        import logging
        from legalfields import config

        monkeypatch.setenv("LEGALFIELDS_LOG_LEVEL", "debug")
        try:
            importlib.reload(config)
            assert config.LOG_LEVEL == "DEBUG"
            assert logging.getLevelName(config.LOG_LEVEL) == logging.DEBUG
        finally:
            monkeypatch.delenv("LEGALFIELDS_LOG_LEVEL")
            importlib.reload(config)
