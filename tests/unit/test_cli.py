"""Unit tests for the tagcheck CLI."""

import json
import sys
import textwrap
from pathlib import Path

import pytest
from typer.testing import CliRunner

from tagcheck import __version__
from tagcheck.cli import app

MODELS_MODULE = "tagcheck_cli_models"

MODELS_SOURCE = textwrap.dedent('''
    from dataclasses import dataclass, field

    from pydantic import BaseModel, Field


    @dataclass
    class Car:
        name: str = field(default="", metadata={"is": "required,length(3|5)", "json": "Name"})
        year: int = field(default=0, metadata={"is": "required,min(2000)", "json": "Year"})


    class Owner(BaseModel):
        email: str = Field(default="", alias="Email", json_schema_extra={"is": "required,email"})
        cars: list[Car] = Field(default_factory=list, alias="Cars")


    NOT_A_MODEL = 42
''')


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def models(tmp_path, monkeypatch):
    """Importable module holding the models used by the validate command."""
    (tmp_path / f"{MODELS_MODULE}.py").write_text(MODELS_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.delitem(sys.modules, MODELS_MODULE, raising=False)
    return tmp_path


def write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestGlobalOptions:
    """Test app-level options."""

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"tagcheck version {__version__}" in result.stdout

    def test_invalid_log_level(self, runner):
        result = runner.invoke(app, ["--log-level", "trace", "rules"])
        assert result.exit_code == 1
        assert "Invalid log level 'trace'" in result.stdout


class TestRulesCommand:
    """Test listing registered rules."""

    def test_lists_standard_rules(self, runner):
        result = runner.invoke(app, ["rules"])
        assert result.exit_code == 0
        assert "email" in result.stdout
        assert "!email" not in result.stdout

    def test_filter(self, runner):
        result = runner.invoke(app, ["rules", "--filter", "uuid"])
        assert result.exit_code == 0
        assert "uuidv4" in result.stdout
        assert "Rules (4 found)" in result.stdout

    def test_negated(self, runner):
        result = runner.invoke(app, ["rules", "--filter", "mongoid", "--negated"])
        assert result.exit_code == 0
        assert "!mongoid" in result.stdout
        assert "Rules (2 found)" in result.stdout

    def test_no_match(self, runner):
        result = runner.invoke(app, ["rules", "--filter", "zzz"])
        assert result.exit_code == 0
        assert "No rules found" in result.stdout


class TestCheckCommand:
    """Test validating a single value."""

    def test_passing_value(self, runner):
        result = runner.invoke(app, ["check", "required,length(3|5)", "abcd"])
        assert result.exit_code == 0
        assert "OK" in result.stdout

    def test_failing_value(self, runner):
        result = runner.invoke(app, ["check", "required,length(3|5)", "123456", "--name", "Code"])
        assert result.exit_code == 1
        assert "Code must be between 3 and 5" in result.stdout

    def test_required_empty_value(self, runner):
        result = runner.invoke(app, ["check", "required", ""])
        assert result.exit_code == 1
        assert "value is a required field" in result.stdout

    def test_unknown_rule(self, runner):
        result = runner.invoke(app, ["check", "nosuchrule", "x"])
        assert result.exit_code == 1
        assert 'uses unknown validator "nosuchrule"' in result.stdout


class TestValidateCommand:
    """Test validating JSON documents against models."""

    def test_valid_document(self, runner, models):
        document = write_json(models / "car.json", {"name": "Golf", "year": 2020})

        result = runner.invoke(app, ["validate", str(document), "--model", f"{MODELS_MODULE}:Car"])
        assert result.exit_code == 0
        assert "Valid Car document" in result.stdout

    def test_invalid_document_table(self, runner, models):
        document = write_json(models / "car.json", {"name": "123456", "year": 1999})

        result = runner.invoke(app, ["validate", str(document), "--model", f"{MODELS_MODULE}:Car"])
        assert result.exit_code == 1
        assert "Validation errors (2 found)" in result.stdout
        assert "length" in result.stdout

    def test_invalid_document_json(self, runner, models):
        document = write_json(models / "owner.json", {
            "Email": "owner@example.com",
            "Cars": [{"name": "Golf", "year": 2020}, {"name": "", "year": 2020}],
        })

        result = runner.invoke(app, [
            "validate", str(document), "--model", f"{MODELS_MODULE}:Owner", "--format", "json"
        ])
        assert result.exit_code == 1

        report = json.loads(result.stdout)
        assert report["valid"] is False
        assert report["count"] == 1
        assert report["errors"][0]["path"] == "Cars.1.Name"
        assert report["errors"][0]["message"] == "Name is a required field"

    def test_config_changes_name_key(self, runner, models):
        document = write_json(models / "car.json", {"name": "", "year": 2020})
        config = write_json(models / ".tagcheck.json", {"validation": {"nameKey": "yaml"}})

        result = runner.invoke(app, [
            "validate", str(document), "--model", f"{MODELS_MODULE}:Car",
            "--format", "json", "--config", str(config),
        ])

        report = json.loads(result.stdout)
        assert report["errors"][0]["path"] == "name"

    def test_missing_config_file(self, runner, models):
        document = write_json(models / "car.json", {"name": "Golf", "year": 2020})

        result = runner.invoke(app, [
            "validate", str(document), "--model", f"{MODELS_MODULE}:Car",
            "--config", str(models / "absent.json"),
        ])
        assert result.exit_code == 1
        assert "Config file not found" in result.stdout

    def test_invalid_format(self, runner, models):
        document = write_json(models / "car.json", {})
        result = runner.invoke(app, ["validate", str(document), "--model", f"{MODELS_MODULE}:Car", "--format", "xml"])
        assert result.exit_code == 1
        assert "Invalid format 'xml'" in result.stdout

    @pytest.mark.parametrize("model", [
        "missing_module_for_tests:Car",
        f"{MODELS_MODULE}:Missing",
        f"{MODELS_MODULE}:NOT_A_MODEL",
        MODELS_MODULE,
    ])
    def test_unloadable_model(self, runner, models, model):
        document = write_json(models / "car.json", {})
        result = runner.invoke(app, ["validate", str(document), "--model", model])
        assert result.exit_code == 1
        assert "Cannot load model" in result.stdout

    def test_missing_file(self, runner, models):
        result = runner.invoke(app, ["validate", str(models / "nope.json"), "--model", f"{MODELS_MODULE}:Car"])
        assert result.exit_code == 1
        assert "File not found" in result.stdout

    def test_document_not_matching_model(self, runner, models):
        document = write_json(models / "car.json", {"name": "Golf", "year": "last year"})
        result = runner.invoke(app, ["validate", str(document), "--model", f"{MODELS_MODULE}:Car"])
        assert result.exit_code == 1
        assert "Document does not match Car" in result.stdout
