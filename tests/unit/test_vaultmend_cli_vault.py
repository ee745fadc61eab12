"""CLI tests for the vault check and create commands."""

import json
from types import SimpleNamespace

import pytest
from typer.testing import CliRunner

from vaultmend.cli._create_app import _create_app
from vaultmend.cli._handle_stage_result import display_format
from vaultmend.cli.vault import vault

pytestmark = pytest.mark.cli

runner = CliRunner()


def _json_payload(stdout: str) -> dict:
    return json.loads(stdout[stdout.index("{") :])


def test_vault_check_json(make_vault):
    root = make_vault({"a.md": "[[c]]"})

    result = runner.invoke(_create_app(), ["--display", "json", "vault", "check", str(root)])

    assert result.exit_code == 0
    payload = _json_payload(result.stdout)
    assert payload["missing_count"] == 1
    assert payload["missing"][0]["target"] == "c"


def test_vault_check_yaml_default(make_vault):
    root = make_vault({"a.md": "[[c]]"})

    result = runner.invoke(_create_app(), ["vault", "check", str(root)])

    assert result.exit_code == 0
    assert "missing_count: 1" in result.stdout


def test_vault_check_failure_exit_code(tmp_path):
    result = runner.invoke(_create_app(), ["vault", "check", str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert "success: false" in result.stdout


def test_vault_create_and_dry_run(make_vault):
    root = make_vault({"a.md": "[[c]]"})

    dry = runner.invoke(_create_app(), ["vault", "create", "--dry-run", str(root)])
    assert dry.exit_code == 0
    assert not (root / "c.md").exists()

    real = runner.invoke(_create_app(), ["vault", "create", str(root)])
    assert real.exit_code == 0
    assert (root / "c.md").exists()


def test_invalid_display_option(make_vault):
    result = runner.invoke(_create_app(), ["--display", "xml", "vault", "check", str(make_vault({}))])

    assert result.exit_code == 1


def test_vault_without_subcommand_shows_help():
    result = runner.invoke(_create_app(), ["vault"])

    assert result.exit_code == 0


def test_display_format_reads_nearest_ancestor():
    root_ctx = SimpleNamespace(obj={"display_format": "json"}, parent=None)
    child = SimpleNamespace(obj=None, parent=root_ctx)

    assert display_format(child) == "json"


def test_display_format_defaults_to_yaml():
    assert display_format(SimpleNamespace(obj=None, parent=None)) == "yaml"


def test_display_format_rejects_unknown_value():
    with pytest.raises(ValueError, match="xml"):
        display_format(SimpleNamespace(obj={"display_format": "xml"}, parent=None))


def test_vault_sub_app_alone_uses_yaml(make_vault):
    result = runner.invoke(vault(), ["check", str(make_vault({"a.md": "[[c]]"}))])

    assert result.exit_code == 0
    assert "missing_count: 1" in result.stdout
