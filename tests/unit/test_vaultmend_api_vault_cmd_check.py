"""Unit tests for vault cmd_check."""

import pytest

from tests.unit.conftest import run_cmd
from vaultmend.api.config.validate_output import validate_output
from vaultmend.api.vault.cmd_check import cmd_check

pytestmark = pytest.mark.vault


def test_cmd_check_reports_missing(make_vault):
    root = make_vault({"a.md": "x\ny\nSee [[b]] and [[c]].", "b.md": ""})

    result = run_cmd(cmd_check, str(root))

    assert result.success is True
    assert result.output["documents_scanned"] == 2
    assert result.output["links_found"] == 2
    assert result.output["missing_count"] == 1
    assert result.output["missing"] == [
        {"target": "c", "file": "c.md", "occurrences": [{"source_file": "a.md", "line_number": 3}]}
    ]
    assert "1 missing" in result.result
    validate_output(cmd_check, result.output)


def test_cmd_check_empty_vault(make_vault):
    result = run_cmd(cmd_check, str(make_vault({})))

    assert result.success is True
    assert result.output["missing_count"] == 0
    assert result.result == "No missing files found."


def test_cmd_check_warns_on_duplicate_basenames(make_vault):
    root = make_vault({"a.md": "[[x]]", "one/x.md": "", "two/x.md": ""})

    result = run_cmd(cmd_check, str(root))

    assert result.output["duplicates"] == {"x": ["one/x.md", "two/x.md"]}
    assert len(result.output["warnings"]) == 1
    assert "'x'" in result.output["warnings"][0]


def test_cmd_check_missing_root(tmp_path):
    result = run_cmd(cmd_check, str(tmp_path / "nope"))

    assert result.success is False
    assert result.output["errors"][0].startswith("Error finding markdown files:")
    validate_output(cmd_check, result.output)


def test_cmd_check_uses_configured_root(make_vault, write_config):
    root = make_vault({"a.md": "[[gone]]"})
    write_config({"vault": {"base_dir": str(root)}})

    result = run_cmd(cmd_check)

    assert result.success is True
    assert result.output["root"] == str(root)
    assert result.output["missing_count"] == 1


def test_cmd_check_without_root_or_config():
    result = run_cmd(cmd_check)

    assert result.success is False
    assert "vault.base_dir is not configured" in result.output["errors"][0]


def test_cmd_check_invalid_config(write_config, make_vault):
    write_config("{not json")

    result = run_cmd(cmd_check, str(make_vault({})))

    assert result.success is False
    assert "Invalid JSON" in result.output["errors"][0]


def test_cmd_check_writes_log(make_vault, vaultmend_home):
    run_cmd(cmd_check, str(make_vault({"a.md": "[[z]]"})))

    log_text = (vaultmend_home / "vaultmend.log").read_text(encoding="utf-8")
    assert "vaultmend.vault.plan" in log_text


def test_cmd_check_continues_without_log_file(make_vault, tmp_path, monkeypatch):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setenv("VAULTMEND_HOME", str(blocker / "home"))

    result = run_cmd(cmd_check, str(make_vault({"a.md": "[[z]]"})))

    assert result.success is True
    assert result.output["missing_count"] == 1
    assert any(w.startswith("Logging disabled: ") for w in result.output["warnings"])
    validate_output(cmd_check, result.output)
