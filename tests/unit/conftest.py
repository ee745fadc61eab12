"""Unit test fixtures.

Configuration helpers live in tests/conftest.py.
"""

import json

import pytest

from tests.conftest import run_cmd

__all__ = ["run_cmd", "write_config"]


@pytest.fixture
def write_config(vaultmend_home):
    """Write a config.json into the isolated home directory."""

    def _write(data) -> None:
        vaultmend_home.mkdir(parents=True, exist_ok=True)
        text = data if isinstance(data, str) else json.dumps(data)
        (vaultmend_home / "config.json").write_text(text, encoding="utf-8")

    return _write
