"""Shared pytest configuration and fixtures for all tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from vaultmend.utils.configure_logging import reset_logging


def pytest_configure(config):
    for marker in ("unit", "integration", "vault", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def vaultmend_home(tmp_path, monkeypatch) -> Path:
    """Isolate configuration and log files from the real home directory."""
    home = (tmp_path / ".vaultmend").resolve()
    monkeypatch.setenv("VAULTMEND_HOME", str(home))
    yield home
    reset_logging()


@pytest.fixture
def make_vault(tmp_path) -> Callable[[dict[str, str]], Path]:
    """Build a vault from a {relative path: content} mapping."""

    def _make(files: dict[str, str]) -> Path:
        root = tmp_path / "vault"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _make


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
