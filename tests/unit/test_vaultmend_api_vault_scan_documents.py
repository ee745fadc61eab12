"""Unit tests for the document scanner and existing-name index."""

import os

import pytest

from vaultmend.api.vault.FilesystemError import FilesystemError
from vaultmend.api.vault.index_existing import index_existing
from vaultmend.api.vault.plan import plan
from vaultmend.api.vault.scan_documents import scan_documents

pytestmark = pytest.mark.vault


def test_scan_documents_recurses_and_filters(make_vault):
    root = make_vault({"a.md": "", "sub/b.md": "", "sub/deeper/c.md": "", "notes.txt": "", "d.markdown": ""})

    documents = scan_documents(root)

    assert [p.relative_to(root).as_posix() for p in documents] == ["a.md", "sub/b.md", "sub/deeper/c.md"]


def test_scan_documents_order_is_stable(make_vault):
    root = make_vault({"z.md": "", "a.md": "", "m/x.md": ""})

    assert scan_documents(root) == scan_documents(root)
    assert [p.name for p in scan_documents(root)] == ["a.md", "z.md", "x.md"]


def test_scan_documents_empty_vault(make_vault):
    assert scan_documents(make_vault({})) == []


def test_scan_documents_missing_root(tmp_path):
    with pytest.raises(FilesystemError, match="Cannot traverse"):
        scan_documents(tmp_path / "does-not-exist")


def test_scan_documents_root_is_file(tmp_path):
    root = tmp_path / "file.md"
    root.write_text("", encoding="utf-8")

    with pytest.raises(FilesystemError):
        scan_documents(root)


def test_scan_documents_excludes_dirnames(make_vault):
    root = make_vault({"a.md": "", ".obsidian/x.md": "", ".trash/old.md": ""})

    documents = scan_documents(root, exclude_dirnames=[".obsidian", ".trash"])

    assert [p.name for p in documents] == ["a.md"]


def test_scan_documents_custom_extension(make_vault):
    root = make_vault({"a.md": "", "b.markdown": ""})

    assert [p.name for p in scan_documents(root, extension=".markdown")] == ["b.markdown"]


def test_index_existing_strips_extension_and_keeps_duplicates(make_vault):
    root = make_vault({"b.md": "", "notes/x.md": "", "archive/x.md": ""})

    existing = index_existing(root)

    assert existing["b"] == ("b.md",)
    assert existing["x"] == ("archive/x.md", "notes/x.md")
    assert "x.md" not in existing


def test_index_existing_missing_root(tmp_path):
    with pytest.raises(FilesystemError):
        index_existing(tmp_path / "gone")


@pytest.fixture
def locked_subdirectory(make_vault, monkeypatch):
    """A vault whose 'locked' directory cannot be listed."""
    root = make_vault({"a.md": "[[x]]", "locked/b.md": "", "z.md": ""})
    real_scandir = os.scandir

    def scandir(path="."):
        if os.fspath(path).endswith("locked"):
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)
    return root


def test_scan_documents_unreadable_subdirectory(locked_subdirectory):
    with pytest.raises(FilesystemError, match="Permission denied"):
        scan_documents(locked_subdirectory)


def test_plan_unreadable_subdirectory(locked_subdirectory):
    with pytest.raises(FilesystemError) as exc_info:
        plan(locked_subdirectory)

    assert exc_info.value.phase == "finding markdown files"
    assert exc_info.value.path.name == "locked"
