# Tests for project configuration loading
import json
from pathlib import Path

import pytest

from xface.config import (
    DEFAULT_LIB_DIR,
    get_lib_dir,
    get_lib_entry,
    get_project_config_path,
    has_custom_path,
    load_project_config,
    save_project_config,
    set_lib_entry,
)
from xface.errors import InvalidConfig


def test_get_project_config_path(tmp_path: Path) -> None:
    """Test the config file lives in .xface/config.json."""
    assert get_project_config_path(tmp_path) == tmp_path / ".xface" / "config.json"


def test_get_lib_dir_override(lib_root: Path) -> None:
    """Test XFACE_LIB_DIR overrides the default cache root."""
    assert get_lib_dir() == lib_root


def test_get_lib_dir_default(monkeypatch) -> None:
    """Test the default cache root is under the home directory."""
    monkeypatch.delenv("XFACE_LIB_DIR", raising=False)
    assert get_lib_dir() == DEFAULT_LIB_DIR
    assert DEFAULT_LIB_DIR.parts[-2:] == (".xface", "lib")


def test_load_missing_config(tmp_path: Path) -> None:
    """Test a project without config.json loads as empty."""
    assert load_project_config(tmp_path) == {}


def test_load_invalid_json(project_root: Path) -> None:
    """Test a JSON syntax error fails with the file path."""
    get_project_config_path(project_root).write_text("{ invalid json }")

    with pytest.raises(InvalidConfig, match="Invalid JSON"):
        load_project_config(project_root)


def test_load_non_object(project_root: Path) -> None:
    """Test a top-level JSON array is rejected."""
    get_project_config_path(project_root).write_text("[1, 2]")

    with pytest.raises(InvalidConfig, match="Expected a JSON object"):
        load_project_config(project_root)


def test_save_and_load(tmp_path: Path) -> None:
    """Test saving creates .xface/ and writes readable JSON."""
    save_project_config(tmp_path, {"lib": {"wp8": {"uri": "https://x"}}})

    assert json.loads(get_project_config_path(tmp_path).read_text()) == {
        "lib": {"wp8": {"uri": "https://x"}}
    }


def test_set_lib_entry_keeps_other_keys(project_root: Path) -> None:
    """Test adding a lib entry preserves the rest of the config."""
    save_project_config(project_root, {"name": "demo", "lib": {"ios": {"uri": "https://i"}}})

    set_lib_entry(project_root, "wp8", {"uri": "https://w"})

    data = load_project_config(project_root)
    assert data["name"] == "demo"
    assert data["lib"] == {"ios": {"uri": "https://i"}, "wp8": {"uri": "https://w"}}


def test_get_lib_entry_absent(project_root: Path) -> None:
    """Test platforms without an entry return None."""
    assert get_lib_entry(project_root, "wp8") is None


def test_get_lib_entry_path_alias(project_root: Path) -> None:
    """Test `path` is accepted in place of `uri`."""
    set_lib_entry(project_root, "wp8", {"path": "/opt/wp8", "id": "mine"})

    entry = get_lib_entry(project_root, "wp8")

    assert entry["uri"] == "/opt/wp8"
    assert entry["id"] == "mine"


def test_get_lib_entry_expands_env(project_root: Path, monkeypatch) -> None:
    """Test ${VAR} references in uri and template are expanded."""
    monkeypatch.setenv("LIB_HOST", "example.org")
    monkeypatch.setenv("TPL", "/opt/tpl")
    set_lib_entry(
        project_root, "wp8",
        {"uri": "https://${LIB_HOST}/wp8.tgz", "template": "${TPL}", "version": "${LIB_HOST}"},
    )

    entry = get_lib_entry(project_root, "wp8")

    assert entry["uri"] == "https://example.org/wp8.tgz"
    assert entry["template"] == "/opt/tpl"
    assert entry["version"] == "${LIB_HOST}"


def test_get_lib_entry_requires_location(project_root: Path) -> None:
    """Test an entry without uri or path is rejected."""
    set_lib_entry(project_root, "wp8", {"id": "mine"})

    with pytest.raises(InvalidConfig, match="'uri' or 'path'"):
        get_lib_entry(project_root, "wp8")


def test_get_lib_entry_must_be_object(project_root: Path) -> None:
    """Test a non-object entry is rejected."""
    save_project_config(project_root, {"lib": {"wp8": "https://x"}})

    with pytest.raises(InvalidConfig, match="must be an object"):
        get_lib_entry(project_root, "wp8")


def test_has_custom_path(project_root: Path, tmp_path: Path) -> None:
    """Test only existing local paths count as custom paths."""
    local = tmp_path / "wp-lib"
    local.mkdir()

    set_lib_entry(project_root, "wp8", {"uri": str(local)})
    assert has_custom_path(project_root, "wp8") == local

    set_lib_entry(project_root, "wp8", {"uri": "https://example.org/wp8.tgz"})
    assert has_custom_path(project_root, "wp8") is None

    set_lib_entry(project_root, "wp8", {"uri": str(tmp_path / "missing")})
    assert has_custom_path(project_root, "wp8") is None

    assert has_custom_path(project_root, "ios") is None
