# Project configuration loading and lib override lookup for xface
import json
import os
from pathlib import Path
from typing import Any

from xface.errors import InvalidConfig
from xface.utils import expand_fields

# ABOUTME: Per-project metadata directory (also marks a project root)
PROJECT_DIR_NAME = ".xface"

# ABOUTME: Per-project config file inside PROJECT_DIR_NAME (JSON format)
PROJECT_CONFIG_NAME = "config.json"

# ABOUTME: Default cache root for downloaded platform libraries
DEFAULT_LIB_DIR = Path.home() / ".xface" / "lib"

# ABOUTME: Keys of a lib entry whose values may reference ${VAR}
_EXPANDABLE_KEYS = ("uri", "path", "template")


def get_lib_dir() -> Path:
    """Return the library cache root.

    ABOUTME: Honors XFACE_LIB_DIR, falls back to ~/.xface/lib
    """
    override = os.environ.get("XFACE_LIB_DIR")
    return Path(override).expanduser() if override else DEFAULT_LIB_DIR


def get_project_config_path(project_root: Path) -> Path:
    return Path(project_root) / PROJECT_DIR_NAME / PROJECT_CONFIG_NAME


def load_project_config(project_root: Path) -> dict[str, Any]:
    """Load `.xface/config.json` for a project.

    ABOUTME: Returns empty dict when the file doesn't exist
    ABOUTME: Fail-fast on JSON syntax errors with a clear message

    Args:
        project_root: Application project root

    Returns:
        Parsed config dict

    Raises:
        InvalidConfig: If the JSON is invalid or not an object
    """
    path = get_project_config_path(project_root)
    if not path.exists():
        return {}

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidConfig(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfig(f"Expected a JSON object in {path}")
    return data


def save_project_config(project_root: Path, data: dict[str, Any]) -> None:
    """Write `.xface/config.json`, creating the directory if needed."""
    path = get_project_config_path(project_root)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")


def get_lib_entry(project_root: Path, platform: str) -> dict[str, str] | None:
    """Return the custom library entry for a platform, if any.

    ABOUTME: Reads lib.<platform> from the project config
    ABOUTME: Expands ${VAR} references in uri/path/template

    Returns:
        Entry dict with at least one of 'uri'/'path', or None
    """
    lib = load_project_config(project_root).get("lib") or {}
    entry = lib.get(platform)
    if entry is None:
        return None
    if not isinstance(entry, dict):
        raise InvalidConfig(f"lib.{platform} must be an object in project config")

    result = expand_fields(
        {key: str(value) for key, value in entry.items() if value is not None},
        _EXPANDABLE_KEYS,
    )

    if "uri" not in result and "path" in result:
        result["uri"] = result["path"]
    if "uri" not in result:
        raise InvalidConfig(f"lib.{platform} needs a 'uri' or 'path' field")
    return result


def set_lib_entry(project_root: Path, platform: str, entry: dict[str, str]) -> None:
    """Store a custom library entry, keeping other config keys untouched."""
    data = load_project_config(project_root)
    lib = dict(data.get("lib") or {})
    lib[platform] = dict(entry)
    data["lib"] = lib
    save_project_config(project_root, data)


def has_custom_path(project_root: Path, platform: str) -> Path | None:
    """Return the configured local library directory for a platform.

    ABOUTME: Only local, existing paths count; remote URIs return None
    """
    entry = get_lib_entry(project_root, platform)
    if entry is None:
        return None
    uri = entry["uri"]
    if uri.startswith(("http://", "https://")):
        return None
    path = Path(uri).expanduser()
    return path if path.exists() else None
