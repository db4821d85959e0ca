# Application project layout helpers
import os
from pathlib import Path

from xface.config import PROJECT_DIR_NAME
from xface.manifest import load_platforms

# ABOUTME: Folders skipped when scanning the plugins directory
_IGNORED_PLUGIN_DIRS = frozenset({".svn", "CVS"})


def _is_project_root(path: Path) -> bool:
    if (path / PROJECT_DIR_NAME).is_dir():
        return True
    return (path / "www").is_dir() and (path / "config.xml").exists()


def _search_up(start: Path) -> Path | None:
    home = Path.home().resolve()
    current = start.resolve()
    while True:
        if current == home:
            return None
        if _is_project_root(current):
            return current
        if current.parent == current:
            return None
        current = current.parent


def find_project_root(start: Path | None = None) -> Path | None:
    """Find the enclosing xface application project.

    ABOUTME: Walks up to the first dir with .xface/ or with both www/ and config.xml
    ABOUTME: Stops (returns None) at the home directory or filesystem root
    ABOUTME: Without `start`, tries $PWD first and then the process cwd

    Args:
        start: Directory to start from

    Returns:
        Project root, or None if not inside a project
    """
    if start is not None:
        return _search_up(Path(start))

    pwd = os.environ.get("PWD")
    if pwd:
        found = _search_up(Path(pwd))
        if found is not None:
            return found
    return _search_up(Path.cwd())


def platforms_dir(project_root: Path) -> Path:
    return Path(project_root) / "platforms"


def merges_dir(project_root: Path) -> Path:
    return Path(project_root) / "merges"


def plugins_dir(project_root: Path) -> Path:
    return Path(project_root) / "plugins"


def project_www(project_root: Path) -> Path:
    return Path(project_root) / "www"


def project_config_xml(project_root: Path) -> Path:
    """Return the application config.xml (root first, then www/)."""
    root_config = Path(project_root) / "config.xml"
    if root_config.exists():
        return root_config
    return project_www(project_root) / "config.xml"


def list_platforms(project_root: Path) -> list[str]:
    """Return supported platforms that have a directory under platforms/."""
    base = platforms_dir(project_root)
    if not base.is_dir():
        return []
    return [name for name in load_platforms() if (base / name).is_dir()]


def find_plugins(plugins_path: Path) -> list[str]:
    """Return plugin directory names, skipping VCS and hidden folders."""
    plugins_path = Path(plugins_path)
    if not plugins_path.is_dir():
        return []
    return sorted(
        entry.name
        for entry in plugins_path.iterdir()
        if entry.is_dir()
        and entry.name not in _IGNORED_PLUGIN_DIRS
        and not entry.name.startswith(".")
    )
