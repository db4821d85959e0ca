# Filesystem helpers shared by the fetcher, merges and platform parsers
import logging
import os
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

# ABOUTME: Version-control metadata folders never shipped in web assets
VCS_FOLDER_NAMES = frozenset({".svn"})


def copy_contents(src: Path, dst: Path) -> None:
    """Copy every entry of `src` into `dst`, overwriting same-named files.

    ABOUTME: Equivalent of `cp -rf src/* dst`; hidden entries are copied too
    ABOUTME: Creates dst if missing
    """
    src = Path(src)
    dst = Path(dst)
    dst.mkdir(parents=True, exist_ok=True)
    for entry in src.iterdir():
        target = dst / entry.name
        if entry.is_dir():
            if target.exists() and not target.is_dir():
                target.unlink()
            shutil.copytree(entry, target, dirs_exist_ok=True)
        else:
            if target.is_dir():
                shutil.rmtree(target)
            shutil.copy2(entry, target)


def remove_path(path: Path) -> None:
    """Remove a file or directory tree; missing paths are ignored."""
    path = Path(path)
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)


def delete_svn_folders(root: Path) -> list[Path]:
    """Recursively delete version-control folders below `root`.

    Returns:
        List of removed directories
    """
    removed: list[Path] = []
    root = Path(root)
    if not root.is_dir():
        return removed

    for dirpath, dirnames, _filenames in os.walk(root):
        for name in list(dirnames):
            if name in VCS_FOLDER_NAMES:
                target = Path(dirpath) / name
                shutil.rmtree(target)
                removed.append(target)
                dirnames.remove(name)
                logger.debug(f"Deleted {target}")
    return removed


def find_single_root(extract_dir: Path) -> Path:
    """Return the lone top-level directory of an extracted archive, if any."""
    entries = [p for p in Path(extract_dir).iterdir() if p.name != "__MACOSX"]
    if len(entries) == 1 and entries[0].is_dir():
        return entries[0]
    return Path(extract_dir)
