# Library source resolution: stock vs custom, remote vs local
import logging
from pathlib import Path

from xface.config import get_lib_dir, get_lib_entry
from xface.errors import InvalidConfig
from xface.manifest import get_platform, load_platforms
from xface.models import (
    STOCK_LIBRARY_ID,
    CustomLocalSource,
    CustomRemoteSource,
    LibrarySource,
    StockSource,
)

logger = logging.getLogger(__name__)

# ABOUTME: URI prefixes treated as network locations
REMOTE_SCHEMES = ("http://", "https://")


def is_remote(uri: str) -> bool:
    return uri.lower().startswith(REMOTE_SCHEMES)


def stock_source(platform: str) -> StockSource:
    """Build the stock source for a manifest platform.

    Raises:
        UnrecognizedPlatform: If the platform isn't in the manifest
    """
    spec = get_platform(platform)
    return StockSource(platform=platform, version=spec.version, url=spec.snapshot_url())


def resolve(project_root: Path, platform_name: str) -> LibrarySource:
    """Decide which library a platform should use.

    ABOUTME: lib.<platform> in .xface/config.json overrides the manifest
    ABOUTME: http(s) URIs become CustomRemoteSource, existing paths CustomLocalSource
    ABOUTME: Without an override the manifest's stock library is used

    Args:
        project_root: Application project root
        platform_name: Platform key, e.g. "wp8"

    Returns:
        The resolved LibrarySource

    Raises:
        UnrecognizedPlatform: Unknown platform and no custom entry
        InvalidConfig: Custom entry points at a missing local path
    """
    entry = get_lib_entry(project_root, platform_name)
    if entry is None:
        return stock_source(platform_name)

    uri = entry["uri"]
    default_version = _default_version(platform_name)
    lib_id = entry.get("id", STOCK_LIBRARY_ID)
    version = entry.get("version", default_version)
    if version is None:
        raise InvalidConfig(f"lib.{platform_name} needs a 'version' field")
    template = entry.get("template")

    if is_remote(uri):
        logger.debug(f"Using custom remote {platform_name} library {uri}")
        return CustomRemoteSource(
            platform=platform_name, url=uri, id=lib_id, version=version, template=template
        )

    path = Path(uri).expanduser()
    if path.exists():
        logger.debug(f"Using custom local {platform_name} library {path}")
        return CustomLocalSource(
            platform=platform_name, path=str(path), id=lib_id, version=version, template=template
        )

    raise InvalidConfig(
        f'Custom {platform_name} library "{uri}" is neither an http(s) URL nor an existing path'
    )


def _default_version(platform: str) -> str | None:
    spec = load_platforms().get(platform)
    return spec.version if spec else None


def cache_path(source: LibrarySource, lib_root: Path | None = None) -> Path:
    """Return where a source lives on disk.

    ABOUTME: <lib_root>/<platform>/<id>/<version> for downloaded libraries
    ABOUTME: The literal path for CustomLocalSource
    """
    if isinstance(source, CustomLocalSource):
        return Path(source.path)
    root = Path(lib_root) if lib_root is not None else get_lib_dir()
    return root / source.platform / source.id / source.version


def library_path(project_root: Path, platform_name: str, lib_root: Path | None = None) -> Path:
    """Directory holding the platform library `bin/` scripts for a project."""
    return cache_path(resolve(project_root, platform_name), lib_root)
