# Static platform manifest loading
from functools import lru_cache
from importlib import resources

import tomli

from xface.errors import UnrecognizedPlatform
from xface.models import PlatformSpec

# ABOUTME: Manifest file shipped inside the package
MANIFEST_RESOURCE = "platforms.toml"


@lru_cache(maxsize=None)
def load_platforms() -> dict[str, PlatformSpec]:
    """Load the packaged platform manifest.

    ABOUTME: Parsed once per process; the result must be treated as read-only
    ABOUTME: Preserves the declaration order of the TOML tables

    Returns:
        Mapping of platform name to PlatformSpec

    Raises:
        ValueError: If the manifest is malformed
    """
    raw = resources.files("xface").joinpath(MANIFEST_RESOURCE).read_text(encoding="utf-8")
    try:
        data = tomli.loads(raw)
    except tomli.TOMLDecodeError as e:
        raise ValueError(f"Invalid platform manifest: {e}") from e

    platforms: dict[str, PlatformSpec] = {}
    for name, entry in data.items():
        if "url" not in entry or "version" not in entry:
            raise ValueError(f"Platform '{name}' missing 'url' or 'version' in manifest")
        platforms[name] = PlatformSpec(
            name=name,
            version=entry["version"],
            url=entry["url"],
            parser=entry.get("parser", name),
        )
    return platforms


def platform_names() -> list[str]:
    return list(load_platforms())


def get_platform(name: str) -> PlatformSpec:
    """Look up a platform, raising UnrecognizedPlatform if unknown."""
    platforms = load_platforms()
    if name not in platforms:
        raise UnrecognizedPlatform(name)
    return platforms[name]
