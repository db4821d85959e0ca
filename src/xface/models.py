# Core data models for xface
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Union, runtime_checkable

# ABOUTME: Library id used for stock (bundled) platform libraries
STOCK_LIBRARY_ID = "cordova"


@dataclass(frozen=True)
class PlatformSpec:
    """Static description of a supported platform.

    ABOUTME: Loaded once from the packaged platforms.toml manifest
    ABOUTME: `url` is the source-control base the snapshot URL is built from
    """
    name: str
    version: str
    url: str
    parser: str

    def snapshot_url(self, version: str | None = None) -> str:
        """Return the tarball snapshot URL for a given revision."""
        return f"{self.url};a=snapshot;h={version or self.version};sf=tgz"


@dataclass(frozen=True)
class StockSource:
    """Bundled library described by the platform manifest."""
    platform: str
    version: str
    url: str
    id: str = STOCK_LIBRARY_ID
    template: str | None = None


@dataclass(frozen=True)
class CustomRemoteSource:
    """User-configured library downloaded from an http(s) URL."""
    platform: str
    url: str
    id: str
    version: str
    template: str | None = None


@dataclass(frozen=True)
class CustomLocalSource:
    """User-configured library that already lives on disk.

    ABOUTME: Never copied, linked or downloaded; the path is used as is
    """
    platform: str
    path: str
    id: str
    version: str
    template: str | None = None

    @property
    def url(self) -> str:
        return self.path


LibrarySource = Union[StockSource, CustomRemoteSource, CustomLocalSource]


@runtime_checkable
class NetworkConfig(Protocol):
    """Provider of proxy settings (`https-proxy`, `proxy`)."""

    def get(self, key: str) -> str | None:
        ...


@runtime_checkable
class PluginManager(Protocol):
    """External plugin installer invoked after a platform is created."""

    def install(
        self,
        platform: str,
        project_dir: Path,
        plugin_id: str,
        plugins_dir: Path,
    ) -> None:
        ...
