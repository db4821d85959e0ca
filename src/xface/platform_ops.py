# Platform add/remove/update/list/prepare orchestration
import logging
from dataclasses import dataclass, field
from pathlib import Path

from xface.config_parser import ConfigParser
from xface.errors import XFaceError
from xface.fetcher import LibraryFetcher
from xface.hooks import HookDispatcher
from xface.manifest import platform_names
from xface.models import PluginManager
from xface.platforms import get_parser
from xface.project import (
    find_plugins,
    list_platforms,
    merges_dir,
    platforms_dir,
    plugins_dir,
    project_config_xml,
)
from xface.resolver import resolve
from xface.utils import remove_path, run_command

logger = logging.getLogger(__name__)


@dataclass
class PlatformListing:
    """Installed vs available platforms of a project.

    ABOUTME: `available` excludes what is already installed
    """
    installed: list[str] = field(default_factory=list)
    available: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"Installed platforms: {', '.join(self.installed)}\n"
            f"Available platforms: {', '.join(self.available)}"
        )


def _require_targets(names: list[str], action: str) -> None:
    if not names:
        raise XFaceError(f"You need to qualify `{action}` with one or more platforms!")


def supports(project_root: Path, name: str, lib_root: Path | None = None) -> None:
    """Check that this machine can build for a platform.

    ABOUTME: Runs the library's bin/check_reqs, so the library must be fetched first

    Raises:
        XFaceError: No platform name given
        UnrecognizedPlatform: Unknown platform
        RequirementsCheckFailed: The platform SDK check failed
    """
    if not name:
        raise XFaceError("Please specify a platform to check requirements for.")
    get_parser(name).check_requirements(project_root, lib_root)


def add_platforms(
    project_root: Path,
    names: list[str],
    hooks: HookDispatcher,
    fetcher: LibraryFetcher,
    plugin_manager: PluginManager | None = None,
) -> list[Path]:
    """Create native projects for platforms.

    ABOUTME: Libraries are fetched concurrently, then every platform's requirements
    ABOUTME: are checked before any project is created
    ABOUTME: Project plugins are handed to the external plugin manager afterwards

    Returns:
        Paths of the created platform project directories
    """
    _require_targets(names, "add")
    hooks.fire("before_platform_add", {"platforms": list(names)})

    config = ConfigParser(project_config_xml(project_root))
    for name in names:
        if (platforms_dir(project_root) / name).exists():
            raise XFaceError(f"Platform {name} already added")

    sources = [resolve(project_root, name) for name in names]
    lib_dirs = fetcher.fetch_all(sources)
    for name in names:
        supports(project_root, name, fetcher.lib_root)

    created: list[Path] = []
    for name, source, lib_dir in zip(names, sources, lib_dirs):
        output = platforms_dir(project_root) / name
        logger.info(f"Creating {name} project...")
        args: list[str | Path] = [
            lib_dir / "bin" / "create",
            output,
            config.package_name(),
            config.name(),
        ]
        if source.template:
            args.append(source.template)
        run_command(args)
        created.append(output)

        if plugin_manager is not None:
            _install_plugins(project_root, name, output, plugin_manager)

    hooks.fire("after_platform_add", {"platforms": list(names)})
    return created


def _install_plugins(
    project_root: Path,
    platform: str,
    platform_dir: Path,
    plugin_manager: PluginManager,
) -> None:
    plugins_path = plugins_dir(project_root)
    for plugin_id in find_plugins(plugins_path):
        logger.info(f"Installing plugin {plugin_id} following successful platform add of {platform}")
        plugin_manager.install(platform, platform_dir, plugin_id, plugins_path)


def remove_platforms(project_root: Path, names: list[str], hooks: HookDispatcher) -> None:
    """Delete platform projects and their merges directories."""
    _require_targets(names, "remove")
    hooks.fire("before_platform_rm", {"platforms": list(names)})
    for name in names:
        remove_path(platforms_dir(project_root) / name)
        remove_path(merges_dir(project_root) / name)
    hooks.fire("after_platform_rm", {"platforms": list(names)})


def update_platform(
    project_root: Path,
    names: list[str],
    hooks: HookDispatcher,
    fetcher: LibraryFetcher,
) -> None:
    """Run the library's bin/update against one installed platform project."""
    if not names:
        raise XFaceError("No platform provided. Please specify a platform to update.")
    if len(names) > 1:
        raise XFaceError("Platform update can only be executed on one platform at a time.")

    name = names[0]
    platform_dir = platforms_dir(project_root) / name
    if not platform_dir.is_dir():
        raise XFaceError(f"Platform {name} is not added to this project.")

    hooks.fire("before_platform_update", {"platforms": [name]})
    lib_dir = fetcher.fetch(resolve(project_root, name))
    run_command([lib_dir / "bin" / "update", platform_dir])
    logger.info(f"{name} updated")
    hooks.fire("after_platform_update", {"platforms": [name]})


def list_platforms_report(project_root: Path, hooks: HookDispatcher) -> PlatformListing:
    hooks.fire("before_platform_ls")
    installed = list_platforms(project_root)
    available = [name for name in platform_names() if name not in installed]
    hooks.fire("after_platform_ls")
    return PlatformListing(installed=installed, available=available)


def prepare(project_root: Path, names: list[str], hooks: HookDispatcher) -> list[str]:
    """Copy web assets and sync identity metadata into platform projects.

    ABOUTME: Defaults to every installed platform when `names` is empty
    ABOUTME: Per platform: update_www() then update_project(config)

    Returns:
        Platforms that were prepared
    """
    targets = names or list_platforms(project_root)
    if not targets:
        raise XFaceError("No platforms added to this project. Please use `xface platform add <platform>`.")

    hooks.fire("before_prepare", {"platforms": list(targets)})
    config = ConfigParser(project_config_xml(project_root))
    for name in targets:
        parser = get_parser(name)(platforms_dir(project_root) / name, hooks)
        parser.update_www()
        parser.update_project(config)
    hooks.fire("after_prepare", {"platforms": list(targets)})
    return list(targets)
