# Shared platform parser behavior: www layout, merges, staging, hooks
import logging
from pathlib import Path
from typing import ClassVar

from xface.config import has_custom_path
from xface.config_parser import ConfigParser
from xface.errors import RequirementsCheckFailed, SubprocessFailed
from xface.hooks import HookDispatcher
from xface.merges import copy_merges
from xface.project import find_project_root, merges_dir, project_www
from xface.resolver import cache_path, stock_source
from xface.utils import copy_contents, delete_svn_folders, remove_path, run_command

logger = logging.getLogger(__name__)

# ABOUTME: App id used when the platform config.xml lists no app packages
DEFAULT_APP_ID = "helloxface"

# ABOUTME: Name of the multi-app web-asset output root inside platform projects
WWW_ROOT_NAME = "xface3"


class PlatformParser:
    """Base class for native platform project parsers.

    ABOUTME: Subclasses set `name`/`merges_layers` and implement update_from_config
    ABOUTME: www output lives at <www_root>/<app id>, one dir per installed app
    ABOUTME: The hook dispatcher is injected; a project-scoped one is built lazily
    """

    name: ClassVar[str] = ""
    merges_layers: ClassVar[tuple[str, ...]] = ()
    lib_subdir: ClassVar[str | None] = None

    def __init__(self, project_dir: Path, hooks: HookDispatcher | None = None) -> None:
        self.project_dir = Path(project_dir)
        self.hooks = hooks
        self.config_path = self.project_dir / "config.xml"

    @classmethod
    def check_requirements(cls, project_root: Path, lib_root: Path | None = None) -> None:
        """Run the platform library's bin/check_reqs.

        ABOUTME: Uses the custom local library if configured, else the stock one

        Raises:
            RequirementsCheckFailed: Nonzero exit or launch failure
        """
        logger.info(f"Checking {cls.name} requirements...")
        custom_path = has_custom_path(project_root, cls.name)
        if custom_path is not None:
            lib_path = custom_path / cls.lib_subdir if cls.lib_subdir else custom_path
        else:
            lib_path = cache_path(stock_source(cls.name), lib_root)

        try:
            run_command([lib_path / "bin" / "check_reqs"])
        except SubprocessFailed as e:
            raise RequirementsCheckFailed(cls.name, e.output) from e

    def update_from_config(self, config: ConfigParser) -> None:
        raise NotImplementedError

    def project_root(self) -> Path:
        root = find_project_root(self.project_dir)
        return root if root is not None else self.project_dir.parent.parent

    def config_xml(self) -> Path:
        return self.config_path

    def platform_config(self) -> ConfigParser | None:
        if not self.config_path.exists():
            return None
        return ConfigParser(self.config_path)

    def installed_apps(self) -> list[str]:
        """App ids installed in this platform project."""
        config = self.platform_config()
        apps = config.app_packages() if config is not None else []
        return apps or [DEFAULT_APP_ID]

    def default_app_id(self) -> str:
        return self.installed_apps()[0]

    def www_root(self) -> Path:
        return self.project_dir / WWW_ROOT_NAME

    def www_dir(self) -> Path:
        return self.www_root() / self.default_app_id()

    def platform_www(self) -> Path:
        return self.project_dir / "platform_www"

    def staging_dir(self) -> Path:
        return self.project_dir / ".staging" / "www"

    def update_www(self) -> None:
        """Rebuild the web-asset output from app www, merges and platform www.

        ABOUTME: Later layers win: app www < merges (generic..specific) < platform_www
        """
        root = self.project_root()
        www_root = self.www_root()
        www_dir = self.www_dir()

        remove_path(www_root)
        www_root.mkdir(parents=True)

        app_www = project_www(root)
        if app_www.is_dir():
            copy_contents(app_www, www_root)

        www_dir.mkdir(parents=True, exist_ok=True)
        applied = [layer for layer in self.merges_layers if self.copy_merges(layer)]
        if applied:
            logger.debug(f"Applied merges {', '.join(applied)} for {self.name}")

        if self.platform_www().is_dir():
            copy_contents(self.platform_www(), www_dir)

    def copy_merges(self, sub_path: str) -> bool:
        """Overlay merges/<sub_path> onto www_dir(); False if the layer is absent."""
        return copy_merges(self.www_dir(), merges_dir(self.project_root()), sub_path)

    def update_staging(self) -> None:
        """Copy .staging/www into every installed app's output directory."""
        staging = self.staging_dir()
        if not staging.exists():
            return
        for app_id in self.installed_apps():
            copy_contents(staging, self.www_root() / app_id)

    def update_project(self, config: ConfigParser) -> None:
        """Synchronize the native project with the application config.

        ABOUTME: update_from_config -> pre_package hook -> staging -> .svn cleanup
        ABOUTME: A failure at any step stops the later steps and propagates

        Raises:
            InvalidConfig: config is not a ConfigParser
            HookAborted: pre_package hook failed
        """
        self.update_from_config(config)

        hooks = self.hooks if self.hooks is not None else HookDispatcher(self.project_root())
        hooks.fire("pre_package", {"wwwPath": str(self.www_dir())})

        self.update_staging()
        delete_svn_folders(self.www_dir())
