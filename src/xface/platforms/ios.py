# iOS platform parser
import plistlib
from pathlib import Path

from xface.config_parser import ConfigParser
from xface.errors import InvalidConfig, NotAPlatformProject
from xface.hooks import HookDispatcher
from xface.platforms.base import PlatformParser


class IosParser(PlatformParser):
    """Parser for an Xcode project directory.

    ABOUTME: Requires exactly one *.xcodeproj; its stem names the app folder
    ABOUTME: Identity lives in <Name>/<Name>-Info.plist
    """

    name = "ios"
    merges_layers = ("ios",)

    def __init__(self, project_dir: Path, hooks: HookDispatcher | None = None) -> None:
        super().__init__(project_dir, hooks)
        try:
            xcodeprojs = [p for p in self.project_dir.iterdir() if p.suffix == ".xcodeproj"]
        except OSError as e:
            raise NotAPlatformProject(project_dir, "iOS", e) from e
        if not xcodeprojs:
            raise NotAPlatformProject(project_dir, "iOS", "No .xcodeproj file.")

        self.xcodeproj = xcodeprojs[0]
        self.app_name = self.xcodeproj.stem
        self.info_plist_path = self.project_dir / self.app_name / f"{self.app_name}-Info.plist"
        self.config_path = self.project_dir / self.app_name / "config.xml"

    def update_from_config(self, config: ConfigParser) -> None:
        if not isinstance(config, ConfigParser):
            raise InvalidConfig("update_from_config requires a ConfigParser object")

        with open(self.info_plist_path, "rb") as f:
            info = plistlib.load(f)

        info["CFBundleIdentifier"] = config.package_name()
        info["CFBundleShortVersionString"] = config.version()
        info["CFBundleDisplayName"] = config.name()

        with open(self.info_plist_path, "wb") as f:
            plistlib.dump(info, f)
