# BlackBerry 10 platform parser
from pathlib import Path

from xface.config_parser import ConfigParser
from xface.errors import InvalidConfig, NotAPlatformProject
from xface.hooks import HookDispatcher
from xface.platforms.base import PlatformParser


class Blackberry10Parser(PlatformParser):
    """Parser for a BlackBerry 10 WebWorks project.

    ABOUTME: The platform's own www/config.xml carries name, id and version
    """

    name = "blackberry10"
    merges_layers = ("blackberry10",)

    def __init__(self, project_dir: Path, hooks: HookDispatcher | None = None) -> None:
        super().__init__(project_dir, hooks)
        self.config_path = self.project_dir / "www" / "config.xml"
        if not self.config_path.exists():
            raise NotAPlatformProject(project_dir, "BlackBerry10", "No www/config.xml file.")

    def update_from_config(self, config: ConfigParser) -> None:
        if not isinstance(config, ConfigParser):
            raise InvalidConfig("update_from_config requires a ConfigParser object")

        platform_config = ConfigParser(self.config_path)
        platform_config.set_name(config.name())
        platform_config.set_package_name(config.package_name())
        platform_config.set_version(config.version())
        platform_config.write()
