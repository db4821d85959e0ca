# Firefox OS platform parser
import json
from pathlib import Path

from xface.config_parser import ConfigParser
from xface.errors import InvalidConfig, NotAPlatformProject
from xface.hooks import HookDispatcher
from xface.platforms.base import PlatformParser


class FirefoxOSParser(PlatformParser):
    """Parser for a Firefox OS packaged app.

    ABOUTME: Identity lives in the manifest.webapp JSON document
    """

    name = "firefoxos"
    merges_layers = ("firefoxos",)

    def __init__(self, project_dir: Path, hooks: HookDispatcher | None = None) -> None:
        super().__init__(project_dir, hooks)
        self.manifest_path = self.project_dir / "manifest.webapp"
        if not self.manifest_path.exists():
            raise NotAPlatformProject(project_dir, "FirefoxOS", "No manifest.webapp file.")

    def update_from_config(self, config: ConfigParser) -> None:
        if not isinstance(config, ConfigParser):
            raise InvalidConfig("update_from_config requires a ConfigParser object")

        try:
            manifest = json.loads(self.manifest_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise InvalidConfig(f"Invalid JSON in {self.manifest_path}: {e}") from e

        manifest["name"] = config.name()
        manifest["version"] = config.version()
        manifest["launch_path"] = "/" + config.content().lstrip("/")

        with open(self.manifest_path, "w", encoding="utf-8") as f:
            json.dump(manifest, f, indent=2)
            f.write("\n")
