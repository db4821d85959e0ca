# Android platform parser
import logging
import re
from pathlib import Path

from xface.config_parser import ConfigParser
from xface.errors import InvalidConfig, NotAPlatformProject
from xface.hooks import HookDispatcher
from xface.platforms.base import WWW_ROOT_NAME, PlatformParser
from xface.xml_helpers import XmlDocument, attribute_key, find_all_local

logger = logging.getLogger(__name__)

ANDROID_NS = "http://schemas.android.com/apk/res/android"

_PACKAGE_DECL = re.compile(r"^package\s+[\w.]+\s*;", re.MULTILINE)


class AndroidParser(PlatformParser):
    """Parser for an Android (ant-style) project directory.

    ABOUTME: Identity lives in AndroidManifest.xml and res/values/strings.xml
    ABOUTME: A package change also moves the Java sources of the old package
    """

    name = "android"
    merges_layers = ("android",)

    def __init__(self, project_dir: Path, hooks: HookDispatcher | None = None) -> None:
        super().__init__(project_dir, hooks)
        self.manifest_path = self.project_dir / "AndroidManifest.xml"
        if not self.manifest_path.exists():
            raise NotAPlatformProject(project_dir, "Android", "No AndroidManifest.xml file.")
        self.strings_path = self.project_dir / "res" / "values" / "strings.xml"
        self.config_path = self.project_dir / "res" / "xml" / "config.xml"

    def www_root(self) -> Path:
        return self.project_dir / "assets" / WWW_ROOT_NAME

    def update_from_config(self, config: ConfigParser) -> None:
        if not isinstance(config, ConfigParser):
            raise InvalidConfig("update_from_config requires a ConfigParser object")

        if self.strings_path.exists():
            strings = XmlDocument(self.strings_path)
            for element in find_all_local(strings.root, "string"):
                if element.get("name") == "app_name":
                    element.text = config.name()
            strings.write()

        manifest = XmlDocument(self.manifest_path)
        root = manifest.root
        root.set(attribute_key(root, "versionName", ANDROID_NS), config.version())

        package = config.package_name()
        prev_package = root.get("package", "")
        if prev_package != package:
            root.set("package", package)
            self._move_sources(prev_package, package)

        manifest.write()

    def _move_sources(self, prev_package: str, package: str) -> None:
        if not prev_package:
            return
        src = self.project_dir / "src"
        old_dir = src.joinpath(*prev_package.split("."))
        if not old_dir.is_dir():
            return

        new_dir = src.joinpath(*package.split("."))
        new_dir.mkdir(parents=True, exist_ok=True)
        for java in sorted(old_dir.glob("*.java")):
            text = java.read_text(encoding="utf-8")
            text = _PACKAGE_DECL.sub(f"package {package};", text, count=1)
            (new_dir / java.name).write_text(text, encoding="utf-8")
            java.unlink()
            logger.debug(f"Moved {java.name} to {new_dir}")
