# Windows Phone 8 platform parser
import logging
import re
from pathlib import Path

from xface.config_parser import ConfigParser
from xface.errors import InvalidConfig, NotAPlatformProject
from xface.hooks import HookDispatcher
from xface.platforms.base import PlatformParser
from xface.xml_helpers import XmlDocument, attribute_key

logger = logging.getLogger(__name__)

# ABOUTME: XAML namespace used for the x:Class attribute
XAML_NS = "http://schemas.microsoft.com/winfx/2006/xaml"

# ABOUTME: Runs of dots/whitespace collapsed to "_" for project/solution file names
_UNSAFE_NAME_PATTERN = re.compile(r"(\.\s|\s\.|\s+|\.+)")


def sanitize_name(name: str) -> str:
    """Make an app name usable as a .csproj/.sln base name.

    Examples:
        >>> sanitize_name("My Cool.App")
        'My_Cool_App'
    """
    return _UNSAFE_NAME_PATTERN.sub("_", name)


def replace_namespace(source: str, old: str, new: str) -> str:
    """Rewrite the first `namespace <old>` declaration to `namespace <new>`.

    ABOUTME: Textual patch; `old` is matched literally up to a word boundary
    """
    pattern = re.compile(r"namespace " + re.escape(old) + r"\b")
    return pattern.sub(lambda _m: "namespace " + new, source, count=1)


def _find_by_suffix(directory: Path, suffix: str) -> list[Path]:
    return sorted(
        entry for entry in directory.iterdir()
        if entry.is_file() and entry.name.lower().endswith(suffix)
    )


class Wp8Parser(PlatformParser):
    """Parser for a Windows Phone 8 project directory.

    ABOUTME: Requires a *.csproj directly inside the project dir
    ABOUTME: Keeps WMAppManifest.xml, csproj, sln and XAML sources in sync
    """

    name = "wp8"
    merges_layers = ("wp", "wp8")
    lib_subdir = "wp8"
    display_name = "Windows Phone 8"

    def __init__(self, project_dir: Path, hooks: HookDispatcher | None = None) -> None:
        super().__init__(project_dir, hooks)
        try:
            candidates = _find_by_suffix(self.project_dir, ".csproj")
            if not candidates:
                raise FileNotFoundError("No .csproj file.")
        except OSError as e:
            raise NotAPlatformProject(project_dir, self.display_name, e) from e

        self.csproj_path = candidates[0]
        self.sln_path = self.csproj_path.with_suffix(".sln")
        self.manifest_path = self.project_dir / "Properties" / "WMAppManifest.xml"

    def update_from_config(self, config: ConfigParser) -> None:
        """Rewrite version, name and package across the project files.

        ABOUTME: Order matters: the package step reads the csproj the name step renamed
        ABOUTME: The manifest is always written last, even if nothing changed

        Raises:
            InvalidConfig: config is not a ConfigParser
        """
        if not isinstance(config, ConfigParser):
            raise InvalidConfig("update_from_config requires a ConfigParser object")

        manifest = XmlDocument(self.manifest_path)
        app = manifest.require("App")

        app.set("Version", config.version())

        name = config.name()
        prev_name = app.get("Title", "")
        if prev_name != name:
            self._update_name(manifest, prev_name, name)

        package = config.package_name()
        csproj = XmlDocument(self.csproj_path)
        prev_package = csproj.require("RootNamespace").text or ""
        if prev_package != package:
            self._update_package(csproj, prev_package, package)

        manifest.write()

    def _update_name(self, manifest: XmlDocument, prev_name: str, name: str) -> None:
        logger.info(f"Updating app name from {prev_name} to {name}")
        app = manifest.require("App")
        app.set("Title", name)
        app.set("Publisher", f"{name} Publisher")
        app.set("Author", f"{name} Author")
        manifest.require("PrimaryToken").set("TokenID", name)

        safe_name = sanitize_name(name)
        safe_prev = sanitize_name(prev_name)

        solutions = _find_by_suffix(self.project_dir, ".sln")
        new_sln_path = self.project_dir / f"{safe_name}.sln"
        if solutions:
            sln_path = solutions[0]
            if safe_prev:
                text = sln_path.read_text(encoding="utf-8")
                sln_path.write_text(text.replace(safe_prev, safe_name), encoding="utf-8")
            sln_path.replace(new_sln_path)
        else:
            logger.warning(f"No .sln file found in {self.project_dir}")

        new_csproj_path = self.project_dir / f"{safe_name}.csproj"
        self.csproj_path.replace(new_csproj_path)
        self.csproj_path = new_csproj_path
        self.sln_path = new_sln_path

    def _update_package(self, csproj: XmlDocument, prev_package: str, package: str) -> None:
        logger.info(f"Updating package name from {prev_package} to {package}")
        csproj.require("RootNamespace").text = package
        csproj.require("AssemblyName").text = package
        csproj.require("XapFilename").text = f"{package}.xap"
        csproj.require("SilverlightAppEntry").text = f"{package}.App"
        csproj.write()

        self._set_xaml_class(self.project_dir / "MainPage.xaml", f"{package}.MainPage")
        self._patch_namespace(self.project_dir / "MainPage.xaml.cs", prev_package, package)
        self._set_xaml_class(self.project_dir / "App.xaml", f"{package}.App")
        self._patch_namespace(self.project_dir / "App.xaml.cs", prev_package, package)

    def _set_xaml_class(self, path: Path, value: str) -> None:
        xaml = XmlDocument(path)
        xaml.root.set(attribute_key(xaml.root, "Class", XAML_NS), value)
        xaml.write()

    def _patch_namespace(self, path: Path, prev_package: str, package: str) -> None:
        source = path.read_text(encoding="utf-8")
        path.write_text(replace_namespace(source, prev_package, package), encoding="utf-8")
