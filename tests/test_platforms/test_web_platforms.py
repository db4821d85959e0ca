# Tests for BlackBerry 10 and Firefox OS platform parsers
import json
from pathlib import Path

import pytest

from xface.config_parser import ConfigParser
from xface.errors import InvalidConfig, NotAPlatformProject
from xface.platforms.blackberry10 import Blackberry10Parser
from xface.platforms.firefoxos import FirefoxOSParser


@pytest.fixture
def bb10_dir(project_root: Path) -> Path:
    root = project_root / "platforms" / "blackberry10"
    (root / "www").mkdir(parents=True)
    (root / "www" / "config.xml").write_text(
        '<widget xmlns="http://www.w3.org/ns/widgets" id="com.old.app" version="0.0.1">'
        "<name>Old</name><author>Someone</author></widget>"
    )
    return root


@pytest.fixture
def firefoxos_dir(project_root: Path) -> Path:
    root = project_root / "platforms" / "firefoxos"
    root.mkdir(parents=True)
    (root / "manifest.webapp").write_text(
        json.dumps({"name": "Old", "version": "0.0.1", "launch_path": "/old.html", "icons": {}})
    )
    return root


class TestBlackberry10:
    def test_requires_config(self, tmp_path: Path) -> None:
        with pytest.raises(NotAPlatformProject, match="No www/config.xml file."):
            Blackberry10Parser(tmp_path)

    def test_update_from_config(self, bb10_dir: Path, project_root: Path) -> None:
        """Test identity fields are copied into the platform config.xml."""
        Blackberry10Parser(bb10_dir).update_from_config(ConfigParser(project_root / "config.xml"))

        config = ConfigParser(bb10_dir / "www" / "config.xml")
        assert config.name() == "MyApp"
        assert config.package_name() == "com.example.app"
        assert config.version() == "1.0"
        assert config.doc.find("author").text == "Someone"


class TestFirefoxOS:
    def test_requires_manifest(self, tmp_path: Path) -> None:
        with pytest.raises(NotAPlatformProject, match="No manifest.webapp file."):
            FirefoxOSParser(tmp_path)

    def test_update_from_config(self, firefoxos_dir: Path, project_root: Path) -> None:
        """Test name, version and launch path are written to manifest.webapp."""
        FirefoxOSParser(firefoxos_dir).update_from_config(ConfigParser(project_root / "config.xml"))

        manifest = json.loads((firefoxos_dir / "manifest.webapp").read_text())
        assert manifest == {
            "name": "MyApp",
            "version": "1.0",
            "launch_path": "/index.html",
            "icons": {},
        }

    def test_invalid_manifest(self, firefoxos_dir: Path, project_root: Path) -> None:
        (firefoxos_dir / "manifest.webapp").write_text("{not json")

        with pytest.raises(InvalidConfig, match="Invalid JSON"):
            FirefoxOSParser(firefoxos_dir).update_from_config(
                ConfigParser(project_root / "config.xml")
            )
