# Tests for Android platform parser
from pathlib import Path

import pytest

from xface.config_parser import ConfigParser
from xface.errors import InvalidConfig, NotAPlatformProject
from xface.platforms.android import ANDROID_NS, AndroidParser
from xface.xml_helpers import XmlDocument

ANDROID_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<manifest xmlns:android="http://schemas.android.com/apk/res/android"
    package="com.old.app" android:versionName="0.0.1" android:versionCode="1">
    <application android:label="@string/app_name" />
</manifest>
"""

STRINGS = """<?xml version="1.0" encoding="utf-8"?>
<resources>
    <string name="app_name">Old</string>
    <string name="other">keep</string>
</resources>
"""

ACTIVITY = """package com.old.app;

import android.os.Bundle;

public class Old extends XFaceActivity { }
"""


@pytest.fixture
def android_dir(project_root: Path) -> Path:
    root = project_root / "platforms" / "android"
    (root / "res" / "values").mkdir(parents=True)
    (root / "res" / "xml").mkdir(parents=True)
    (root / "src" / "com" / "old" / "app").mkdir(parents=True)
    (root / "AndroidManifest.xml").write_text(ANDROID_MANIFEST)
    (root / "res" / "values" / "strings.xml").write_text(STRINGS)
    (root / "src" / "com" / "old" / "app" / "Old.java").write_text(ACTIVITY)
    return root


def test_requires_manifest(tmp_path: Path) -> None:
    with pytest.raises(NotAPlatformProject, match="No AndroidManifest.xml file."):
        AndroidParser(tmp_path)


def test_layout(android_dir: Path) -> None:
    """Test www output lives under assets and config under res/xml."""
    parser = AndroidParser(android_dir)

    assert parser.www_root() == android_dir / "assets" / "xface3"
    assert parser.www_dir() == android_dir / "assets" / "xface3" / "helloxface"
    assert parser.config_xml() == android_dir / "res" / "xml" / "config.xml"


def test_update_from_config(android_dir: Path, project_root: Path) -> None:
    """Test name, version and package are synced and sources moved."""
    AndroidParser(android_dir).update_from_config(ConfigParser(project_root / "config.xml"))

    manifest = XmlDocument(android_dir / "AndroidManifest.xml")
    assert manifest.root.get("package") == "com.example.app"
    assert manifest.root.get(f"{{{ANDROID_NS}}}versionName") == "1.0"
    assert manifest.root.get(f"{{{ANDROID_NS}}}versionCode") == "1"
    assert "xmlns:android=" in (android_dir / "AndroidManifest.xml").read_text()

    strings = {
        element.get("name"): element.text
        for element in XmlDocument(android_dir / "res" / "values" / "strings.xml").root
    }
    assert strings == {"app_name": "MyApp", "other": "keep"}

    moved = android_dir / "src" / "com" / "example" / "app" / "Old.java"
    assert moved.read_text().startswith("package com.example.app;")
    assert not (android_dir / "src" / "com" / "old" / "app" / "Old.java").exists()


def test_same_package_keeps_sources(android_dir: Path, tmp_path: Path) -> None:
    config_path = tmp_path / "config.xml"
    config_path.write_text(
        '<widget xmlns="http://www.w3.org/ns/widgets" id="com.old.app" version="2.0">'
        "<name>Old</name></widget>"
    )

    AndroidParser(android_dir).update_from_config(ConfigParser(config_path))

    assert (android_dir / "src" / "com" / "old" / "app" / "Old.java").read_text() == ACTIVITY


def test_rejects_non_config(android_dir: Path) -> None:
    with pytest.raises(InvalidConfig):
        AndroidParser(android_dir).update_from_config(None)
