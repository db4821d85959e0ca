# ABOUTME: Shared fixtures: on-disk xface application and Windows Phone 8 projects
# ABOUTME: Library cache is redirected to tmp via XFACE_LIB_DIR
from pathlib import Path

import pytest

from xface.hooks import HookDispatcher

APP_CONFIG_XML = """<?xml version='1.0' encoding='utf-8'?>
<widget xmlns="http://www.w3.org/ns/widgets" id="com.example.app" version="1.0">
    <name>MyApp</name>
    <description>Sample</description>
    <content src="index.html" />
</widget>
"""

PLATFORM_CONFIG_XML = """<?xml version='1.0' encoding='utf-8'?>
<widget xmlns="http://www.w3.org/ns/widgets" id="com.old.app" version="0.0.1">
    <name>Old</name>
    <pre_install_packages>
        <app_package id="helloxface" name="helloxface.zip" />
        <app_package id="second" name="second.zip" />
    </pre_install_packages>
</widget>
"""

WMAPP_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<Deployment xmlns="http://schemas.microsoft.com/windowsphone/2012/deployment" AppPlatformVersion="8.0">
  <DefaultLanguage xmlns="" code="en-US" />
  <App xmlns="" ProductID="{11111111-2222-3333-4444-555555555555}" Title="Old" RuntimeType="Silverlight" Version="0.0.1" Genre="apps.normal" Author="Old Author" Description="Sample" Publisher="Old Publisher">
    <Tokens>
      <PrimaryToken TokenID="Old" TaskName="_default" />
    </Tokens>
  </App>
</Deployment>
"""

CSPROJ = """<?xml version="1.0" encoding="utf-8"?>
<Project ToolsVersion="4.0" DefaultTargets="Build" xmlns="http://schemas.microsoft.com/developer/msbuild/2003">
  <!-- generated by the xface template -->
  <PropertyGroup>
    <RootNamespace>com.old.app</RootNamespace>
    <AssemblyName>com.old.app</AssemblyName>
    <XapFilename>com.old.app.xap</XapFilename>
    <SilverlightAppEntry>com.old.app.App</SilverlightAppEntry>
  </PropertyGroup>
</Project>
"""

SLN = """Microsoft Visual Studio Solution File, Format Version 12.00
Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "Old", "Old.csproj", "{AAAA}"
EndProject
"""

MAIN_PAGE_XAML = """<phone:PhoneApplicationPage
    x:Class="com.old.app.MainPage"
    xmlns="http://schemas.microsoft.com/winfx/2006/xaml/presentation"
    xmlns:x="http://schemas.microsoft.com/winfx/2006/xaml"
    xmlns:phone="clr-namespace:Microsoft.Phone.Controls;assembly=Microsoft.Phone">
    <Grid x:Name="LayoutRoot" />
</phone:PhoneApplicationPage>
"""

APP_XAML = """<Application
    x:Class="com.old.app.App"
    xmlns="http://schemas.microsoft.com/winfx/2006/xaml/presentation"
    xmlns:x="http://schemas.microsoft.com/winfx/2006/xaml">
</Application>
"""

MAIN_PAGE_CS = """using System;

namespace com.old.app
{
    public partial class MainPage { }
}
"""

APP_CS = """using System;

namespace com.old.app
{
    public partial class App { }
}
"""


@pytest.fixture(autouse=True)
def lib_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the library cache away from the real home directory."""
    root = tmp_path / "lib"
    monkeypatch.setenv("XFACE_LIB_DIR", str(root))
    return root


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A minimal xface application project."""
    root = tmp_path / "app"
    (root / ".xface").mkdir(parents=True)
    (root / "www" / "helloxface").mkdir(parents=True)
    (root / "www" / "helloxface" / "index.html").write_text("<html>app</html>")
    (root / "config.xml").write_text(APP_CONFIG_XML)
    return root


def write_wp8_project(project_dir: Path, name: str = "Old") -> Path:
    """Write a Windows Phone 8 project skeleton."""
    (project_dir / "Properties").mkdir(parents=True)
    (project_dir / "Properties" / "WMAppManifest.xml").write_text(WMAPP_MANIFEST)
    (project_dir / f"{name}.csproj").write_text(CSPROJ)
    (project_dir / f"{name}.sln").write_text(SLN)
    (project_dir / "MainPage.xaml").write_text(MAIN_PAGE_XAML)
    (project_dir / "MainPage.xaml.cs").write_text(MAIN_PAGE_CS)
    (project_dir / "App.xaml").write_text(APP_XAML)
    (project_dir / "App.xaml.cs").write_text(APP_CS)
    (project_dir / "config.xml").write_text(PLATFORM_CONFIG_XML)
    return project_dir


@pytest.fixture
def wp8_dir(project_root: Path) -> Path:
    return write_wp8_project(project_root / "platforms" / "wp8")


@pytest.fixture
def hooks(project_root: Path) -> HookDispatcher:
    return HookDispatcher(project_root)


@pytest.fixture
def make_wp8_project():
    """Factory writing a Windows Phone 8 project into a given directory."""
    return write_wp8_project
