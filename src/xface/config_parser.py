# Application config.xml (W3C widget) parser
import xml.etree.ElementTree as ET
from pathlib import Path

from xface.xml_helpers import XmlDocument, find_all_local, local_name


class ConfigParser:
    """Read/write access to the identity fields of a config.xml.

    ABOUTME: name, version, package id and start page of the application
    ABOUTME: Also lists pre-installed app packages of a platform config.xml
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.doc = XmlDocument(self.path)

    def _child(self, name: str, create: bool = False) -> ET.Element | None:
        root = self.doc.root
        for child in root:
            if isinstance(child.tag, str) and local_name(child.tag) == name:
                return child
        if not create:
            return None
        ns = root.tag[1:].split("}", 1)[0] if root.tag.startswith("{") else None
        return ET.SubElement(root, f"{{{ns}}}{name}" if ns else name)

    def package_name(self) -> str:
        return self.doc.root.get("id", "")

    def set_package_name(self, package: str) -> None:
        self.doc.root.set("id", package)

    def version(self) -> str:
        return self.doc.root.get("version", "")

    def set_version(self, version: str) -> None:
        self.doc.root.set("version", version)

    def name(self) -> str:
        element = self._child("name")
        return (element.text or "").strip() if element is not None else ""

    def set_name(self, name: str) -> None:
        self._child("name", create=True).text = name

    def content(self) -> str:
        """Start page of the application (defaults to index.html)."""
        element = self._child("content")
        if element is None:
            return "index.html"
        return element.get("src", "index.html")

    def set_content(self, src: str) -> None:
        self._child("content", create=True).set("src", src)

    def app_packages(self) -> list[str]:
        """Ids listed under <pre_install_packages>, in document order."""
        return [
            package.get("id")
            for package in find_all_local(self.doc.root, "app_package")
            if package.get("id")
        ]

    def write(self) -> None:
        self.doc.write()
