# XML read/write helpers for manifests, project descriptors and XAML
import xml.etree.ElementTree as ET
from pathlib import Path


class XmlDocument:
    """A parsed XML file that writes back with its own namespace prefixes.

    ABOUTME: ElementTree's prefix registry is global, so prefixes are
    ABOUTME: re-registered right before each write
    ABOUTME: Comments are kept; a default namespace undone by xmlns="" gets a prefix
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.namespaces: list[tuple[str, str]] = [
            ns for _event, ns in ET.iterparse(str(self.path), events=("start-ns",))
        ]
        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
        self.tree = ET.parse(str(self.path), parser=parser)

    @property
    def root(self) -> ET.Element:
        return self.tree.getroot()

    def find(self, name: str) -> ET.Element | None:
        return find_local(self.root, name)

    def require(self, name: str) -> ET.Element:
        element = self.find(name)
        if element is None:
            raise ValueError(f"No <{name}> element in {self.path}")
        return element

    def _register_namespaces(self) -> None:
        has_reset = any(not uri for _prefix, uri in self.namespaces)
        for prefix, uri in self.namespaces:
            if not uri:
                continue
            if not prefix and has_reset:
                prefix = "ns"
            ET.register_namespace(prefix, uri)

    def write(self, path: Path | None = None, indent: str = "    ") -> None:
        self._register_namespaces()
        ET.indent(self.tree, space=indent)
        self.tree.write(str(path or self.path), encoding="utf-8", xml_declaration=True)


def local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1] if tag.startswith("{") else tag


def find_local(root: ET.Element, name: str) -> ET.Element | None:
    """First element (root included) whose tag, namespace ignored, is `name`."""
    for element in root.iter():
        if isinstance(element.tag, str) and local_name(element.tag) == name:
            return element
    return None


def find_all_local(root: ET.Element, name: str) -> list[ET.Element]:
    return [
        element for element in root.iter()
        if isinstance(element.tag, str) and local_name(element.tag) == name
    ]


def attribute_key(element: ET.Element, name: str, namespace: str | None = None) -> str:
    """Key of an attribute by local name, reusing the existing qualified key.

    ABOUTME: Falls back to `{namespace}name` (or bare `name`) when absent
    """
    for key in element.attrib:
        if local_name(key) == name:
            return key
    return f"{{{namespace}}}{name}" if namespace else name
