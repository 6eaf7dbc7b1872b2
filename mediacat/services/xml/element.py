# mediacat/services/xml/element.py
"""
XML adapter for catalogue metadata documents.

Built on xml.etree.ElementTree, which is not hardened against malicious
input: entity-expansion ("billion laughs") payloads are expanded in memory.
parse_xml refuses any document carrying a DOCTYPE, which is where such
entities are declared; catalogue documents never need one.
Beyond that, only feed it documents from a trusted catalogue source.
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import List, Optional

from mediacat.domain.errors import ParseError


class XmlElement:
    """
    ElementPort adapter over xml.etree.ElementTree. Child lookups match direct
    children by tag name only.
    """

    __slots__ = ("_node",)

    def __init__(self, node: ET.Element):
        self._node = node

    @property
    def tag(self) -> str:
        return self._node.tag

    @property
    def text(self) -> str:
        return self._node.text or ""

    def has_child(self, name: str) -> bool:
        return self._node.find(name) is not None

    def get_child_text(self, name: str) -> str:
        child = self._node.find(name)
        if child is None:
            raise KeyError(name)
        return child.text or ""

    def get_child(self, name: str) -> Optional[XmlElement]:
        child = self._node.find(name)
        return XmlElement(child) if child is not None else None

    def get_children(self, name: str) -> List[XmlElement]:
        return [XmlElement(c) for c in self._node.findall(name)]

    def get_attribute(self, name: str) -> Optional[str]:
        return self._node.get(name)

    def __repr__(self) -> str:
        return f"XmlElement(<{self._node.tag}>)"


def parse_xml(text: str | bytes) -> XmlElement:
    """Parse a metadata document and return its root element."""
    marker = b"<!DOCTYPE" if isinstance(text, bytes) else "<!DOCTYPE"
    if marker in text:
        raise ParseError("DOCTYPE declarations are not accepted")
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise ParseError(f"malformed XML: {exc}") from exc
    return XmlElement(root)
