"""The office 'idmap' element: which shape id blocks a drawing uses."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Optional

from .attributes import ExtType

NAMESPACE_VML = "urn:schemas-microsoft-com:vml"
NAMESPACE_VML_OFFICE = "urn:schemas-microsoft-com:office:office"
OFFICE_PREFIX = "o"


def _local_name(name: str) -> str:
    if name.startswith("{"):
        return name.rsplit("}", 1)[-1]
    return name.rsplit(":", 1)[-1]


@dataclass
class IdMap:
    """CT_IdMap: an edit extension flag and the list of id blocks."""

    ext: Optional[ExtType] = None
    data: str = ""

    @classmethod
    def from_element(cls, element: ET.Element) -> "IdMap":
        """Read an idmap element; attributes match by local name.

        Raises ValueError when the element is not an idmap.
        """
        if _local_name(element.tag) != "idmap":
            raise ValueError(f"expected element <idmap>, got <{element.tag}>")

        ext: Optional[ExtType] = None
        data = ""
        for key, value in element.attrib.items():
            local = _local_name(key)
            if local == "ext":
                ext = ExtType.decode(value)
            elif local == "data":
                data = value
        return cls(ext=ext, data=data)

    def to_element(self) -> ET.Element:
        """Element written with the office prefix; unset attributes are left out."""
        element = ET.Element(f"{OFFICE_PREFIX}:idmap")
        if self.ext is not None:
            name, value = self.ext.encode("ext")
            element.set(name, value)
        if self.data:
            element.set("data", self.data)
        return element

    def to_xml(self) -> str:
        """XML text of the element."""
        return ET.tostring(self.to_element(), encoding="unicode", short_empty_elements=False)