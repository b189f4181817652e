"""ElementTree-backed parser for XML lab reports."""

from typing import Any
from xml.etree import ElementTree as ET

from labconvert.converter.models import StructuredReport
from labconvert.xml_report.base import BaseXmlParser
from labconvert.xml_report.exceptions import XmlParseError


class XmlReportParser(BaseXmlParser):
    """Converts <Events><Event>...</Event></Events> documents into structured reports.

    The events container may be the root element or a direct child of it.
    Containers named as the plural of their children (Reports/Report,
    Depths/Depth) become lists; repeated sibling tags also become lists.
    """

    async def parse_report(self, text: str) -> StructuredReport | None:
        try:
            root = ET.fromstring(text)
        except ET.ParseError as exc:
            raise XmlParseError(f"Malformed XML: {exc}") from exc

        events_element = self._find_events(root)
        if events_element is None:
            return None
        events = [
            _element_value(child)
            for child in events_element
            if _local_name(child.tag) == "Event"
        ]
        if not events:
            return None
        return {"Events": events}

    @staticmethod
    def _find_events(root: ET.Element) -> ET.Element | None:
        if _local_name(root.tag) == "Events":
            return root
        for child in root:
            if _local_name(child.tag) == "Events":
                return child
        return None


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _element_value(element: ET.Element) -> Any:
    children = list(element)
    text = (element.text or "").strip()
    if not children and not element.attrib:
        return text

    child_names = [_local_name(child.tag) for child in children]
    is_plural_container = (
        len(set(child_names)) == 1 and _local_name(element.tag) == f"{child_names[0]}s"
    )
    if is_plural_container:
        return [_element_value(child) for child in children]

    grouped: dict[str, list[Any]] = {}
    for name, child in zip(child_names, children):
        grouped.setdefault(name, []).append(_element_value(child))

    value: dict[str, Any] = {_local_name(key): attr for key, attr in element.attrib.items()}
    for name, values in grouped.items():
        value[name] = values[0] if len(values) == 1 else values
    if text:
        value["#text"] = text
    return value
