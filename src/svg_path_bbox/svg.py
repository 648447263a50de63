"""Functions for reading and writing SVG path markup."""

from __future__ import annotations

import re
from typing import Any, TypeGuard
from xml.etree import ElementTree as ET

from defusedxml.ElementTree import fromstring

from .constants import SVG_NAMESPACE


def save_parse(data: str) -> ET.Element:
    """Save and parse an SVG string."""
    return fromstring(data)  # type: ignore[no-any-return]


def assure_elem(elem: Any) -> TypeGuard[ET.Element]:
    """Assure that the element is an `ET.Element`."""
    return isinstance(elem, ET.Element)


def filtered_tag(tag: str) -> str:
    """Get the tag without the provider.

    Examples:
        >>> filtered_tag("{http://www.w3.org/2000/svg}path")
        'path'
        >>> filtered_tag("path")
        'path'
    """
    return re.sub(r"\{.*\}", "", tag)


def to_string(elem: ET.Element) -> str:
    """Convert an element to a string."""
    string = ET.tostring(elem).decode("utf-8")
    string = string.replace("ns0:", "").replace(":ns0", "")
    string = string.replace("svg:", "").replace(":svg", "")
    return string.strip()


def read_path_element(data: str | ET.Element) -> ET.Element:
    """Read a single `<path>` element from markup or an existing element.

    Raises:
        TypeError: If data is neither markup nor an element.
        ValueError: If the root element is not a path.
    """
    if isinstance(data, str):
        elem = save_parse(data)
    elif assure_elem(data):
        elem = data
    else:
        raise TypeError(f"Expected markup or an element, got {type(data).__name__}")

    if filtered_tag(elem.tag) != "path":
        raise ValueError(f"Expected a path element, got {filtered_tag(elem.tag)}")

    return elem


def split_style(attrib: dict[str, str]) -> dict[str, str]:
    """Merge the style attribute into separate attributes.

    Style properties take precedence over presentation attributes.
    """
    attrs = {k: v for k, v in attrib.items() if k != "style"}
    style = attrib.get("style", "")
    styles = [x.strip() for x in style.split(";") if x.strip()]
    for item in styles:
        key, _, value = item.partition(":")
        attrs[key.strip()] = value.strip()
    return attrs


def path_element(d: str) -> ET.Element:
    """Create a namespaced SVG path element with the given path data."""
    return ET.Element(f"{{{SVG_NAMESPACE}}}path", {"d": d})
