"Contains the element level helpers of the OpenStreetMap XML format"

import re
from typing import Dict, List, Optional, Sequence, Tuple
from xml.etree.ElementTree import Element
from openlr import Coordinates
from shapely.geometry import MultiPoint
from ..error import MapLoadError

# "Science & Engineering Offices (SEO)" -> "SEO"
ABBREVIATION_PATTERN = re.compile(r"\(([^()]+)\)\s*$")

#: Tags that carry a building abbreviation, in order of preference
ABBREVIATION_TAGS = ("abbreviation", "short_name")


def read_tags(element: Element) -> Dict[str, str]:
    "Returns the <tag k=... v=...> children of an element as dictionary"
    return {tag.get("k"): tag.get("v") for tag in element.iter("tag")}


def read_node(element: Element) -> Tuple[int, Coordinates]:
    "Returns the id and position of a <node> element"
    try:
        node_id = int(element.get("id"))
        lat = float(element.get("lat"))
        lon = float(element.get("lon"))
    except (TypeError, ValueError):
        raise MapLoadError(f"Invalid node element with attributes {element.attrib}")
    return node_id, Coordinates(lon=lon, lat=lat)


def read_way_id(element: Element) -> int:
    "Returns the id of a <way> element"
    try:
        return int(element.get("id"))
    except (TypeError, ValueError):
        raise MapLoadError(f"Invalid way element with attributes {element.attrib}")


def read_node_refs(element: Element) -> List[int]:
    "Returns the node ids referenced by a <way> element, in order"
    try:
        return [int(nd.get("ref")) for nd in element.iter("nd")]
    except (TypeError, ValueError):
        raise MapLoadError(f"Way {element.get('id')} has an invalid node reference")


def building_abbreviation(tags: Dict[str, str]) -> str:
    """Returns the abbreviation of a building

    Explicit abbreviation tags take precedence over a parenthesized suffix of the name.
    Buildings without any abbreviation get an empty one."""
    for key in ABBREVIATION_TAGS:
        if tags.get(key):
            return tags[key]
    match = ABBREVIATION_PATTERN.search(tags.get("name", ""))
    if match is not None:
        return match.group(1).strip()
    return ""


def centroid(positions: Sequence[Coordinates]) -> Optional[Coordinates]:
    "Returns the mean position of `positions`, or None if there are none"
    if not positions:
        return None
    center = MultiPoint([tuple(position) for position in positions]).centroid
    return Coordinates(lon=center.x, lat=center.y)
