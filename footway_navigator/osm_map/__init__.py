"""A map reader for OpenStreetMap XML files, conforming to
the interface in footway_navigator.maps"""

from logging import debug
from io import StringIO
from typing import Dict, List, TextIO, Union
from xml.etree.ElementTree import ElementTree, ParseError, parse
from openlr import Coordinates
from ..configuration import Config, DEFAULT_CONFIG
from ..error import MapLoadError
from ..maps import MapReader, Footway, Building
from .primitives import read_tags, read_node, read_way_id, read_node_refs, building_abbreviation, centroid


class OsmMapReader(MapReader):
    """
    This is a reader for OpenStreetMap XML files (`.osm`).

    Create an instance with: `OsmMapReader('map.osm')`.

    The whole file is read at construction. Nodes are all <node> elements; footways
    and buildings are <way> elements carrying the tags configured in `config`.
    """

    def __init__(self, source: Union[str, TextIO], config: Config = DEFAULT_CONFIG):
        self.config = config
        try:
            tree = parse(source)
        except (OSError, ParseError) as err:
            raise MapLoadError(f"Unable to load open street map {source}: {err}") from err
        self.nodes: Dict[int, Coordinates] = {}
        self.footways: List[Footway] = []
        self.buildings: List[Building] = []
        self._read(tree)

    @classmethod
    def from_string(cls, text: str, config: Config = DEFAULT_CONFIG) -> "OsmMapReader":
        "Reads a map from an XML string"
        return cls(StringIO(text), config)

    def _read(self, tree: ElementTree):
        root = tree.getroot()
        if root.tag != "osm":
            raise MapLoadError(f"Expected an <osm> document, found <{root.tag}>")
        for element in root.iter("node"):
            node_id, position = read_node(element)
            self.nodes[node_id] = position
        for element in root.iter("way"):
            tags = read_tags(element)
            if self._is_footway(tags):
                self.footways.append(Footway(read_way_id(element), tuple(read_node_refs(element))))
            elif self._is_building(tags):
                building = self._read_building(element, tags)
                if building is not None:
                    self.buildings.append(building)
        debug(
            f"Read {len(self.nodes)} nodes, {len(self.footways)} footways "
            f"and {len(self.buildings)} buildings"
        )

    def _is_footway(self, tags: Dict[str, str]) -> bool:
        return any(tags.get(key) == value for (key, value) in self.config.footway_tags)

    def _is_building(self, tags: Dict[str, str]) -> bool:
        (key, value) = self.config.building_tag
        return tags.get(key) == value

    def _read_building(self, element, tags: Dict[str, str]):
        name = tags.get("name")
        if not name:
            debug(f"Skipping unnamed building way {element.get('id')}")
            return None
        refs = read_node_refs(element)
        # A closed way repeats its first node at the end
        if len(refs) > 1 and refs[0] == refs[-1]:
            refs.pop()
        positions = [self.nodes[ref] for ref in refs if ref in self.nodes]
        position = centroid(positions)
        if position is None:
            debug(f"Skipping building {name} without known nodes")
            return None
        return Building(name, building_abbreviation(tags), position)

    def get_nodes(self) -> Dict[int, Coordinates]:
        return self.nodes

    def get_footways(self) -> List[Footway]:
        return self.footways

    def get_buildings(self) -> List[Building]:
        return self.buildings
