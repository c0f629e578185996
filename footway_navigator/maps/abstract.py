"""Contains an abstract `MapReader` base class, which must be implemented for each
map format to navigate on.

A MapReader loads a map and hands out its contents. An implementation may read an
OpenStreetMap XML file, a database or something similar. The navigator reads everything
once, builds its graph from it, and does not ask the reader again.

In order to implement a reader for a new map, the :py:attr:`~MapReader` interface
has to be implemented.

The map model
-------------
Nodes
=====
A node is an integer ID together with a WGS84 longitude/latitude position.

Footways
========
A footway is an ordered sequence of node IDs. Consecutive nodes are directly connected
by a walkable segment. Footways are walkable in both directions.

Buildings
=========
A building has a full name, an abbreviation and a position. Buildings are not part of
the walking network; they are matched to the closest footway node.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Mapping, NamedTuple, Tuple
from openlr import Coordinates
from shapely.geometry import LineString, Point


class Footway(NamedTuple):
    "A walking path through a sequence of nodes"
    #: The id of the way this footway comes from
    way_id: int
    #: The node ids along the footway, in order
    nodes: Tuple[int, ...]

    def segments(self) -> List[Tuple[int, int]]:
        "Returns each pair of consecutive node ids"
        return list(zip(self.nodes, self.nodes[1:]))


class Building(NamedTuple):
    "A named point of interest that routes start or end at"
    fullname: str
    abbrev: str
    coordinates: Coordinates

    @property
    def geometry(self) -> Point:
        "Returns the position of this building as shapely point"
        return Point(*self.coordinates)


def footway_geometry(footway: Footway, nodes: Mapping[int, Coordinates]) -> LineString:
    "Returns the shape of `footway` as a linestring of (lon, lat) points"
    return LineString([nodes[node_id] for node_id in footway.nodes])


class MapReader(ABC):
    """Abstract base class for map readers.

    This is an adapter class providing the map contents the navigator needs."""

    @abstractmethod
    def get_nodes(self) -> Dict[int, Coordinates]:
        "Returns the position of every node, by node id"

    @abstractmethod
    def get_footways(self) -> List[Footway]:
        "Returns all footways in the map, in no particular order"

    @abstractmethod
    def get_buildings(self) -> List[Building]:
        "Returns all buildings in the map, in no particular order"

    def get_nodecount(self) -> int:
        "Returns the number of nodes in the map."
        return len(self.get_nodes())

    def get_footwaycount(self) -> int:
        "Returns the number of footways in the map."
        return len(self.get_footways())

    def get_buildingcount(self) -> int:
        "Returns the number of buildings in the map."
        return len(self.get_buildings())
