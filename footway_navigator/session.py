"""The routing session owns the map contents and the graph built from them,
and answers navigation requests between buildings."""

from logging import debug
from math import inf
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple
from openlr import Coordinates
from .buildings import find_building
from .configuration import Config, DEFAULT_CONFIG
from .error import BuildingNotFoundError, InvalidSourceError
from .maps import (
    MapReader,
    Footway,
    Building,
    WeightedGraph,
    nearest_node,
    shortest_paths,
    reconstruct_path,
)
from .maps.wgs84 import coordinate_distance
from .observer import NavigationObserver


class Route(NamedTuple):
    "The answer to a navigation request"
    #: The building the route starts at
    start: Building
    #: The building the route leads to
    destination: Building
    #: The footway node closest to the start building
    start_node: int
    #: The footway node closest to the destination building
    dest_node: int
    #: Walking distance between both nodes, in miles. Infinite if unreachable.
    distance: float
    #: The node ids from start node to destination node, or None if unreachable
    path: Optional[List[int]]

    @property
    def reachable(self) -> bool:
        "Whether a walking path to the destination exists"
        return self.path is not None


def build_graph(nodes: Dict[int, Coordinates], footways: Sequence[Footway]) -> WeightedGraph:
    """Builds the walking graph

    Every node becomes a vertex. Consecutive footway nodes are connected in both
    directions, weighted by their great-circle distance in miles."""
    graph = WeightedGraph()
    for node_id in nodes:
        graph.add_vertex(node_id)

    for footway in footways:
        for (node_a, node_b) in footway.segments():
            if node_a not in nodes or node_b not in nodes:
                debug(f"Footway {footway.way_id} segment {node_a, node_b} has an unknown node")
                continue
            dist = coordinate_distance(nodes[node_a], nodes[node_b])
            graph.add_edge(node_a, node_b, dist)
            graph.add_edge(node_b, node_a, dist)

    debug(f"Built {graph}")
    return graph


class RoutingSession:
    """Holds one loaded map and navigates on it

    The graph is built once at construction and only read afterwards. Each call to
    `navigate` works on its own distance and predecessor maps."""

    def __init__(
            self,
            nodes: Dict[int, Coordinates],
            footways: List[Footway],
            buildings: List[Building],
            config: Config = DEFAULT_CONFIG,
            observer: Optional[NavigationObserver] = None,
    ):
        self.nodes = nodes
        self.footways = footways
        self.buildings = buildings
        self.config = config
        self.observer = observer
        self.graph = build_graph(nodes, footways)

    @classmethod
    def from_reader(
            cls,
            reader: MapReader,
            config: Config = DEFAULT_CONFIG,
            observer: Optional[NavigationObserver] = None,
    ) -> "RoutingSession":
        "Creates a session from everything `reader` provides"
        return cls(
            reader.get_nodes(), reader.get_footways(), reader.get_buildings(), config, observer
        )

    def find_building(self, query: str, endpoint: str = "start") -> Building:
        """Looks up a building by partial name or abbreviation

        Raises:
            BuildingNotFoundError:
                Raised if no building matches. `endpoint` names the role of the
                building in the error message."""
        building = find_building(self.buildings, query)
        if building is None:
            raise BuildingNotFoundError(query, endpoint)
        return building

    def nearest_node(self, building: Building) -> int:
        "Returns the footway node closest to `building`"
        node_id = nearest_node(building.coordinates, self.footways, self.nodes)
        if self.observer is not None:
            self.observer.on_nearest_node(building, node_id)
        return node_id

    def route_between(self, start_node: int, dest_node: int) -> Tuple[float, Optional[List[int]]]:
        """Returns the walking distance and the path between two nodes

        The distance is infinite and the path None if `dest_node` can't be reached.

        Raises:
            InvalidSourceError:
                Raised if `start_node` is not a vertex of the graph.
        """
        if start_node not in self.graph:
            raise InvalidSourceError(f"Node {start_node} is not part of the graph")
        result = shortest_paths(self.graph, start_node)
        dist = result.distances.get(dest_node, inf)
        path = None
        if dist != inf:
            path = reconstruct_path(result.predecessors, start_node, dest_node)

        if self.observer is not None:
            if path is None:
                self.observer.on_route_fail(start_node, dest_node)
            else:
                self.observer.on_route_success(start_node, dest_node, dist, path)
        return dist, path

    def navigate(self, start_query: str, dest_query: str) -> Route:
        """Finds the shortest walk between two buildings

        Args:
            start_query:
                Partial name or abbreviation of the start building
            dest_query:
                Partial name or abbreviation of the destination building
        Returns:
            The route. An unreachable destination is not an error; check `Route.reachable`.
        Raises:
            BuildingNotFoundError:
                Raised if one of the buildings doesn't exist.
            NoFootwayNodesError:
                Raised if the map has no footway nodes to start or end at.
        """
        start = self.find_building(start_query, "start")
        destination = self.find_building(dest_query, "destination")
        start_node = self.nearest_node(start)
        dest_node = self.nearest_node(destination)
        debug(f"Navigating from {start.fullname} ({start_node}) to {destination.fullname} ({dest_node})")
        dist, path = self.route_between(start_node, dest_node)
        return Route(start, destination, start_node, dest_node, dist, path)
