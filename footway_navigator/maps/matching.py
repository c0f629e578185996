"Matches positions on the map to the closest node of the footway network"

from logging import debug
from typing import Iterable, Mapping
from openlr import Coordinates
from ..error import NoFootwayNodesError
from .abstract import Footway
from .wgs84 import distance


def nearest_node(
        target: Coordinates,
        footways: Iterable[Footway],
        coordinates: Mapping[int, Coordinates]
) -> int:
    """Returns the footway node closest to `target`

    Every node of every footway is considered, even if it appears on several footways.
    On equal distances, the node found first wins.

    Args:
        target:
            The position to match
        footways:
            The footways whose nodes are candidates
        coordinates:
            Positions of the nodes, by node id. Nodes without a position are skipped.
    Raises:
        NoFootwayNodesError:
            Raised if the footways contain no node with a known position.
    """
    closest = None
    min_dist = None

    for footway in footways:
        for node_id in footway.nodes:
            position = coordinates.get(node_id)
            if position is None:
                debug(f"Footway {footway.way_id} references node {node_id} without position")
                continue
            dist = distance(target.lat, target.lon, position.lat, position.lon)
            if min_dist is None or dist < min_dist:
                min_dist = dist
                closest = node_id

    if closest is None:
        raise NoFootwayNodesError(f"No footway node to match {target} to")
    debug(f"Nearest footway node to {target} is {closest}, {min_dist} miles away")
    return closest
