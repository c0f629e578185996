"Contains a simple NavigationObserver implementation"
from typing import Sequence, NamedTuple, Optional
from .abstract import NavigationObserver
from ..maps import Building


class AttemptedRoute(NamedTuple):
    """An attempted route between two nodes"""
    start_node: int
    dest_node: int
    success: bool
    distance: Optional[float]
    path: Optional[Sequence[int]]


class SimpleObserver(NavigationObserver):
    """A simple observer that collects the information and can be
    queried after the navigation is finished"""

    def __init__(self):
        self.nearest_nodes = {}
        self.attempted_routes = []

    def on_nearest_node(self, building: Building, node_id: int):
        self.nearest_nodes[building.fullname] = node_id

    def on_route_success(self, start_node: int, dest_node: int, distance: float,
                         path: Sequence[int]):
        self.attempted_routes.append(
            AttemptedRoute(start_node, dest_node, True, distance, path)
        )

    def on_route_fail(self, start_node: int, dest_node: int):
        self.attempted_routes.append(
            AttemptedRoute(start_node, dest_node, False, None, None)
        )
