"Contains the abstract observer class for the navigator"
from abc import abstractmethod
from typing import Sequence

from ..maps import Building


class NavigationObserver:
    "Abstract class representing an observer to the navigation process"

    @abstractmethod
    def on_nearest_node(self, building: Building, node_id: int):
        "Called by the navigator when it matched a building to its closest footway node"

    @abstractmethod
    def on_route_success(self, start_node: int, dest_node: int, distance: float,
                         path: Sequence[int]):
        """Called after the navigator found a shortest path between two nodes"""

    @abstractmethod
    def on_route_fail(self, start_node: int, dest_node: int):
        """Called after the navigator found the destination node to be unreachable
        from the start node"""
