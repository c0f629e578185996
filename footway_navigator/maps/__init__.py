"""
This module describes the handling of maps. It provides the map model,
the graph the routes are searched on and the search itself.
"""

from .abstract import MapReader, Footway, Building, footway_geometry
from .graph import WeightedGraph
from .matching import nearest_node
from .dijkstra import shortest_paths, ShortestPaths, reconstruct_path
