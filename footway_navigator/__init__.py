#!/usr/bin/env python3
"""
Walking route finder for OpenStreetMap footway networks.
"""

from .configuration import Config, load_config, save_config, DEFAULT_CONFIG
from .error import (
    NavigationError,
    NoFootwayNodesError,
    InvalidSourceError,
    BuildingNotFoundError,
    MapLoadError,
)
from .maps import (
    WeightedGraph,
    Footway,
    Building,
    MapReader,
    nearest_node,
    shortest_paths,
    reconstruct_path,
)
from .maps.wgs84 import distance
from .observer import NavigationObserver, SimpleObserver
from .session import RoutingSession, Route, build_graph

from ._version import (
    __title__,
    __description__,
    __url__,
    __version__,
    __author__,
    __author_email__,
    __license__,
)
