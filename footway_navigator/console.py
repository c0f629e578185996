"""
The interactive console of the navigator.

    - Inputs:
        - an OpenStreetMap XML file
        - pairs of start and destination buildings, by partial name or abbreviation
    - Outputs:
        - map statistics
        - nearest footway nodes of both buildings
        - the walking distance and the node path between them
"""

import argparse
import logging
import sys
from logging import debug
from typing import List, Optional, TextIO
from openlr import Coordinates
from .configuration import Config, DEFAULT_CONFIG, load_config
from .error import BuildingNotFoundError, MapLoadError, NoFootwayNodesError
from .maps import Building
from .osm_map import OsmMapReader
from .session import RoutingSession

QUIT = "#"


class Console:
    "Reads navigation requests from `stdin` and writes the answers to `stdout`"

    def __init__(self, stdin: TextIO, stdout: TextIO, config: Config = DEFAULT_CONFIG):
        self.stdin = stdin
        self.stdout = stdout
        self.config = config

    def write(self, text: str = ""):
        self.stdout.write(text + "\n")

    def prompt(self, text: str) -> Optional[str]:
        "Asks for one line of input. Returns None at the end of input."
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def number(self, value: float) -> str:
        return f"{value:.{self.config.precision}g}"

    def position(self, position: Coordinates) -> str:
        return f" ({self.number(position.lat)}, {self.number(position.lon)})"

    def write_building(self, building: Building):
        self.write(f" {building.fullname}")
        self.write(self.position(building.coordinates))

    def write_node(self, session: RoutingSession, node_id: int):
        self.write(f" {node_id}")
        self.write(self.position(session.nodes[node_id]))

    def load(self, map_file: Optional[str]) -> RoutingSession:
        "Loads the map and prints its statistics"
        if map_file is None:
            map_file = self.prompt("Enter map filename> ") or self.config.map_file
        reader = OsmMapReader(map_file, self.config)
        session = RoutingSession.from_reader(reader, self.config)
        self.write()
        self.write(f"# of nodes: {reader.get_nodecount()}")
        self.write(f"# of footways: {reader.get_footwaycount()}")
        self.write(f"# of buildings: {reader.get_buildingcount()}")
        self.write(f"# of vertices: {session.graph.vertex_count()}")
        self.write(f"# of edges: {session.graph.edge_count()}")
        self.write()
        return session

    def navigate(self, session: RoutingSession, start_query: str, dest_query: str):
        "Answers one navigation request"
        try:
            start = session.find_building(start_query, "start")
            destination = session.find_building(dest_query, "destination")
        except BuildingNotFoundError as err:
            self.write(str(err))
            return

        self.write("Starting point:")
        self.write_building(start)
        self.write("Destination point:")
        self.write_building(destination)

        try:
            start_node = session.nearest_node(start)
            dest_node = session.nearest_node(destination)
        except NoFootwayNodesError as err:
            debug(err)
            self.write("Sorry, the map has no footways")
            return
        self.write()
        self.write("Nearest start node:")
        self.write_node(session, start_node)
        self.write("Nearest destination node:")
        self.write_node(session, dest_node)

        self.write()
        self.write("Navigating with Dijkstra...")
        dist, path = session.route_between(start_node, dest_node)
        if path is None:
            self.write("Sorry, destination unreachable")
            return
        self.write(f"Distance to dest: {self.number(dist)} {self.config.distance_unit}")
        self.write("Path: " + "->".join(str(node_id) for node_id in path))

    def run(self, map_file: Optional[str] = None) -> int:
        "Runs the console until the user quits. Returns the exit status."
        self.write("** Navigating open street map **")
        self.write()
        try:
            session = self.load(map_file)
        except MapLoadError as err:
            debug(err)
            self.write("**Error: unable to load open street map.")
            self.write()
            return 1

        start_query = self.prompt("Enter start (partial name or abbreviation), or #> ")
        while start_query is not None and start_query != QUIT:
            dest_query = self.prompt("Enter destination (partial name or abbreviation)> ")
            if dest_query is None:
                break
            self.navigate(session, start_query, dest_query)
            self.write()
            start_query = self.prompt("Enter start (partial name or abbreviation), or #> ")

        self.write("** Done **")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find the shortest walk between two buildings of an OpenStreetMap map"
    )
    parser.add_argument("map", nargs="?", help="path to the map file; asked for if omitted")
    parser.add_argument("-c", "--config", action="store", help="JSON config file")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug mode.")
    args = parser.parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    config = load_config(args.config) if args.config else DEFAULT_CONFIG
    return Console(sys.stdin, sys.stdout, config).run(args.map)
