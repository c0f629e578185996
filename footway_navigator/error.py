class NavigationError(Exception):
    "An error that happens while resolving a walking route"


class NoFootwayNodesError(NavigationError):
    "An error that happens when a nearest node is requested but no footway has any node"


class InvalidSourceError(NavigationError):
    "The start vertex of a shortest path query is not part of the graph"


class BuildingNotFoundError(NavigationError):
    "No building matches the given name or abbreviation"

    def __init__(self, query: str, endpoint: str):
        super().__init__(f"{endpoint.capitalize()} building not found")
        self.query = query
        self.endpoint = endpoint


class MapLoadError(NavigationError):
    "The map file could not be read"
