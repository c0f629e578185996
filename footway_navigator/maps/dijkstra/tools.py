"Helper types and functions for Dijkstra"

from math import inf
from typing import Dict, Hashable, List, NamedTuple, Optional


class ShortestPaths(NamedTuple):
    "The result of a single-source shortest path search"
    #: Shortest known distance from the source for every vertex, infinite if unreached
    distances: Dict[Hashable, float]
    #: The vertex before each vertex on its shortest path. `None` for the source and
    #: for unreached vertices.
    predecessors: Dict[Hashable, Optional[Hashable]]

    def is_reachable(self, vertex: Hashable) -> bool:
        "Returns whether `vertex` can be reached from the source"
        return self.distances.get(vertex, inf) != inf

    def path_to(self, source: Hashable, target: Hashable) -> Optional[List[Hashable]]:
        "Shortcut for `reconstruct_path` on this result"
        if not self.is_reachable(target):
            return None
        return reconstruct_path(self.predecessors, source, target)


def reconstruct_path(
        predecessors: Dict[Hashable, Optional[Hashable]],
        source: Hashable,
        target: Hashable
) -> Optional[List[Hashable]]:
    """Walks the predecessors back from `target` to `source`

    Returns:
        The vertices from `source` to `target`, both included. `[source]` if both are
        the same. None if the predecessor chain does not lead back to `source`, which
        is the case when `target` is unreachable."""
    path = [target]
    current = target
    while current != source:
        current = predecessors.get(current)
        if current is None or len(path) > len(predecessors):
            return None
        path.append(current)
    path.reverse()
    return path
