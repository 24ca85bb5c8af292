# database/pathfinding.py
from typing import List, Dict, Any, Optional
import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum

from .graph import SocialGraph

INF = float('inf')

class PathStatus(Enum):
    """Outcome of a shortest path query."""
    SAME_NODE = "same_node"
    FOUND = "found"
    NOT_FOUND = "not_found"

@dataclass
class PathResult:
    """Container for a shortest path query result."""
    status: PathStatus
    start: int
    target: int
    distance: Optional[int] = None
    path: List[int] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.status is not PathStatus.NOT_FOUND

    def to_dict(self) -> Dict[str, Any]:
        return {
            'status': self.status.value,
            'start': self.start,
            'target': self.target,
            'distance': self.distance,
            'path': list(self.path)
        }

class PathFinder:
    """Breadth-first shortest paths (degrees of separation) between users."""

    def __init__(self, graph: SocialGraph):
        self.graph = graph
        self.logger = logging.getLogger(self.__class__.__name__)

    def find_shortest_path(self, start: int, target: int) -> PathResult:
        """
        Find the shortest directed path from ``start`` to ``target``.
        Neighbours are expanded in ascending id order, so among several
        shortest paths the returned one is always the same.
        Args:
            start: Starting user id
            target: Target user id
        """
        start = self.graph.get_user(start).id
        target = self.graph.get_user(target).id

        if start == target:
            return PathResult(
                status=PathStatus.SAME_NODE,
                start=start,
                target=target,
                distance=0,
                path=[start]
            )

        n = self.graph.num_users
        distance = [INF] * n
        parent: List[Optional[int]] = [None] * n

        distance[start] = 0
        queue = deque([start])
        found = False

        while queue:
            u = queue.popleft()
            if u == target:
                found = True
                break

            for v in self.graph.neighbors(u):
                if distance[v] == INF:
                    distance[v] = distance[u] + 1
                    parent[v] = u
                    queue.append(v)

        if not found:
            self.logger.debug(f"No path from {start} to {target}")
            return PathResult(status=PathStatus.NOT_FOUND, start=start, target=target)

        path = self._reconstruct_path(parent, target)
        self.logger.debug(f"Path from {start} to {target}: {path}")

        return PathResult(
            status=PathStatus.FOUND,
            start=start,
            target=target,
            distance=int(distance[target]),
            path=path
        )

    def degrees_of_separation(self, start: int, target: int) -> Optional[int]:
        """Edge count of the shortest path, or None when unreachable."""
        return self.find_shortest_path(start, target).distance

    @staticmethod
    def _reconstruct_path(parent: List[Optional[int]], target: int) -> List[int]:
        path = []
        current: Optional[int] = target
        while current is not None:
            path.append(current)
            current = parent[current]
        path.reverse()
        return path
