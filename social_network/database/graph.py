# database/graph.py
from typing import List, Dict, Any, Optional, Iterable, Tuple
from dataclasses import dataclass
import logging

import networkx as nx
import numpy as np

from ..config import Config, DEFAULT_MAX_USERS, DEFAULT_MAX_NAME_LENGTH
from ..utils.error_handler import (
    CapacityExceededError,
    ConfigurationError,
    ErrorTracker,
    InvalidEdgeError,
    NodeNotFoundError,
    OperationError,
    ValidationError,
)

@dataclass(frozen=True)
class User:
    """A participant in the social graph."""
    id: int
    name: str

class SocialGraph:
    """Fixed-capacity directed graph of users backed by a dense adjacency matrix.

    Users are fixed at construction and numbered 0..n-1 in input order.
    Relationships are added afterwards; once the graph is frozen it is
    read-only and safe to share between analyses.
    """

    def __init__(self, names: Iterable[str],
                 capacity: int = DEFAULT_MAX_USERS,
                 max_name_length: int = DEFAULT_MAX_NAME_LENGTH):
        self.logger = logging.getLogger(self.__class__.__name__)

        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ConfigurationError(
                f"Capacity must be a positive integer, got {capacity!r}",
                'invalid_config',
                {'capacity': capacity}
            )

        names = list(names)
        if len(names) > capacity:
            error = CapacityExceededError(len(names), capacity)
            self.logger.error(f"Error: {error}")
            raise error

        for name in names:
            self._validate_name(name, max_name_length)

        self._capacity = capacity
        self._users: List[User] = [User(id=i, name=name) for i, name in enumerate(names)]
        self._adjacency = np.zeros((capacity, capacity), dtype=bool)
        self._frozen = False
        self.errors = ErrorTracker()

        self.logger.info(f"Graph initialized with {len(self._users)} users.")

    @classmethod
    def from_config(cls, config: Config, names: Iterable[str]) -> 'SocialGraph':
        """Create a graph sized by the ``graph`` section of the config."""
        return cls(names, capacity=config.max_users, max_name_length=config.max_name_length)

    @staticmethod
    def _validate_name(name: Any, max_length: int):
        if not isinstance(name, str) or not name.strip():
            raise ValidationError(
                f"User name must be a non-empty string, got {name!r}",
                'invalid_user_name',
                {'name': name}
            )
        if len(name) > max_length:
            raise ValidationError(
                f"User name {name!r} exceeds {max_length} characters",
                'invalid_user_name',
                {'name': name, 'max_length': max_length}
            )

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def num_users(self) -> int:
        return len(self._users)

    @property
    def users(self) -> List[User]:
        return list(self._users)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def edge_count(self) -> int:
        n = self.num_users
        return int(self._adjacency[:n, :n].sum())

    def __len__(self) -> int:
        return self.num_users

    def __repr__(self) -> str:
        return f"SocialGraph(users={self.num_users}, relationships={self.edge_count}, capacity={self._capacity})"

    def contains(self, node_id: Any) -> bool:
        """True if ``node_id`` is the id of a user of this graph."""
        return (isinstance(node_id, (int, np.integer)) and not isinstance(node_id, bool)
                and 0 <= node_id < self.num_users)

    def _require_node(self, node_id: Any) -> int:
        if not self.contains(node_id):
            raise NodeNotFoundError(node_id, self.num_users)
        return int(node_id)

    def get_user(self, node_id: int) -> User:
        return self._users[self._require_node(node_id)]

    def index_of(self, name: str) -> Optional[int]:
        """Id of the first user called ``name``, or None."""
        for user in self._users:
            if user.name == name:
                return user.id
        return None

    def add_relationship(self, from_id: int, to_id: int) -> bool:
        """
        Add the directed relationship ``from_id -> to_id``.
        Returns False, leaving the graph unchanged, when either endpoint is
        not a user of the graph. The rejection is logged and kept in
        ``self.errors``.
        """
        self._ensure_mutable(from_id, to_id)

        if not (self.contains(from_id) and self.contains(to_id)):
            self._report_invalid_edge(from_id, to_id)
            return False

        self._adjacency[from_id, to_id] = True
        return True

    def add_relationship_by_name(self, from_name: str, to_name: str) -> bool:
        """Same as ``add_relationship`` with endpoints given by user name."""
        self._ensure_mutable(from_name, to_name)

        from_id = self.index_of(from_name)
        to_id = self.index_of(to_name)
        if from_id is None or to_id is None:
            self._report_invalid_edge(from_name, to_name)
            return False
        return self.add_relationship(from_id, to_id)

    def _ensure_mutable(self, from_id: Any, to_id: Any):
        if self._frozen:
            raise OperationError(
                "Cannot add relationships to a frozen graph",
                'graph_frozen',
                {'from': from_id, 'to': to_id}
            )

    def _report_invalid_edge(self, from_id: Any, to_id: Any):
        error = InvalidEdgeError(from_id, to_id)
        self.logger.warning(str(error))
        self.errors.track_error(error)

    def has_edge(self, from_id: int, to_id: int) -> bool:
        return bool(self._adjacency[self._require_node(from_id), self._require_node(to_id)])

    def neighbors(self, node_id: int) -> List[int]:
        """Out-neighbours of ``node_id`` in ascending id order."""
        row = self._adjacency[self._require_node(node_id), :self.num_users]
        return [int(v) for v in np.flatnonzero(row)]

    def adjacency_matrix(self) -> np.ndarray:
        """Read-only copy of the n x n block of the adjacency matrix."""
        n = self.num_users
        matrix = self._adjacency[:n, :n].copy()
        matrix.flags.writeable = False
        return matrix

    def relationships(self) -> List[Tuple[int, int]]:
        """All relationships in row-major order."""
        n = self.num_users
        return [(int(i), int(j)) for i, j in np.argwhere(self._adjacency[:n, :n])]

    def freeze(self) -> 'SocialGraph':
        """End the construction phase. Further insertions raise OperationError."""
        self._frozen = True
        self._adjacency.flags.writeable = False
        self.logger.debug(f"Graph frozen with {self.edge_count} relationships")
        return self

    def to_networkx(self) -> nx.DiGraph:
        """Export to a NetworkX DiGraph keyed by user id."""
        G = nx.DiGraph()
        for user in self._users:
            G.add_node(user.id, name=user.name)
        G.add_edges_from(self.relationships())
        return G

    def to_dict(self) -> Dict[str, Any]:
        return {
            'capacity': self._capacity,
            'users': [{'id': u.id, 'name': u.name} for u in self._users],
            'relationships': [list(edge) for edge in self.relationships()]
        }
