"""Ring adjacency table used by the grid embedder."""

from dataclasses import dataclass, field
from typing import List, NamedTuple


class RingConnection(NamedTuple):
    """Direction code from one ring to a neighbouring ring."""

    from_ring: int
    to_ring: int
    direction: int


@dataclass
class ConnectivityTable:
    """Ring-to-ring connections, each recorded in both directions."""

    connections: List[RingConnection] = field(default_factory=list)
    used_rings: List[int] = field(default_factory=list)

    def add(self, from_ring: int, to_ring: int, direction: int) -> None:
        self.connections.append(RingConnection(from_ring, to_ring, direction))

    def first_index_from(self, ring_id: int) -> int:
        """Index of the first connection leaving ``ring_id``, or -1."""
        for index, connection in enumerate(self.connections):
            if connection.from_ring == ring_id:
                return index
        return -1

    def __len__(self) -> int:
        return len(self.connections)
