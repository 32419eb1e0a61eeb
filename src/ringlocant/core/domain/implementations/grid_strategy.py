#!/usr/bin/env python3
# src/ringlocant/core/domain/implementations/grid_strategy.py

"""
Numbering candidates for ring systems made only of six-membered rings.

Rings are placed on a hexagonal lattice: x advances by two per horizontal
step and by one per diagonal step, y by one per row. The lattice is kept as
a numpy integer grid indexed ``[x, y]`` holding ring ids, with -1 for empty
cells and the top row at ``y = h - 1``.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from ...exceptions import NumberingError
from ...services.orientation_rules import apply_rules_bcd
from ...utils.directions import (
    change_direction_with_history,
    count_dh,
    count_dx,
    direction_from_distance,
    opposite_direction,
)
from ...utils.ring_walk import emit_ring_atoms
from ..interfaces.numbering_strategy import NumberingStrategy
from ..models.connectivity_table import ConnectivityTable
from ..models.quadrant import Quadrant
from ..models.ring_system import RingSystem

logger = logging.getLogger(__name__)

EMPTY = -1

# (chain length, x of first ring, row)
Chain = Tuple[int, int, int]


class GridStrategy(NumberingStrategy):
    """Strategy embedding six-membered ring systems in a 2D ring map."""

    def candidate_sequences(self, system: RingSystem) -> List[List[int]]:
        terminal_rings = system.terminal_rings()
        if not terminal_rings:
            raise NumberingError("Terminal rings not found")
        terminal = terminal_rings[0]

        start_bond = system.non_fused_bond(terminal.ring_id)
        if start_bond is None:
            raise NumberingError("Non-fused bond at terminal ring not found")

        table = ConnectivityTable()
        self._build_table(
            system, terminal.ring_id, None, 0, start_bond,
            system.fragment.bonds[start_bond].atom1_id, table,
        )

        directions = self._longest_chain_directions(system, table)
        logger.debug("Principal directions: %s", directions)

        paths = []
        for direction in directions:
            paths.extend(self._find_possible_paths(system, table, direction))
        return paths

    def _build_table(
        self,
        system: RingSystem,
        ring_id: int,
        parent_id: Optional[int],
        previous_direction: int,
        previous_bond: int,
        atom_id: int,
        table: ConnectivityTable,
    ) -> None:
        """Depth-first walk recording every ring connection in both directions."""
        ring = system.ring(ring_id)
        ring.make_cyclic(system.fragment, previous_bond, atom_id)
        table.used_rings.append(ring_id)

        for neighbour_id in ring.neighbours:
            current_bond = system.find_fusion_bond(ring_id, neighbour_id)
            if current_bond is None:
                raise NumberingError(f"Rings {ring_id} and {neighbour_id} share no bond")

            if neighbour_id == parent_id:
                direction = opposite_direction(previous_direction)
            else:
                distance = (
                    ring.size + ring.bond_number(current_bond) - ring.bond_number(previous_bond)
                ) % ring.size
                if distance == 0:
                    raise NumberingError("Distance between bonds is equal to 0")
                direction = direction_from_distance(distance, ring.size, previous_direction)

            table.add(ring_id, neighbour_id, direction)

            if neighbour_id not in table.used_rings:
                self._build_table(
                    system, neighbour_id, ring_id, direction, current_bond,
                    ring.atom_before_bond(current_bond), table,
                )

    def _longest_chain_directions(self, system: RingSystem, table: ConnectivityTable) -> List[int]:
        """Directions (one of each opposite pair) of the longest straight runs."""
        directions: List[int] = []
        lengths: List[int] = []
        max_chain = 0

        for connection in table.connections:
            ring_id = connection.to_ring
            direction = connection.direction
            run = 1
            while True:
                following = self._next_in_direction(table, ring_id, direction)
                if following is None:
                    break
                run += 1
                if run > len(system):
                    raise NumberingError("Chain of rings longer than the ring system")
                ring_id = following

            if run >= max_chain:
                max_chain = run
                opposite = opposite_direction(direction)
                if direction in directions:
                    index = directions.index(direction)
                    lengths[index] = max(lengths[index], run)
                elif opposite in directions:
                    index = directions.index(opposite)
                    lengths[index] = max(lengths[index], run)
                else:
                    directions.append(direction)
                    lengths.append(run)

        return [d for d, length in zip(directions, lengths) if length == max_chain]

    @staticmethod
    def _next_in_direction(table: ConnectivityTable, ring_id: int, direction: int) -> Optional[int]:
        start = table.first_index_from(ring_id)
        if start < 0:
            return None
        for connection in table.connections[start:]:
            if connection.from_ring == ring_id and connection.direction == direction:
                return connection.to_ring
        return None

    def _find_possible_paths(
        self, system: RingSystem, table: ConnectivityTable, main_direction: int
    ) -> List[List[int]]:
        """Map the rings with the principal direction horizontal and order atoms per corner."""
        if not table.connections:
            raise NumberingError("Connectivity table is empty")

        turned = [
            change_direction_with_history(
                connection.direction, -main_direction, system.ring(connection.from_ring).size
            )
            for connection in table.connections
        ]

        ring_map = self._build_ring_map(system, table, turned)
        chains = _find_chains(ring_map)

        quadrant_counts = [
            _count_grid_quadrants(ring_map, x + length - 1, y) for length, x, y in chains
        ]
        candidates = apply_rules_bcd(quadrant_counts)

        paths = []
        for candidate in candidates:
            quadrant_map = _transform_map(ring_map, candidate.quadrant)
            paths.append(
                self._order_atoms(system, quadrant_map, candidate.quadrant.inverts_atom_order)
            )
        return paths

    def _build_ring_map(
        self, system: RingSystem, table: ConnectivityTable, directions: List[int]
    ) -> np.ndarray:
        ring_count = len(table.used_rings)
        first = table.connections[0].from_ring
        taken = [first]
        coordinates = [(0, 0)]

        # breadth-first: each ring placed relative to one already placed
        for index in range(ring_count - 1):
            if index >= len(taken):
                raise NumberingError("Ring system is not connected")
            ring_id = taken[index]
            x, y = coordinates[index]
            start = table.first_index_from(ring_id)
            if start < 0:
                continue
            for j in range(start, len(table.connections)):
                connection = table.connections[j]
                if connection.from_ring != ring_id or connection.to_ring in taken:
                    continue
                taken.append(connection.to_ring)
                coordinates.append(
                    (x + int(round(2 * count_dx(directions[j]))), y + count_dh(directions[j]))
                )

        xs = [xy[0] for xy in coordinates]
        ys = [xy[1] for xy in coordinates]
        min_x, min_y = min(xs), min(ys)
        width = max(xs) - min_x + 1
        height = max(ys) - min_y + 1

        shifted = [(x - min_x, y - min_y) for x, y in coordinates]
        ring_map = _place_rings(taken, shifted, (width, height))

        logger.debug("Ring map %dx%d for %d rings", width, height, len(taken))
        return ring_map

    def _order_atoms(self, system: RingSystem, ring_map: np.ndarray, inverse_atoms: bool) -> List[int]:
        """Walk the periphery starting from the rightmost ring of the top row."""
        width, height = ring_map.shape

        ring_id = None
        for x in range(width - 1, -1, -1):
            if ring_map[x, height - 1] != EMPTY:
                ring_id = int(ring_map[x, height - 1])
                break
        if ring_id is None:
            raise NumberingError("Upper right ring not found")

        upper_left = _upper_left_neighbour(system, ring_map, ring_id)
        previous_bond = system.find_fusion_bond(ring_id, upper_left)
        if previous_bond is None:
            raise NumberingError("Fusion bond to the upper left ring not found")
        # the first ring may be left towards any neighbour, including the upper left one
        previous_ring = None

        atom_path: List[int] = []
        for _ in range(system.atom_count):
            ring = system.ring(ring_id)
            size = ring.size
            start = ring.bond_number(previous_bond)

            step = -1
            while True:
                next_bond = None
                step += 1
                while step < size:
                    if inverse_atoms:
                        position = (start - step - 1 + size) % size
                    else:
                        position = (start + step + 1) % size
                    bond_id = ring.cyclic_bonds[position]
                    if bond_id in ring.fused_bond_ids:
                        next_bond = bond_id
                        break
                    step += 1
                if next_bond is None:
                    raise NumberingError(f"No fusion bond to leave ring {ring_id} by")

                # two adjacent fusion bonds to the same ring must not send the walk back
                next_ring = None
                for candidate in system.fused_rings(next_bond):
                    if candidate != ring_id and (next_bond == previous_bond or candidate != previous_ring):
                        next_ring = candidate
                        break
                if next_ring is not None:
                    break

            end = ring.bond_number(next_bond)
            if emit_ring_atoms(ring, start, end, inverse_atoms, atom_path):
                return atom_path

            previous_bond = next_bond
            previous_ring = ring_id
            ring_id = next_ring

        raise NumberingError("Endless loop while ordering atoms of fused rings.")


def _place_rings(
    ring_ids: List[int], coordinates: List[Tuple[int, int]], shape: Tuple[int, int]
) -> np.ndarray:
    """Ring map of the given shape with each ring at its non-negative coordinates."""
    width, height = shape
    ring_map = np.full(shape, EMPTY, dtype=int)
    for ring_id, (x, y) in zip(ring_ids, coordinates):
        if not (0 <= x < width and 0 <= y < height):
            raise NumberingError(f"Coordinates ({x}, {y}) of ring {ring_id} are outside the map")
        if ring_map[x, y] != EMPTY:
            raise NumberingError(f"Rings {ring_map[x, y]} and {ring_id} overlap on the map")
        ring_map[x, y] = ring_id
    return ring_map


def _find_chains(ring_map: np.ndarray) -> List[Chain]:
    """Maximal horizontal runs of rings."""
    width, height = ring_map.shape
    chains: List[Chain] = []
    max_chain = 0

    for y in range(height):
        x = 0
        while x < width:
            if ring_map[x, y] != EMPTY:
                length = 1
                while x + 2 * length < width and ring_map[x + 2 * length, y] != EMPTY:
                    length += 1
                if length >= max_chain:
                    chains.append((length, x, y))
                    max_chain = length
                x += 2 * length
            x += 1

    return [chain for chain in chains if chain[0] == max_chain]


def _count_grid_quadrants(ring_map: np.ndarray, mid_x: int, row: int) -> List[float]:
    """Rings per quadrant around a chain centre; axis rings count half."""
    quadrants = [0.0, 0.0, 0.0, 0.0]
    for x, y in np.argwhere(ring_map != EMPTY):
        if x == mid_x and y == row:
            continue
        if x == mid_x:
            if y > row:
                quadrants[Quadrant.UPPER_RIGHT] += 0.5
                quadrants[Quadrant.UPPER_LEFT] += 0.5
            else:
                quadrants[Quadrant.LOWER_LEFT] += 0.5
                quadrants[Quadrant.LOWER_RIGHT] += 0.5
        elif y == row:
            if x < mid_x:
                quadrants[Quadrant.UPPER_LEFT] += 0.5
                quadrants[Quadrant.LOWER_LEFT] += 0.5
            else:
                quadrants[Quadrant.UPPER_RIGHT] += 0.5
                quadrants[Quadrant.LOWER_RIGHT] += 0.5
        elif x > mid_x and y > row:
            quadrants[Quadrant.UPPER_RIGHT] += 1
        elif x < mid_x and y > row:
            quadrants[Quadrant.UPPER_LEFT] += 1
        elif x < mid_x and y < row:
            quadrants[Quadrant.LOWER_LEFT] += 1
        else:
            quadrants[Quadrant.LOWER_RIGHT] += 1
    return quadrants


def _transform_map(ring_map: np.ndarray, corner: Quadrant) -> np.ndarray:
    """Mirror the map so that ``corner`` becomes the upper-right quadrant."""
    if corner == Quadrant.UPPER_LEFT:
        return np.flip(ring_map, axis=0)
    if corner == Quadrant.LOWER_LEFT:
        return np.flip(ring_map, axis=(0, 1))
    if corner == Quadrant.LOWER_RIGHT:
        return np.flip(ring_map, axis=1)
    return ring_map.copy()


def _upper_left_neighbour(system: RingSystem, ring_map: np.ndarray, ring_id: int) -> int:
    """The highest neighbour of a ring, leftmost among equals."""
    best = None
    best_x, best_y = 0, 0
    for neighbour in system.ring(ring_id).neighbours:
        positions = np.argwhere(ring_map == neighbour)
        if len(positions) == 0:
            raise NumberingError("Ring is not found on the map")
        x, y = (int(v) for v in positions[0])
        if best is None or y > best_y or (y == best_y and x < best_x):
            best, best_x, best_y = neighbour, x, y
    if best is None:
        raise NumberingError(f"Ring {ring_id} has no neighbours")
    return best
