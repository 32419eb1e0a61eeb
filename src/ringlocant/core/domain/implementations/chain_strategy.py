#!/usr/bin/env python3
# src/ringlocant/core/domain/implementations/chain_strategy.py

"""
Numbering candidates for ortho-fused chains of rings.

The chain is linearised into a path of direction codes, one per ring
transition. The longest runs of equal codes are candidate principal chains;
after turning the path so that the principal chain runs horizontally, the
orientation rules pick the upper-right corner rings and the periphery is
walked clockwise from there.
"""

import logging
from typing import List

from ...exceptions import NumberingError
from ...services.orientation_rules import apply_rules_bcd, count_path_quadrants
from ...utils.directions import (
    change_direction_with_history,
    count_dh,
    count_dx,
    direction_from_distance,
    sign,
)
from ...utils.ring_walk import emit_ring_atoms
from ..interfaces.numbering_strategy import NumberingStrategy
from ..models.quadrant import Quadrant
from ..models.ring import Ring
from ..models.ring_system import RingSystem

logger = logging.getLogger(__name__)


class ChainStrategy(NumberingStrategy):
    """Strategy for chains where every ring has at most two fusion bonds."""

    def candidate_sequences(self, system: RingSystem) -> List[List[int]]:
        terminal_rings = system.terminal_rings()
        if not terminal_rings:
            raise NumberingError("Terminal rings not found")
        terminal = terminal_rings[0]

        fused_bonds = terminal.fused_bond_ids
        if not fused_bonds:
            raise NumberingError("No fused bonds found")
        if len(fused_bonds) > 1:
            raise NumberingError("Terminal ring connected to more than 2 rings")

        self._enumerate_ring_atoms(system, terminal)
        ordered_rings: List[Ring] = []
        path = self._directions_path(system, fused_bonds[0], terminal, ordered_rings)
        logger.debug("Chain direction path: %s", path)

        return self._apply_rules(system, path, ordered_rings)

    def _enumerate_ring_atoms(self, system: RingSystem, terminal: Ring) -> None:
        """Make every ring cyclic, each rotating the same way as the previous one."""
        fragment = system.fragment
        ring = terminal
        start_bond = terminal.bond_ids[0]
        start_atom = fragment.bonds[start_bond].atom2_id

        for i in range(len(system)):
            ring.make_cyclic(fragment, start_bond, start_atom)
            if i == len(system) - 1:
                break

            if not ring.fused_bond_ids:
                raise NumberingError(f"Ring {ring.ring_id} has no fusion bonds")
            for bond_id in ring.fused_bond_ids:
                if bond_id != start_bond:
                    start_bond = bond_id
                    break

            # the previous atom keeps the enumeration going the same direction
            start_atom = ring.atom_before_bond(start_bond)
            ring = system.ring(system.other_ring(start_bond, ring.ring_id))

    def _directions_path(
        self, system: RingSystem, start_bond: int, terminal: Ring, ordered_rings: List[Ring]
    ) -> List[int]:
        """Direction codes describing the mutual position of the rings."""
        path = [0] * (len(system) - 1)
        ordered_rings.append(terminal)

        ring = terminal
        current_bond = start_bond
        history = 0

        for i in range(len(system) - 1):
            ring = system.ring(system.other_ring(current_bond, ring.ring_id))
            ordered_rings.append(ring)

            fused_bonds = ring.fused_bond_ids
            if not fused_bonds:
                raise NumberingError(f"Ring {ring.ring_id} has no fusion bonds")
            if len(fused_bonds) == 1:
                break
            if i + 1 >= len(path):
                raise NumberingError("Ring chain does not terminate")

            next_bond = next((b for b in fused_bonds if b != current_bond), None)
            if next_bond is None:
                raise NumberingError(f"Ring {ring.ring_id} has no onward fusion bond")

            distance = (
                ring.size + ring.bond_number(next_bond) - ring.bond_number(current_bond)
            ) % ring.size
            if distance == 0:
                raise NumberingError("Distance between fused bonds is equal to 0")

            history = direction_from_distance(distance, ring.size, history)
            path[i + 1] = history
            current_bond = next_bond

        if len(ordered_rings) != len(system):
            raise NumberingError("The path does not correspond to array of rings")
        return path

    def _apply_rules(self, system: RingSystem, path: List[int], rings: List[Ring]) -> List[List[int]]:
        """Find the longest chains and build atom orders for each of their directions."""
        max_chain = 0
        run = 0
        current = 0
        for direction in path:
            if direction == current:
                run += 1
            else:
                max_chain = max(max_chain, run)
                run = 1
                current = direction
        max_chain = max(max_chain, run)

        directions: List[int] = []
        run = 0
        current = 0
        for direction in path:
            if direction == current:
                run += 1
            else:
                if run == max_chain and current not in directions:
                    directions.append(current)
                run = 1
                current = direction
        if run == max_chain and current not in directions:
            directions.append(current)

        if not directions:
            raise NumberingError("Chains are not recognized in the molecule")

        atom_orders = []
        for direction in directions:
            atom_orders.extend(self._orders_in_direction(system, path, rings, direction, max_chain))
        return atom_orders

    def _orders_in_direction(
        self,
        system: RingSystem,
        path: List[int],
        rings: List[Ring],
        main_direction: int,
        max_chain: int,
    ) -> List[List[int]]:
        """Turn the path so the main chain is horizontal, then apply rules A to D."""
        path = list(path)

        if abs(main_direction) == 4:
            length = len(path)
            if len(rings) < length:
                raise NumberingError("The path does not correspond to array of rings")
            reversed_path = [0] * length
            for i, direction in enumerate(path):
                reversed_path[length - i - 1] = _reverse_direction(direction)
            rings = [rings[length - i] for i in range(length)] + [rings[0]]
            path = reversed_path
        elif main_direction != 0:
            path = [
                change_direction_with_history(direction, -main_direction, rings[i].size)
                for i, direction in enumerate(path)
            ]

        # Rule A: straight runs of maximal length are the principal chains
        chains = []
        run = 0
        in_chain = False
        for i, direction in enumerate(path):
            if direction == 0:
                in_chain = True
                run += 1
            elif in_chain:
                in_chain = False
                if run == max_chain:
                    chains.append(i - max_chain)
                run = 0
        if in_chain and run == max_chain:
            chains.append(len(path) - max_chain)

        quadrant_counts = [count_path_quadrants(start, max_chain, path) for start in chains]
        candidates = apply_rules_bcd(quadrant_counts)

        reversed_rings = list(reversed(rings))
        atom_orders = []
        for candidate in candidates:
            quadrant = candidate.quadrant
            chain_start = chains[candidate.chain_index]
            if quadrant.reverses_rings:
                chain_start = len(path) - chain_start - max_chain
                rings_to_pass = reversed_rings
            else:
                rings_to_pass = list(rings)

            atom_orders.append(
                self._create_atom_order(
                    system,
                    rings_to_pass,
                    _transform_path(path, quadrant),
                    chain_start,
                    max_chain,
                    quadrant.inverts_atom_order,
                )
            )
        return atom_orders

    def _create_atom_order(
        self,
        system: RingSystem,
        rings: List[Ring],
        path: List[int],
        chain_start: int,
        chain_length: int,
        inverse_atoms: bool,
    ) -> List[int]:
        """Walk the periphery starting from the upper-right ring."""
        height = 0
        max_height = 0
        xdist = chain_length / 2
        max_dist = xdist
        found_after_chain = True
        ring_heights = [0] * (len(path) + 1)

        upper_right = chain_start + chain_length - 1
        for i in range(chain_start + chain_length, len(path)):
            height += count_dh(path[i])
            xdist += count_dx(path[i])
            ring_heights[i + 1] = height
            # the highest ring in the right half, then the rightmost
            if (height > max_height and xdist >= 0) or (height == max_height and xdist > max_dist):
                max_height = height
                max_dist = xdist
                upper_right = i

        height = 0
        xdist = -chain_length / 2
        for i in range(chain_start - 1, -1, -1):
            height -= count_dh(path[i])
            xdist -= count_dx(path[i])
            ring_heights[i + 1] = height
            if (height > max_height and xdist >= 0) or (height == max_height and xdist > max_dist):
                max_height = height
                max_dist = xdist
                upper_right = i
                found_after_chain = False

        if found_after_chain:
            upper_right += 1
        if upper_right < 0 or upper_right >= len(rings):
            raise NumberingError("Upper right ring is outside the chain")

        ring = rings[upper_right]
        previous_bond = None
        if len(ring.fused_bond_ids) > 1:
            if upper_right + 1 >= len(ring_heights) or upper_right - 1 < 0:
                raise NumberingError("Upper right ring is not between two rings")
            if ring_heights[upper_right - 1] > ring_heights[upper_right + 1]:
                previous_ring = rings[upper_right - 1]
            else:
                previous_ring = rings[upper_right + 1]
            for bond_id in ring.fused_bond_ids:
                if previous_ring.ring_id in system.fused_rings(bond_id):
                    previous_bond = bond_id
                    break
            if previous_bond is None:
                raise NumberingError("Fusion bond to the previous ring not found")

        atom_path: List[int] = []
        current_bond = None
        for _ in range(2 * len(system) + 2):
            # with one fusion bond the walk leaves by the bond it came in by
            for bond_id in ring.fused_bond_ids:
                if bond_id != previous_bond:
                    current_bond = bond_id
            if previous_bond is None:
                previous_bond = current_bond

            start = ring.bond_number(previous_bond)
            end = ring.bond_number(current_bond)
            if emit_ring_atoms(ring, start, end, inverse_atoms, atom_path):
                return atom_path

            ring = system.ring(system.other_ring(current_bond, ring.ring_id))
            previous_bond = current_bond

        raise NumberingError("Endless loop while ordering atoms of fused rings.")


def _reverse_direction(direction: int) -> int:
    """Direction code of a step when the whole path is read backwards."""
    if direction == 0:
        return 4
    if abs(direction) == 4:
        return 0
    return -(4 - abs(direction)) * sign(direction)


def _transform_path(path: List[int], corner: Quadrant) -> List[int]:
    """Mirror the path so that ``corner`` becomes the upper-right quadrant."""
    if corner == Quadrant.UPPER_LEFT:
        return [-direction for direction in reversed(path)]
    if corner == Quadrant.LOWER_LEFT:
        return list(reversed(path))
    if corner == Quadrant.LOWER_RIGHT:
        return [-direction for direction in path]
    return list(path)
