# src/ringlocant/core/utils/directions.py

"""
Direction calculus for laying fused rings out on a lattice.

A direction code describes where the next ring sits relative to the current
one: 0 is straight to the right, 4 straight back to the left, positive codes
turn upwards and negative codes downwards. Codes are always expressed
relative to the running history of previous turns, which keeps every ring of
a system on one consistent 2-D grid.
"""

from ..config import MAX_DIRECTION_RING_SIZE
from ..exceptions import NumberingError


def sign(value: float) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def direction_from_distance(distance: int, ring_size: int, history: int) -> int:
    """
    Direction of the next ring from the distance between two fusion bonds.

    Args:
        distance: Cyclic bond-index difference between the bond the walk
            entered the ring by and the bond it leaves by
        ring_size: Number of atoms in the ring
        history: Direction of the previous step

    Returns:
        History-adjusted direction code

    Raises:
        NumberingError: If the ring is too large or the distance meaningless
    """
    if ring_size > MAX_DIRECTION_RING_SIZE:
        raise NumberingError(
            f"rings with more than {MAX_DIRECTION_RING_SIZE} members are not recognized"
        )
    if ring_size < 3 or not 0 < distance < ring_size:
        raise NumberingError(f"Distance {distance} is undefined for a {ring_size}-membered ring")

    half = ring_size // 2

    if ring_size == 3:
        direction = 1 if distance == 1 else -1
    elif ring_size == 4:
        if distance == 2:
            direction = 0
        elif distance < 2:
            direction = 2
        else:
            direction = -2
    elif ring_size % 2 == 0:
        if distance == 1:
            direction = 3
        elif distance == ring_size - 1:
            direction = -3
        else:
            direction = half - distance
            if abs(direction) > 2 and ring_size >= 8:
                direction = 2 * sign(direction)
    else:
        if distance in (half, half + 1):
            direction = 0
        elif ring_size == 5:
            direction = 2
        elif distance == ring_size - 1:
            direction = -3
        elif distance == 1:
            direction = 3
        elif ring_size >= 9 and distance in (half - 1, half + 2):
            direction = 2
        elif distance < half:
            direction = 2
        else:
            direction = -2

    return change_direction_with_history(direction, history, ring_size)


def change_direction_with_history(direction: int, history: int, ring_size: int) -> int:
    """
    Express a relative direction in terms of the accumulated history.

    Codes that leave the -4..4 range are folded back, and -4 is normalised
    to 4. Six-membered rings have no direction 2; when the sum produces one
    the relative and historical turn magnitudes decide between 1 and 3.
    """
    relative = direction

    if abs(history) == 4:
        if direction == 0:
            direction = 4
        else:
            direction -= 4 * sign(direction)
    else:
        direction += history

    if abs(direction) > 4:
        direction = (8 - abs(direction)) * sign(direction) * -1

    # Should not happen for a regular hexagonal layout; kept as a heuristic.
    if ring_size == 6 and abs(direction) == 2:
        if (abs(relative) == 1 and abs(history) == 3) or (abs(relative) == 3 and abs(history) == 1):
            direction = sign(direction)
        elif abs(relative) == 1 and abs(history) == 1:
            direction = 3 * sign(direction)
        elif abs(relative) == 3 and abs(history) == 3:
            direction = 3 * sign(direction)

    if direction == -4:
        direction = 4

    return direction


def opposite_direction(direction: int) -> int:
    """Direction from ring B back to ring A, given the one from A to B."""
    if direction == 0:
        return 4
    if abs(direction) == 4:
        return 0
    if abs(direction) == 1:
        return -3 * sign(direction)
    return -sign(direction)


def count_dx(direction: int) -> float:
    """Horizontal offset between consecutive rings."""
    magnitude = abs(direction)
    if magnitude == 1:
        return 0.5
    if magnitude == 3:
        return -0.5
    if magnitude == 0:
        return 1.0
    if magnitude == 4:
        return -1.0
    return 0.0


def count_dh(direction: int) -> int:
    """Vertical offset between consecutive rings."""
    if abs(direction) == 4:
        return 0
    return sign(direction)
