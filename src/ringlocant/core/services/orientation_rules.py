# src/ringlocant/core/services/orientation_rules.py

"""
IUPAC orientation rules B, C and D.

Both path builders describe each candidate principal chain by the number of
rings in its four quadrants (upper right, upper left, lower left, lower
right). Rings sitting on an axis count half towards each adjacent quadrant,
so counts are floats. The rules then pick which quadrants may serve as the
upper-right corner of the drawing.
"""

import logging
from typing import List, Sequence

from ..domain.models.quadrant import CornerCandidate, Quadrant
from ..exceptions import NumberingError
from ..utils.directions import count_dh, count_dx

logger = logging.getLogger(__name__)

QuadrantCounts = Sequence[float]


def apply_rules_bcd(quadrant_counts: Sequence[QuadrantCounts]) -> List[CornerCandidate]:
    """
    Select upper-right corner candidates for every principal chain.

    Args:
        quadrant_counts: Ring counts per quadrant, one entry per chain

    Returns:
        Surviving (chain, quadrant) pairs in chain order, then quadrant order

    Raises:
        NumberingError: If no candidate survives
    """
    # Rule B: maximum number of rings in the upper right quadrant
    q_max = 0.0
    for counts in quadrant_counts:
        q_max = max(q_max, *counts)

    candidates = [
        CornerCandidate(c, Quadrant(q))
        for c, counts in enumerate(quadrant_counts)
        for q in range(4)
        if counts[q] == q_max
    ]
    if not candidates:
        raise NumberingError("Atom enumeration path not found")

    # Rule C: minimum number of rings in the lower left quadrant
    if len(candidates) > 1:
        q_min = min(quadrant_counts[c.chain_index][c.quadrant.diagonal] for c in candidates)
        candidates = [
            c for c in candidates if quadrant_counts[c.chain_index][c.quadrant.diagonal] == q_min
        ]

    # Rule D: maximum number of rings above the horizontal row
    if len(candidates) > 1:
        r_max = max(0.0, max(_rings_above(quadrant_counts, c) for c in candidates))
        candidates = [c for c in candidates if _rings_above(quadrant_counts, c) == r_max]

    if not candidates:
        raise NumberingError("Atom enumeration path not found")

    logger.debug(
        "Rules B/C/D kept %s",
        ", ".join(f"chain {c.chain_index} quadrant {int(c.quadrant)}" for c in candidates),
    )
    return candidates


def _rings_above(quadrant_counts: Sequence[QuadrantCounts], candidate: CornerCandidate) -> float:
    counts = quadrant_counts[candidate.chain_index]
    return counts[candidate.quadrant] + counts[candidate.quadrant.same_row]


def increment_quadrant(height: int, xdist: float, quadrants: List[float]) -> None:
    """Add one ring at (xdist, height) relative to the chain centre."""
    if height > 0:
        if xdist > 0:
            quadrants[Quadrant.UPPER_RIGHT] += 1
        elif xdist < 0:
            quadrants[Quadrant.UPPER_LEFT] += 1
        else:
            quadrants[Quadrant.UPPER_RIGHT] += 0.5
            quadrants[Quadrant.UPPER_LEFT] += 0.5
    elif height < 0:
        if xdist > 0:
            quadrants[Quadrant.LOWER_RIGHT] += 1
        elif xdist < 0:
            quadrants[Quadrant.LOWER_LEFT] += 1
        else:
            quadrants[Quadrant.LOWER_RIGHT] += 0.5
            quadrants[Quadrant.LOWER_LEFT] += 0.5
    else:
        if xdist > 0:
            quadrants[Quadrant.UPPER_RIGHT] += 0.5
            quadrants[Quadrant.LOWER_RIGHT] += 0.5
        elif xdist < 0:
            quadrants[Quadrant.UPPER_LEFT] += 0.5
            quadrants[Quadrant.LOWER_LEFT] += 0.5
        # a ring at the very centre would add 0.25 everywhere, which changes nothing


def count_path_quadrants(start: int, length: int, path: Sequence[int]) -> List[float]:
    """
    Count rings per quadrant for a chain inside a direction path.

    Args:
        start: Index in ``path`` where the principal chain begins
        length: Number of straight steps in the chain
        path: Direction codes, one per ring transition

    Returns:
        Ring counts [upper right, upper left, lower left, lower right]
    """
    quadrants = [0.0, 0.0, 0.0, 0.0]

    height = 0
    xdist = -length / 2
    for i in range(start - 1, -1, -1):
        height -= count_dh(path[i])
        xdist -= count_dx(path[i])
        increment_quadrant(height, xdist, quadrants)

    height = 0
    xdist = length / 2
    for i in range(start + length, len(path)):
        height += count_dh(path[i])
        xdist += count_dx(path[i])
        increment_quadrant(height, xdist, quadrants)

    return quadrants
