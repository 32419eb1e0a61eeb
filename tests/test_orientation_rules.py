import pytest

from ringlocant.core.domain.models.quadrant import CornerCandidate, Quadrant
from ringlocant.core.exceptions import NumberingError
from ringlocant.core.services.orientation_rules import (
    apply_rules_bcd,
    count_path_quadrants,
    increment_quadrant,
)


def test_rule_b_picks_most_populated_quadrant():
    assert apply_rules_bcd([[1, 0, 0, 0]]) == [CornerCandidate(0, Quadrant.UPPER_RIGHT)]


def test_rule_b_compares_across_chains():
    candidates = apply_rules_bcd([[1, 0, 0, 0], [0, 2, 0, 0]])
    assert candidates == [CornerCandidate(1, Quadrant.UPPER_LEFT)]


def test_rule_c_minimises_opposite_quadrant():
    # upper right and lower right tie on rule B; lower right faces the
    # emptier upper left quadrant
    candidates = apply_rules_bcd([[2, 0, 1, 2]])
    assert candidates == [CornerCandidate(0, Quadrant.LOWER_RIGHT)]


def test_rule_d_maximises_rings_above():
    candidates = apply_rules_bcd([[2, 1, 0.5, 0.5], [0.5, 0.5, 2, 0]])
    assert candidates == [CornerCandidate(0, Quadrant.UPPER_RIGHT)]


def test_symmetric_chain_keeps_all_quadrants():
    candidates = apply_rules_bcd([[0, 0, 0, 0]])
    assert [c.quadrant for c in candidates] == list(Quadrant)


def test_no_chains_raises():
    with pytest.raises(NumberingError, match="Atom enumeration path not found"):
        apply_rules_bcd([])


def test_increment_quadrant_counts_axis_rings_half():
    quadrants = [0.0, 0.0, 0.0, 0.0]
    increment_quadrant(1, 0, quadrants)
    increment_quadrant(0, -1, quadrants)
    increment_quadrant(-1, 2, quadrants)
    increment_quadrant(0, 0, quadrants)
    assert quadrants == [0.5, 1.0, 0.5, 1.0]


def test_count_path_quadrants_for_angular_chain():
    # one straight step followed by a turn upwards
    assert count_path_quadrants(0, 1, [0, 1]) == [1, 0, 0, 0]
    assert count_path_quadrants(1, 1, [-1, 0]) == [0, 1, 0, 0]


def test_count_path_quadrants_for_straight_chain():
    assert count_path_quadrants(0, 2, [0, 0]) == [0, 0, 0, 0]


def test_quadrant_geometry():
    assert Quadrant.UPPER_RIGHT.diagonal == Quadrant.LOWER_LEFT
    assert Quadrant.UPPER_LEFT.same_row == Quadrant.UPPER_RIGHT
    assert Quadrant.LOWER_LEFT.same_row == Quadrant.LOWER_RIGHT
    assert [q.inverts_atom_order for q in Quadrant] == [False, True, False, True]
    assert [q.reverses_rings for q in Quadrant] == [False, True, True, False]
