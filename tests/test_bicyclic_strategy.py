import pytest

from ringlocant.core.domain.implementations.bicyclic_strategy import BicyclicStrategy
from ringlocant.core.domain.models.ring_system import RingSystem
from ringlocant.core.exceptions import NumberingError
from ringlocant.core.services.sssr_finder import find_sssr

from conftest import build


def test_one_candidate_per_bridgehead_neighbour(naphthalene):
    system = RingSystem(naphthalene, find_sssr(naphthalene))
    candidates = BicyclicStrategy().candidate_sequences(system)

    assert candidates == [
        [3, 2, 1, 0, 5, 9, 8, 7, 6, 4],
        [6, 7, 8, 9, 5, 0, 1, 2, 3, 4],
        [0, 1, 2, 3, 4, 6, 7, 8, 9, 5],
        [9, 8, 7, 6, 4, 3, 2, 1, 0, 5],
    ]


def test_candidates_cover_every_atom_and_end_at_a_bridgehead(quinoline):
    system = RingSystem(quinoline, find_sssr(quinoline))
    for candidate in BicyclicStrategy().candidate_sequences(system):
        assert sorted(candidate) == list(range(10))
        assert candidate[-1] in (4, 5)


def test_spiro_system_has_no_bridgeheads():
    spiro = build(
        ["C"] * 7,
        [(0, 1), (1, 2), (2, 0), (0, 3), (3, 4), (4, 5), (5, 6), (6, 0)],
    )
    system = RingSystem(spiro, find_sssr(spiro))
    with pytest.raises(NumberingError, match="No bridgehead atoms"):
        BicyclicStrategy().candidate_sequences(system)
