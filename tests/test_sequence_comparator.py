import pytest

from ringlocant.core.exceptions import NumberingError
from ringlocant.core.services.sequence_comparator import SequenceComparator

from conftest import NAPHTHALENE_EDGES, build


def with_heteroatoms(**elements):
    symbols = ["C"] * 10
    for atom_id, element in elements.items():
        symbols[int(atom_id[1:])] = element
    return build(symbols, NAPHTHALENE_EDGES)


def test_heteroatom_gets_lowest_locant(quinoline):
    comparator = SequenceComparator(quinoline)
    nitrogen_first = [3, 2, 1, 0, 5, 9, 8, 7, 6, 4]
    nitrogen_late = [6, 7, 8, 9, 5, 0, 1, 2, 3, 4]

    assert comparator.compare(nitrogen_first, nitrogen_late) == -1
    assert comparator.compare(nitrogen_late, nitrogen_first) == 1
    assert comparator.sort([nitrogen_late, nitrogen_first])[0] == nitrogen_first


def test_fusion_carbons_do_not_take_a_number(quinoline):
    comparator = SequenceComparator(quinoline)
    # the bridgehead in front of the nitrogen is skipped, so N is still "1"
    bridgehead_first = [5, 3, 2, 1, 0, 4, 6, 7, 8, 9]
    carbon_first = [0, 3, 2, 1, 5, 4, 6, 7, 8, 9]

    assert comparator.compare(bridgehead_first, carbon_first) == -1


def test_oxygen_preferred_over_nitrogen():
    fragment = with_heteroatoms(a3="O", a6="N")
    comparator = SequenceComparator(fragment)
    oxygen_first = [3, 2, 1, 0, 5, 9, 8, 7, 6, 4]
    nitrogen_first = [6, 7, 8, 9, 5, 0, 1, 2, 3, 4]

    assert comparator.compare(oxygen_first, nitrogen_first) == -1


def test_unknown_elements_rank_as_carbon():
    fragment = with_heteroatoms(a3="Xe", a6="Hg")
    comparator = SequenceComparator(fragment)
    xenon_first = [3, 2, 1, 0, 5, 9, 8, 7, 6, 4]
    mercury_first = [6, 7, 8, 9, 5, 0, 1, 2, 3, 4]

    assert comparator.compare(mercury_first, xenon_first) == -1


def test_low_locants_to_fusion_carbons(naphthalene):
    comparator = SequenceComparator(naphthalene)
    late = [3, 2, 1, 0, 5, 9, 8, 7, 6, 4]
    early = [2, 1, 0, 5, 9, 8, 7, 6, 4, 3]

    assert comparator.compare(late, early) == 1
    assert comparator.sort([late, early]) == [early, late]


def test_low_locants_to_fusion_heteroatoms():
    fragment = with_heteroatoms(a3="N", a4="N")
    comparator = SequenceComparator(fragment)
    fusion_nitrogen_first = [4, 3, 2, 1, 0, 5, 9, 8, 7, 6]
    plain_nitrogen_first = [3, 4, 2, 1, 0, 5, 9, 8, 7, 6]

    assert comparator.compare(fusion_nitrogen_first, plain_nitrogen_first) == -1


def test_identical_sequences_compare_equal(naphthalene):
    sequence = [3, 2, 1, 0, 5, 9, 8, 7, 6, 4]
    assert SequenceComparator(naphthalene).compare(sequence, list(sequence)) == 0


def test_sort_is_stable(naphthalene):
    comparator = SequenceComparator(naphthalene)
    first = [3, 2, 1, 0, 5, 9, 8, 7, 6, 4]
    second = [6, 7, 8, 9, 5, 0, 1, 2, 3, 4]

    assert comparator.sort([first, second]) == [first, second]
    assert comparator.sort([second, first]) == [second, first]


def test_length_mismatch_raises(naphthalene):
    comparator = SequenceComparator(naphthalene)
    with pytest.raises(NumberingError, match="differ in length"):
        comparator.compare([0, 1, 2], [0, 1])
