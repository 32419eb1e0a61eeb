from ringlocant.core.utils.fragment_tools import (
    assign_placeholder_locants,
    relabel_fused_ring_system,
)

from conftest import NAPHTHALENE_EDGES, build


def test_fusion_carbons_take_letters(naphthalene):
    relabel_fused_ring_system(naphthalene, [3, 2, 1, 0, 5, 9, 8, 7, 6, 4])

    assert naphthalene.get_locants() == {
        0: "4", 1: "3", 2: "2", 3: "1", 4: "8a",
        5: "4a", 6: "8", 7: "7", 8: "6", 9: "5",
    }


def test_consecutive_fusion_carbons(pyrene):
    order = [9, 8, 7, 6, 5, 4, 3, 2, 1, 0, 13, 12, 11, 10, 14, 15]
    relabel_fused_ring_system(pyrene, order)

    assert [pyrene.get_atom(a).locant for a in order] == [
        "1", "2", "3", "3a", "4", "5", "5a", "6", "7", "8", "8a",
        "9", "10", "10a", "10b", "10c",
    ]


def test_fusion_heteroatom_takes_a_number():
    elements = ["C"] * 10
    elements[4] = "N"
    fragment = build(elements, NAPHTHALENE_EDGES)
    relabel_fused_ring_system(fragment, [3, 2, 1, 0, 5, 9, 8, 7, 6, 4])

    assert fragment.get_atom(4).locant == "9"
    assert fragment.get_atom(5).locant == "4a"


def test_placeholders_follow_fragment_order(benzene):
    benzene.reorder_atom_collection([5, 4, 3, 2, 1, 0])
    assign_placeholder_locants(benzene)

    assert [atom.locant for atom in benzene.atoms] == ["X1", "X2", "X3", "X4", "X5", "X6"]
    assert benzene.get_atom(5).locant == "X1"
