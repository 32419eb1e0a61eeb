import pytest

from ringlocant.core.domain.models.fragment import Fragment

# Bridgeheads 4 and 5 share bond 4-5; atom 3 sits next to bridgehead 4.
NAPHTHALENE_EDGES = [
    (0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0),
    (4, 6), (6, 7), (7, 8), (8, 9), (9, 5),
]

# Linear: the middle ring is fused through bonds 4-5 and 7-8.
ANTHRACENE_EDGES = NAPHTHALENE_EDGES + [
    (8, 10), (10, 11), (11, 12), (12, 13), (13, 7),
]

# Angular: the middle ring is fused through bonds 4-5 and 6-7.
PHENANTHRENE_EDGES = NAPHTHALENE_EDGES + [
    (7, 10), (10, 11), (11, 12), (12, 13), (13, 6),
]

# Atom i is pyrene position [1, 2, 3, 3a, 4, 5, 5a, 6, 7, 8, 8a, 9, 10, 10a, 10b, 10c][i].
PYRENE_EDGES = [
    (0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (6, 7), (7, 8),
    (8, 9), (9, 10), (10, 11), (11, 12), (12, 13), (13, 0),
    (3, 14), (6, 15), (10, 15), (13, 14), (14, 15),
]

# Naphthalene with a five-membered ring across bridgehead 5.
ACENAPHTHYLENE_EDGES = NAPHTHALENE_EDGES + [(0, 10), (10, 11), (11, 9)]

BENZENE_EDGES = [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0)]

# Six-, eleven- and six-membered rings; the middle ring is fused through 4-5 and 9-10.
LARGE_RING_CHAIN_EDGES = [
    (0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0),
    (5, 6), (6, 7), (7, 8), (8, 9), (9, 10), (10, 11), (11, 12), (12, 13), (13, 14), (14, 4),
    (9, 15), (15, 16), (16, 17), (17, 18), (18, 10),
]


def build(elements, edges):
    return Fragment.from_edges(elements, edges)


@pytest.fixture
def naphthalene():
    return build(["C"] * 10, NAPHTHALENE_EDGES)


@pytest.fixture
def quinoline():
    elements = ["C"] * 10
    elements[3] = "N"
    return build(elements, NAPHTHALENE_EDGES)


@pytest.fixture
def anthracene():
    return build(["C"] * 14, ANTHRACENE_EDGES)


@pytest.fixture
def phenanthrene():
    return build(["C"] * 14, PHENANTHRENE_EDGES)


@pytest.fixture
def pyrene():
    return build(["C"] * 16, PYRENE_EDGES)


@pytest.fixture
def acenaphthylene():
    return build(["C"] * 12, ACENAPHTHYLENE_EDGES)


@pytest.fixture
def benzene():
    return build(["C"] * 6, BENZENE_EDGES)


@pytest.fixture
def large_ring_chain():
    return build(["C"] * 19, LARGE_RING_CHAIN_EDGES)
