from ringlocant.core.domain.models.numbering_result import Topology
from ringlocant.core.domain.models.ring_system import RingSystem
from ringlocant.core.services.sssr_finder import find_sssr
from ringlocant.core.services.topology_classifier import classify_topology, rings_are_in_chain


def system_for(fragment):
    return RingSystem(fragment, find_sssr(fragment))


def test_two_rings_are_bicyclic(naphthalene):
    assert classify_topology(system_for(naphthalene)) == Topology.BICYCLIC


def test_linear_and_angular_chains(anthracene, phenanthrene):
    assert classify_topology(system_for(anthracene)) == Topology.CHAIN
    assert classify_topology(system_for(phenanthrene)) == Topology.CHAIN


def test_peri_fused_six_membered_rings_use_the_grid(pyrene):
    system = system_for(pyrene)
    assert not rings_are_in_chain(system)
    assert classify_topology(system) == Topology.GRID


def test_peri_fused_mixed_sizes_fall_back(acenaphthylene):
    system = system_for(acenaphthylene)
    assert not rings_are_in_chain(system)
    assert classify_topology(system) == Topology.FALLBACK


def test_single_ring_falls_back(benzene):
    assert classify_topology(system_for(benzene)) == Topology.FALLBACK


def test_no_rings_falls_back(benzene):
    assert classify_topology(RingSystem(benzene, [])) == Topology.FALLBACK
