import logging

import pytest

from mass_conservation_dae import (
    ConservationTable,
    DAEEnumerator,
    ModelConfig,
    ModelConsistencyError,
    ras_mapk_conservation_table,
    ras_mapk_network,
)
from mass_conservation_dae.reaction import RateTerm


def _enumerator(config, strict=False):
    return DAEEnumerator(ras_mapk_network(config), ras_mapk_conservation_table(config), strict=strict)


def test_number_of_systems_is_product_of_pool_sizes(config):
    table = ras_mapk_conservation_table(config)
    expected = len(table["Raf0"]) * len(table["MEK0"]) * len(table["ERK0"])
    enumerator = _enumerator(config)
    assert len(enumerator) == expected
    assert sum(1 for _ in enumerator) == expected


def test_one_equation_per_species(config):
    network = ras_mapk_network(config)
    for system in _enumerator(config):
        assert [eq.species for eq in system.equations] == network.species


def test_qss_with_feedback_scenario():
    config = ModelConfig(michaelis_menten_for_all=True, feedback=True)
    systems = list(_enumerator(config))
    assert len(systems) == 18
    for system in systems:
        assert len(system.equations) == 8
        assert len(system.algebraic_species) == 3


def test_enumeration_order_and_indices():
    systems = list(_enumerator(ModelConfig()))
    assert [s.index for s in systems] == list(range(1, 19))
    assert systems[0].choices == {"Raf0": "Raf", "MEK0": "MEK", "ERK0": "ERK"}
    assert systems[1].choices == {"Raf0": "Raf", "MEK0": "MEK", "ERK0": "p-ERK"}
    assert systems[3].choices == {"Raf0": "Raf", "MEK0": "p-MEK", "ERK0": "ERK"}
    assert systems[-1].choices == {"Raf0": "Raf*", "MEK0": "pp-MEK", "ERK0": "pp-ERK"}


def test_size_counts_only_differential_equations():
    systems = list(_enumerator(ModelConfig()))
    # original size 22; Raf (3), MEK (2), ERK (2) replaced
    assert systems[0].size == 15
    # p-ERK carries 4 terms
    assert systems[1].size == 13


def test_enumeration_is_restartable():
    enumerator = _enumerator(ModelConfig())
    first = [s.choices for s in enumerator]
    second = [s.choices for s in enumerator]
    assert first == second


def test_algebraic_equation_replaces_chosen_species():
    system = next(iter(_enumerator(ModelConfig())))
    by_species = {eq.species: eq for eq in system.equations}
    assert by_species["Raf"].algebraic.render() == "[Raf] = [Raf0] - [Raf*]"
    assert by_species["MEK"].algebraic.render() == "[MEK] = [MEK0] - [p-MEK] - [pp-MEK]"
    assert not by_species["Raf*"].is_algebraic


def test_mass_action_without_feedback_strict_raises():
    config = ModelConfig(michaelis_menten_for_all=False, feedback=False)
    enumerator = _enumerator(config, strict=True)
    with pytest.raises(ModelConsistencyError) as excinfo:
        enumerator.check_pools()
    assert excinfo.value.missing == {"Raf0": ["pp-ERK-Raf*"]}
    with pytest.raises(ModelConsistencyError):
        next(iter(enumerator))


def test_mass_action_without_feedback_lenient_keeps_all_systems(caplog):
    config = ModelConfig(michaelis_menten_for_all=False, feedback=False)
    with caplog.at_level(logging.WARNING, logger="mass_conservation_dae.enumerator"):
        systems = list(_enumerator(config))
    assert len(systems) == 175
    assert "pp-ERK-Raf*" in caplog.text
    # Raf0 choice pp-ERK-Raf* is the last Raf0 member and replaces no ODE
    tail = [s for s in systems if s.choices["Raf0"] == "pp-ERK-Raf*"]
    assert len(tail) == 35
    assert all("Raf" not in s.algebraic_species for s in tail)


def test_shared_member_uses_first_pool():
    config = ModelConfig(michaelis_menten_for_all=False, feedback=True)
    enumerator = _enumerator(config)
    system = enumerator.system(1, {"Raf0": "pp-ERK-Raf*", "MEK0": "MEK", "ERK0": "pp-ERK-Raf*"})
    by_species = {eq.species: eq for eq in system.equations}
    assert by_species["pp-ERK-Raf*"].algebraic.pool == "Raf0"
    assert system.algebraic_species == ["MEK", "pp-ERK-Raf*"]


def test_enumerator_accepts_plain_rhs_and_single_member_pool():
    rhs = {
        "X": (RateTerm(-1, "k1", ("X",)),),
        "Y": (RateTerm(1, "k1", ("X",)),),
    }
    table = ConservationTable([("X0", ["X"])])
    (system,) = list(DAEEnumerator(rhs, table))
    assert system.equations[0].algebraic.render() == "[X] = [X0]"
    assert system.size == 1
