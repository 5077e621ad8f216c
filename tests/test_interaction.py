from __future__ import annotations

import pytest

from colldb import constants
from colldb.exceptions import DataNotFoundException
from colldb.interactions import CollisionPair
from colldb.models import InteractionType
from colldb.particles import Species

DATABASE = {
    "defaults": {
        "all": {"Q11": 1.0e-19, "Q22": 2.0e-19},
        "charged-charged": {"Q11": 7.0e-18},
    },
    "pairs": {
        "Ar + N2": {"Q11": {"model": "constant", "value": 9.0, "units": "A^2"}},
        "N2 + N2": {
            "Q11": 4.0e-19,
            "Q12": 3.0e-19,
            "Q13": 2.5e-19,
            "Q22": 5.0e-19,
        },
    },
}


@pytest.fixture
def n2() -> Species:
    return Species("N2", molar_mass=0.028)


@pytest.fixture
def ar() -> Species:
    return Species("Ar", molar_mass=0.04)


class TestInteractionType:
    def test_types(self, n2, ar, electron):
        ion = Species("Ar+", molar_mass=0.04, charge=1)
        assert CollisionPair(n2, ar).interaction_type is InteractionType.NEUTRAL_NEUTRAL
        assert CollisionPair(ar, ion).interaction_type is InteractionType.NEUTRAL_ION
        assert CollisionPair(electron, ar).interaction_type is InteractionType.NEUTRAL_ELECTRON
        assert CollisionPair(electron, ion).interaction_type is InteractionType.CHARGED_CHARGED


class TestLookup:
    def test_pair_entry_in_either_order(self, n2, ar):
        pair = CollisionPair(n2, ar, DATABASE)
        assert pair.get("Q11", 1000.0) == pytest.approx(9.0 * constants.K_CONST_ANGSTROM_SQ)

    def test_falls_back_to_defaults(self, n2, ar):
        pair = CollisionPair(n2, ar, DATABASE)
        assert pair.get("Q22", 1000.0) == pytest.approx(2.0e-19)

    def test_type_defaults_override_all(self, electron):
        ion = Species("Ar+", molar_mass=0.04, charge=1)
        pair = CollisionPair(electron, ion, DATABASE)
        assert pair.get("Q11", 1000.0) == pytest.approx(7.0e-18)
        assert pair.get("Q22", 1000.0) == pytest.approx(2.0e-19)

    def test_missing_kind(self, n2, ar):
        with pytest.raises(DataNotFoundException, match="Q14"):
            CollisionPair(n2, ar, DATABASE).get("Q14", 1000.0)


class TestDerivedKinds:
    def test_ratios(self, n2):
        pair = CollisionPair(n2, n2, DATABASE)
        assert pair.get("Ast", 1000.0) == pytest.approx(5.0 / 4.0)
        assert pair.get("Bst", 1000.0) == pytest.approx((5.0 * 3.0 - 4.0 * 2.5) / 4.0)
        assert pair.get("Cst", 1000.0) == pytest.approx(3.0 / 4.0)

    def test_missing_base_integral(self, n2, ar):
        with pytest.raises(DataNotFoundException, match="Q12"):
            CollisionPair(n2, ar, DATABASE).get("Bst", 1000.0)


class TestEvaluator:
    def test_evaluator_replaces_data(self, n2, ar):
        calls = []

        def evaluator(pair, kind, T):
            calls.append((pair.name, kind, T))
            return 2.0 * T

        pair = CollisionPair(n2, ar, DATABASE, indices=(1, 2), evaluator=evaluator)
        assert pair.get("anything", 10.0) == 20.0
        assert calls == [("N2 + Ar", "anything", 10.0)]
        assert pair.indices == (1, 2)

    def test_correlations_are_not_replaceable(self, n2, ar):
        with pytest.raises(TypeError):
            CollisionPair(n2, ar, DATABASE, approximation=object())
