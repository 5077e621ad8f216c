from __future__ import annotations

from pathlib import Path

import pytest

from colldb.mixtures import Mixture
from colldb.particles import Species

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def linear_evaluator(pair, kind, T):
    """Q(kind, T) = T for every pair and kind."""
    return T


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def electron() -> Species:
    return Species("e-", molar_mass=5.4857990907e-7, charge=-1)


@pytest.fixture
def heavy_species() -> list:
    return [
        Species("Ar", molar_mass=0.039948),
        Species("Ar+", molar_mass=0.0399474514, charge=1),
    ]


@pytest.fixture
def ionized_mixture(electron, heavy_species) -> Mixture:
    """e-, Ar, Ar+ with the electron given last to check that it is moved to index 0."""
    return Mixture(heavy_species + [electron], T=5000.0, Te=8000.0)


@pytest.fixture
def neutral_mixture() -> Mixture:
    return Mixture(
        [Species("N2", molar_mass=0.0280134), Species("O2", molar_mass=0.0319988), Species("NO", molar_mass=0.0300061)],
        T=3000.0,
    )
