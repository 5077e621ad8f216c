from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Mapping, Optional

import numpy as np

from .. import constants
from ..exceptions import InvalidGroupNameException
from ..interactions import PairEvaluator
from ..mixtures import Mixture
from ..models import GROUP_SUFFIXES, GroupType
from ..yaml_loader import database_file_name, load_yaml_file
from .collision_group import CollisionGroup
from .pair_index import PairSelection, SpeciesPairIndex
from .tabulation import TabulationConfig

logger = logging.getLogger(__name__)


def _read_only(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


class CollisionDB:
    """
    Collision integral database of a gas mixture.

    Groups of integrals are requested by name, `<kind><suffix>`, where the suffix
    selects the pairs: ``ee`` the electron self pair, ``ei`` the electron with
    every species, ``ii`` the heavy self pairs and ``ij`` all heavy pairs. Groups
    are created on first request and cached by name.
    """

    def __init__(
        self,
        database: str | os.PathLike | Mapping[str, Any],
        thermo: Mixture,
        *,
        evaluator: Optional[PairEvaluator] = None,
    ) -> None:
        if isinstance(database, Mapping):
            root = database
        else:
            root = load_yaml_file(database_file_name(database, "transport"))
        self._thermo = thermo
        self.tabulation = TabulationConfig.from_mapping(root)
        self.pairs = SpeciesPairIndex(thermo.species, root, evaluator=evaluator)
        self._groups: Dict[str, CollisionGroup] = {}

        ns = thermo.n_species
        e = 1 if thermo.has_electrons else 0
        mw = np.asarray(thermo.species_mw(), dtype=float)
        RU = constants.K_CONST_RU

        self._etafac = _read_only(5.0 / 16.0 * np.sqrt(constants.K_CONST_PI * RU * mw[e:]))

        deifac = np.zeros(ns * e)
        if e:
            deifac[:] = 3.0 / 16.0 * np.sqrt(constants.K_CONST_TWOPI * RU / mw[0])
            deifac[0] *= 2.0 / constants.K_CONST_SQRT2
        self._deifac = _read_only(deifac)

        heavy = self.pairs.index_pairs()[e * ns:]
        mi, mj = mw[heavy[:, 0]], mw[heavy[:, 1]]
        self._dijfac = _read_only(3.0 / 16.0 * np.sqrt(constants.K_CONST_TWOPI * RU * (mi + mj) / (mi * mj)))

        logger.info(
            "Collision database for %s: %d pairs, tabulation %s",
            thermo.get_names(),
            len(self.pairs),
            f"[{self.tabulation.Tmin:g}, {self.tabulation.Tmax:g}] K every {self.tabulation.dT:g} K"
            if self.tabulation.tabulate else "disabled",
        )

    @staticmethod
    def group_type(name: str) -> GroupType:
        assert isinstance(name, str), "collision group names are strings"
        if len(name) < 2:
            return GroupType.INVALID
        return GROUP_SUFFIXES.get(name[-2:], GroupType.INVALID)

    @staticmethod
    def group_kind(name: str) -> str:
        return name[:-2]

    def _temperature(self, type_: GroupType) -> float:
        return self._thermo.Te() if type_.uses_electron_temperature else self._thermo.T()

    def _selection(self, type_: GroupType) -> PairSelection:
        ns = self._thermo.n_species
        e = 1 if self._thermo.has_electrons else 0
        if type_ is GroupType.EE:
            return PairSelection.span(0, e)
        if type_ is GroupType.EI:
            return PairSelection.span(0, e * ns)
        if type_ is GroupType.IJ:
            return PairSelection.span(e * ns, len(self.pairs))
        return self.pairs.diagonal(e)

    def group(self, name: str) -> CollisionGroup:
        """Return the group `name`, refreshed at the current temperature of its type."""
        type_ = self.group_type(name)
        if type_ is GroupType.INVALID:
            raise InvalidGroupNameException(name, GROUP_SUFFIXES)

        group = self._groups.get(name)
        if group is not None:
            return group.refresh(self._temperature(type_))

        group = CollisionGroup(self.group_kind(name), self.pairs, self._selection(type_), self.tabulation)
        # only cache groups that evaluated once
        group.refresh(self._temperature(type_))
        logger.debug("Created collision group %s with %d pairs", name, group.size)
        self._groups[name] = group
        return group

    @property
    def group_names(self) -> List[str]:
        return list(self._groups)

    @property
    def thermo(self) -> Mixture:
        return self._thermo

    @property
    def etafac(self) -> np.ndarray:
        return self._etafac

    @property
    def Deifac(self) -> np.ndarray:
        return self._deifac

    @property
    def Dijfac(self) -> np.ndarray:
        return self._dijfac

    def Q11ee(self) -> CollisionGroup:
        return self.group("Q11ee")

    def Q22ee(self) -> CollisionGroup:
        return self.group("Q22ee")

    def Q11ei(self) -> CollisionGroup:
        return self.group("Q11ei")

    def Q22ei(self) -> CollisionGroup:
        return self.group("Q22ei")

    def Q11ij(self) -> CollisionGroup:
        return self.group("Q11ij")

    def Q22ij(self) -> CollisionGroup:
        return self.group("Q22ij")

    def Q22ii(self) -> CollisionGroup:
        return self.group("Q22ii")

    def Astij(self) -> CollisionGroup:
        return self.group("Astij")

    def Bstij(self) -> CollisionGroup:
        return self.group("Bstij")

    def Cstij(self) -> CollisionGroup:
        return self.group("Cstij")

    def Astei(self) -> CollisionGroup:
        return self.group("Astei")

    def Bstei(self) -> CollisionGroup:
        return self.group("Bstei")

    def Cstei(self) -> CollisionGroup:
        return self.group("Cstei")

    def etai(self) -> np.ndarray:
        """Pure-species viscosities of the heavy species, in Pa.s."""
        return np.sqrt(self._thermo.T()) * self._etafac / self.Q22ii().values

    def nDei(self) -> np.ndarray:
        """Electron-species binary diffusion coefficients times number density."""
        if self._deifac.size == 0:
            return np.zeros(0)
        return np.sqrt(self._thermo.Te()) * self._deifac / self.Q11ei().values

    def nDij(self) -> np.ndarray:
        """Heavy-pair binary diffusion coefficients times number density."""
        return np.sqrt(self._thermo.T()) * self._dijfac / self.Q11ij().values

    def Dim(self) -> np.ndarray:
        """Effective mixture diffusion coefficients.

        Not computed yet: always zeros, one entry per species.
        """
        return np.zeros(self._thermo.n_species)
