"""Enum definitions for group types and integral models."""
from __future__ import annotations

from enum import Enum, IntEnum


class GroupType(IntEnum):
    """Species-pair category of a collision group.

    Ordered so that the electron categories compare below ``II``.
    """

    EE = 0
    EI = 1
    II = 2
    IJ = 3
    INVALID = 4

    @property
    def uses_electron_temperature(self) -> bool:
        return self < GroupType.II


GROUP_SUFFIXES = {
    "ee": GroupType.EE,
    "ei": GroupType.EI,
    "ii": GroupType.II,
    "ij": GroupType.IJ,
}


class ModelsIntegral(Enum):
    CONSTANT = "constant"
    TABLE = "table"
    EXP_POLY = "exp-poly"
    GUPTA_YOS = "gupta-yos"


class ModelsInterpolator(Enum):
    LINEAR = "linear"
    SPLINE = "spline"


class InteractionType(Enum):
    NEUTRAL_NEUTRAL = "neutral-neutral"
    NEUTRAL_ION = "neutral-ion"
    NEUTRAL_ELECTRON = "neutral-electron"
    CHARGED_CHARGED = "charged-charged"
