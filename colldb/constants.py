"""Physical constants used by the collision database."""
from __future__ import annotations

import math

K_CONST_PI: float = math.pi
K_CONST_TWOPI: float = 2.0 * math.pi
K_CONST_SQRT2: float = math.sqrt(2.0)

# Boltzmann constant, J/K
K_CONST_K: float = 1.380649e-23
# Avogadro number, 1/mol
K_CONST_NA: float = 6.02214076e23
# Universal gas constant, J/(mol K)
K_CONST_RU: float = K_CONST_K * K_CONST_NA

# square angstrom in m^2
K_CONST_ANGSTROM_SQ: float = 1.0e-20
