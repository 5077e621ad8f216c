from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import numpy as np

from ..exceptions import ConfigurationException
from ..numerics import is_whole_number, uniform_grid
from ..yaml_loader import parse_bool


@dataclass(frozen=True)
class TabulationConfig:
    """Uniform temperature grid on which collision groups are tabulated."""

    tabulate: bool = True
    Tmin: float = 300.0
    Tmax: float = 20000.0
    dT: float = 100.0

    def __post_init__(self) -> None:
        if not self.tabulate:
            return
        if not self.Tmin > 0.0:
            raise ConfigurationException("Tmin must be positive.")
        if not self.Tmax > 0.0:
            raise ConfigurationException("Tmax must be positive.")
        if not self.dT > 0.0:
            raise ConfigurationException("dT must be positive.")
        if not self.Tmin < self.Tmax:
            raise ConfigurationException("Tmin must be < Tmax.")
        if not is_whole_number((self.Tmax - self.Tmin) / self.dT):
            raise ConfigurationException("(Tmax - Tmin)/dT must be a positive whole number.")

    @classmethod
    def from_mapping(cls, root: Mapping[str, Any]) -> "TabulationConfig":
        """Read the optional tabulate, Tmin, Tmax and dT attributes of a database root."""
        defaults = cls.__dataclass_fields__
        try:
            return cls(
                tabulate=parse_bool(root.get("tabulate", defaults["tabulate"].default), "tabulate"),
                Tmin=float(root.get("Tmin", defaults["Tmin"].default)),
                Tmax=float(root.get("Tmax", defaults["Tmax"].default)),
                dT=float(root.get("dT", defaults["dT"].default)),
            )
        except (TypeError, ValueError) as exc:
            raise ConfigurationException(f"Invalid tabulation attribute: {exc}") from exc

    @property
    def n_points(self) -> int:
        return int(round((self.Tmax - self.Tmin) / self.dT)) + 1

    def contains(self, T: float) -> bool:
        return self.tabulate and self.Tmin <= T <= self.Tmax

    def grid(self) -> np.ndarray:
        return uniform_grid(self.Tmin, self.Tmax, self.dT)
