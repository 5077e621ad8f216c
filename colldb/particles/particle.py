from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import DataNotFoundException, IncorrectValueException
from ..yaml_loader import data_directory, load_yaml_file

ELECTRON_NAME = "e-"
SPECIES_FILE = "species.yaml"


@dataclass
class Species:
    """A gas species as seen by the transport database."""

    name: str = ""
    molar_mass: float = 0.0
    charge: int = 0

    def __init__(
        self,
        name: str | None = None,
        filename: str | None = None,
        *,
        molar_mass: float | None = None,
        charge: int = 0,
    ) -> None:
        self.name = name or ""
        self.molar_mass = 0.0
        self.charge = charge
        if molar_mass is not None:
            self.molar_mass = float(molar_mass)
        elif name:
            self.read_data(name, filename)
        if self.name and self.molar_mass <= 0.0:
            raise IncorrectValueException(f"Molar mass of {self.name} must be positive")

    @property
    def is_electron(self) -> bool:
        return self.name == ELECTRON_NAME

    @property
    def is_ion(self) -> bool:
        return self.charge != 0 and not self.is_electron

    def read_data(self, name: str, filename: str | None = None) -> None:
        """Load the species from a YAML file, by default `species.yaml` in the data directory."""
        file = load_yaml_file(filename if filename is not None else data_directory() / SPECIES_FILE)
        if name not in file:
            raise DataNotFoundException(f"No data found for {name} in the database")
        self.name = name
        species = file[name]
        self.molar_mass = float(species.get("Molar mass, kg/mol", self.molar_mass))
        self.charge = int(species.get("Charge", self.charge))
