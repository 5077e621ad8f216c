"""Collision database demo for a three-species argon plasma."""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.append(str(ROOT))

from colldb.mixtures import Mixture  # noqa: E402
from colldb.transport import CollisionDB  # noqa: E402


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    os.environ.setdefault("COLLDB_DATA_DIRECTORY", str(ROOT / "data"))

    mixture = Mixture(species_names="Ar, Ar+, e-")
    db = CollisionDB("argon", mixture)
    print("Species:", mixture.get_names())
    print("Number of pairs:", len(db.pairs))

    for T in np.linspace(2000.0, 18000.0, num=5):
        mixture.set_state(T, 1.2 * T)
        print(f"T = {T:8.1f} K")
        print("  etai :", db.etai())
        print("  nDei :", db.nDei())
        print("  nDij :", db.nDij())

    # above Tmax the groups are evaluated directly
    mixture.set_state(30000.0)
    print("Q11ij at 30000 K:", db.Q11ij().values)
    print("Dim (not computed):", db.Dim())
    print("Managed groups:", db.group_names)


if __name__ == "__main__":
    main()
