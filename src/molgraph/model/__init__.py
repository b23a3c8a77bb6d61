"""Core data model for molgraph: positions, atoms, bonds and molecules.

Everything is re-exported here so that ``from molgraph.model import
Molecule`` works without knowing the submodule layout.
"""

from molgraph.model.atom import Atom, Neighbour
from molgraph.model.bond import Bond
from molgraph.model.molecule import Molecule, build_molecule
from molgraph.model.position import Position

__all__ = [
    "Atom",
    "Bond",
    "Molecule",
    "Neighbour",
    "Position",
    "build_molecule",
]
