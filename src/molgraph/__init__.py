"""molgraph: molecular connectivity from atomic coordinates.

molgraph infers which atoms of a molecule are bonded from their
element identities and Cartesian positions alone, producing a
molecular graph for rendering or further analysis.

Example usage::

    from molgraph import Molecule

    molecule = Molecule.from_xyz("methane.xyz")
    for bond in molecule.sorted_bonds():
        print(bond.index_a, bond.index_b, molecule.bond_length(bond))
"""

import logging

from molgraph.colour import RGB
from molgraph.elements import (
    DEFAULT_COLOUR,
    DEFAULT_COVALENT_RADIUS,
    DEFAULT_MAXIMAL_VALENCE,
    ELEMENTS,
    atomic_number,
    element_colour,
    covalent_radius,
    element_symbol,
    maximal_valence,
)
from molgraph.exceptions import MolgraphError, UnknownElementSymbol, XYZFormatError
from molgraph.model import (
    Atom,
    Bond,
    Molecule,
    Neighbour,
    Position,
    build_molecule,
)
from molgraph.parser import AtomRecord, parse_xyz, parse_xyz_title
from molgraph.perception import perceive_bonds, propose_bonds

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Atom",
    "AtomRecord",
    "Bond",
    "DEFAULT_COLOUR",
    "DEFAULT_COVALENT_RADIUS",
    "DEFAULT_MAXIMAL_VALENCE",
    "ELEMENTS",
    "Molecule",
    "MolgraphError",
    "Neighbour",
    "Position",
    "RGB",
    "UnknownElementSymbol",
    "XYZFormatError",
    "atomic_number",
    "build_molecule",
    "element_colour",
    "covalent_radius",
    "element_symbol",
    "maximal_valence",
    "parse_xyz",
    "parse_xyz_title",
    "perceive_bonds",
    "propose_bonds",
]
