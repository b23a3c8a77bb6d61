"""Bond perception from atomic positions and element properties.

Each atom independently ranks the atoms it could be bonded to by
distance and proposes bonds to the nearest ones, up to its maximal
valence.  The proposals of all atoms are then unioned into a single
set of undirected bonds.

A bond only needs one of its two atoms to propose it.  An atom whose
own valence is used up by closer neighbours can therefore still pick
up further bonds proposed by atoms with spare capacity; the result is
a connectivity heuristic, not a chemically validated graph.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from molgraph._constants import BOND_TOLERANCE
from molgraph.model.bond import Bond

if TYPE_CHECKING:
    from molgraph.model.molecule import Molecule

logger = logging.getLogger(__name__)


def propose_bonds(
    molecule: Molecule,
    index: int,
    *,
    tolerance: float = BOND_TOLERANCE,
) -> list[Bond]:
    """Bonds proposed by a single atom's own greedy pass.

    Candidates from :meth:`Atom.neighbours_in` are sorted by distance
    (stable, so equal distances keep increasing atom index) and the
    first ``maximal_valence()`` are taken.  Fewer candidates simply
    give fewer bonds; an atom with zero valence proposes nothing.

    Args:
        molecule: Molecule whose atoms are searched.
        index: Index of the proposing atom.
        tolerance: Relative tolerance on the sum of covalent radii.

    Returns:
        Proposed bonds, nearest partner first.

    Raises:
        IndexError: If *index* is out of range.
    """
    atom = molecule.atoms[index]
    valence = atom.maximal_valence()
    if valence == 0:
        return []
    neighbours = sorted(
        atom.neighbours_in(molecule, tolerance=tolerance),
        key=lambda n: n.distance,
    )
    return [Bond(index, n.index) for n in neighbours[:valence]]


def perceive_bonds(
    molecule: Molecule,
    *,
    tolerance: float = BOND_TOLERANCE,
) -> frozenset[Bond]:
    """Compute the bond set of a molecule.

    Every atom's proposals are computed from the immutable atom
    sequence first, and only then combined, so no partially built
    bond set is ever observed.

    Args:
        molecule: Molecule whose atoms are searched.
        tolerance: Relative tolerance on the sum of covalent radii.

    Returns:
        The de-duplicated set of undirected bonds.
    """
    proposals = [
        propose_bonds(molecule, i, tolerance=tolerance)
        for i in range(len(molecule.atoms))
    ]
    bonds = frozenset(bond for proposed in proposals for bond in proposed)
    logger.debug(
        "Perceived %d bonds from %d proposals across %d atoms",
        len(bonds),
        sum(len(p) for p in proposals),
        len(molecule.atoms),
    )
    return bonds
