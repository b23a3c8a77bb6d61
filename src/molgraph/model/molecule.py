from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

import numpy as np

from molgraph._constants import BOND_TOLERANCE
from molgraph.model.atom import Atom
from molgraph.model.bond import Bond
from molgraph.model.position import Position
from molgraph.parser import parse_xyz
from molgraph.perception import perceive_bonds

logger = logging.getLogger(__name__)


class Molecule:
    """A molecular graph: atoms as nodes, perceived bonds as edges.

    The atom order is the order given and is the basis for the indices
    held by every :class:`Bond`.  Bonds are perceived once, when the
    molecule is constructed (see :func:`molgraph.perception.perceive_bonds`),
    and the molecule is read-only afterwards.

    Args:
        atoms: Atoms in input order.
        tolerance: Relative tolerance on the sum of covalent radii
            used to decide whether two atoms could be bonded.

    Raises:
        TypeError: If any element of *atoms* is not an :class:`Atom`.
    """

    def __init__(
        self,
        atoms: Iterable[Atom],
        *,
        tolerance: float = BOND_TOLERANCE,
    ) -> None:
        self._atoms: tuple[Atom, ...] = tuple(atoms)
        for i, atom in enumerate(self._atoms):
            if not isinstance(atom, Atom):
                raise TypeError(
                    f"atoms[{i}] must be an Atom, got {type(atom).__name__}"
                )
        self._tolerance = tolerance

        coords = np.array(
            [[a.position.x, a.position.y, a.position.z] for a in self._atoms],
            dtype=float,
        ).reshape(-1, 3)
        coords.flags.writeable = False
        self._coords = coords

        radii = np.array([a.covalent_radius() for a in self._atoms], dtype=float)
        radii.flags.writeable = False
        self._covalent_radii = radii

        self._bonds: frozenset[Bond] = perceive_bonds(self, tolerance=tolerance)
        logger.debug(
            "Built molecule with %d atoms and %d bonds",
            len(self._atoms), len(self._bonds),
        )

    @classmethod
    def from_records(
        cls,
        records: Iterable[tuple[str, float, float, float]],
        *,
        tolerance: float = BOND_TOLERANCE,
    ) -> Molecule:
        """Create a molecule from ``(symbol, x, y, z)`` records.

        Raises:
            UnknownElementSymbol: If any record has an unrecognised
                symbol.  No molecule is built.
        """
        atoms = [Atom.from_symbol(*record) for record in records]
        return cls(atoms, tolerance=tolerance)

    @classmethod
    def from_xyz(
        cls,
        source: str | Path,
        *,
        tolerance: float = BOND_TOLERANCE,
    ) -> Molecule:
        """Create a molecule from an XYZ file or XYZ text.

        Args:
            source: Path to an ``.xyz`` file, or the file content as a
                string.
            tolerance: Relative tolerance on the sum of covalent radii.

        Raises:
            XYZFormatError: If the text is not valid XYZ.
            UnknownElementSymbol: If an atom has an unrecognised symbol.

        See Also:
            :func:`molgraph.parser.parse_xyz`
        """
        return cls.from_records(parse_xyz(source), tolerance=tolerance)

    @property
    def atoms(self) -> tuple[Atom, ...]:
        """Atoms in input order."""
        return self._atoms

    @property
    def bonds(self) -> frozenset[Bond]:
        """The perceived bond set."""
        return self._bonds

    @property
    def coords(self) -> np.ndarray:
        """Read-only Cartesian coordinates, shape ``(n_atoms, 3)``."""
        return self._coords

    @property
    def covalent_radii(self) -> np.ndarray:
        """Read-only covalent radii in angstroms, shape ``(n_atoms,)``."""
        return self._covalent_radii

    @property
    def species(self) -> list[str]:
        """Element symbol of each atom."""
        return [atom.symbol for atom in self._atoms]

    @property
    def tolerance(self) -> float:
        """Bonding tolerance the bonds were perceived with."""
        return self._tolerance

    def __len__(self) -> int:
        return len(self._atoms)

    def __iter__(self) -> Iterator[Atom]:
        return iter(self._atoms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Molecule):
            return NotImplemented
        return self._atoms == other._atoms and self._bonds == other._bonds

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Molecule(n_atoms={len(self._atoms)}, "
            f"n_bonds={len(self._bonds)})"
        )

    def sorted_bonds(self) -> list[Bond]:
        """Bonds ordered by ``(index_a, index_b)``."""
        return sorted(self._bonds)

    def bonds_of(self, index: int) -> list[Bond]:
        """All bonds touching atom *index*, in sorted order."""
        self._check_index(index)
        return sorted(b for b in self._bonds if b.involves(index))

    def bond_positions(self, bond: Bond) -> tuple[Position, Position]:
        """Positions of the two atoms joined by *bond*."""
        self._check_bond(bond)
        return (
            self._atoms[bond.index_a].position,
            self._atoms[bond.index_b].position,
        )

    def bond_length(self, bond: Bond) -> float:
        """Length of *bond* in angstroms."""
        r_a, r_b = self.bond_positions(bond)
        return r_a.distance_to(r_b)

    def bond_midpoint(self, bond: Bond) -> Position:
        """Point halfway along *bond*."""
        r_a, r_b = self.bond_positions(bond)
        return r_a.midpoint(r_b)

    def bond_direction(self, bond: Bond) -> np.ndarray:
        """Unit vector pointing from atom ``index_a`` to atom ``index_b``."""
        r_a, r_b = self.bond_positions(bond)
        v = r_b.as_array() - r_a.as_array()
        return v / np.linalg.norm(v)

    def centroid(self) -> Position:
        """Mean position of all atoms.

        Raises:
            ValueError: If the molecule has no atoms.
        """
        if not self._atoms:
            raise ValueError("centroid of an empty molecule is undefined")
        total = Position(0.0, 0.0, 0.0)
        for atom in self._atoms:
            total += atom.position
        return total / len(self._atoms)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._atoms):
            raise IndexError(
                f"atom index {index} out of range for molecule with "
                f"{len(self._atoms)} atom(s)"
            )

    def _check_bond(self, bond: Bond) -> None:
        self._check_index(bond.index_a)
        self._check_index(bond.index_b)


def build_molecule(
    atoms: Iterable[Atom],
    *,
    tolerance: float = BOND_TOLERANCE,
) -> Molecule:
    """Build a molecule and perceive its bonds.

    Equivalent to ``Molecule(atoms, tolerance=tolerance)``.
    """
    return Molecule(atoms, tolerance=tolerance)
