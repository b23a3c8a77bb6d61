from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from molgraph import elements
from molgraph._constants import BOND_TOLERANCE, IDENTICAL_ATOM_DISTANCE
from molgraph.colour import RGB
from molgraph.model.position import Position
from molgraph.parser import parse_atom_line

if TYPE_CHECKING:
    from molgraph.model.molecule import Molecule


@dataclass(frozen=True)
class Neighbour:
    """A bonding candidate found by :meth:`Atom.neighbours_in`.

    Attributes:
        distance: Distance from the searching atom, in angstroms.
        index: Index of the candidate in the molecule's atom sequence.
    """

    distance: float
    index: int


@dataclass(frozen=True, eq=False)
class Atom:
    """An element at a position.

    Two atoms are equal when they have the same atomic number and
    their positions agree to within an absolute ``1e-16`` per
    component (see :meth:`Position.is_very_close_to`).

    Attributes:
        atomic_number: Element identity, in ``[1, 118]``.
        position: Cartesian position in angstroms.

    Raises:
        ValueError: If *atomic_number* is outside ``[1, 118]``.
    """

    atomic_number: int
    position: Position

    def __post_init__(self) -> None:
        if not 1 <= self.atomic_number <= elements.MAX_ATOMIC_NUMBER:
            raise ValueError(
                f"atomic_number must be in [1, {elements.MAX_ATOMIC_NUMBER}], "
                f"got {self.atomic_number}"
            )

    @classmethod
    def from_symbol(
        cls, symbol: str, x: float = 0.0, y: float = 0.0, z: float = 0.0,
    ) -> Atom:
        """Create an atom from an element symbol and coordinates.

        Raises:
            UnknownElementSymbol: If *symbol* is not recognised.
        """
        return cls(elements.atomic_number(symbol), Position(x, y, z))

    @classmethod
    def from_line(cls, line: str, line_number: int | None = None) -> Atom:
        """Create an atom from an XYZ atom line, e.g. ``"H  0.0  1.0  2.0"``.

        Columns after the third coordinate are ignored.

        Args:
            line: Whitespace-separated symbol and coordinates.
            line_number: Optional 1-based line number, used only in
                error messages.

        Raises:
            UnknownElementSymbol: If the symbol is not recognised.
            XYZFormatError: If the coordinates are missing or are
                not numbers.
        """
        return cls.from_symbol(*parse_atom_line(line, line_number))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Atom):
            return NotImplemented
        return (
            self.atomic_number == other.atomic_number
            and self.position.is_very_close_to(other.position)
        )

    # Positions compare approximately, so only the element is hashed.
    def __hash__(self) -> int:
        return hash(self.atomic_number)

    @property
    def symbol(self) -> str:
        """Element symbol, e.g. ``"C"``."""
        return elements.element_symbol(self.atomic_number)

    def covalent_radius(self) -> float:
        """Covalent radius in angstroms."""
        return elements.covalent_radius(self.atomic_number)

    def maximal_valence(self) -> int:
        """Maximal number of bonds this atom may propose."""
        return elements.maximal_valence(self.atomic_number)

    def colour(self) -> RGB:
        """Display colour of this atom's element."""
        return elements.element_colour(self.atomic_number)

    def distance_to(self, other: Atom) -> float:
        """Distance to *other* in angstroms."""
        return self.position.distance_to(other.position)

    def could_be_bonded_to(
        self, other: Atom, *, tolerance: float = BOND_TOLERANCE,
    ) -> bool:
        """Whether *other* is close enough to be bonded to this atom.

        The pair qualifies when the separation is larger than ``1e-8``
        (so an atom is never bonded to itself or to a duplicate) and
        smaller than *tolerance* times the sum of the two covalent
        radii.
        """
        r = self.distance_to(other)
        if r <= IDENTICAL_ATOM_DISTANCE:
            return False
        return r < tolerance * (self.covalent_radius() + other.covalent_radius())

    def neighbours_in(
        self, molecule: Molecule, *, tolerance: float = BOND_TOLERANCE,
    ) -> list[Neighbour]:
        """Find every atom in *molecule* this atom could be bonded to.

        Every atom is scanned, including this one; the identical-atom
        check removes it.  The result is in the molecule's atom order,
        not sorted by distance.

        Args:
            molecule: The molecule to search.
            tolerance: Relative tolerance on the sum of covalent radii.

        Returns:
            One :class:`Neighbour` per qualifying atom.
        """
        coords = molecule.coords
        if len(coords) == 0:
            return []
        diff = coords - self.position.as_array()
        dist = np.sqrt(np.sum(diff * diff, axis=1))
        cutoff = tolerance * (self.covalent_radius() + molecule.covalent_radii)
        hits = (dist > IDENTICAL_ATOM_DISTANCE) & (dist < cutoff)
        return [Neighbour(float(dist[j]), int(j)) for j in np.nonzero(hits)[0]]
