from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Bond:
    """An undirected bond between two atoms of a molecule.

    The pair is stored with the smaller index first so that the data
    structure is invariant under exchange of the two atoms:
    ``Bond(3, 1) == Bond(1, 3)`` and both hash identically, which lets
    a plain ``set`` collapse symmetric duplicates.

    Attributes:
        index_a: The smaller atom index.
        index_b: The larger atom index.

    Raises:
        ValueError: If the indices are equal or negative.
    """

    index_a: int
    index_b: int

    def __post_init__(self) -> None:
        a, b = int(self.index_a), int(self.index_b)
        if a == b:
            raise ValueError(f"an atom cannot be bonded to itself (index {a})")
        if a < 0 or b < 0:
            raise ValueError(
                f"atom indices must be non-negative, got ({a}, {b})"
            )
        if a > b:
            a, b = b, a
        object.__setattr__(self, "index_a", a)
        object.__setattr__(self, "index_b", b)

    def __iter__(self):
        return iter((self.index_a, self.index_b))

    def involves(self, index: int) -> bool:
        """Whether atom *index* is one end of this bond."""
        return index == self.index_a or index == self.index_b

    def partner(self, index: int) -> int:
        """Return the index at the other end of the bond from *index*.

        Raises:
            ValueError: If *index* is not part of this bond.
        """
        if index == self.index_a:
            return self.index_b
        if index == self.index_b:
            return self.index_a
        raise ValueError(f"atom {index} is not part of {self!r}")
