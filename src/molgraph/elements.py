"""Element table: symbols, covalent radii, maximal valences and colours.

All tables are indexed by ``atomic_number - 1``.  Only the lighter
elements are populated; lookups past the end of a table return the
documented default rather than failing, since the properties of the
superheavy elements are rarely needed and often undefined.

Covalent radii are Cordero et al., Dalton Trans. 2008 (high-spin
values for Mn, Fe and Co), tabulated in picometres and converted to
angstroms on lookup.
"""

from __future__ import annotations

from molgraph._constants import PICOMETERS_TO_ANGSTROMS
from molgraph.colour import RGB
from molgraph.exceptions import UnknownElementSymbol

ELEMENTS: tuple[str, ...] = (
    "H", "He",
    "Li", "Be", "B", "C", "N", "O", "F", "Ne",
    "Na", "Mg", "Al", "Si", "P", "S", "Cl", "Ar",
    "K", "Ca", "Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co",
    "Ni", "Cu", "Zn", "Ga", "Ge", "As", "Se", "Br", "Kr",
    "Rb", "Sr", "Y", "Zr", "Nb", "Mo", "Tc", "Ru", "Rh",
    "Pd", "Ag", "Cd", "In", "Sn", "Sb", "Te", "I", "Xe",
    "Cs", "Ba", "La", "Ce", "Pr", "Nd", "Pm", "Sm", "Eu",
    "Gd", "Tb", "Dy", "Ho", "Er", "Tm", "Yb", "Lu", "Hf",
    "Ta", "W", "Re", "Os", "Ir", "Pt", "Au", "Hg", "Tl",
    "Pb", "Bi", "Po", "At", "Rn",
    "Fr", "Ra", "Ac", "Th", "Pa", "U", "Np", "Pu", "Am",
    "Cm", "Bk", "Cf", "Es", "Fm", "Md", "No", "Lr", "Rf",
    "Db", "Sg", "Bh", "Hs", "Mt", "Ds", "Rg", "Cn", "Nh",
    "Fl", "Mc", "Lv", "Ts", "Og",
)
"""The 118 recognised element symbols, in atomic-number order."""

MAX_ATOMIC_NUMBER: int = len(ELEMENTS)

_ATOMIC_NUMBERS: dict[str, int] = {
    symbol: i + 1 for i, symbol in enumerate(ELEMENTS)
}

# Covalent radii in picometres, H through Rn.
COVALENT_RADII_PICOMETERS: tuple[float, ...] = (
    # Period 1
    31.0, 28.0,
    # Period 2
    128.0, 96.0, 84.0, 76.0, 71.0, 66.0, 57.0, 58.0,
    # Period 3
    166.0, 141.0, 121.0, 111.0, 107.0, 105.0, 102.0, 106.0,
    # Period 4
    203.0, 176.0, 170.0, 160.0, 153.0, 139.0, 161.0, 152.0, 150.0,
    124.0, 132.0, 122.0, 122.0, 120.0, 119.0, 120.0, 120.0, 116.0,
    # Period 5
    220.0, 195.0, 190.0, 175.0, 164.0, 154.0, 147.0, 146.0, 142.0,
    139.0, 145.0, 144.0, 142.0, 139.0, 139.0, 138.0, 139.0, 140.0,
    # Period 6
    244.0, 215.0,
    207.0, 204.0, 203.0, 201.0, 199.0, 198.0, 198.0,
    196.0, 194.0, 192.0, 192.0, 189.0, 190.0, 187.0,
    175.0, 187.0, 170.0, 162.0, 151.0, 144.0, 141.0, 136.0,
    136.0, 132.0, 145.0, 146.0, 148.0, 140.0, 150.0, 150.0,
)

# Maximal number of bonds, H through Sr.
MAXIMAL_VALENCES: tuple[int, ...] = (
    1, 0,
    1, 2, 3, 4, 5, 2, 1, 0,
    1, 2, 3, 4, 5, 6, 7, 0,
    1, 2, 3, 4, 5, 6, 7, 7, 5, 4, 4, 6, 3, 4, 5, 6, 7, 2,
    1, 2,
)

ELEMENT_COLOURS: tuple[RGB, ...] = (
    RGB(191, 191, 191),  # H
    RGB(208, 255, 255),  # He
    RGB(217, 123, 255),  # Li
    RGB(176, 255, 0),    # Be
    RGB(255, 178, 179),  # B
    RGB(102, 102, 102),  # C
    RGB(12, 12, 255),    # N
    RGB(255, 0, 0),      # O
    RGB(112, 181, 255),  # F
    RGB(166, 229, 248),  # Ne
    RGB(183, 88, 251),   # Na
    RGB(82, 255, 0),     # Mg
    RGB(196, 165, 165),  # Al
    RGB(121, 154, 153),  # Si
    RGB(255, 119, 0),    # P
    RGB(179, 179, 0),    # S
    RGB(0, 244, 0),      # Cl
)

DEFAULT_COVALENT_RADIUS: float = 2.0
"""Radius (angstroms) for elements past the end of the radius table."""

DEFAULT_MAXIMAL_VALENCE: int = 6
"""Valence for elements past the end of the valence table."""

DEFAULT_COLOUR: RGB = RGB(252, 252, 252)
"""Colour for elements past the end of the colour table."""


def _index(atomic_number: int) -> int:
    if not 1 <= atomic_number <= MAX_ATOMIC_NUMBER:
        raise ValueError(
            f"atomic_number must be in [1, {MAX_ATOMIC_NUMBER}], "
            f"got {atomic_number}"
        )
    return atomic_number - 1


def atomic_number(symbol: str) -> int:
    """Resolve an element symbol to its atomic number.

    Matching is case-sensitive (``"Cl"``, not ``"CL"``).  There is no
    fallback: an unrecognised symbol is always an error.

    Raises:
        UnknownElementSymbol: If *symbol* is not a recognised symbol.
    """
    try:
        return _ATOMIC_NUMBERS[symbol]
    except (KeyError, TypeError):
        raise UnknownElementSymbol(symbol) from None


def element_symbol(atomic_number: int) -> str:
    """Return the element symbol for *atomic_number*."""
    return ELEMENTS[_index(atomic_number)]


def covalent_radius(atomic_number: int) -> float:
    """Covalent radius in angstroms.

    Returns :data:`DEFAULT_COVALENT_RADIUS` for elements beyond Rn.
    """
    i = _index(atomic_number)
    if i >= len(COVALENT_RADII_PICOMETERS):
        return DEFAULT_COVALENT_RADIUS
    return COVALENT_RADII_PICOMETERS[i] * PICOMETERS_TO_ANGSTROMS


def maximal_valence(atomic_number: int) -> int:
    """Maximal number of bonds an atom of this element may form.

    Returns :data:`DEFAULT_MAXIMAL_VALENCE` for elements beyond Sr.
    """
    i = _index(atomic_number)
    if i >= len(MAXIMAL_VALENCES):
        return DEFAULT_MAXIMAL_VALENCE
    return MAXIMAL_VALENCES[i]


def element_colour(atomic_number: int) -> RGB:
    """Display colour; :data:`DEFAULT_COLOUR` for elements beyond Cl."""
    i = _index(atomic_number)
    if i >= len(ELEMENT_COLOURS):
        return DEFAULT_COLOUR
    return ELEMENT_COLOURS[i]
