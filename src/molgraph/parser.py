"""XYZ coordinate file parser."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NamedTuple

from molgraph.exceptions import XYZFormatError

logger = logging.getLogger(__name__)


class AtomRecord(NamedTuple):
    """One atom line of an XYZ file: an element symbol and coordinates.

    The symbol is passed through verbatim; it is checked against the
    element table only when the record is turned into an
    :class:`~molgraph.model.Atom`.
    """

    symbol: str
    x: float
    y: float
    z: float


def _read_source(source: str | Path) -> str:
    """Read file content from a path or return inline string content."""
    if isinstance(source, Path):
        return source.read_text()
    # If the string has no newlines and the path exists, read it.
    if "\n" not in source:
        path = Path(source)
        if path.is_file():
            return path.read_text()
    return source


def _lines(text: str) -> list[str]:
    # DOS and Unix line endings are equivalent.
    return text.replace("\r", "").split("\n")


def parse_atom_line(line: str, line_number: int | None = None) -> AtomRecord:
    """Parse a single ``symbol x y z`` line.

    Columns after the third coordinate are ignored.

    Args:
        line: The line to parse.
        line_number: Optional 1-based line number for error messages.

    Raises:
        XYZFormatError: If the line has fewer than four columns or a
            coordinate is not a number.
    """
    parts = line.split()
    if len(parts) < 4:
        raise XYZFormatError(
            f"expected a symbol and three coordinates, got {line.strip()!r}",
            line_number,
        )
    coords: list[float] = []
    for axis, token in zip("xyz", parts[1:4]):
        try:
            coords.append(float(token))
        except ValueError:
            raise XYZFormatError(
                f"failed to parse {axis} coordinate {token!r} as a float",
                line_number,
            ) from None
    return AtomRecord(parts[0], coords[0], coords[1], coords[2])


def parse_xyz(source: str | Path) -> list[AtomRecord]:
    """Parse a single-frame XYZ file.

    The first line holds the number of atoms and the second a free-text
    title, which is skipped.  Every following non-blank line is one atom.

    Args:
        source: Path to an ``.xyz`` file, or the file content as a string.

    Returns:
        Atom records in file order.

    Raises:
        XYZFormatError: If the atom count is not an integer, an atom
            line is malformed, or the number of atom lines differs from
            the declared count.
    """
    lines = _lines(_read_source(source))

    try:
        n_atoms = int(lines[0].strip())
    except ValueError:
        raise XYZFormatError(
            f"failed to parse the atom count {lines[0].strip()!r} as an integer",
            1,
        ) from None

    records: list[AtomRecord] = []
    for i, line in enumerate(lines[2:], start=3):
        if not line.strip():
            continue
        records.append(parse_atom_line(line, i))

    if len(records) != n_atoms:
        raise XYZFormatError(
            f"declared {n_atoms} atoms but found {len(records)}"
        )

    logger.debug("Parsed %d atoms from XYZ source", n_atoms)
    return records


def parse_xyz_title(source: str | Path) -> str:
    """Return the title (second) line of an XYZ file, stripped."""
    lines = _lines(_read_source(source))
    if len(lines) < 2:
        return ""
    return lines[1].strip()
