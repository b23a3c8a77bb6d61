"""Shared constants used across the model and perception layers."""

BOND_TOLERANCE: float = 1.3
"""Relative tolerance on the sum of covalent radii for a possible bond."""

IDENTICAL_ATOM_DISTANCE: float = 1e-8
"""Atoms closer than this (angstroms) are treated as the same atom."""

POSITION_EPSILON: float = 1e-16
"""Absolute per-component tolerance for :meth:`Position.is_very_close_to`."""

PICOMETERS_TO_ANGSTROMS: float = 0.01
"""Scale factor applied to the tabulated covalent radii."""
