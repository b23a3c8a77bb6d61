"""Display colours for elements."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RGB:
    """An 8-bit RGB display colour.

    Attributes:
        r: Red channel, ``0``-``255``.
        g: Green channel, ``0``-``255``.
        b: Blue channel, ``0``-``255``.

    Raises:
        ValueError: If any channel lies outside ``[0, 255]``.
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            val = getattr(self, name)
            if not 0 <= val <= 255:
                raise ValueError(
                    f"RGB component {name} must be in [0, 255], got {val}"
                )

    def __iter__(self):
        return iter((self.r, self.g, self.b))

    def normalised(self) -> tuple[float, float, float]:
        """Return the colour as floats in ``[0, 1]``."""
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0)

    def to_hex(self) -> str:
        """Return the colour as a ``#rrggbb`` string."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
