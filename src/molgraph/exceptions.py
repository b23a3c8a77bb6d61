"""Exceptions raised by molgraph.

Every error derives from :class:`MolgraphError`, which is itself a
:class:`ValueError`, so callers that already catch ``ValueError`` for
bad input keep working.
"""

from __future__ import annotations


class MolgraphError(ValueError):
    """Base class for all molgraph errors."""


class UnknownElementSymbol(MolgraphError):
    """An element symbol is not one of the 118 recognised symbols.

    Attributes:
        symbol: The offending symbol, exactly as given.
    """

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Unknown element symbol: {symbol!r}")


class XYZFormatError(MolgraphError):
    """XYZ text could not be interpreted.

    Attributes:
        line_number: 1-based line number of the problem, or ``None``
            when the error concerns the file as a whole.
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
