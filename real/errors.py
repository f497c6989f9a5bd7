"""
Exceptions raised when parsing or constructing quantity values.

All errors derive from QuantityError, which is a ValueError, so callers may catch
either the specific error, the whole family, or plain ValueError.

Hierarchy:
    QuantityError
    ├── QuantityFormatError
    │   ├── SizeFormatError
    │   └── SpeedFormatError
    ├── UnknownUnitError
    ├── QuantityOverflowError (also OverflowError)
    │   ├── SizeOverflowError
    │   └── SpeedOverflowError
    └── InvalidArgumentError
"""

__all__ = [
    'QuantityError',
    'QuantityFormatError',
    'SizeFormatError',
    'SpeedFormatError',
    'UnknownUnitError',
    'QuantityOverflowError',
    'SizeOverflowError',
    'SpeedOverflowError',
    'InvalidArgumentError',
]


# Classes --------------------------------------------------------------------------------------------------------------

class QuantityError(ValueError):
    """Base class for all quantity errors."""


class QuantityFormatError(QuantityError):
    """Malformed quantity text."""


class SizeFormatError(QuantityFormatError):
    """Data size text has no leading digit run."""


class SpeedFormatError(QuantityFormatError):
    """Data speed text has no per-time separator."""


class UnknownUnitError(QuantityError):
    """Unit suffix or duration unit not found in its lookup table."""


class QuantityOverflowError(QuantityError, OverflowError):
    """Scaled value does not fit the representable integer range."""


class SizeOverflowError(QuantityOverflowError):
    """Data size outside of the signed 64-bit range."""


class SpeedOverflowError(QuantityOverflowError):
    """Data speed outside of the unsigned 64-bit range."""


class InvalidArgumentError(QuantityError):
    """Negative duration or negative amount where not allowed."""
