"""
Data size values in bytes with metric and binary, byte and bit units.

A Size is an immutable signed 64-bit count of bytes. It selects a readable unit
automatically, formats with a chosen precision, and parses integer notations such as
'512 MiB', '10kb' or '42'.

Formatting verbs for format() and f-strings:
    B : binary bytes  (B, kiB, MiB, ...)
    M : metric bytes  (B, kB, MB, ...)
    b : binary bits   (b, kib, Mib, ...)
    m : metric bits   (b, kb, Mb, ...)
    d : raw byte count without unit
    An optional '.N' prefix sets the fraction digits, e.g. f"{size:.1B}".
    A leading width is accepted and ignored, so '8.1B' formats like '.1B'.
    Any other spec falls back to str(size).
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
import re
from dataclasses import dataclass, field
from typing import Self

# Third Party ----------------------------------------------------------------------------------------------------------
from loguru import logger

# Local ----------------------------------------------------------------------------------------------------------------
from . import units
from .errors import SizeFormatError, SizeOverflowError
from .units import BASE_BIT, BASE_BYTE, MAX_INT64, MIN_INT64, UnitFamily, data_conf

_NUMERAL = re.compile(r"[+-]?[0-9]+")
_FORMAT_SPEC = re.compile(r"[0-9]*(?:\.(?P<precision>[0-9]+))?(?P<verb>[BMbmd])")

_VERB_FAMILIES = {
    "B": UnitFamily.BINARY_BYTE,
    "M": UnitFamily.METRIC_BYTE,
    "b": UnitFamily.BINARY_BIT,
    "m": UnitFamily.METRIC_BIT,
}


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True, order=True, repr=False)
class Size:
    """
    Quantity of data in bytes.

    The value must fit a signed 64-bit integer; arithmetic leaving that range raises
    SizeOverflowError instead of wrapping. Build sizes from the module constants:

        >>> 3 * MiB + 512 * KiB
        Size(3670016)
        >>> str(Size(1536))
        '1.50 kiB'
        >>> f"{Size(1500):M}"
        '1.50 kB'
    """

    value: int = field(default=0)

    def __post_init__(self):
        if isinstance(self.value, bool):
            raise TypeError(f"Size value must be int, got {type(self.value).__name__}")
        try:
            value = operator.index(self.value)
        except TypeError:
            raise TypeError(f"Size value must be int, got {type(self.value).__name__}") from None

        if not MIN_INT64 <= value <= MAX_INT64:
            raise SizeOverflowError(f"size overflows int64: {value}")
        object.__setattr__(self, 'value', value)

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Parse a data size from a number followed by an optional unit suffix.

        Surrounding whitespace is ignored, as is whitespace between the number and the unit.
        An empty suffix means bytes. An all-lowercase suffix is matched case-insensitively
        ('gib' reads as 'GiB', 'kb' reads as 'KB'); mixed case is matched verbatim.

        Args:
            text: Text like '42', '-1 KB', '512MiB' or '10 Kb'.

        Returns:
            The parsed Size.

        Raises:
            TypeError: If text is not a str.
            SizeFormatError: If text does not start with an integer.
            UnknownUnitError: If the unit suffix is not recognized.
            SizeOverflowError: If the scaled value does not fit int64.

        Examples:
            >>> Size.parse("2 MB")
            Size(2000000)
            >>> Size.parse("1kib")
            Size(1024)
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")

        trimmed = text.strip()
        match = _NUMERAL.match(trimmed)
        if match is None:
            logger.debug("no numeral in data size {!r}", text)
            raise SizeFormatError(f"invalid size format: {text!r}")

        number = int(match.group())
        if not MIN_INT64 <= number <= MAX_INT64:
            logger.debug("numeral out of int64 range in data size {!r}", text)
            raise SizeOverflowError(f"size number out of int64 range: {text!r}")

        suffix = trimmed[match.end():].strip() or BASE_BYTE
        scale = units.lookup_unit(suffix)
        return cls._scaled(number, scale, source=text)

    @classmethod
    def from_units(cls, amount: int, unit: str) -> Self:
        """
        Size of an integer amount of a unit, e.g. Size.from_units(3, "MiB").

        The unit follows the same lookup rules as parse() and the product is overflow-checked.
        """
        return cls._scaled(operator.index(amount), units.lookup_unit(unit), source=f"{amount} {unit}")

    @classmethod
    def _scaled(cls, number: int, scale: int, source: str) -> Self:
        """Multiply number by scale, checking the int64 bounds before the multiplication."""
        if number > 0 and number > MAX_INT64 // scale:
            logger.debug("data size {!r} overflows int64", source)
            raise SizeOverflowError(f"size overflows int64: {source!r}")
        if number < 0 and number < _trunc_div(MIN_INT64, scale):
            logger.debug("data size {!r} overflows int64", source)
            raise SizeOverflowError(f"size overflows int64: {source!r}")
        return cls(number * scale)

    # ----- Conversions -----

    def quotient(self, unit: "Size | int") -> float:
        """
        The size expressed in units, as a float.

        Computed as integer quotient plus remainder fraction, which keeps precision for
        values beyond the 53-bit float mantissa. A zero unit gives NaN.
        """
        unit = _as_int(unit)
        if unit == 0:
            return math.nan
        whole, rest = _trunc_divmod(self.value, unit)
        return float(whole) + float(rest) / float(unit)

    def best_unit(self, family: UnitFamily = UnitFamily.BINARY_BYTE) -> str:
        """Name of the largest unit of family not exceeding this size."""
        return units.best_unit(self.value, family)

    # ----- Formatting -----

    def format_unit(self, unit: str, precision: int = 0) -> str:
        """
        Format the size in a given unit with a number of fraction digits.

        Zero always renders as '0 <unit>'. Bytes ('B') and bits ('b') render as exact
        integers; a nonzero precision only appends zero fraction digits. Bits are computed
        with unbounded integers, so sizes near the int64 limit are exact as well.

        Raises:
            UnknownUnitError: If unit is not an output unit name.
            ValueError: If precision is negative.

        Examples:
            >>> Size(1536).format_unit("KiB", 2)
            '1.50 KiB'
            >>> Size(1).format_unit("b")
            '8 b'
            >>> Size(42).format_unit("B", 2)
            '42.00 B'
        """
        if precision < 0:
            raise ValueError(f"precision must be >= 0, got {precision}")

        if self.value == 0:
            return f"0 {unit}"

        if unit == BASE_BYTE:
            return f"{self.value}{_zero_fraction(precision)} {unit}"

        if unit == BASE_BIT:
            bits = self.value * 8
            return f"{bits}{_zero_fraction(precision)} {unit}"

        scale = units.unit_value(unit)
        return f"{self.quotient(scale):.{precision}f} {unit}"

    def __format__(self, format_spec: str) -> str:
        match = _FORMAT_SPEC.fullmatch(format_spec)
        if match is None:
            return str(self)

        verb = match.group("verb")
        if verb == "d":
            return str(self.value)

        unit = self.best_unit(_VERB_FAMILIES[verb])
        if match.group("precision") is not None:
            return self.format_unit(unit, int(match.group("precision")))
        return self.format_unit(unit, _default_precision(unit))

    def __str__(self) -> str:
        unit = self.best_unit(UnitFamily.BINARY_BYTE)
        return self.format_unit(unit, _default_precision(unit))

    def __repr__(self) -> str:
        return f"Size({self.value})"

    # ----- Arithmetic -----

    def __add__(self, other: "Size") -> "Size":
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.value + other.value)

    def __radd__(self, other: int) -> "Size":
        # sum() starts from int 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: "Size") -> "Size":
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.value - other.value)

    def __mul__(self, other: int) -> "Size":
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Size(self.value * other)

    __rmul__ = __mul__

    def __floordiv__(self, other: "Size | int") -> "Size | int":
        if isinstance(other, Size):
            return self.value // other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return Size(self.value // other)
        return NotImplemented

    def __mod__(self, other: "Size") -> "Size":
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.value % other.value)

    def __truediv__(self, other: "Size | int") -> float:
        if not isinstance(other, (Size, int)) or isinstance(other, bool):
            return NotImplemented
        return self.quotient(other)

    def __neg__(self) -> "Size":
        return Size(-self.value)

    def __pos__(self) -> "Size":
        return self

    def __abs__(self) -> "Size":
        return Size(abs(self.value))

    def __bool__(self) -> bool:
        return self.value != 0

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


# Methods --------------------------------------------------------------------------------------------------------------

def parse_size(text: str) -> Size:
    """Parse a data size, see Size.parse()."""
    return Size.parse(text)


# Private Methods ------------------------------------------------------------------------------------------------------

def _as_int(unit: "Size | int") -> int:
    if isinstance(unit, Size):
        return unit.value
    return operator.index(unit)


def _default_precision(unit: str) -> int:
    if unit in (BASE_BYTE, BASE_BIT):
        return data_conf.BASE_PRECISION
    return data_conf.DEFAULT_PRECISION


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    return _trunc_divmod(a, b)[0]


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Quotient rounded toward zero and the remainder with the sign of a."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


def _zero_fraction(precision: int) -> str:
    if precision == 0:
        return ""
    return "." + "0" * precision


# Constants ------------------------------------------------------------------------------------------------------------

# @formatter:off
ZERO = Size(0)
BYTE = Size(units.BYTE)

KB, MB, GB = Size(units.KB), Size(units.MB), Size(units.GB)
TB, PB, EB = Size(units.TB), Size(units.PB), Size(units.EB)

KiB, MiB, GiB = Size(units.KiB), Size(units.MiB), Size(units.GiB)
TiB, PiB, EiB = Size(units.TiB), Size(units.PiB), Size(units.EiB)

Kb, Mb, Gb = Size(units.Kb), Size(units.Mb), Size(units.Gb)
Tb, Pb, Eb = Size(units.Tb), Size(units.Pb), Size(units.Eb)

Kib, Mib, Gib = Size(units.Kib), Size(units.Mib), Size(units.Gib)
Tib, Pib, Eib = Size(units.Tib), Size(units.Pib), Size(units.Eib)
# @formatter:on
