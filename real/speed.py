"""
Data transfer speed values in bytes per second.

A Speed is derived from an amount of data and the time it took to transfer, or parsed
from text such as '2MB/s', '100 Mbps' or '1 KiB / ms'. It formats like a Size with a
'/s' suffix and accepts the same format() verbs (B, M, b, m, d).
"""

# Standard library -----------------------------------------------------------------------------------------------------
import operator
from dataclasses import dataclass, field
from datetime import timedelta
from types import MappingProxyType
from typing import Mapping, Self

# Third Party ----------------------------------------------------------------------------------------------------------
from loguru import logger

# Local ----------------------------------------------------------------------------------------------------------------
from . import units
from .errors import InvalidArgumentError, SpeedFormatError, SpeedOverflowError, UnknownUnitError
from .size import Size
from .units import MAX_INT64, data_conf

# @formatter:off

# Constants ------------------------------------------------------------------------------------------------------------

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

# Duration ticks are nanoseconds
TICKS_PER_SECOND = SECOND

DURATION_TABLE: Mapping[str, int] = MappingProxyType({
    "ns": NANOSECOND,
    "µs": MICROSECOND,
    "us": MICROSECOND,
    "ms": MILLISECOND,
    "s":  SECOND,
    "m":  MINUTE,
    "h":  HOUR,
})

PER_SEPARATORS = "/p"

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True, order=True, repr=False)
class Speed:
    """
    Quantity of data transfer in bytes per second.

    Speeds are never negative and, since they format through Size, never exceed the
    int64 maximum.

        >>> Speed.from_amount(100 * MB, 2 * SECOND)
        Speed(50000000)
        >>> str(Speed(1536))
        '1.50 kiB/s'
        >>> f"{Speed.parse('1 Gbps'):m}"
        '1.00 Gb/s'
    """

    value: int = field(default=0)

    def __post_init__(self):
        if isinstance(self.value, bool):
            raise TypeError(f"Speed value must be int, got {type(self.value).__name__}")
        try:
            value = operator.index(self.value)
        except TypeError:
            raise TypeError(f"Speed value must be int, got {type(self.value).__name__}") from None

        if value < 0:
            raise InvalidArgumentError(f"negative speed: {value}")
        if value > MAX_INT64:
            raise SpeedOverflowError(f"speed overflows int64: {value}")
        object.__setattr__(self, 'value', value)

    @classmethod
    def from_amount(cls, amount: Size, duration: int | timedelta) -> Self:
        """
        Speed of transferring an amount of data over a duration.

        The result is amount * TICKS_PER_SECOND // duration, truncated. A zero duration
        gives a zero speed, meaning an instantaneous transfer rather than an infinite one.

        Args:
            amount: Data transferred.
            duration: Nanoseconds as int, or a timedelta.

        Raises:
            InvalidArgumentError: If duration or amount is negative.
            SpeedOverflowError: If amount * TICKS_PER_SECOND exceeds the int64 range.

        Examples:
            >>> Speed.from_amount(500 * MB, 500 * MILLISECOND)
            Speed(1000000000)
            >>> Speed.from_amount(MB, timedelta(0))
            Speed(0)
        """
        amount = _as_size(amount)
        ticks = _duration_ticks(duration)

        if ticks < 0:
            logger.debug("negative duration {} for data speed", ticks)
            raise InvalidArgumentError(f"negative duration: {ticks}")

        if amount.value < 0:
            logger.debug("negative amount {!r} for data speed", amount)
            raise InvalidArgumentError(f"negative amount: {amount.value}")

        if ticks == 0:
            return cls(0)

        if amount.value > MAX_INT64 // TICKS_PER_SECOND:
            logger.debug("data speed of {!r} overflows int64", amount)
            raise SpeedOverflowError(f"speed overflows int64: {amount.value} bytes")

        return cls((amount.value * TICKS_PER_SECOND) // ticks)

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Parse a data speed from a size, a per-separator ('/' or 'p') and a duration unit.

        The last '/' or 'p' splits the text, so '1 KB / s', '1KBps' and '10 Mbps' all parse.
        The size part follows Size.parse() rules and its errors propagate unchanged.

        Raises:
            TypeError: If text is not a str.
            SpeedFormatError: If there is no per-separator.
            UnknownUnitError: If the duration unit is not one of ns, µs, us, ms, s, m, h.
            SizeFormatError | UnknownUnitError | SizeOverflowError: From the size part.
            InvalidArgumentError: If the size is negative.
            SpeedOverflowError: If the speed overflows.

        Examples:
            >>> Speed.parse("2MB/s")
            Speed(2000000)
            >>> Speed.parse("1B/ms")
            Speed(1000)
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")

        trimmed = text.strip()
        per_index = max(trimmed.rfind(sep) for sep in PER_SEPARATORS)
        if per_index < 0:
            logger.debug("no per-separator in data speed {!r}", text)
            raise SpeedFormatError(f"invalid data speed format: {text!r}")

        size_text, duration_text = trimmed[:per_index], trimmed[per_index + 1:]

        try:
            duration = DURATION_TABLE[duration_text.strip()]
        except KeyError:
            logger.debug("unknown duration unit {!r} in data speed {!r}", duration_text, text)
            raise UnknownUnitError(f"invalid duration for data speed: {duration_text!r}") from None

        return cls.from_amount(Size.parse(size_text), duration)

    # ----- Conversions -----

    @property
    def size(self) -> Size:
        """The amount transferred per second as a Size."""
        return Size(self.value)

    def transfer_time(self, amount: Size) -> timedelta:
        """
        Time to transfer an amount at this speed, truncated to microseconds.

        Raises:
            InvalidArgumentError: If the speed is zero or amount is negative.
        """
        amount = _as_size(amount)
        if self.value == 0:
            raise InvalidArgumentError("transfer time at zero speed is undefined")
        if amount.value < 0:
            raise InvalidArgumentError(f"negative amount: {amount.value}")
        micros = amount.value * 1_000_000 // self.value
        return timedelta(microseconds=micros)

    @property
    def bytes_per_second(self) -> int:
        return self.value

    @property
    def kilobits_per_second(self) -> float:
        return self._per(units.Kb)

    @property
    def megabits_per_second(self) -> float:
        return self._per(units.Mb)

    @property
    def gigabits_per_second(self) -> float:
        return self._per(units.Gb)

    @property
    def kilobytes_per_second(self) -> float:
        return self._per(units.KB)

    @property
    def megabytes_per_second(self) -> float:
        return self._per(units.MB)

    @property
    def gigabytes_per_second(self) -> float:
        return self._per(units.GB)

    @property
    def kibibits_per_second(self) -> float:
        return self._per(units.Kib)

    @property
    def mebibits_per_second(self) -> float:
        return self._per(units.Mib)

    @property
    def gibibits_per_second(self) -> float:
        return self._per(units.Gib)

    @property
    def kibibytes_per_second(self) -> float:
        return self._per(units.KiB)

    @property
    def mebibytes_per_second(self) -> float:
        return self._per(units.MiB)

    @property
    def gibibytes_per_second(self) -> float:
        return self._per(units.GiB)

    def _per(self, unit: int) -> float:
        if self.value == 0:
            return 0
        return float(self.value) / float(unit)

    # ----- Formatting -----

    def format_unit(self, unit: str, precision: int = 0) -> str:
        """
        Format the speed in a given unit per second, see Size.format_unit().

        Examples:
            >>> Speed(MiB.value + 512 * KiB.value).format_unit("MiB", 2)
            '1.50 MiB/s'
            >>> Speed(1).format_unit("b")
            '8 b/s'
        """
        if self.value == 0:
            return f"0 {unit}{data_conf.PER_SECOND}"
        return self.size.format_unit(unit, precision) + data_conf.PER_SECOND

    def __format__(self, format_spec: str) -> str:
        return format(self.size, format_spec) + data_conf.PER_SECOND

    def __str__(self) -> str:
        return str(self.size) + data_conf.PER_SECOND

    def __repr__(self) -> str:
        return f"Speed({self.value})"

    def __bool__(self) -> bool:
        return self.value != 0

    def __int__(self) -> int:
        return self.value


# Methods --------------------------------------------------------------------------------------------------------------

def new_speed(amount: Size, duration: int | timedelta) -> Speed:
    """Speed of transferring amount over duration, see Speed.from_amount()."""
    return Speed.from_amount(amount, duration)


def parse_speed(text: str) -> Speed:
    """Parse a data speed, see Speed.parse()."""
    return Speed.parse(text)


# Private Methods ------------------------------------------------------------------------------------------------------

def _as_size(amount: Size) -> Size:
    if isinstance(amount, Size):
        return amount
    raise TypeError(f"amount must be Size, got {type(amount).__name__}")


def _duration_ticks(duration: int | timedelta) -> int:
    """Duration in nanoseconds."""
    if isinstance(duration, timedelta):
        return ((duration.days * 86_400 + duration.seconds) * 1_000_000 + duration.microseconds) * 1000
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise TypeError(f"duration must be int nanoseconds or timedelta, got {type(duration).__name__}")
    return duration
