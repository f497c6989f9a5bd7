#
# Real - Data Units Tables
#

# Standard library -----------------------------------------------------------------------------------------------------
from enum import StrEnum, unique
from types import MappingProxyType
from typing import Mapping, NamedTuple

# Third Party ----------------------------------------------------------------------------------------------------------
from loguru import logger

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import UnknownUnitError


# @formatter:off

class DataConf:
    DEFAULT_PRECISION = 2       # Fraction digits for scaled units when none requested
    BASE_PRECISION = 0          # Fraction digits for the byte and bit base units
    PER_SECOND = "/s"           # Suffix appended to data speed units


data_conf = DataConf()

# Constants ------------------------------------------------------------------------------------------------------------

MAX_INT64 = 2**63 - 1
MIN_INT64 = -2**63

BYTE = 1

# Metric bytes
KB = 1000 * BYTE
MB = 1000 * KB
GB = 1000 * MB
TB = 1000 * GB
PB = 1000 * TB
EB = 1000 * PB

# Binary bytes
KiB = 1024 * BYTE
MiB = 1024 * KiB
GiB = 1024 * MiB
TiB = 1024 * GiB
PiB = 1024 * TiB
EiB = 1024 * PiB

# Metric bits
Kb = KB // 8
Mb = MB // 8
Gb = GB // 8
Tb = TB // 8
Pb = PB // 8
Eb = EB // 8

# Binary bits
Kib = KiB // 8
Mib = MiB // 8
Gib = GiB // 8
Tib = TiB // 8
Pib = PiB // 8
Eib = EiB // 8

BASE_BYTE = "B"
BASE_BIT = "b"

UNIT_TABLE: Mapping[str, int] = MappingProxyType({
    "B":   BYTE,
    "kB":  KB,  "KB":  KB,  "MB":  MB,  "GB":  GB,  "TB":  TB,  "PB":  PB,  "EB":  EB,
    "kiB": KiB, "KiB": KiB, "MiB": MiB, "GiB": GiB, "TiB": TiB, "PiB": PiB, "EiB": EiB,
    "kb":  Kb,  "Kb":  Kb,  "Mb":  Mb,  "Gb":  Gb,  "Tb":  Tb,  "Pb":  Pb,  "Eb":  Eb,
    "kib": Kib, "Kib": Kib, "Mib": Mib, "Gib": Gib, "Tib": Tib, "Pib": Pib, "Eib": Eib,
})

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class UnitFamily(StrEnum):
    """
    Families of units used to pick the most readable unit for a data size.

    Attributes:
        BINARY_BYTE (str) : B, kiB, MiB, GiB, ... powers of 1024 bytes
        METRIC_BYTE (str) : B, kB, MB, GB, ...    powers of 1000 bytes
        BINARY_BIT (str)  : b, kib, Mib, Gib, ... powers of 1024 bits
        METRIC_BIT (str)  : b, kb, Mb, Gb, ...    powers of 1000 bits
    """
    BINARY_BYTE = "binary_byte"
    METRIC_BYTE = "metric_byte"
    BINARY_BIT = "binary_bit"
    METRIC_BIT = "metric_bit"


class UnitStep(NamedTuple):
    """A unit name with the smallest byte count it is displayed for."""
    name: str
    threshold: int


# @formatter:off
UNIT_FAMILIES: Mapping[UnitFamily, tuple[UnitStep, ...]] = MappingProxyType({
    UnitFamily.BINARY_BYTE: (
        UnitStep("B", BYTE), UnitStep("kiB", KiB), UnitStep("MiB", MiB), UnitStep("GiB", GiB),
        UnitStep("TiB", TiB), UnitStep("PiB", PiB), UnitStep("EiB", EiB),
    ),
    UnitFamily.METRIC_BYTE: (
        UnitStep("B", BYTE), UnitStep("kB", KB), UnitStep("MB", MB), UnitStep("GB", GB),
        UnitStep("TB", TB), UnitStep("PB", PB), UnitStep("EB", EB),
    ),
    # 1 byte is 8 bits, so the bit base unit applies from zero
    UnitFamily.BINARY_BIT: (
        UnitStep("b", 0), UnitStep("kib", Kib), UnitStep("Mib", Mib), UnitStep("Gib", Gib),
        UnitStep("Tib", Tib), UnitStep("Pib", Pib), UnitStep("Eib", Eib),
    ),
    UnitFamily.METRIC_BIT: (
        UnitStep("b", 0), UnitStep("kb", Kb), UnitStep("Mb", Mb), UnitStep("Gb", Gb),
        UnitStep("Tb", Tb), UnitStep("Pb", Pb), UnitStep("Eb", Eb),
    ),
})
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def best_unit(value: int, family: UnitFamily) -> str:
    """
    Return the largest unit name of a family whose threshold does not exceed the value.

    The family steps are ascending, so the scan keeps the last qualifying step. The base
    unit is the fallback for values below every threshold, including zero and negatives.

    Raises:
        AssertionError: If family is not a UnitFamily member. The set of families is closed,
            so an unknown one is a programming error rather than bad input.

    Examples:
        >>> best_unit(1023, UnitFamily.BINARY_BYTE)
        'B'
        >>> best_unit(1024, UnitFamily.BINARY_BYTE)
        'kiB'
    """
    if not isinstance(family, UnitFamily):
        raise AssertionError(f"invalid unit family: {family!r}")

    steps = UNIT_FAMILIES[family]
    name = steps[0].name
    for step in steps:
        if step.threshold > value:
            break
        name = step.name
    return name


def lookup_unit(suffix: str) -> int:
    """
    Look up the byte scale of a unit suffix given as user input.

    An all-lowercase suffix is normalized first with normalize_unit(), so that 'mib' or 'gb'
    are accepted. Mixed-case suffixes are looked up verbatim.

    Raises:
        UnknownUnitError: If the normalized suffix is not in UNIT_TABLE.

    Examples:
        >>> lookup_unit("mib")
        1048576
        >>> lookup_unit("Kb")
        125
    """
    unit = normalize_unit(suffix)
    try:
        return UNIT_TABLE[unit]
    except KeyError:
        logger.debug("unknown unit suffix {!r} (normalized {!r})", suffix, unit)
        raise UnknownUnitError(f"invalid input unit: {suffix!r}") from None


def normalize_unit(suffix: str) -> str:
    """
    Upper-case every letter except the binary marker 'i' when the suffix is all lowercase.

    A suffix with any non-lowercase character is returned unchanged, e.g. 'mIb' stays 'mIb'.

    Examples:
        >>> normalize_unit("kib")
        'KiB'
        >>> normalize_unit("Mb")
        'Mb'
    """
    if suffix and all(ch.islower() for ch in suffix):
        return "".join(ch if ch == "i" else ch.upper() for ch in suffix)
    return suffix


def unit_value(name: str) -> int:
    """
    Byte scale of an output unit name, looked up verbatim.

    Raises:
        UnknownUnitError: If name is not in UNIT_TABLE.
    """
    try:
        return UNIT_TABLE[name]
    except KeyError:
        raise UnknownUnitError(f"illegal data size unit: {name!r}") from None


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Every non-base family unit must be a known output unit with a matching scale.
for _family, _steps in UNIT_FAMILIES.items():
    for _step in _steps[1:]:
        if UNIT_TABLE.get(_step.name) != _step.threshold:
            raise AssertionError(
                f"Configuration Error: unit {_step.name!r} of {_family} disagrees with UNIT_TABLE."
            )
    if [s.threshold for s in _steps] != sorted(s.threshold for s in _steps):
        raise AssertionError(f"Configuration Error: units of {_family} must be ascending.")

del _family, _steps, _step
