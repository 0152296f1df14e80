# elementary/core/enums.py

from enum import Enum, IntEnum, IntFlag


class BosonType(IntEnum):
    """Discrete boson tag. Ordinal order drives ``Boson.compare_to``."""
    UNKNOWN = 0  # sentinel, equal to nothing
    PHOTON = 1
    NEUTRAL_WEAK = 2
    CHARGED_WEAK = 3
    GRAVITON = 4


class InteractionFlags(IntFlag):
    """Force channels a boson mediates or couples to."""
    NONE = 0
    ELECTROMAGNETIC = 1
    WEAK = 2
    STRONG = 4
    GRAVITY = 8


class EnergyUnit(str, Enum):
    ELECTRON_VOLT = "eV"
    KILOELECTRON_VOLT = "keV"
    MEGAELECTRON_VOLT = "MeV"
    GIGAELECTRON_VOLT = "GeV"
    TERAELECTRON_VOLT = "TeV"
    JOULE = "J"


class MassUnit(str, Enum):
    KILOGRAM = "kg"
    GRAM = "g"


class ConstantCategory(str, Enum):
    """Role of a constant within the registry."""
    FUNDAMENTAL = "Fundamental"
    DERIVED = "Derived Normalizations"
    CONVERSION = "Conversion Factors"


class ConstantStatus(str, Enum):
    CANONICAL = "Canonical"  # exact or CODATA value
    DERIVED = "Derived"      # follows from other entries


class ObservationStatus(str, Enum):
    OBSERVED = "Observed"
    HYPOTHETICAL = "Hypothetical"


__all__ = [
    "BosonType",
    "InteractionFlags",
    "EnergyUnit",
    "MassUnit",
    "ConstantCategory",
    "ConstantStatus",
    "ObservationStatus",
]
