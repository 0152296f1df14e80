"""
elementary: gauge bosons as immutable value objects.

Usage:
    from elementary import Boson, BosonType, PHOTON
    PHOTON.is_vector()
"""

__version__ = "0.1.0"

from elementary.core.enums import BosonType, EnergyUnit, InteractionFlags, MassUnit
from elementary.core.errors import ElementaryError, QuantityParseError
from elementary.core.quantities import ElectricCharge, Energy, Mass, Spin
from elementary.boson import Boson
from elementary.catalog import BOSONS, CATALOG, GLUON, GRAVITON, PHOTON, W, X, Y, Z

__all__ = [
    "__version__",
    "Boson",
    "BosonType",
    "InteractionFlags",
    "EnergyUnit",
    "MassUnit",
    "Energy",
    "Mass",
    "ElectricCharge",
    "Spin",
    "ElementaryError",
    "QuantityParseError",
    "PHOTON", "Z", "W", "GLUON", "GRAVITON", "X", "Y",
    "CATALOG", "BOSONS",
]
