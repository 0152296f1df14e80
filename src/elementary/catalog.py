"""
Canonical catalog of gauge bosons.

The seven entries are built once, at import, from literal physical values.
Type tags and interaction flags are reproduced as recorded even where they
look physically odd: Z and W share NEUTRAL_WEAK, the gluon is tagged
CHARGED_WEAK and couples only to the weak channel, and the grand-unification
X and Y bosons are tagged GRAVITON. Equality depends on the tag, so changing
any of these changes which bosons compare equal.

Exports:
    - BosonInfo: Pydantic model pairing a boson with its catalog metadata.
    - PHOTON, Z, W, GLUON, GRAVITON, X, Y: the catalog bosons.
    - CATALOG, CATALOG_DICT, BOSONS: registry views.
    - get_boson, get_bosons_by_type, stable_bosons, observed_bosons,
      sorted_bosons, validate_catalog.
"""

import math
from typing import Dict, List, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from elementary.boson import Boson
from elementary.core.constants import ELECTRON_MASS_PLANCK, SPEED_OF_LIGHT_SQUARED
from elementary.core.enums import BosonType, EnergyUnit, InteractionFlags, ObservationStatus
from elementary.core.logging import logger
from elementary.core.quantities import Energy

_EM = InteractionFlags.ELECTROMAGNETIC
_WEAK = InteractionFlags.WEAK
_GRAVITY = InteractionFlags.GRAVITY


class BosonInfo(BaseModel):
    """A catalog boson with its descriptive metadata."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Canonical name (used as key)")
    symbol: str = Field(..., description="Conventional particle symbol")
    boson: Boson
    description: str = ""
    status: ObservationStatus = ObservationStatus.OBSERVED
    notes: Optional[str] = None
    source_refs: List[str] = Field(default_factory=list)


def _gev(value: float) -> Energy:
    return Energy(value=value, unit=EnergyUnit.GIGAELECTRON_VOLT)


def _single(value: float) -> float:
    # widths are recorded at single precision
    return float(np.float32(value))


# The photon is the quantum of the electromagnetic field and the force carrier
# of the electromagnetic interaction. Its invariant mass is zero.
PHOTON = Boson(
    type=BosonType.PHOTON,
    natural_mass=Energy.zero(),
    electric_charge="(0)",
    interaction_flags=_EM | _WEAK | _GRAVITY,
    spin="+(1)",
    isospin="+(0)",
    hypercharge=0,
    lifetime=math.inf,
)

# Z boson, neutral mediator of the weak interaction.
# PDG: m_Z = 91.1876 GeV, Γ_Z = 2.4952 GeV. The lifetime field holds the width in eV, at single precision.
Z = Boson(
    type=BosonType.NEUTRAL_WEAK,
    natural_mass=_gev(91.1876),
    electric_charge="(0)",
    interaction_flags=_WEAK,
    spin="+(1)",
    isospin="+(0)",
    hypercharge=0,
    lifetime=_single(_gev(2.4952).electron_volts),
)

# W boson, charged mediator of the weak interaction.
# PDG: m_W = 80.379 GeV, Γ_W = 2.085 GeV. The lifetime field holds the width in eV, at single precision.
W = Boson(
    type=BosonType.NEUTRAL_WEAK,
    natural_mass=_gev(80.379),
    electric_charge="+(1)",
    interaction_flags=_WEAK,
    spin="+(1)",
    isospin="+(1)",
    hypercharge=0,
    lifetime=_single(_gev(2.085).electron_volts),
)

# Gluon, exchange particle of the strong force between quarks.
GLUON = Boson(
    type=BosonType.CHARGED_WEAK,
    natural_mass=Energy.zero(),
    electric_charge="+(0)",
    interaction_flags=_WEAK,
    spin="+(1)",
    isospin="+(0)",
    hypercharge=0,
    lifetime=math.inf,
)

# Hypothetical quantum of gravity. No complete quantum field theory of the
# graviton exists; in string theory it is a massless state of a fundamental string.
GRAVITON = Boson(
    type=BosonType.GRAVITON,
    natural_mass=Energy.zero(),
    electric_charge="+(2)",
    interaction_flags=_GRAVITY,
    spin="+(0)",
    isospin="+(0)",
    hypercharge=0,
    lifetime=math.inf,
)

# Grand-unification X boson at the 1e15 GeV scale.
# Hypercharge 5/3 is stored as an integer, so it truncates to 1.
X = Boson(
    type=BosonType.GRAVITON,
    natural_mass=_gev(1e15),
    electric_charge="+(4/3)",
    interaction_flags=_GRAVITY,
    spin="+(1)",
    isospin="+(1/2)",
    hypercharge=5 // 3,
    lifetime=math.inf,
)

# Grand-unification Y boson, partner of X.
Y = Boson(
    type=BosonType.GRAVITON,
    natural_mass=_gev(1e15),
    electric_charge="+(1/3)",
    interaction_flags=_GRAVITY,
    spin="+(1)",
    isospin="+(1/2)",
    hypercharge=5 // 3,
    lifetime=math.inf,
)

# === Catalog Registry ===
CATALOG: List[BosonInfo] = [
    BosonInfo(
        name="Photon",
        symbol="γ",
        boson=PHOTON,
        description="Quantum of the electromagnetic field; massless and stable.",
    ),
    BosonInfo(
        name="Z",
        symbol="Z⁰",
        boson=Z,
        description="Neutral intermediate vector boson of the weak interaction.",
        source_refs=["https://pdg.lbl.gov/"],
    ),
    BosonInfo(
        name="W",
        symbol="W⁺",
        boson=W,
        description="Charged intermediate vector boson of the weak interaction.",
        notes="Tagged NEUTRAL_WEAK, so it compares equal to Z.",
        source_refs=["https://pdg.lbl.gov/"],
    ),
    BosonInfo(
        name="Gluon",
        symbol="g",
        boson=GLUON,
        description="Gauge boson of the strong force between quarks.",
        notes="Tagged CHARGED_WEAK with the WEAK flag only.",
    ),
    BosonInfo(
        name="Graviton",
        symbol="G",
        boson=GRAVITON,
        description="Hypothetical quantum of gravity.",
        status=ObservationStatus.HYPOTHETICAL,
    ),
    BosonInfo(
        name="X",
        symbol="X",
        boson=X,
        description="Hypothetical grand-unification boson, charge 4/3.",
        status=ObservationStatus.HYPOTHETICAL,
        notes="Tagged GRAVITON.",
    ),
    BosonInfo(
        name="Y",
        symbol="Y",
        boson=Y,
        description="Hypothetical grand-unification boson, charge 1/3.",
        status=ObservationStatus.HYPOTHETICAL,
        notes="Tagged GRAVITON.",
    ),
]

# --- Generate Derived Exports ---

CATALOG_DICT: Dict[str, BosonInfo] = {info.name: info for info in CATALOG}

BOSONS: Dict[str, Boson] = {info.name: info.boson for info in CATALOG}

logger.debug(f"Boson catalog built with {len(CATALOG)} entries")

# --- Utility Functions ---

def get_info(name: str) -> BosonInfo:
    """Return the catalog entry for ``name`` (case-insensitive)."""
    for key, info in CATALOG_DICT.items():
        if key.lower() == name.lower():
            return info
    raise KeyError(f"Unknown boson: {name}")

def get_boson(name: str) -> Boson:
    """Return the catalog boson for ``name`` (case-insensitive)."""
    return get_info(name).boson

def get_bosons_by_type(boson_type: BosonType) -> List[Boson]:
    """Return all catalog bosons carrying a given type tag."""
    return [b for b in BOSONS.values() if b.type == boson_type]

def stable_bosons() -> List[Boson]:
    return [b for b in BOSONS.values() if b.is_stable()]

def observed_bosons() -> List[Boson]:
    return [b for b in BOSONS.values() if b.is_observed()]

def sorted_bosons() -> List[Boson]:
    """Catalog bosons sorted by type ordinal; catalog order is kept within a tag."""
    return sorted(BOSONS.values())

def validate_catalog(rel_tol: float = 1e-12) -> Dict[str, str]:
    """
    Check every entry for internal consistency.
    Returns dict of any errors found.
    """
    errors = {}

    for info in CATALOG:
        boson = info.boson
        expected = boson.natural_mass.electron_volts * SPEED_OF_LIGHT_SQUARED / ELECTRON_MASS_PLANCK
        actual = boson.mass.kilograms
        if not math.isclose(actual, expected, rel_tol=rel_tol, abs_tol=0.0):
            errors[info.name] = f"Derived mass {actual} kg, expected {expected} kg"
            continue
        observed = info.status == ObservationStatus.OBSERVED
        if observed != boson.is_observed():
            logger.debug(f"{info.name}: status {info.status.value} disagrees with type tag {boson.type.name}")

    shared = {}
    for info in CATALOG:
        shared.setdefault(info.boson.type, []).append(info.name)
    for boson_type, names in shared.items():
        if len(names) > 1:
            logger.debug(f"Type tag {boson_type.name} shared by {', '.join(names)}")

    if errors:
        logger.warning(f"Catalog validation errors: {errors}")
    return errors

__all__ = [
    "BosonInfo",
    "PHOTON", "Z", "W", "GLUON", "GRAVITON", "X", "Y",
    "CATALOG", "CATALOG_DICT", "BOSONS",
    "get_info", "get_boson", "get_bosons_by_type",
    "stable_bosons", "observed_bosons", "sorted_bosons",
    "validate_catalog",
]
