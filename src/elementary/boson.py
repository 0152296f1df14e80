"""
The boson value type.

A Boson is an immutable bundle of quantum numbers. Its rest mass is derived
from the rest energy and is never supplied directly:

    mass [kg] = natural_mass [eV] * c^2 / electron_mass_planck

Equality is decided by the type tag alone, and the UNKNOWN tag (the tag of the
default ``Boson()``) is equal to nothing, itself included. The hash mixes every
field, so two bosons that compare equal can hash differently. Do not rely on
hash-based containers to merge bosons of the same type.
"""

import math
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from elementary.core.constants import ELECTRON_MASS_PLANCK, SPEED_OF_LIGHT_SQUARED
from elementary.core.enums import BosonType, InteractionFlags
from elementary.core.quantities import ElectricCharge, Energy, Mass, Spin

__all__ = ["Boson"]

_HASH_MULTIPLIER = 397
_INT32_MIN = -(2**31)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _truncate_lifetime(lifetime: float) -> int:
    # infinite lifetimes truncate to the 32-bit minimum
    if math.isfinite(lifetime):
        return int(lifetime)
    return _INT32_MIN


class Boson(BaseModel):
    """An elementary gauge boson.

    Charge and spin fields accept rational expressions such as ``"+(1/2)"``;
    a malformed expression raises ``QuantityParseError``.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    type: BosonType = BosonType.UNKNOWN
    natural_mass: Energy = Field(default_factory=Energy.zero, description="Rest energy")
    electric_charge: ElectricCharge = Field(default_factory=ElectricCharge)
    interaction_flags: InteractionFlags = InteractionFlags.NONE
    spin: Spin = Field(default_factory=Spin)
    isospin: Spin = Field(default_factory=Spin)
    hypercharge: int = 0
    lifetime: float = Field(0.0, ge=0.0, description="Mean lifetime in seconds, +inf when stable")

    _mass: Mass = PrivateAttr()

    @field_validator("natural_mass")
    @classmethod
    def validate_non_negative_energy(cls, v: Energy) -> Energy:
        if v.electron_volts < 0:
            raise ValueError(f"Rest energy must be non-negative, got {v}")
        return v

    def model_post_init(self, __context: Any) -> None:
        self._mass = self._derive_mass()

    def _derive_mass(self) -> Mass:
        kilograms = (self.natural_mass.electron_volts * SPEED_OF_LIGHT_SQUARED) / ELECTRON_MASS_PLANCK
        return Mass(value=kilograms)

    def model_copy(self, *, update: Dict[str, Any] = None, deep: bool = False) -> "Boson":
        copied = super().model_copy(update=update, deep=deep)
        copied._mass = copied._derive_mass()
        return copied

    @property
    def mass(self) -> Mass:
        """Rest mass in kilograms, derived from ``natural_mass``."""
        return self._mass

    # --- Classification ---

    def is_stable(self) -> bool:
        return self.lifetime == math.inf

    def is_vector(self) -> bool:
        return self.spin.numerator == 1

    def is_observed(self) -> bool:
        return self.type != BosonType.GRAVITON

    # --- Equality, ordering, hashing ---

    def equals(self, other: "Boson") -> bool:
        if self.type == BosonType.UNKNOWN:
            return False
        if other.type == BosonType.UNKNOWN:
            return False
        return self.type == other.type

    def compare_to(self, other: Any) -> int:
        """Positive if ``other`` has the greater type ordinal, negative if smaller.

        Non-boson operands compare as 0.
        """
        if not isinstance(other, Boson):
            return 0
        if other.type > self.type:
            return 1
        if other.type < self.type:
            return -1
        return 0

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Boson):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # Rich comparisons follow the ascending type ordinal, so sorted() groups tags.
    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Boson):
            return NotImplemented
        return self.type < other.type

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Boson):
            return NotImplemented
        return self.type <= other.type

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Boson):
            return NotImplemented
        return self.type > other.type

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Boson):
            return NotImplemented
        return self.type >= other.type

    def __hash__(self) -> int:
        hash_code = int(self.type)
        for part in (
            hash(self.electric_charge),
            hash(self.spin),
            hash(self.isospin),
            hash(self.natural_mass),
            hash(self.mass),
            int(self.interaction_flags),
            self.hypercharge,
            _truncate_lifetime(self.lifetime),
        ):
            hash_code = _to_int32((hash_code * _HASH_MULTIPLIER) ^ part)
        return hash_code

    # --- Display ---

    def interaction_names(self) -> list:
        return [flag.name for flag in InteractionFlags if flag and flag in self.interaction_flags]

    def summary(self) -> Dict[str, Any]:
        """Plain-python view of the boson for display and JSON output."""
        return {
            "type": self.type.name,
            "natural_mass_eV": self.natural_mass.electron_volts,
            "mass_kg": self.mass.kilograms,
            "electric_charge": self.electric_charge.expression,
            "interactions": self.interaction_names(),
            "spin": self.spin.expression,
            "isospin": self.isospin.expression,
            "hypercharge": self.hypercharge,
            "lifetime_s": self.lifetime,
            "stable": self.is_stable(),
            "vector": self.is_vector(),
            "observed": self.is_observed(),
        }
