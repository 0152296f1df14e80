"""
Physical quantities used as boson quantum numbers.

Energy and Mass wrap a magnitude with a unit tag and convert between units.
ElectricCharge and Spin are signed rationals, constructible from a textual
expression ``"<sign>(<numerator>[/<denominator>])"`` such as ``"+(4/3)"``.

Exports:
    - Energy, Mass: unit-tagged magnitudes.
    - RationalQuantity, ElectricCharge, Spin: signed rational quantum numbers.
    - parse_rational: expression -> (numerator, denominator).
    - lifetime_from_width: decay width -> mean lifetime in seconds.
"""

import math
import re
from typing import Any, Dict, Tuple

import sympy as sp
from pydantic import BaseModel, ConfigDict, Field, model_validator

from elementary.core.constants import HBAR_EV_S, VALUES
from elementary.core.enums import EnergyUnit, MassUnit
from elementary.core.errors import QuantityParseError

__all__ = [
    "Energy",
    "Mass",
    "RationalQuantity",
    "ElectricCharge",
    "Spin",
    "parse_rational",
    "lifetime_from_width",
]

_EV_PER_UNIT: Dict[EnergyUnit, float] = {
    EnergyUnit.ELECTRON_VOLT: 1.0,
    EnergyUnit.KILOELECTRON_VOLT: 1e3,
    EnergyUnit.MEGAELECTRON_VOLT: 1e6,
    EnergyUnit.GIGAELECTRON_VOLT: VALUES["GeV_eV"],
    EnergyUnit.TERAELECTRON_VOLT: 1e12,
    EnergyUnit.JOULE: 1.0 / VALUES["eV_J"],
}

_KG_PER_UNIT: Dict[MassUnit, float] = {
    MassUnit.KILOGRAM: 1.0,
    MassUnit.GRAM: 1e-3,
}

_RATIONAL_RE = re.compile(r"^\s*([+-]?)\s*\(\s*(\d+)\s*(?:/\s*(\d+)\s*)?\)\s*$")


class Energy(BaseModel):
    """An energy magnitude with its unit."""
    model_config = ConfigDict(frozen=True)

    value: float = 0.0
    unit: EnergyUnit = EnergyUnit.ELECTRON_VOLT

    @classmethod
    def zero(cls) -> "Energy":
        return cls()

    @property
    def electron_volts(self) -> float:
        return self.value * _EV_PER_UNIT[self.unit]

    @property
    def joules(self) -> float:
        return self.electron_volts * VALUES["eV_J"]

    def to(self, unit: EnergyUnit) -> "Energy":
        """Return the same energy expressed in ``unit``."""
        unit = EnergyUnit(unit)
        return Energy(value=self.electron_volts / _EV_PER_UNIT[unit], unit=unit)

    def __str__(self) -> str:
        return f"{self.value:g} {self.unit.value}"


class Mass(BaseModel):
    """A non-negative mass magnitude with its unit."""
    model_config = ConfigDict(frozen=True)

    value: float = Field(0.0, ge=0.0)
    unit: MassUnit = MassUnit.KILOGRAM

    @property
    def kilograms(self) -> float:
        return self.value * _KG_PER_UNIT[self.unit]

    @property
    def grams(self) -> float:
        return self.to(MassUnit.GRAM).value

    def to(self, unit: MassUnit) -> "Mass":
        unit = MassUnit(unit)
        return Mass(value=self.kilograms / _KG_PER_UNIT[unit], unit=unit)

    def __str__(self) -> str:
        return f"{self.value:.6e} {self.unit.value}"


def parse_rational(expression: Any) -> Tuple[int, int]:
    """
    Parse a signed rational expression into (numerator, denominator).

    The sign is optional and applies to the numerator. The denominator
    defaults to 1 and is kept as written (no reduction).

    Examples:
        "+(1)"   -> (1, 1)
        "(0)"    -> (0, 1)
        "-(4/3)" -> (-4, 3)

    Raises:
        QuantityParseError: If the expression is ill-formed or the denominator is zero.
    """
    if not isinstance(expression, str):
        raise QuantityParseError(f"Rational expression must be a string, got {type(expression).__name__}")
    match = _RATIONAL_RE.match(expression)
    if match is None:
        raise QuantityParseError(f"Ill-formed rational expression: {expression!r}")
    sign, numerator, denominator = match.groups()
    numerator = int(numerator)
    denominator = int(denominator) if denominator is not None else 1
    if denominator == 0:
        raise QuantityParseError(f"Zero denominator in rational expression: {expression!r}")
    if sign == "-":
        numerator = -numerator
    return numerator, denominator


class RationalQuantity(BaseModel):
    """A signed numerator/denominator pair.

    Accepts either keyword fields or a textual expression wherever the type is
    validated, e.g. ``Spin.parse("+(1/2)")`` or a ``"+(1/2)"`` string passed
    to a model field typed as ``Spin``.
    """
    model_config = ConfigDict(frozen=True)

    numerator: int = 0
    denominator: int = Field(1, gt=0)

    @model_validator(mode="before")
    @classmethod
    def validate_expression(cls, data: Any) -> Any:
        if isinstance(data, str):
            numerator, denominator = parse_rational(data)
            return {"numerator": numerator, "denominator": denominator}
        return data

    @classmethod
    def parse(cls, expression: str):
        return cls.model_validate(expression)

    @property
    def value(self) -> sp.Rational:
        return sp.Rational(self.numerator, self.denominator)

    @property
    def expression(self) -> str:
        sign = "-" if self.numerator < 0 else "+"
        body = str(abs(self.numerator))
        if self.denominator != 1:
            body += f"/{self.denominator}"
        return f"{sign}({body})"

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __str__(self) -> str:
        return self.expression


class ElectricCharge(RationalQuantity):
    """Electric charge as a multiple of the elementary charge."""

    @property
    def coulombs(self) -> float:
        return float(self) * VALUES["eV_J"]


class Spin(RationalQuantity):
    """Spin or isospin quantum number (units of ħ)."""


def lifetime_from_width(width: Energy) -> float:
    """
    Mean lifetime τ = ħ/Γ in seconds for a decay width Γ.

    A zero width means a stable particle and yields +inf.
    """
    gamma = width.electron_volts
    if gamma < 0:
        raise ValueError(f"Decay width must be non-negative, got {width}")
    if gamma == 0:
        return math.inf
    return HBAR_EV_S / gamma
