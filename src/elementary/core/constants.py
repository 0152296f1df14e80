"""
Physical constants consumed by the boson model.

This file is the single source of truth for the numeric inputs of mass
derivation and width conversion. Each entry carries its metadata, a SymPy
symbol and, for derived entries, an evaluatable relation that
``validate_relations`` checks against the stored value.

Exports:
    - ConstantInfo: Pydantic model for constant metadata.
    - CONSTANTS: The canonical list of registry entries.
    - CONSTANTS_DICT: Dictionary mapping constant names to ConstantInfo objects.
    - SYMBOLS: Dictionary mapping names to SymPy symbols.
    - VALUES: Dictionary mapping names to numeric values.
    - SPEED_OF_LIGHT_SQUARED, ELECTRON_MASS_PLANCK, HBAR_EV_S: numeric shortcuts.
"""

__version__ = "1.0.0"
__date__ = "2026-10-19"

# --- Core Imports ---
import sympy as sp
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List, Dict, Any

from elementary.core.enums import ConstantCategory, ConstantStatus
from elementary.core.logging import logger

# --- Core Data Structures ---

class ConstantInfo(BaseModel):
    """Complete metadata and value for a single registry constant."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # Core identification
    name: str = Field(..., description="Canonical name (used as key)")
    symbol: Optional[sp.Basic] = Field(None, description="SymPy symbol for analytics")
    latex: Optional[str] = Field(None, description="LaTeX representation")

    # Value and units
    value: Optional[float] = Field(None, description="Numeric value if known")
    units: str = Field("dimensionless", description="Physical units")

    # Documentation
    description: str = Field("", description="Brief description")
    category: ConstantCategory = Field(..., description="Category/role")
    status: ConstantStatus = Field(ConstantStatus.CANONICAL)

    # Relations and provenance
    relation: Optional[str] = Field(None, description="Symbolic relation (LaTeX)")
    eval_expr: Optional[sp.Expr] = Field(None, description="Evaluatable SymPy expression")
    source_refs: Optional[List[str]] = Field(default_factory=list, description="DOIs/URLs")

# --- Numerical Base Values ---
_c = 299_792_458.0  # m/s (exact)
_eV = 1.602176634e-19  # J (exact by definition)
_hbar = 1.054571817e-34  # J·s

GEV_TO_EV = 1e9

# === Canonical Constants Registry ===
CONSTANTS: List[ConstantInfo] = [

    # ========== 1. FUNDAMENTAL ==========

    ConstantInfo(
        name="c",
        symbol=sp.Symbol('c'),
        latex=r"c",
        value=_c,
        units="m/s",
        description="Speed of light in vacuum",
        category=ConstantCategory.FUNDAMENTAL,
        source_refs=["https://physics.nist.gov/cgi-bin/cuu/Value?c"],
    ),

    ConstantInfo(
        name="eV_J",
        symbol=sp.Symbol('eV_J'),
        latex=r"e",
        value=_eV,
        units="J/eV",
        description="Joules per electron-volt (elementary charge)",
        category=ConstantCategory.FUNDAMENTAL,
        source_refs=["https://physics.nist.gov/cgi-bin/cuu/Value?e"],
    ),

    ConstantInfo(
        name="hbar_J",
        symbol=sp.Symbol('hbar_J'),
        latex=r"\hbar",
        value=_hbar,
        units="J·s",
        description="Reduced Planck constant",
        category=ConstantCategory.FUNDAMENTAL,
        source_refs=["https://physics.nist.gov/cgi-bin/cuu/Value?hbar"],
    ),

    # ========== 2. DERIVED NORMALIZATIONS ==========

    ConstantInfo(
        name="c_squared",
        symbol=sp.Symbol('c_squared'),
        latex=r"c^2",
        value=_c**2,
        units="m²/s²",
        description="Speed of light squared, numerator of rest-mass derivation",
        category=ConstantCategory.DERIVED,
        status=ConstantStatus.DERIVED,
        relation=r"c^2",
        eval_expr=sp.Symbol('c')**2,
    ),

    ConstantInfo(
        name="electron_mass_planck",
        symbol=sp.Symbol('electron_mass_planck'),
        latex=r"c^4 / e",
        value=_c**4 / _eV,
        units="eV·m²/(kg·s²)",
        description="Normalization dividing E[eV]·c² so the result is a rest mass in kg",
        category=ConstantCategory.DERIVED,
        status=ConstantStatus.DERIVED,
        relation=r"c^4 / e",
        eval_expr=sp.Symbol('c')**4 / sp.Symbol('eV_J'),
    ),

    ConstantInfo(
        name="hbar_eV",
        symbol=sp.Symbol('hbar_eV'),
        latex=r"\hbar / e",
        value=_hbar / _eV,
        units="eV·s",
        description="Reduced Planck constant in eV·s, converts a decay width to a lifetime",
        category=ConstantCategory.DERIVED,
        status=ConstantStatus.DERIVED,
        relation=r"\hbar / e",
        eval_expr=sp.Symbol('hbar_J') / sp.Symbol('eV_J'),
    ),

    # ========== 3. CONVERSION FACTORS ==========

    ConstantInfo(
        name="GeV_eV",
        symbol=sp.Symbol('GeV_eV'),
        value=GEV_TO_EV,
        units="eV/GeV",
        description="Electron-volts per giga-electron-volt",
        category=ConstantCategory.CONVERSION,
    ),
]

# --- Generate Derived Exports ---

CONSTANTS_DICT: Dict[str, ConstantInfo] = {c.name: c for c in CONSTANTS}

SYMBOLS: Dict[str, sp.Basic] = {
    c.name: c.symbol for c in CONSTANTS if c.symbol is not None
}

VALUES: Dict[str, float] = {
    c.name: c.value for c in CONSTANTS if c.value is not None
}

SPEED_OF_LIGHT_SQUARED: float = VALUES["c_squared"]
ELECTRON_MASS_PLANCK: float = VALUES["electron_mass_planck"]
HBAR_EV_S: float = VALUES["hbar_eV"]

# --- Utility Functions ---

def get_constants_by_category(category: ConstantCategory) -> List[ConstantInfo]:
    """Return all constants in a given category."""
    return [c for c in CONSTANTS if c.category == category]

def get_constants_by_status(status: ConstantStatus) -> List[ConstantInfo]:
    """Return all constants with a given status."""
    return [c for c in CONSTANTS if c.status == status]

def export_to_yaml(filename: str = "constants.yaml") -> None:
    """Export all constants to YAML format for external tools."""
    import yaml

    data = {
        "version": __version__,
        "date": __date__,
        "constants": {}
    }

    for const in CONSTANTS:
        entry = {
            "latex": const.latex,
            "value": const.value,
            "units": const.units,
            "description": const.description,
            "category": const.category.value,
            "status": const.status.value,
        }
        if const.relation:
            entry["relation"] = const.relation
        if const.source_refs:
            entry["references"] = const.source_refs

        data["constants"][const.name] = entry

    with open(filename, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    logger.debug(f"Exported {len(CONSTANTS)} constants to {filename}")

def validate_relations(rel_tol: float = 1e-6) -> Dict[str, Any]:
    """
    Evaluate every eval_expr against the registry values.
    Returns dict of any errors found.
    """
    errors = {}

    for const in CONSTANTS:
        if const.eval_expr is None:
            continue
        subs = {}
        for sym in const.eval_expr.free_symbols:
            if str(sym) in VALUES:
                subs[sym] = VALUES[str(sym)]
        result = const.eval_expr.subs(subs)
        if not result.is_number:
            errors[const.name] = f"Unresolved symbols: {sorted(map(str, result.free_symbols))}"
            continue
        if const.value:
            rel_error = abs(float(result) - const.value) / abs(const.value)
            if rel_error > rel_tol:
                errors[const.name] = f"Computed {float(result)}, stated {const.value} (rel_error={rel_error:.2e})"

    if errors:
        logger.warning(f"Constant relation errors: {errors}")
    else:
        logger.debug("All constant relations validated")
    return errors

# --- Export all public names ---
__all__ = [
    # Core classes
    "ConstantInfo",
    # Main registry
    "CONSTANTS", "CONSTANTS_DICT", "SYMBOLS", "VALUES",
    # Numeric shortcuts
    "SPEED_OF_LIGHT_SQUARED", "ELECTRON_MASS_PLANCK", "HBAR_EV_S", "GEV_TO_EV",
    # Utility functions
    "get_constants_by_category", "get_constants_by_status",
    "export_to_yaml", "validate_relations",
    # Version info
    "__version__", "__date__",
]
