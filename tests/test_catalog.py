import math

import numpy as np
import pytest

from elementary import catalog
from elementary.catalog import (
    BosonInfo,
    BOSONS,
    CATALOG,
    CATALOG_DICT,
    GLUON,
    GRAVITON,
    PHOTON,
    W,
    X,
    Y,
    Z,
    get_boson,
    get_bosons_by_type,
    observed_bosons,
    sorted_bosons,
    stable_bosons,
    validate_catalog,
)
from elementary.boson import Boson
from elementary.core.constants import ELECTRON_MASS_PLANCK, SPEED_OF_LIGHT_SQUARED
from elementary.core.enums import BosonType, EnergyUnit, InteractionFlags, ObservationStatus
from elementary.core.quantities import Energy


def test_catalog_has_seven_unique_entries():
    names = [info.name for info in CATALOG]
    assert names == ["Photon", "Z", "W", "Gluon", "Graviton", "X", "Y"]
    assert set(CATALOG_DICT) == set(names)
    assert BOSONS["Photon"] is PHOTON


def test_type_tags_reproduced_literally():
    assert PHOTON.type is BosonType.PHOTON
    assert Z.type is BosonType.NEUTRAL_WEAK
    assert W.type is BosonType.NEUTRAL_WEAK
    assert GLUON.type is BosonType.CHARGED_WEAK
    assert GRAVITON.type is BosonType.GRAVITON
    assert X.type is BosonType.GRAVITON
    assert Y.type is BosonType.GRAVITON


def test_interaction_flags_reproduced_literally():
    em, weak, gravity = InteractionFlags.ELECTROMAGNETIC, InteractionFlags.WEAK, InteractionFlags.GRAVITY
    assert PHOTON.interaction_flags == em | weak | gravity
    assert Z.interaction_flags == weak
    assert W.interaction_flags == weak
    assert GLUON.interaction_flags == weak
    for b in (GRAVITON, X, Y):
        assert b.interaction_flags == gravity


def test_literal_quantum_numbers():
    assert PHOTON.natural_mass.electron_volts == 0.0
    assert Z.natural_mass.electron_volts == pytest.approx(91.1876e9)
    assert W.natural_mass.electron_volts == pytest.approx(80.379e9)
    assert X.natural_mass.electron_volts == pytest.approx(1e24)
    assert Y.natural_mass.electron_volts == pytest.approx(1e24)

    assert W.electric_charge.expression == "+(1)"
    assert GRAVITON.electric_charge.expression == "+(2)"
    assert X.electric_charge.expression == "+(4/3)"
    assert Y.electric_charge.expression == "+(1/3)"

    assert W.isospin.expression == "+(1)"
    assert X.isospin.expression == "+(1/2)"
    assert GRAVITON.spin.numerator == 0

    assert X.hypercharge == 1
    assert Y.hypercharge == 1


def test_z_and_w_lifetimes_are_widths_in_ev():
    assert Z.lifetime == pytest.approx(2.4952e9)
    assert W.lifetime == pytest.approx(2.085e9)


def test_z_and_w_widths_are_single_precision():
    assert Z.lifetime == 2495200000.0
    w_width = Energy(value=2.085, unit=EnergyUnit.GIGAELECTRON_VOLT).electron_volts
    assert W.lifetime == float(np.float32(w_width))
    assert W.lifetime != w_width
    assert abs(W.lifetime - w_width) <= 128
    for b in (Z, W):
        assert float(np.float32(b.lifetime)) == b.lifetime


def test_only_z_and_w_are_unstable():
    for name, b in BOSONS.items():
        assert b.is_stable() == (name not in ("Z", "W")), name
    stable = stable_bosons()
    expected = [PHOTON, GLUON, GRAVITON, X, Y]
    # == compares type tags only, so check identity
    assert len(stable) == len(expected)
    assert all(a is b for a, b in zip(stable, expected))
    assert math.isinf(PHOTON.lifetime)


def test_vector_predicate():
    assert PHOTON.is_vector()
    assert not GRAVITON.is_vector()
    assert all(b.is_vector() for b in (Z, W, GLUON, X, Y))


def test_observed_predicate_follows_graviton_tag():
    assert not GRAVITON.is_observed()
    # X and Y share the GRAVITON tag, so they are not observed either
    assert not X.is_observed()
    assert not Y.is_observed()
    assert [b.type for b in observed_bosons()] == [
        BosonType.PHOTON, BosonType.NEUTRAL_WEAK, BosonType.NEUTRAL_WEAK, BosonType.CHARGED_WEAK,
    ]


def test_catalog_status_matches_predicate():
    for info in CATALOG:
        assert (info.status == ObservationStatus.OBSERVED) == info.boson.is_observed()


def test_masses_match_derivation():
    for b in (Z, W):
        expected = b.natural_mass.electron_volts * SPEED_OF_LIGHT_SQUARED / ELECTRON_MASS_PLANCK
        assert b.mass.kilograms == pytest.approx(expected, rel=1e-12)
    assert Z.mass.kilograms == pytest.approx(1.62557e-25, rel=1e-5)
    assert W.mass.kilograms == pytest.approx(1.43289e-25, rel=1e-5)


def test_equality_between_catalog_constants():
    assert PHOTON.equals(PHOTON)
    assert PHOTON == PHOTON
    assert Z == W
    assert X == Y == GRAVITON
    assert PHOTON != GLUON


def test_get_boson_is_case_insensitive():
    assert get_boson("photon") is PHOTON
    assert get_boson("GRAVITON") is GRAVITON
    with pytest.raises(KeyError):
        get_boson("Higgs")


def test_get_bosons_by_type():
    assert get_bosons_by_type(BosonType.NEUTRAL_WEAK) == [Z, W]
    assert get_bosons_by_type(BosonType.UNKNOWN) == []


def test_sorted_bosons_groups_type_tags():
    ordered = sorted_bosons()
    types = [b.type for b in ordered]
    assert types == sorted(types)
    assert ordered[1] is Z and ordered[2] is W


def test_validate_catalog_finds_no_errors():
    errors = validate_catalog()
    assert not errors, f"Found catalog errors: {errors}"


def test_status_disagreement_is_not_an_error(monkeypatch):
    odd = BosonInfo(name="Odd", symbol="?", boson=GRAVITON, status=ObservationStatus.OBSERVED)
    monkeypatch.setattr(catalog, "CATALOG", [odd])
    assert validate_catalog() == {}


def test_catalog_bosons_survive_dump_and_validate():
    for name, b in BOSONS.items():
        dumped = b.model_dump()
        assert "mass" not in dumped
        restored = Boson.model_validate(dumped)
        assert restored.model_dump() == dumped, name
        assert restored.mass.kilograms == b.mass.kilograms, name
        assert hash(restored) == hash(b), name
