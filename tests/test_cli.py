import json

import yaml
from typer.testing import CliRunner

from elementary import __version__
from elementary.cli.main import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_bosons_list():
    result = runner.invoke(app, ["bosons", "list"])
    assert result.exit_code == 0
    for name in ("Photon", "Gluon", "Graviton"):
        assert name in result.output


def test_bosons_show_json():
    result = runner.invoke(app, ["bosons", "show", "z", "--format", "json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["name"] == "Z"
    assert data["type"] == "NEUTRAL_WEAK"
    assert data["stable"] is False


def test_bosons_show_markdown():
    result = runner.invoke(app, ["bosons", "show", "W", "--format", "md"])
    assert result.exit_code == 0
    assert result.output.startswith("## W")
    assert "NEUTRAL_WEAK" in result.output


def test_bosons_show_unknown_name_exits_1():
    result = runner.invoke(app, ["bosons", "show", "Higgs"])
    assert result.exit_code == 1
    assert "Boson not found" in result.output


def test_constants_show_json():
    result = runner.invoke(app, ["constants", "show", "c", "--format", "json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["value"] == 299_792_458.0


def test_constants_show_unknown_name_exits_1():
    result = runner.invoke(app, ["constants", "show", "G"])
    assert result.exit_code == 1


def test_constants_export(tmp_path):
    path = tmp_path / "out.yaml"
    result = runner.invoke(app, ["constants", "export", str(path)])
    assert result.exit_code == 0
    assert "electron_mass_planck" in yaml.safe_load(path.read_text())["constants"]


def _reject_constant(token):
    raise ValueError(f"non-standard JSON constant {token}")


def test_bosons_show_json_for_stable_boson_is_strict_json():
    result = runner.invoke(app, ["bosons", "show", "photon", "--format", "json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout, parse_constant=_reject_constant)
    assert data["name"] == "Photon"
    assert data["lifetime_s"] is None
    assert data["stable"] is True
