import sys

import pytest
from loguru import logger

from elementary.catalog import validate_catalog
from elementary.core.constants import validate_relations
from elementary.core.logging import LOG_LEVEL_ENV, configure_logging, setup_logfile


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)
    logger.disable("elementary")


def test_configure_logging_reads_env_level(monkeypatch, capsys, restore_logger):
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    configure_logging()
    validate_relations()
    assert "All constant relations validated" in capsys.readouterr().err


def test_configure_logging_default_is_quiet(monkeypatch, capsys, restore_logger):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    configure_logging()
    validate_relations()
    assert "All constant relations validated" not in capsys.readouterr().err


def test_setup_logfile_captures_package_debug(tmp_path, restore_logger):
    path = tmp_path / "elementary.log"
    handler_id = setup_logfile(str(path), level="DEBUG")
    validate_catalog()
    logger.remove(handler_id)

    text = path.read_text()
    assert "Loguru file logging initialized" in text
    assert "Type tag NEUTRAL_WEAK shared by Z, W" in text
