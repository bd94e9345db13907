import logging

import pytest

from countryreg.config.countries import CountryRegistry
from countryreg.domain.models import CountryRecord


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep tests away from real .env files and COUNTRYREG_* settings"""
    for variable in ("ENVIRONMENT", "COUNTRYREG_DATASET", "COUNTRYREG_LOG_LEVEL", "COUNTRYREG_LOG_FILE"):
        monkeypatch.delenv(variable, raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / "pyproject.toml").write_text("")
    yield tmp_path


@pytest.fixture(autouse=True)
def restore_root_logger():
    """CLI commands reconfigure root logging; undo it after each test"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def registry() -> CountryRegistry:
    """Registry over the built-in dataset"""
    return CountryRegistry()


@pytest.fixture
def sample_countries() -> list[CountryRecord]:
    return [
        CountryRecord(name="Norden", alpha2="NA", alpha3="NRD", numeric="001", currency=["NRK"]),
        CountryRecord(name="Sunnan", alpha2="SU", alpha3="SUN", numeric="042", currency=[]),
        CountryRecord(name="Österland", alpha2="OS", alpha3="OST", numeric="999", currency=["EUR", "SEK"]),
    ]


@pytest.fixture
def custom_registry(sample_countries) -> CountryRegistry:
    return CountryRegistry(sample_countries)
