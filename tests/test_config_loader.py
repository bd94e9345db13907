import json

import pytest

from countryreg.config.settings import ConfigurationError
from countryreg.config_loader import DEFAULT_DATASET, load_countries, load_default_countries
from countryreg.domain.models import CountryRecord

RECORDS = [
    {"name": "Norden", "alpha2": "NA", "alpha3": "NRD", "numeric": "001", "currency": ["NRK"]},
    {"name": "Sunnan", "alpha2": "SU", "alpha3": "SUN", "numeric": "042", "currency": []},
]

YAML_DATASET = """\
countries:
  - name: "Norden"
    alpha2: "NA"
    alpha3: "NRD"
    numeric: "001"
    currency:
      - "NRK"
  - name: "Norge"
    alpha2: "NO"
    alpha3: "NOR"
    numeric: "578"
    currency: []
"""


def test_default_dataset_is_bundled():
    assert DEFAULT_DATASET.exists()

    countries = load_default_countries()
    assert len(countries) == 249
    assert all(isinstance(country, CountryRecord) for country in countries)
    assert load_default_countries() is countries


def test_default_dataset_keeps_codes_as_strings():
    norway = next(country for country in load_default_countries() if country.alpha3 == "NOR")

    assert norway.alpha2 == "NO"
    assert norway.numeric == "578"


def test_load_yaml_mapping(tmp_path):
    path = tmp_path / "countries.yml"
    path.write_text(YAML_DATASET, encoding="utf-8")

    countries = load_countries(path)

    assert [country.alpha2 for country in countries] == ["NA", "NO"]
    assert countries[0].currency == ("NRK",)


def test_load_json_list(tmp_path):
    path = tmp_path / "countries.json"
    path.write_text(json.dumps(RECORDS), encoding="utf-8")

    countries = load_countries(path)

    assert [country.name for country in countries] == ["Norden", "Sunnan"]


def test_load_json_mapping_with_yaml_extension(tmp_path):
    path = tmp_path / "countries.yaml"
    path.write_text(json.dumps({"countries": RECORDS}), encoding="utf-8")

    assert len(load_countries(path)) == 2


def test_empty_file_yields_no_records(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")

    assert load_countries(path) == []


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_countries(tmp_path / "missing.yml")


def test_unsupported_extension(tmp_path):
    path = tmp_path / "countries.csv"
    path.write_text("name,alpha2\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Unsupported"):
        load_countries(path)


def test_invalid_json(tmp_path):
    path = tmp_path / "countries.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid JSON"):
        load_countries(path)


def test_unexpected_document_shape(tmp_path):
    path = tmp_path / "countries.yml"
    path.write_text("name: Norden\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="list of countries"):
        load_countries(path)


def test_record_missing_fields(tmp_path):
    path = tmp_path / "countries.json"
    path.write_text(json.dumps([{"name": "Norden"}]), encoding="utf-8")

    with pytest.raises(ConfigurationError, match="#0"):
        load_countries(path)
