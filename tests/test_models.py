import pytest
from pydantic import ValidationError

from countryreg.domain.enums import LookupKey
from countryreg.domain.models import CountryRecord


@pytest.fixture
def sweden() -> CountryRecord:
    return CountryRecord(name="Sverige", alpha2="SE", alpha3="SWE", numeric="752", currency=["SEK"])


def test_currency_list_becomes_tuple(sweden):
    assert sweden.currency == ("SEK",)


def test_currency_defaults_to_empty():
    country = CountryRecord(name="Nowhere", alpha2="NW", alpha3="NWH", numeric="000")
    assert country.currency == ()


def test_record_is_frozen(sweden):
    with pytest.raises(ValidationError):
        sweden.name = "Sweden"


def test_required_fields():
    with pytest.raises(ValidationError):
        CountryRecord(name="Sverige", alpha2="SE")


def test_mapping_access(sweden):
    assert sweden["alpha2"] == "SE"
    assert sweden[LookupKey.NUMERIC] == "752"
    assert sweden.get("region") is None
    assert sweden.get("region", "Europe") == "Europe"
    with pytest.raises(KeyError):
        sweden["region"]


def test_mapping_access_does_not_expose_methods(sweden):
    with pytest.raises(KeyError):
        sweden["as_dict"]


def test_extra_fields_are_carried():
    country = CountryRecord(
        name="Sverige", alpha2="SE", alpha3="SWE", numeric="752", capital="Stockholm"
    )

    assert country["capital"] == "Stockholm"
    assert country.as_dict()["capital"] == "Stockholm"


def test_as_dict(sweden):
    assert sweden.as_dict() == {
        "name": "Sverige",
        "alpha2": "SE",
        "alpha3": "SWE",
        "numeric": "752",
        "currency": ["SEK"],
    }


def test_str(sweden):
    assert str(sweden) == "Sverige (SE)"


def test_lookup_key_values():
    assert LookupKey.values() == ["alpha2", "alpha3", "numeric", "name"]
    assert LookupKey("numeric") is LookupKey.NUMERIC
