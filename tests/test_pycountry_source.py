import pycountry
import pytest

from geodata.fetchers.pycountry_source import PycountrySource


def by_code(records, key):
    return {r[key]: r for r in records}


def test_source_language_returns_source_names():
    src = PycountrySource()
    src.set_locale("en")
    countries = by_code(src.get_countries(), "alpha_2")
    assert countries["FR"]["local_name"] == "France"
    assert countries["FR"]["name"] == "France"
    assert len(countries) == len(pycountry.countries)


def test_translated_locale():
    src = PycountrySource()
    src.set_locale("de")
    countries = by_code(src.get_countries(), "alpha_2")
    assert countries["FR"]["local_name"] == "Frankreich"
    assert countries["FR"]["name"] == "France"


def test_regional_locale_falls_back_to_language():
    src = PycountrySource()
    src.set_locale("de_AT")
    countries = by_code(src.get_countries(), "alpha_2")
    assert countries["FR"]["local_name"] == "Frankreich"


def test_locale_without_catalog_has_empty_local_names(tmp_path):
    src = PycountrySource(localedir=str(tmp_path))
    src.set_locale("de")
    records = src.get_countries()
    assert records
    assert all(r["local_name"] == "" for r in records)


def test_strict_mode_fails_without_exact_catalog(tmp_path):
    src = PycountrySource(fallback=False, localedir=str(tmp_path))
    src.set_locale("de")
    with pytest.raises(FileNotFoundError):
        src.get_countries()
    # the source language never needs a catalog
    src.set_locale("en")
    assert src.get_countries()[0]["local_name"]


def test_subdivision_records():
    src = PycountrySource()
    src.set_locale("en")
    subs = by_code(src.get_subdivisions(), "code")
    assert subs["US-CA"]["type"] == "State"
    assert subs["US-CA"]["local_name"] == "California"
    assert len(subs) == len(pycountry.subdivisions)


def test_invalid_locale_identifier():
    src = PycountrySource()
    with pytest.raises(ValueError):
        src.set_locale("")
    with pytest.raises(RuntimeError):
        PycountrySource().get_countries()
