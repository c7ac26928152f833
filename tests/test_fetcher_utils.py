import pytest

from geodata.fetchers._utils import (
    gettext_candidates,
    language_prefix,
    split_locale,
    split_subdivision_code,
)
from geodata.fetchers.base import COUNTRIES, fetch_locale, successful


def test_language_prefix():
    assert language_prefix("de_AT") == "de"
    assert language_prefix("sr_Latn_RS") == "sr"
    assert language_prefix("fr") == "fr"
    assert language_prefix("sr@latin") == "sr@latin"


def test_split_locale():
    assert split_locale("zh_Hant_TW") == ("zh", "Hant", "TW", None)
    assert split_locale("es_419") == ("es", None, "419", None)
    assert split_locale("sr@latin") == ("sr", None, None, "latin")
    assert split_locale("en_US_POSIX") == ("en", None, "US", None)


@pytest.mark.parametrize(
    "locale,expected",
    [
        ("de", ["de"]),
        ("de_AT", ["de_AT", "de"]),
        ("sr_Latn_RS", ["sr_RS@latin", "sr@latin", "sr_RS", "sr"]),
        ("sr@latin", ["sr@latin", "sr"]),
        ("zh_Hant", ["zh_TW", "zh"]),
        ("zh_Hans_CN", ["zh_CN", "zh"]),
        ("uz_Cyrl", ["uz@cyrillic", "uz"]),
    ],
)
def test_gettext_candidates(locale, expected):
    assert gettext_candidates(locale) == expected


def test_split_subdivision_code():
    assert split_subdivision_code("US-CA") == ("US", "CA")
    assert split_subdivision_code("GB-ENG") == ("GB", "ENG")
    with pytest.raises(ValueError):
        split_subdivision_code("USCA")
    with pytest.raises(ValueError):
        split_subdivision_code("US-")


def test_fetch_locale_wraps_errors(make_source):
    src = make_source({"en": {"US": "United States"}}, failing=["xx"])
    ok = fetch_locale(src, "en", COUNTRIES)
    assert ok.ok and ok.fetch_log["rows"] == 1
    bad = fetch_locale(src, "xx", COUNTRIES)
    assert not bad.ok
    assert bad.records == []
    assert bad.fetch_log["error"].startswith("LookupError")

    failures = []
    passed = list(successful([ok, bad], failures))
    assert passed == [ok]
    assert failures == [bad]


def test_fetch_locale_rejects_unknown_kind(make_source):
    src = make_source({"en": {"US": "United States"}})
    res = fetch_locale(src, "en", "planets")
    assert not res.ok
    assert "planets" in res.error
