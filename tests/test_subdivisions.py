import pytest

from geodata.processing.countries import AnchorLocaleError
from geodata.processing.subdivisions import (
    aggregate_subdivisions,
    group_by_country,
    regions_by_country,
)


def build(world, make_source, locales, countries=("US", "FR", "DE"), **kwargs):
    src = make_source(
        world["countries"],
        world["subdivisions"],
        world["subdivision_names"],
        failing=kwargs.pop("failing", ()),
    )
    acc, selected = aggregate_subdivisions(locales, "en", src, countries=set(countries), **kwargs)
    return regions_by_country(acc), selected, src


def test_only_selected_types_are_kept(world, make_source):
    regions, selected, _ = build(world, make_source, ["de", "fr"])
    assert set(selected["US"]) == {"State", "District", "Outlying area"}
    assert list(regions["US"]) == ["CA", "DC", "NY", "PR"]
    # Île-de-France is a metropolitan region, not a shipping level in France
    assert "IDF" not in regions["FR"]
    assert list(regions["FR"]) == ["01", "75C"]
    assert selected["DE"] == ("Land",)


def test_names_are_deduplicated_like_countries(world, make_source):
    regions, _, _ = build(world, make_source, ["de", "de_CH", "fr"])
    assert regions["US"]["CA"] == {"en": "California", "de": "Kalifornien", "fr": "Californie"}
    # "New York" in German equals the anchor
    assert regions["US"]["NY"] == {"en": "New York"}
    # Bayern is the anchor name already
    assert regions["DE"]["BY"] == {"en": "Bayern", "fr": "Bavière"}


def test_country_universe_restricts_subdivisions(world, make_source):
    regions, selected, _ = build(world, make_source, ["de"], countries=("US",))
    assert list(regions) == ["US"]
    assert list(selected) == ["US"]


def test_type_selection_uses_anchor_listing_only(world, make_source):
    _, selected, src = build(world, make_source, ["de"])
    assert src.calls[0] == ("en", "subdivisions")
    assert selected == {
        "DE": ("Land",),
        # both FR types are unranked, so listing order decides
        "FR": ("Metropolitan collectivity with special status", "Metropolitan department"),
        "US": ("State", "District", "Outlying area"),
    }


def test_failed_locale_is_skipped(world, make_source):
    failures = []
    regions, _, _ = build(world, make_source, ["de", "fr"], failing=["fr"], failures=failures)
    assert [f.locale for f in failures] == ["fr"]
    assert regions["US"]["CA"] == {"en": "California", "de": "Kalifornien"}


def test_anchor_failure_is_fatal(world, make_source):
    with pytest.raises(AnchorLocaleError):
        build(world, make_source, ["de"], failing=["en"])


def test_country_without_subdivisions_has_no_entry(world, make_source):
    regions, selected, _ = build(world, make_source, ["de"], countries=("US", "FR", "DE", "AD"))
    assert "AD" not in regions
    assert "AD" not in selected


def test_group_by_country_skips_bad_codes():
    records = [
        {"code": "US-CA", "type": "State", "name": "California"},
        {"code": "broken", "type": "State", "name": "?"},
        {"code": "CA-ON", "type": "Province", "name": "Ontario"},
    ]
    grouped = group_by_country(records, {"US"})
    assert list(grouped) == ["US"]
    assert len(grouped["US"]) == 1
