import warnings
from typing import Dict, Iterable, List, Optional, Tuple

import pytest

from geodata.fetchers.base import AbstractTranslationSource

# Suppress noisy pydantic deprecation warnings (v1-style validators) during tests
warnings.filterwarnings("ignore", category=DeprecationWarning, module="pydantic.*")
warnings.filterwarnings("ignore", category=FutureWarning, module="pydantic.*")
# pandas futurewarnings are benign for our tests
warnings.filterwarnings("ignore", category=FutureWarning, module="pandas.*")


class FakeSource(AbstractTranslationSource):
    """In-memory translation source.

    countries: locale -> {alpha_2 -> localized name}; the `base` locale holds the
    source names. subdivisions: [(code, type, source name)] in listing order;
    subdivision_names: locale -> {code -> localized name}. Locales in `failing`
    raise on lookup. Every locale lists the same records, like the real data.
    """

    source = "fake"

    def __init__(
        self,
        countries: Dict[str, Dict[str, str]],
        subdivisions: Optional[List[Tuple[str, str, str]]] = None,
        subdivision_names: Optional[Dict[str, Dict[str, str]]] = None,
        failing: Iterable[str] = (),
        base: str = "en",
    ):
        super().__init__(fallback=True)
        self.countries = countries
        self.subdivisions = subdivisions or []
        self.subdivision_names = subdivision_names or {}
        self.failing = set(failing)
        self.base = base
        self.calls: List[Tuple[str, str]] = []

    def set_locale(self, locale):
        if locale in self.failing:
            raise LookupError(f"unsupported locale {locale}")
        self.locale = locale

    def get_countries(self):
        self.calls.append((self.locale, "countries"))
        base = self.countries.get(self.base, {})
        table = self.countries.get(self.locale, {})
        codes = list(base) + [c for c in table if c not in base]
        return [
            {"alpha_2": c, "local_name": table.get(c, ""), "name": base.get(c, c)}
            for c in codes
        ]

    def get_subdivisions(self):
        self.calls.append((self.locale, "subdivisions"))
        names = self.subdivision_names.get(self.locale, {})
        if self.locale == self.base:
            names = {code: name for code, _, name in self.subdivisions}
        return [
            {"code": code, "type": type_, "local_name": names.get(code, ""), "name": name}
            for code, type_, name in self.subdivisions
        ]


@pytest.fixture
def make_source():
    return FakeSource


@pytest.fixture
def world():
    """A small two-country world with a handful of translations."""
    countries = {
        "en": {"US": "United States", "FR": "France", "DE": "Germany"},
        "fr": {"US": "États-Unis", "FR": "France", "DE": "Allemagne"},
        "fr_CA": {"US": "États-Unis", "FR": "France", "DE": "Allemagne"},
        "de": {"US": "Vereinigte Staaten", "FR": "Frankreich", "DE": "Deutschland"},
        "de_CH": {"US": "Vereinigte Staaten", "FR": "Frankreich", "DE": "Deutschland"},
    }
    subdivisions = [
        ("US-CA", "State", "California"),
        ("US-NY", "State", "New York"),
        ("US-DC", "District", "District of Columbia"),
        ("US-PR", "Outlying area", "Puerto Rico"),
        ("FR-75C", "Metropolitan collectivity with special status", "Paris"),
        ("FR-IDF", "Metropolitan region", "Île-de-France"),
        ("FR-01", "Metropolitan department", "Ain"),
        ("DE-BY", "Land", "Bayern"),
        ("DE-BE", "Land", "Berlin"),
    ]
    subdivision_names = {
        "de": {"US-CA": "Kalifornien", "US-NY": "New York", "DE-BY": "Bayern"},
        "de_CH": {"US-CA": "Kalifornien"},
        "fr": {"US-CA": "Californie", "FR-IDF": "Île-de-France", "DE-BY": "Bavière"},
    }
    return {
        "countries": countries,
        "subdivisions": subdivisions,
        "subdivision_names": subdivision_names,
    }
