"""Translation source backed by pycountry's ISO 3166 data and its gettext catalogs.

pycountry ships the iso-codes JSON databases together with compiled gettext
catalogs (``<LOCALES_DIR>/<lang>/LC_MESSAGES/iso3166-1.mo`` for countries and
``iso3166-2.mo`` for subdivisions). The source names are English, so the
English locale never needs a catalog.
"""
import gettext
import logging
import os
from typing import Dict, List, Optional

import pycountry  # type: ignore[import]

from .base import AbstractTranslationSource
from ._utils import gettext_candidates, split_locale

COUNTRY_DOMAIN = "iso3166-1"
SUBDIVISION_DOMAIN = "iso3166-2"
SOURCE_LANGUAGE = "en"


def catalog_path(localedir: str, name: str, domain: str) -> str:
    return os.path.join(localedir, name, "LC_MESSAGES", f"{domain}.mo")


class PycountrySource(AbstractTranslationSource):
    source = "pycountry"

    def __init__(self, fallback: bool = True, localedir: Optional[str] = None):
        super().__init__(fallback)
        self.localedir = localedir or pycountry.LOCALES_DIR
        self._active: Dict[str, Optional[gettext.NullTranslations]] = {}
        # catalogs are shared by every locale that resolves to them
        self._catalogs: Dict[str, gettext.GNUTranslations] = {}

    def set_locale(self, locale: str) -> None:
        language = split_locale(locale)[0]
        if not language or not language.isalpha():
            raise ValueError(f"invalid locale identifier {locale!r}")
        self.locale = locale
        self._active = {}

    def is_source_language(self) -> bool:
        return self.locale == SOURCE_LANGUAGE

    def _open_catalog(self, path: str) -> gettext.GNUTranslations:
        if path not in self._catalogs:
            with open(path, "rb") as fh:
                self._catalogs[path] = gettext.GNUTranslations(fh)
        return self._catalogs[path]

    def _load(self, domain: str) -> Optional[gettext.NullTranslations]:
        logger = logging.getLogger(__name__)
        if self.locale is None:
            raise RuntimeError("set_locale() must be called before reading records")
        names = gettext_candidates(self.locale) if self.fallback else [self.locale]
        for name in names:
            path = catalog_path(self.localedir, name, domain)
            if os.path.exists(path):
                if name != self.locale:
                    logger.debug(f"{domain}: locale {self.locale} falls back to catalog {name}")
                return self._open_catalog(path)
        if self.fallback or self.is_source_language():
            return None
        raise FileNotFoundError(f"no {domain} catalog for locale {self.locale}")

    def _translator(self, domain: str):
        if domain not in self._active:
            self._active[domain] = self._load(domain)
        catalog = self._active[domain]
        if catalog is not None:
            return catalog.gettext
        if self.is_source_language():
            return lambda name: name
        return lambda name: ""

    def get_countries(self) -> List[Dict[str, str]]:
        tr = self._translator(COUNTRY_DOMAIN)
        return [
            {"alpha_2": c.alpha_2, "local_name": tr(c.name), "name": c.name}
            for c in pycountry.countries
        ]

    def get_subdivisions(self) -> List[Dict[str, str]]:
        tr = self._translator(SUBDIVISION_DOMAIN)
        return [
            {"code": s.code, "type": s.type, "local_name": tr(s.name), "name": s.name}
            for s in pycountry.subdivisions
        ]
