"""Locale enumeration.

Two catalogs are available: Babel's CLDR locale list (what the system knows how
to name) and the directory of translation catalogs shipped with pycountry. The
latter also contributes script-variant identifiers such as ``sr@latin`` that CLDR
spells differently.
"""
import logging
import os
from typing import Iterable, List, Optional

from babel import localedata  # type: ignore[import]

from ._utils import VARIANT_SEPARATOR

CATALOG = "catalog"
TRANSLATIONS = "translations"


def catalog_locales() -> List[str]:
    return list(localedata.locale_identifiers())


def translation_locales(localedir: Optional[str] = None) -> List[str]:
    """Locale directory names found in the translation data directory."""
    if localedir is None:
        import pycountry  # type: ignore[import]

        localedir = pycountry.LOCALES_DIR
    try:
        names = os.listdir(localedir)
    except FileNotFoundError:
        return []
    return [n for n in names if os.path.isdir(os.path.join(localedir, n, "LC_MESSAGES"))]


def variant_locales(localedir: Optional[str] = None, known: Iterable[str] = ()) -> List[str]:
    """Script-variant identifiers (``xx@variant``) not already present in `known`."""
    known_set = set(known)
    return [
        n
        for n in translation_locales(localedir)
        if VARIANT_SEPARATOR in n and n not in known_set
    ]


def enumerate_locales(
    source: str = CATALOG,
    include_variants: bool = True,
    extra: Iterable[str] = (),
    exclude: Iterable[str] = (),
    localedir: Optional[str] = None,
) -> List[str]:
    """Return the sorted, de-duplicated list of locale ids to process."""
    logger = logging.getLogger(__name__)
    if source == CATALOG:
        locales = catalog_locales()
        logger.info(f"Found {len(locales)} locales in the CLDR catalog")
        if include_variants:
            variants = variant_locales(localedir, known=locales)
            if variants:
                logger.info(f"Adding {len(variants)} script-variant locales: {', '.join(sorted(variants))}")
            locales.extend(variants)
    elif source == TRANSLATIONS:
        locales = translation_locales(localedir)
        logger.info(f"Found {len(locales)} locales in the translation data directory")
    else:
        raise ValueError(f"unknown locale source {source!r}")
    excluded = set(exclude)
    return sorted({loc for loc in list(locales) + list(extra) if loc and loc not in excluded})
