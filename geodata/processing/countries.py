from typing import Dict, Iterable, List, Optional
import logging

from ..fetchers.base import (
    AbstractTranslationSource,
    COUNTRIES,
    LocaleResult,
    fetch_all,
    fetch_locale,
    successful,
)
from .dedup import NameAccumulator


class AnchorLocaleError(RuntimeError):
    """The anchor locale produced no data; nothing can be built without it."""


def ordered_locales(locales: Iterable[str], anchor: str) -> List[str]:
    """Non-anchor locales in ascending order, repeats removed."""
    return sorted({loc for loc in locales if loc != anchor})


def require_anchor(result: LocaleResult) -> LocaleResult:
    if not result.ok:
        raise AnchorLocaleError(f"anchor locale {result.locale} failed for {result.kind}: {result.error}")
    if not result.records:
        raise AnchorLocaleError(f"anchor locale {result.locale} returned no {result.kind}")
    return result


def seed_countries(anchor_result: LocaleResult) -> NameAccumulator:
    """First phase: every country the anchor locale knows, with its anchor name."""
    acc = NameAccumulator(anchor_result.locale)
    for rec in anchor_result.records:
        acc.seed(rec["alpha_2"], rec.get("local_name"), rec["name"])
    return acc


def extend_countries(acc: NameAccumulator, results: Iterable[LocaleResult]) -> NameAccumulator:
    """Second phase: add non-redundant names from the remaining locales."""
    logger = logging.getLogger(__name__)
    for result in results:
        added = 0
        for rec in result.records:
            code = rec["alpha_2"]
            if code not in acc:
                logger.debug(f"  {result.locale}: ignoring unknown country {code}")
                continue
            if acc.offer(code, result.locale, rec.get("local_name")):
                added += 1
        logger.info(f"Processing locale: {result.locale} ({added} country names)")
    return acc


def aggregate_countries(
    locales: Iterable[str],
    anchor: str,
    source: AbstractTranslationSource,
    failures: Optional[List[LocaleResult]] = None,
) -> NameAccumulator:
    """Build country code -> {locale -> name}.

    Raises AnchorLocaleError if the anchor lookup fails. Failures of any other
    locale are appended to `failures` and the locale is left out.
    """
    logger = logging.getLogger(__name__)
    failures = failures if failures is not None else []
    anchor_result = require_anchor(fetch_locale(source, anchor, COUNTRIES))
    acc = seed_countries(anchor_result)
    logger.info(f"Anchor locale {anchor}: {len(acc)} countries")
    results = successful(fetch_all(source, ordered_locales(locales, anchor), COUNTRIES), failures)
    return extend_countries(acc, results)


def country_names(acc: NameAccumulator) -> Dict[str, Dict[str, str]]:
    """Country mapping sorted by code, ready for the writer."""
    return acc.snapshot()
