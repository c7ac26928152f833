from typing import Collection, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
import logging

from ..fetchers._utils import split_subdivision_code
from ..fetchers.base import (
    AbstractTranslationSource,
    SUBDIVISIONS,
    LocaleResult,
    fetch_all,
    fetch_locale,
    successful,
)
from .countries import require_anchor, ordered_locales
from .dedup import NameAccumulator
from .subdivision_types import DEFAULT_MIN_COUNT, select_types
from .type_tables import SHIPPING_TYPES


def group_by_country(
    records: Iterable[Mapping[str, str]], countries: Collection[str]
) -> Dict[str, List[Mapping[str, str]]]:
    """Group subdivision records by country code, keeping list order.

    Records of countries outside `countries` and malformed codes are dropped.
    """
    logger = logging.getLogger(__name__)
    grouped: Dict[str, List[Mapping[str, str]]] = {}
    for rec in records:
        try:
            cc, _ = split_subdivision_code(rec["code"])
        except ValueError as e:
            logger.debug(f"Skipping subdivision: {e}")
            continue
        if cc not in countries:
            continue
        grouped.setdefault(cc, []).append(rec)
    return grouped


def seed_subdivisions(
    anchor_result: LocaleResult,
    countries: Collection[str],
    overrides: Mapping[str, Sequence[str]] = SHIPPING_TYPES,
    min_count: int = DEFAULT_MIN_COUNT,
) -> Tuple[NameAccumulator, Dict[str, Tuple[str, ...]]]:
    """First phase: choose types per country from the anchor listing and seed their names.

    Returns the accumulator keyed by (country code, region code) and the
    selected types per country.
    """
    acc = NameAccumulator(anchor_result.locale)
    selected: Dict[str, Tuple[str, ...]] = {}
    grouped = group_by_country(anchor_result.records, countries)
    for cc in sorted(grouped):
        types = select_types(cc, grouped[cc], overrides=overrides, min_count=min_count)
        if not types:
            continue
        selected[cc] = types
        for rec in grouped[cc]:
            if rec["type"] not in types:
                continue
            _, region = split_subdivision_code(rec["code"])
            acc.seed((cc, region), rec.get("local_name"), rec["name"])
    return acc, selected


def extend_subdivisions(acc: NameAccumulator, results: Iterable[LocaleResult]) -> NameAccumulator:
    """Second phase: add non-redundant names; only subdivisions seeded by the anchor are considered."""
    logger = logging.getLogger(__name__)
    for result in results:
        added = 0
        for rec in result.records:
            try:
                key = split_subdivision_code(rec["code"])
            except ValueError:
                continue
            if key not in acc:
                continue
            if acc.offer(key, result.locale, rec.get("local_name")):
                added += 1
        logger.info(f"Processing subdivisions for locale: {result.locale} ({added} region names)")
    return acc


def aggregate_subdivisions(
    locales: Iterable[str],
    anchor: str,
    source: AbstractTranslationSource,
    countries: Collection[str],
    failures: Optional[List[LocaleResult]] = None,
    overrides: Mapping[str, Sequence[str]] = SHIPPING_TYPES,
    min_count: int = DEFAULT_MIN_COUNT,
) -> Tuple[NameAccumulator, Dict[str, Tuple[str, ...]]]:
    """Build (country code, region code) -> {locale -> name} for the selected types.

    `countries` is the country universe established by the country pass.
    Raises AnchorLocaleError if the anchor lookup fails.
    """
    logger = logging.getLogger(__name__)
    failures = failures if failures is not None else []
    anchor_result = require_anchor(fetch_locale(source, anchor, SUBDIVISIONS))
    acc, selected = seed_subdivisions(anchor_result, countries, overrides=overrides, min_count=min_count)
    logger.info(f"Anchor locale {anchor}: {len(acc)} regions in {len(selected)} countries")
    results = successful(fetch_all(source, ordered_locales(locales, anchor), SUBDIVISIONS), failures)
    return extend_subdivisions(acc, results), selected


def regions_by_country(acc: NameAccumulator) -> Dict[str, Dict[str, Dict[str, str]]]:
    """Nest the (country, region) keyed snapshot as country -> region -> NameMap, all sorted."""
    out: Dict[str, Dict[str, Dict[str, str]]] = {}
    for (cc, region), names in acc.snapshot().items():
        out.setdefault(cc, {})[region] = names
    return out
