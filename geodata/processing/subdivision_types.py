"""Pick the subdivision type(s) that represent "the region" of an address.

Countries with a curated entry in SHIPPING_TYPES use it as-is (restricted to
types that actually occur). Everything else goes through a count-based
heuristic:

1. drop types that are too general or too specific to be an address region
2. keep every remaining type with at least `min_count` subdivisions
3. if nothing qualifies, take the single most frequent remaining type (or
   the most frequent type overall when step 1 dropped everything); ties go
   to the type seen first in the subdivision list

The selection is returned ordered from general to specific (TYPE_RANKING,
unranked types last), then by first appearance.
"""
import logging
import math
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from .type_tables import GENERAL_TYPES, SHIPPING_TYPES, SPECIFIC_TYPES, TYPE_RANKING

DEFAULT_MIN_COUNT = 3


def count_types(subdivisions: Iterable[Mapping[str, str]]) -> Dict[str, int]:
    """Occurrences per type, keyed in first-seen order."""
    counts: Dict[str, int] = {}
    for s in subdivisions:
        t = s["type"]
        counts[t] = counts.get(t, 0) + 1
    return counts


def type_rank(type_name: str, ranking: Sequence[str] = TYPE_RANKING) -> float:
    """Position in the ranking (higher = more specific); unranked types are infinitely specific."""
    try:
        return float(ranking.index(type_name))
    except ValueError:
        return math.inf


def _ordered(types: Iterable[str], counts: Dict[str, int], ranking: Sequence[str]) -> Tuple[str, ...]:
    first_seen = {t: i for i, t in enumerate(counts)}
    return tuple(sorted(types, key=lambda t: (type_rank(t, ranking), first_seen.get(t, len(first_seen)))))


def select_override(country_code: str, counts: Dict[str, int], allowed: Sequence[str]) -> List[str]:
    logger = logging.getLogger(__name__)
    selected = [t for t in allowed if counts.get(t, 0) > 0]
    ignored = [t for t in counts if t not in allowed]
    if ignored:
        logger.info(f"{country_code}: ignoring subdivision types not used for addressing: {', '.join(ignored)}")
    return selected


def select_heuristic(
    counts: Dict[str, int],
    min_count: int = DEFAULT_MIN_COUNT,
    general: Iterable[str] = GENERAL_TYPES,
    specific: Iterable[str] = SPECIFIC_TYPES,
) -> List[str]:
    excluded = set(general) | set(specific)
    candidates = [t for t in counts if t not in excluded]
    selected = [t for t in candidates if counts[t] >= min_count]
    if selected:
        return selected
    pool = candidates or list(counts)
    if not pool:
        return []
    # max() keeps the first maximal element, i.e. the first-seen type on ties
    return [max(pool, key=lambda t: counts[t])]


def select_types(
    country_code: str,
    subdivisions: Iterable[Mapping[str, str]],
    overrides: Mapping[str, Sequence[str]] = SHIPPING_TYPES,
    ranking: Sequence[str] = TYPE_RANKING,
    min_count: int = DEFAULT_MIN_COUNT,
) -> Tuple[str, ...]:
    """Return the subdivision types to keep for `country_code`."""
    logger = logging.getLogger(__name__)
    counts = count_types(subdivisions)
    if not counts:
        return ()
    if country_code in overrides:
        selected = select_override(country_code, counts, overrides[country_code])
        if not selected:
            logger.warning(f"{country_code}: none of the listed subdivision types occur in the data; no regions kept")
        how = "override"
    else:
        selected = select_heuristic(counts, min_count=min_count)
        how = "heuristic"
    result = _ordered(selected, counts, ranking)
    logger.debug(f"{country_code}: selected {list(result)} by {how} from {counts}")
    return result
