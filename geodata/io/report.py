from typing import Dict, Iterable, List, Mapping, Optional
import os

import pandas as pd

from ..fetchers.base import LocaleResult

REPORT_COLUMNS = ["locale", "status", "countries", "regions", "error"]


def coverage_frame(
    locales: Iterable[str],
    country_counts: Mapping[str, int],
    region_counts: Mapping[str, int],
    failures: Iterable[LocaleResult],
    anchor: Optional[str] = None,
) -> pd.DataFrame:
    """One row per locale: how many names it contributed, or why it failed.

    The anchor row counts every entity since it seeds all NameMaps.
    """
    errors: Dict[str, List[str]] = {}
    for f in failures:
        errors.setdefault(f.locale, []).append(f"{f.kind}: {f.error}")
    all_locales = set(locales) | set(errors)
    if anchor:
        all_locales.add(anchor)
    rows = []
    for loc in sorted(all_locales):
        if loc in errors:
            status = "failed"
        elif loc == anchor:
            status = "anchor"
        elif country_counts.get(loc, 0) or region_counts.get(loc, 0):
            status = "ok"
        else:
            status = "redundant"
        rows.append(
            {
                "locale": loc,
                "status": status,
                "countries": int(country_counts.get(loc, 0)),
                "regions": int(region_counts.get(loc, 0)),
                "error": "; ".join(errors.get(loc, [])) or None,
            }
        )
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def write_coverage_report(path: str, df: pd.DataFrame) -> str:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    df.to_csv(path, index=False)
    return path
