"""Small utilities for fetchers: timing, locale id handling and subdivision codes."""
import time
from typing import List, Optional, Tuple

REGION_SEPARATOR = "_"
VARIANT_SEPARATOR = "@"
CODE_SEPARATOR = "-"

# CLDR script subtags -> gettext modifiers used by the iso-codes catalogs
SCRIPT_MODIFIERS = {
    "Latn": "latin",
    "Cyrl": "cyrillic",
    "Arab": "arabic",
    "Deva": "devanagari",
}

# Chinese catalogs are keyed by territory rather than by script
CHINESE_SCRIPT_TERRITORIES = {"Hans": "CN", "Hant": "TW"}


def time_ms():
    return int(time.time() * 1000)


def language_prefix(locale_id: str) -> str:
    """Return the part of a locale id before the first region separator.

    'de_AT' -> 'de', 'sr_Latn_RS' -> 'sr', 'fr' -> 'fr'
    """
    return locale_id.split(REGION_SEPARATOR, 1)[0]


def split_locale(locale_id: str) -> Tuple[str, Optional[str], Optional[str], Optional[str]]:
    """Split a CLDR or gettext style identifier into (language, script, territory, modifier)."""
    base, _, modifier = locale_id.partition(VARIANT_SEPARATOR)
    parts = base.split(REGION_SEPARATOR)
    language = parts[0]
    script = None
    territory = None
    for p in parts[1:]:
        if len(p) == 4 and p.isalpha():
            script = p.title()
        elif (len(p) == 2 and p.isalpha()) or (len(p) == 3 and p.isdigit()):
            territory = p.upper()
        # other subtags (e.g. POSIX) do not affect catalog lookup
    return language, script, territory, (modifier or None)


def gettext_candidates(locale_id: str) -> List[str]:
    """Map a locale id to gettext catalog names, most specific first.

    'sr_Latn_RS' -> ['sr_RS@latin', 'sr@latin', 'sr_RS', 'sr']
    'zh_Hant'    -> ['zh_TW', 'zh']
    """
    language, script, territory, modifier = split_locale(locale_id)
    if language == "zh" and script in CHINESE_SCRIPT_TERRITORIES and territory is None:
        territory = CHINESE_SCRIPT_TERRITORIES[script]
        script = None
    if modifier is None and script is not None:
        modifier = SCRIPT_MODIFIERS.get(script)

    out: List[str] = []
    if modifier:
        if territory:
            out.append(f"{language}_{territory}@{modifier}")
        out.append(f"{language}@{modifier}")
    if territory:
        out.append(f"{language}_{territory}")
    out.append(language)
    deduped: List[str] = []
    for c in out:
        if c not in deduped:
            deduped.append(c)
    return deduped


def split_subdivision_code(code: str) -> Tuple[str, str]:
    """Split a compound subdivision code 'US-CA' into ('US', 'CA')."""
    country, sep, region = code.partition(CODE_SEPARATOR)
    if not sep or not region:
        raise ValueError(f"not a compound subdivision code: {code!r}")
    return country, region
