"""Anchor-first name accumulation with redundant-translation suppression.

A NameMap keeps the anchor locale's name for every entity and adds other
locales only when they say something new:

- the name is empty -> skipped
- the name equals the anchor name -> skipped
- the locale is a regional variant (``de_AT``) whose language (``de``) is
  already stored with exactly the same name -> skipped

The two equality filters are independent; a name is stored only if it passes both.
"""
from typing import Any, Dict, Hashable, Iterable, Optional

from ..fetchers._utils import language_prefix


def is_anchor_duplicate(name: str, anchor_name: Optional[str]) -> bool:
    return anchor_name is not None and name == anchor_name


def is_parent_duplicate(name: str, locale: str, name_map: Dict[str, str]) -> bool:
    prefix = language_prefix(locale)
    if prefix == locale:
        return False
    return prefix in name_map and name_map[prefix] == name


def should_store(name: Optional[str], locale: str, anchor: str, name_map: Dict[str, str]) -> bool:
    if not name:
        return False
    anchor_dup = is_anchor_duplicate(name, name_map.get(anchor))
    parent_dup = is_parent_duplicate(name, locale, name_map)
    return not anchor_dup and not parent_dup


class NameAccumulator:
    """Entity key -> {locale -> name}, seeded by the anchor locale.

    The anchor pass defines the universe of keys; later locales can only add
    names to keys that already exist.
    """

    def __init__(self, anchor: str):
        self.anchor = anchor
        self.entries: Dict[Hashable, Dict[str, str]] = {}
        self.stored: Dict[str, int] = {}

    def __len__(self):
        return len(self.entries)

    def __contains__(self, key):
        return key in self.entries

    def seed(self, key: Hashable, local_name: Optional[str], fallback_name: str) -> None:
        name = local_name or fallback_name
        self.entries[key] = {self.anchor: name}
        self.stored[self.anchor] = self.stored.get(self.anchor, 0) + 1

    def offer(self, key: Hashable, locale: str, name: Optional[str]) -> bool:
        """Store `name` under `locale` for `key` unless it is redundant. Returns True if stored."""
        name_map = self.entries.get(key)
        if name_map is None or locale == self.anchor:
            return False
        if not should_store(name, locale, self.anchor, name_map):
            return False
        name_map[locale] = name  # type: ignore[assignment]
        self.stored[locale] = self.stored.get(locale, 0) + 1
        return True

    def keys(self) -> Iterable[Hashable]:
        return self.entries.keys()

    def snapshot(self) -> Dict[Any, Dict[str, str]]:
        """Copy of the entries sorted by key, NameMaps sorted by locale."""
        return {k: dict(sorted(v.items())) for k, v in sorted(self.entries.items(), key=lambda kv: kv[0])}


def stored_counts(acc: NameAccumulator, exclude_anchor: bool = True) -> Dict[str, int]:
    counts = dict(acc.stored)
    if exclude_anchor:
        counts.pop(acc.anchor, None)
    return counts
