from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Iterator, List, Optional
import logging

from pydantic import BaseModel, Field

from ._utils import time_ms

COUNTRIES = "countries"
SUBDIVISIONS = "subdivisions"


class AbstractTranslationSource(ABC):
    """Abstract translation source. Implementations resolve locale fallback internally.

    Country records are dicts with keys [alpha_2, local_name, name];
    subdivision records are dicts with keys [code, type, local_name, name].
    `local_name` is an empty string when the locale has no translation.
    """

    source: str

    def __init__(self, fallback: bool = True):
        self.fallback = fallback
        self.locale: Optional[str] = None

    @abstractmethod
    def set_locale(self, locale: str) -> None:
        pass

    @abstractmethod
    def get_countries(self) -> List[Dict[str, str]]:
        pass

    @abstractmethod
    def get_subdivisions(self) -> List[Dict[str, str]]:
        pass


class LocaleResult(BaseModel):
    """Outcome of one locale lookup: records on success, a reason on failure."""

    locale: str
    kind: str
    records: list = Field(default_factory=list)
    error: Optional[str] = None
    fetch_log: Dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.error is None


def fetch_locale(source: AbstractTranslationSource, locale: str, kind: str) -> LocaleResult:
    start = time_ms()
    try:
        source.set_locale(locale)
        if kind == COUNTRIES:
            records = source.get_countries()
        elif kind == SUBDIVISIONS:
            records = source.get_subdivisions()
        else:
            raise ValueError(f"unknown record kind {kind!r}")
        error = None
    except Exception as e:
        records = []
        error = f"{type(e).__name__}: {e}"
    fetch_log = {
        "locale": locale,
        "kind": kind,
        "source": getattr(source, "source", None),
        "rows": len(records),
        "response_time_ms": time_ms() - start,
        "fetch_timestamp": datetime.now(timezone.utc).isoformat(),
        "error": error,
    }
    return LocaleResult(locale=locale, kind=kind, records=records, error=error, fetch_log=fetch_log)


def fetch_all(source: AbstractTranslationSource, locales: Iterable[str], kind: str) -> Iterator[LocaleResult]:
    """Lazily look up every locale in order; one failing locale never stops the rest."""
    for locale in locales:
        yield fetch_locale(source, locale, kind)


def successful(results: Iterable[LocaleResult], failures: List[LocaleResult]) -> Iterator[LocaleResult]:
    """Pass through successful results, collecting failed ones into `failures`."""
    logger = logging.getLogger(__name__)
    for r in results:
        if r.ok:
            yield r
            continue
        logger.warning(f"Error processing {r.kind} for locale {r.locale}: {r.error}")
        failures.append(r)
