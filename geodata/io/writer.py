import json
import logging
import os
from typing import Any, Dict, List, Mapping

DEFAULT_INDENT = 4


def dumps_sorted(data: Mapping[str, Any], indent: int = DEFAULT_INDENT) -> str:
    """Pretty JSON with sorted keys and unescaped unicode, newline terminated."""
    return json.dumps(data, ensure_ascii=False, indent=indent, sort_keys=True) + "\n"


def write_json(path: str, data: Mapping[str, Any], indent: int = DEFAULT_INDENT) -> str:
    # serialize first; a failure must not truncate an existing file
    payload = dumps_sorted(data, indent=indent)
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(payload)
    return path


def write_countries(path: str, countries: Mapping[str, Mapping[str, str]], indent: int = DEFAULT_INDENT) -> str:
    """Write the country mapping; errors propagate to the caller."""
    return write_json(path, countries, indent=indent)


def write_regions(
    regions_dir: str,
    regions: Mapping[str, Mapping[str, Mapping[str, str]]],
    indent: int = DEFAULT_INDENT,
) -> Dict[str, str]:
    """Write one <CC>.json per country. A failing country is logged and skipped.

    Returns country code -> written path.
    """
    logger = logging.getLogger(__name__)
    os.makedirs(regions_dir, exist_ok=True)
    written: Dict[str, str] = {}
    for cc in sorted(regions):
        country_regions = regions[cc]
        if not country_regions:
            continue
        path = os.path.join(regions_dir, f"{cc}.json")
        try:
            write_json(path, country_regions, indent=indent)
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Error writing regions for country {cc}: {e}")
            continue
        written[cc] = path
        logger.info(f"Generated {path} with {len(country_regions)} regions")
    return written


def list_region_files(regions_dir: str) -> List[str]:
    try:
        return sorted(f for f in os.listdir(regions_dir) if f.endswith(".json"))
    except FileNotFoundError:
        return []
