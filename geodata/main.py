import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import ConfigModel, load_config, model_as_dict
from .fetchers.base import AbstractTranslationSource, LocaleResult
from .fetchers.locales import enumerate_locales
from .processing.countries import AnchorLocaleError, aggregate_countries, country_names
from .processing.dedup import stored_counts
from .processing.subdivisions import aggregate_subdivisions, regions_by_country
from .io.writer import write_countries, write_regions
from .io.report import coverage_frame, write_coverage_report
from .io.artifacts import write_manifest


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")


def resolve_locales(cfg: ConfigModel, explicit: Optional[List[str]] = None) -> List[str]:
    lc = cfg.locales
    if explicit:
        locales = sorted(set(explicit) | set(lc.extra))
        logging.getLogger(__name__).info(f"Using {len(locales)} locales from the command line")
        return locales
    return enumerate_locales(
        source=lc.source,
        include_variants=lc.include_variants,
        extra=lc.extra,
        exclude=lc.exclude,
    )


def default_source(cfg: ConfigModel) -> AbstractTranslationSource:
    # pycountry loads its databases on import; keep it out of module import time
    from .fetchers.pycountry_source import PycountrySource

    return PycountrySource(fallback=cfg.locales.fallback)


def build(
    cfg: ConfigModel,
    source: Optional[AbstractTranslationSource] = None,
    locales: Optional[List[str]] = None,
) -> int:
    """Run the whole build. Returns the process exit code."""
    logger = logging.getLogger(__name__)
    anchor = cfg.locales.anchor
    source = source or default_source(cfg)
    if locales is None:
        locales = resolve_locales(cfg)
    logger.info(f"Strategy {cfg.strategy}: anchor {anchor}, {len(locales)} locales, fallback={'on' if cfg.locales.fallback else 'off'}")

    out_dir = cfg.output.dir
    countries_path = os.path.join(out_dir, cfg.output.countries_file)
    regions_dir = os.path.join(out_dir, cfg.output.regions_dir)
    failures: List[LocaleResult] = []

    # Countries
    try:
        country_acc = aggregate_countries(locales, anchor, source, failures)
    except AnchorLocaleError as e:
        logger.error(f"Cannot build base country data: {e}")
        return 1
    countries = country_names(country_acc)
    try:
        write_countries(countries_path, countries, indent=cfg.output.indent)
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Error writing {countries_path}: {e}")
        return 1
    logger.info(f"Generated {countries_path} with {len(countries)} countries")

    # Regions
    logger.info("Generating regions...")
    try:
        region_acc, selected = aggregate_subdivisions(
            locales,
            anchor,
            source,
            countries=set(countries),
            failures=failures,
            min_count=cfg.selection.min_type_count,
        )
    except AnchorLocaleError as e:
        logger.error(f"Cannot build base region data: {e}")
        return 1
    regions = regions_by_country(region_acc)
    try:
        written = write_regions(regions_dir, regions, indent=cfg.output.indent)
    except OSError as e:
        logger.error(f"Cannot create region directory {regions_dir}: {e}")
        written = {}

    outputs = {"countries": countries_path}
    outputs.update({f"regions/{cc}": p for cc, p in written.items()})

    if cfg.output.coverage_report:
        report_path = os.path.join(out_dir, cfg.output.coverage_report)
        try:
            df = coverage_frame(
                locales,
                stored_counts(country_acc, exclude_anchor=False),
                stored_counts(region_acc, exclude_anchor=False),
                failures,
                anchor=anchor,
            )
            write_coverage_report(report_path, df)
            logger.info(f"Wrote coverage report to {report_path}")
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to write coverage report: {e}")

    if cfg.output.manifest:
        try:
            manifest = {
                "strategy": cfg.strategy,
                "anchor": anchor,
                "config_snapshot": model_as_dict(cfg),
                "locales": list(locales),
                "n_countries": len(countries),
                "n_region_files": len(written),
                "failed_locales": [f.fetch_log for f in failures],
                "selected_types": {cc: list(types) for cc, types in selected.items()},
            }
            mpath = write_manifest(manifest, outputs=outputs, artifact_dir=cfg.output.artifact_dir)
            logger.info(f"Wrote manifest to {mpath}")
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Failed to write manifest: {e}")

    if failures:
        logger.warning(f"{len(failures)} locale lookups failed: {', '.join(sorted({f.locale for f in failures}))}")
    logger.info(f"Generated {countries_path} with {len(countries)} countries and region files for {len(written)} countries")
    return 0


def main(cli_args=None, source: Optional[AbstractTranslationSource] = None) -> int:
    parser = argparse.ArgumentParser(description="Build localized country and region name datasets.")
    parser.add_argument("--config", "-c", default=None)
    parser.add_argument(
        "--strategy",
        "-s",
        default=None,
        help="Locale strategy: catalog, translations or strict (overrides config)",
    )
    parser.add_argument("--anchor", default=None, help="Anchor locale (overrides strategy)")
    parser.add_argument("--output", "-o", default=None, help="Output directory")
    parser.add_argument(
        "--locales",
        "-L",
        default=None,
        help="Optional comma-separated list of locales to process instead of enumerating them",
    )
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(cli_args)
    setup_logging(args.debug)
    try:
        cfg = load_config(args.config, strategy=args.strategy)
    except ValueError as e:
        # pydantic's ValidationError is a ValueError
        logging.getLogger(__name__).error(f"Invalid configuration: {e}")
        return 2
    if args.anchor:
        cfg.locales.anchor = args.anchor.strip()
    if args.output:
        cfg.output.dir = args.output
    locales = None
    if args.locales:
        locales = [loc.strip() for loc in args.locales.split(",") if loc.strip()]
        locales = resolve_locales(cfg, locales)
    return build(cfg, source=source, locales=locales)


if __name__ == "__main__":
    sys.exit(main())
