"""Build the datasets once per locale strategy.

Each strategy writes into its own directory under output/ (output/catalog,
output/translations, output/strict) so the results can be compared side by
side. A strategy that fails does not stop the others.
"""
import os
import sys
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from geodata.config import STRATEGIES
from geodata.main import main
from geodata.io.writer import list_region_files

OUT_DIR = os.path.join(ROOT, "output")


def run_all(extra_args=None):
    results = {}
    for name in sorted(STRATEGIES):
        target = os.path.join(OUT_DIR, name)
        print(f"Running strategy {name} into {target}...")
        try:
            code = main(["--strategy", name, "--output", target] + list(extra_args or []))
        except Exception as e:
            print(f"Strategy {name} failed: {e}")
            code = 1
        results[name] = code
        n_regions = len(list_region_files(os.path.join(target, "regions")))
        print(f" -> exit code {code}, {n_regions} region files")
    return results


if __name__ == "__main__":
    res = run_all(sys.argv[1:])
    sys.exit(1 if any(res.values()) else 0)
