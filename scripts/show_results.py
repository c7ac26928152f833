"""Print a short overview of a build: coverage per locale and a sample region file."""
import json
import os
import sys

import pandas as pd

OUT = sys.argv[1] if len(sys.argv) > 1 else "output"
COUNTRY = (sys.argv[2] if len(sys.argv) > 2 else "US").upper()

with open(os.path.join(OUT, "countries.json"), "r", encoding="utf-8") as fh:
    countries = json.load(fh)
print(f"{len(countries)} countries")
print(json.dumps(countries.get(COUNTRY, {}), indent=2, ensure_ascii=False))

report = os.path.join(OUT, "coverage.csv")
if os.path.exists(report):
    df = pd.read_csv(report)
    print('\n--- Coverage by status ---\n')
    print(df.groupby("status").size().to_string())
    print('\n--- Top 15 locales by stored names ---\n')
    df["total"] = df["countries"] + df["regions"]
    print(df.sort_values("total", ascending=False).head(15).to_string(index=False))

region_file = os.path.join(OUT, "regions", f"{COUNTRY}.json")
if os.path.exists(region_file):
    with open(region_file, "r", encoding="utf-8") as fh:
        regions = json.load(fh)
    print(f"\n--- {COUNTRY}: {len(regions)} regions ---\n")
    for code in list(regions)[:10]:
        print(code, regions[code].get("en"))
