import os
import json

ART = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "data", "_artifacts")


def latest_manifest(artifact_dir=ART):
    try:
        files = sorted(
            [os.path.join(artifact_dir, f) for f in os.listdir(artifact_dir) if f.endswith(".json")]
        )
    except FileNotFoundError:
        files = []
    if not files:
        print("No manifests found")
        return None
    path = files[-1]
    print("Latest manifest:", path)
    with open(path, encoding="utf-8") as fh:
        j = json.load(fh)
    print("Strategy:", j.get("strategy"), "anchor:", j.get("anchor"))
    print("Locales:", len(j.get("locales", [])))
    print("Countries:", j.get("n_countries"), "region files:", j.get("n_region_files"))
    failed = j.get("failed_locales", [])
    print("Failed locale lookups:", len(failed))
    for f in failed[:10]:
        print(f"  {f.get('locale')} ({f.get('kind')}): {f.get('error')}")
    print("Outputs digest:", j.get("outputs_digest"))
    print("Versions:", j.get("environment", {}).get("packages"))
    return j


if __name__ == "__main__":
    latest_manifest()
