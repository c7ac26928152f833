import json
import os
import sys
import hashlib
from datetime import datetime, timezone
from typing import Any, Dict, Optional

ARTIFACT_DIR = "data/_artifacts"

# distributions whose versions decide the generated data
DATA_PACKAGES = ("pycountry", "babel")


def ensure_artifact_dir(artifact_dir: str = ARTIFACT_DIR):
    os.makedirs(artifact_dir, exist_ok=True)


def sha256_of_bytes(b: bytes) -> str:
    h = hashlib.sha256()
    h.update(b)
    return h.hexdigest()


def sha256_of_file(path: str) -> Optional[str]:
    try:
        h = hashlib.sha256()
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(8192), b""):
                h.update(chunk)
        return h.hexdigest()
    except OSError:
        return None


def outputs_digest(out_hashes: Dict[str, Dict[str, Any]]) -> str:
    """Single hash over all output hashes; equal digests mean byte-identical outputs."""
    canonical = json.dumps(
        {k: v.get("sha256") for k, v in out_hashes.items()},
        sort_keys=True,
        separators=(",", ":"),
    )
    return sha256_of_bytes(canonical.encode("utf-8"))


def package_versions() -> Dict[str, Optional[str]]:
    from importlib import metadata

    res: Dict[str, Optional[str]] = {}
    for name in DATA_PACKAGES:
        try:
            res[name] = metadata.version(name)
        except metadata.PackageNotFoundError:
            res[name] = None
    return res


def environment_manifest() -> Dict[str, Any]:
    import platform

    return {
        "python_version": platform.python_version(),
        "platform": platform.platform(),
        "packages": package_versions(),
        "python_executable": sys.executable if hasattr(sys, "executable") else None,
        "cwd": os.getcwd(),
    }


def write_manifest(
    manifest: Dict[str, Any],
    prefix: str = "manifest",
    outputs: Optional[Dict[str, str]] = None,
    artifact_dir: str = ARTIFACT_DIR,
) -> str:
    """Write a build manifest JSON augmented with environment info and output hashes.

    Arguments:
      manifest: base manifest dict (will not be mutated)
      prefix: filename prefix
      outputs: optional mapping of output logical name -> file path to hash
      artifact_dir: directory the manifest is written to

    Returns path to manifest file.
    """
    ensure_artifact_dir(artifact_dir)
    m = dict(manifest)
    m.setdefault("run_timestamp_utc", datetime.now(timezone.utc).isoformat())
    m["environment"] = environment_manifest()

    out_hashes = {}
    for k, p in sorted((outputs or {}).items()):
        out_hashes[k] = {"path": p, "sha256": sha256_of_file(p)}
    m["outputs"] = out_hashes
    m["outputs_digest"] = outputs_digest(out_hashes)

    ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
    path = os.path.join(artifact_dir, f"{prefix}_{ts}.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(m, f, ensure_ascii=False, indent=2, default=str)
    return path
