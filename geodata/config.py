import copy
import yaml  # type: ignore[import]
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, ValidationError, validator


# Compatibility helper: safely convert Pydantic models to plain dicts
# across pydantic v1 and v2.
def model_as_dict(obj):
    if isinstance(obj, BaseModel):
        if hasattr(obj, "model_dump") and callable(getattr(obj, "model_dump")):
            return obj.model_dump()
        return obj.dict()
    return obj


class LocaleConfig(BaseModel):
    anchor: str = "en"
    # "catalog": CLDR locales (+ script variants), "translations": catalog directories only
    source: str = "catalog"
    include_variants: bool = True
    fallback: bool = True
    extra: List[str] = Field(default_factory=list)
    exclude: List[str] = Field(default_factory=lambda: ["root"])

    @validator("anchor")
    def check_anchor(cls, v):
        v = (v or "").strip()
        if not v:
            raise ValueError("anchor locale must not be empty")
        return v

    @validator("source")
    def check_source(cls, v):
        if v not in ("catalog", "translations"):
            raise ValueError("source must be 'catalog' or 'translations'")
        return v


class SelectionConfig(BaseModel):
    min_type_count: int = Field(3, ge=1)


class OutputConfig(BaseModel):
    dir: str = "./output"
    countries_file: str = "countries.json"
    regions_dir: str = "regions"
    indent: int = Field(4, ge=0, le=8)
    coverage_report: Optional[str] = "coverage.csv"
    manifest: bool = True
    artifact_dir: str = "data/_artifacts"


class ConfigModel(BaseModel):
    strategy: str = "catalog"
    locales: LocaleConfig = Field(default_factory=LocaleConfig)
    selection: SelectionConfig = Field(default_factory=SelectionConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @validator("strategy")
    def check_strategy(cls, v):
        if v not in STRATEGIES:
            raise ValueError(f"strategy must be one of {', '.join(sorted(STRATEGIES))}")
        return v


# The three base-locale/fallback strategies. Each entry overrides `locales`.
STRATEGIES: Dict[str, Dict[str, Any]] = {
    "catalog": {"anchor": "en", "source": "catalog", "include_variants": True, "fallback": True},
    "translations": {"anchor": "en", "source": "translations", "fallback": True},
    "strict": {"anchor": "en", "source": "catalog", "include_variants": True, "fallback": False},
}


DEFAULT_CONFIG = {
    "strategy": "catalog",
    "locales": dict(STRATEGIES["catalog"], extra=[], exclude=["root"]),
    "selection": {"min_type_count": 3},
    "output": {
        "dir": "./output",
        "countries_file": "countries.json",
        "regions_dir": "regions",
        "indent": 4,
        "coverage_report": "coverage.csv",
        "manifest": True,
        "artifact_dir": "data/_artifacts",
    },
}


def apply_strategy(cfg: Dict[str, Any], strategy: str) -> Dict[str, Any]:
    """Return a copy of `cfg` with the strategy's locale settings applied."""
    if strategy not in STRATEGIES:
        raise ValueError(f"unknown strategy {strategy!r}; choose from {', '.join(sorted(STRATEGIES))}")
    out = copy.deepcopy(cfg)
    out["strategy"] = strategy
    out.setdefault("locales", {})
    out["locales"].update(STRATEGIES[strategy])
    return out


def load_config(path: Optional[str] = None, strategy: Optional[str] = None) -> ConfigModel:
    if path:
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    else:
        cfg = copy.deepcopy(DEFAULT_CONFIG)
    if strategy:
        cfg = apply_strategy(cfg, strategy)
    try:
        model = ConfigModel(**cfg)
    except ValidationError as e:
        print("Config validation error:")
        print(e.json())
        raise
    return model
