import os
from pathlib import Path

import yaml

_DEFAULT_PATH = Path(__file__).resolve().parent.parent / "policies.yaml"


def _policies_path() -> Path:
    """Read ASSETDESK_POLICIES_PATH at call time (supports env var changes in tests)."""
    return Path(os.getenv("ASSETDESK_POLICIES_PATH", str(_DEFAULT_PATH)))


# Simple dict cache keyed by path to support test env var overrides
_cache: dict[str, dict] = {}


def load_policies() -> dict:
    path = _policies_path()
    cache_key = str(path)
    if cache_key in _cache:
        return _cache[cache_key]

    if not path.exists():
        raise FileNotFoundError(f"No policy file found at {path}")

    with open(path) as f:
        result = yaml.safe_load(f) or {}
    _cache[cache_key] = result
    return result


def get_depreciation_policy() -> dict:
    return load_policies().get("depreciation", {})


def get_procurement_policy() -> dict:
    return load_policies().get("procurement", {})


def get_finance_policy() -> dict:
    return load_policies().get("finance", {})


def get_plans() -> dict:
    return load_policies().get("plans", {})


def get_plan(name: str) -> dict:
    plans = get_plans()
    if name not in plans:
        raise ValueError(f"Unknown subscription plan '{name}'. Valid plans: {sorted(plans)}")
    return plans[name]


def get_roles() -> list[dict]:
    return load_policies().get("roles", [])
