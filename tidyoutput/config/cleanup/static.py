"""Static cleanup profile loader. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from tidyoutput.config.cleanup.models import CleanupConfig
from tidyoutput.config.cleanup.validation import validate_options

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, dict[str, Any]] | None = None
_active_profile: str | None = None


def _load_raw_data() -> dict[str, Any]:
    """Load raw JSON; used to read both profiles and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def load_cleanup_profiles() -> dict[str, dict[str, Any]]:
    """
    Load raw cleanup options per profile from static.json. Kept unvalidated:
    validation depends on which strategies this runtime has.
    """
    global _cached
    if _cached is not None:
        return _cached
    data = _load_raw_data()
    _cached = dict(data.get("profiles", {}))
    return _cached


def get_active_profile_name() -> str:
    """Return the profile name marked as active in static.json. Defaults to 'default' if missing."""
    global _active_profile
    if _active_profile is not None:
        return _active_profile
    data = _load_raw_data()
    _active_profile = data.get("active", "default")
    return _active_profile


def resolve_cleanup_config(profile_name: str, inline_options: dict[str, Any] | None = None) -> CleanupConfig:
    """
    Resolve cleanup config by profile name with optional inline overrides.
    If profile_name is "active", use the profile marked as active in static.json.
    Inline options are merged over the profile before validation.
    Raises ValueError if the profile is missing.
    """
    name = get_active_profile_name() if profile_name == "active" else profile_name
    profile = load_cleanup_profiles().get(name)
    if profile is None:
        raise ValueError(f"Unknown cleanup profile: {name!r}")
    if not inline_options:
        return validate_options(profile)
    return validate_options({**profile, **inline_options})
