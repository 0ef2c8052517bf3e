"""
Options validation. Turns stored/raw options into a CleanupConfig that agrees
with the runtime: unknown or unavailable methods fall back to the recommended
one and actions the method cannot perform are switched off.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from tidyoutput.config.cleanup.models import MAX_INDENT_LEVEL, Action, CleanupConfig
from tidyoutput.services.cleanup.registry import get_strategy_descriptor, recommended_strategy

# Old single indent setting; it applied to post content
LEGACY_INDENT_KEY = "indent"

_BOOL = TypeAdapter(bool)
_INT = TypeAdapter(int)

_ACTION_FLAGS: dict[str, Action] = {
    "whole_document": Action.WHOLE_DOCUMENT,
    "repair": Action.REPAIR,
    "reformat": Action.REFORMAT,
}
_INDENT_KEYS = ("indent_content", "indent_comment")


def default_options() -> dict[str, Any]:
    """Default options. The method is the recommended strategy for this runtime."""
    return {
        "method": recommended_strategy(),
        "whole_document": False,
        "repair": True,
        "reformat": False,
        "indent_content": 0,
        "indent_comment": 0,
    }


def migrate_legacy_options(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Copy the legacy indent value into indent_content. Legacy wins over the new key."""
    migrated = dict(raw)
    if migrated.get(LEGACY_INDENT_KEY) is not None:
        migrated["indent_content"] = migrated[LEGACY_INDENT_KEY]
    migrated.pop(LEGACY_INDENT_KEY, None)
    return migrated


def _parse_bool(value: Any) -> bool:
    """Lenient boolean: 'yes', 'on', '1', 'true' are True; anything unparseable is False."""
    if isinstance(value, str):
        value = value.strip().lower()
    try:
        return _BOOL.validate_python(value)
    except ValidationError:
        return False


def _parse_indent(value: Any) -> int | None:
    """Indent level in [0, MAX_INDENT_LEVEL], or None when invalid."""
    try:
        level = _INT.validate_python(value)
    except ValidationError:
        return None
    if level < 0 or level > MAX_INDENT_LEVEL:
        return None
    return level


def validate_options(raw: Mapping[str, Any] | None) -> CleanupConfig:
    """
    Validate raw options into a CleanupConfig. Missing or invalid values keep
    their defaults; unknown keys are ignored. The method is validated first so
    action flags, defaults included, are checked against the method actually in use.
    """
    cleaned = default_options()
    options = migrate_legacy_options(raw or {})

    method = options.get("method")
    if method is not None and get_strategy_descriptor(str(method)) is not None:
        cleaned["method"] = str(method)
    descriptor = get_strategy_descriptor(cleaned["method"])
    supported = descriptor.supports if descriptor is not None else frozenset()

    for key, action in _ACTION_FLAGS.items():
        value = cleaned[key] if options.get(key) is None else _parse_bool(options[key])
        cleaned[key] = value and action in supported

    for key in _INDENT_KEYS:
        if options.get(key) is None:
            continue
        level = _parse_indent(options[key])
        if level is not None:
            cleaned[key] = level

    return CleanupConfig.model_validate(cleaned)
