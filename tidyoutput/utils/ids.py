"""Id generation for markup wrapping. Unique per call."""

import uuid


def generate_uuid_prefix(prefix: str) -> str:
    """Generate a unique id with prefix, e.g. tidy_<uuid>."""
    return f"{prefix}_{uuid.uuid4().hex[:24]}"


def generate_wrapper_id() -> str:
    """Generate a unique element id used to find a wrapped fragment after parsing."""
    return generate_uuid_prefix("tidy")
