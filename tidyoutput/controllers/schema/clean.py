"""Request/response schemas for the /clean routes."""

from typing import Any

from pydantic import BaseModel, Field

from tidyoutput.config.cleanup.models import ContentKind, StrategyDescriptor


class CleanRequest(BaseModel):
    """POST /clean request body. Options come from a profile in static.json, optionally overridden inline."""

    content: str = Field(..., description="Markup to clean")
    kind: ContentKind = Field(default=ContentKind.CONTENT, description="content|comment|full_document")
    whole_document: bool = Field(default=False, description="content is a complete page")
    profile: str | None = Field(default=None, description="Cleanup profile; defaults to the configured one")
    options: dict[str, Any] | None = Field(default=None, description="Raw option overrides, validated like stored options")


class CleanResponse(BaseModel):
    """POST /clean response body."""

    content: str
    method: str = Field(..., description="Strategy that was configured for this call")
    changed: bool


class StrategiesResponse(BaseModel):
    """GET /clean/strategies response body."""

    strategies: list[StrategyDescriptor] = Field(default_factory=list)
