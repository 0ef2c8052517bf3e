"""Cleanup configuration models. Read-only; no business logic."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# One indent level is this many spaces. Stored option values depend on both constants.
INDENT_WIDTH = 4
MAX_INDENT_LEVEL = 20

TIDY = "tidy"
DOM = "dom"
DISABLED = "disabled"


class ContentKind(str, Enum):
    """What kind of markup is being cleaned; selects the indent level that applies."""

    CONTENT = "content"
    COMMENT = "comment"
    FULL_DOCUMENT = "full_document"


class Action(str, Enum):
    """Cleanup actions a strategy may support."""

    REPAIR = "repair"
    REFORMAT = "reformat"
    WHOLE_DOCUMENT = "whole_document"


class CleanupConfig(BaseModel):
    """
    Resolved cleanup options. Immutable snapshot passed into every clean call.
    Produced by config/cleanup/validation, which keeps action flags consistent
    with what the selected strategy supports.
    """

    model_config = ConfigDict(frozen=True)

    method: str = Field(default=DISABLED, description="tidy|dom|disabled")
    whole_document: bool = Field(default=False, description="Clean the whole rendered page instead of fragments")
    repair: bool = Field(default=True, description="Fix malformed markup")
    reformat: bool = Field(default=False, description="Re-indent markup for readability")
    indent_content: int = Field(default=0, ge=0, le=MAX_INDENT_LEVEL)
    indent_comment: int = Field(default=0, ge=0, le=MAX_INDENT_LEVEL)


class StrategyDescriptor(BaseModel):
    """A cleanup strategy available on this runtime and the actions it supports."""

    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    supports: frozenset[Action] = Field(default_factory=frozenset)
    recommended: bool = False
