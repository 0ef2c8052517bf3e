"""POST /clean: clean one piece of markup. GET /clean/strategies: what this runtime can run."""

from fastapi import APIRouter, HTTPException

from tidyoutput.config.cleanup.static import resolve_cleanup_config
from tidyoutput.config.logging import get_logger
from tidyoutput.config.settings import get_settings
from tidyoutput.controllers.schema.clean import CleanRequest, CleanResponse, StrategiesResponse
from tidyoutput.services.cleanup.cleaner import clean
from tidyoutput.services.cleanup.registry import available_strategies

logger = get_logger(__name__)

router = APIRouter(prefix="/clean", tags=["cleanup"])


@router.post("", response_model=CleanResponse)
def clean_markup(body: CleanRequest) -> CleanResponse:
    """
    Clean body.content with the requested (or configured) profile. Parsing has
    no time bound, so content size is capped by max_content_length.
    """
    settings = get_settings()
    if len(body.content) > settings.max_content_length:
        raise HTTPException(status_code=413, detail="Content too large")

    try:
        config = resolve_cleanup_config(body.profile or settings.cleanup_profile, body.options)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    cleaned = clean(body.content, body.kind, body.whole_document, config)
    logger.info(
        "Content cleaned",
        extra={"method": config.method, "kind": body.kind.value, "length": len(body.content)},
    )
    return CleanResponse(content=cleaned, method=config.method, changed=cleaned != body.content)


@router.get("/strategies", response_model=StrategiesResponse)
def list_strategies() -> StrategiesResponse:
    """Strategies available on this runtime, recommended first, disabled last."""
    return StrategiesResponse(strategies=available_strategies())
