"""URL Routes — base_http_url applied directly and partially applied.

Invariants:
    - GET /api/v1/urls/base applies base_http_url to both query params
    - GET /api/v1/urls/localhost/{port} applies a function with host pre-bound
    - Port outside 1-65535 → 400 validation envelope (never reaches core)
"""

import logging

from fastapi import APIRouter, Path, Query

from fnfun.core.examples import base_http_url
from fnfun.core.functions import partial_first
from fnfun.schemas.examples import BaseUrlResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/urls", tags=["urls"])

_localhost_url = partial_first(base_http_url, "localhost")


@router.get("/base", response_model=BaseUrlResponse)
async def get_base_url(
    host: str = Query(min_length=1, max_length=253),
    port: int = Query(ge=1, le=65535),
):
    """Apply the two-argument function to both arguments."""
    url = base_http_url(host=host, port=port)
    logger.debug("Built base url", extra={"function_name": "base_http_url"})
    return BaseUrlResponse(host=host, port=port, url=url)


@router.get("/localhost/{port}", response_model=BaseUrlResponse)
async def get_localhost_url(port: int = Path(ge=1, le=65535)):
    """Apply the partially applied function to the remaining argument."""
    return BaseUrlResponse(host="localhost", port=port, url=_localhost_url(port))
