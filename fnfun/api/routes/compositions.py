"""Composition Routes — square/increment composed in either order, and map fusion.

Invariants:
    - order="compose"  → square(increment(value))
    - order="and_then" → increment(square(value))
    - POST /api/v1/compositions/fused-map applies increment then square in one pass
"""

import logging

from fastapi import APIRouter

from fnfun.core.examples import increment, square
from fnfun.core.functions import and_then, compose, fused_map
from fnfun.schemas.examples import (
    CompositionRequest, CompositionResponse, FusedMapRequest, FusedMapResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/compositions", tags=["compositions"])

_COMPOSITIONS = {
    "compose": compose(square, increment),
    "and_then": and_then(square, increment),
}


@router.post("", response_model=CompositionResponse)
async def apply_composition(body: CompositionRequest):
    """Apply square and increment combined in the requested order."""
    result = _COMPOSITIONS[body.order](body.value)
    logger.info(
        f"Applied {body.order} to {body.value}", extra={"order": body.order},
    )
    return CompositionResponse(order=body.order, value=body.value, result=result)


@router.post("/fused-map", response_model=FusedMapResponse)
async def apply_fused_map(body: FusedMapRequest):
    """Increment then square every number in one fused pass."""
    return FusedMapResponse(
        numbers=body.numbers,
        results=fused_map(body.numbers, increment, square),
    )
