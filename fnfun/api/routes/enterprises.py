"""Enterprise Routes — client code of the functional dependency-injection example.

Invariants:
    - The route never sees host/port: it receives an already-configured lookup
    - Lookup miss → ResourceNotFoundError (404 via global handler)

Design Decisions:
    - The configured lookup is wired once in main.lifespan and stored on
      app.state; get_enterprise_lookup is the only accessor, so tests can
      swap it through app.dependency_overrides
"""

import logging
from typing import Callable

from fastapi import APIRouter, Depends, Request

from fnfun.core.errors import ResourceNotFoundError
from fnfun.core.multiple_argument_lists import Enterprise
from fnfun.schemas.examples import EnterpriseResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/enterprises", tags=["enterprises"])

EnterpriseLookup = Callable[[str], Enterprise | None]


def get_enterprise_lookup(request: Request) -> EnterpriseLookup:
    return request.app.state.enterprise_lookup


@router.get("/{ern}", response_model=EnterpriseResponse)
async def get_enterprise(
    ern: str,
    lookup: EnterpriseLookup = Depends(get_enterprise_lookup),
):
    """Look up an enterprise by ERN using the injected lookup."""
    enterprise = lookup(ern)
    if enterprise is None:
        raise ResourceNotFoundError("Enterprise", ern)
    logger.info("Enterprise found", extra={"ern": enterprise.ern})
    return EnterpriseResponse(ern=enterprise.ern, source=enterprise.source)
