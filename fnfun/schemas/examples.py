"""Example Schemas — Pydantic models for the example endpoints.

Invariants:
    - Ports are validated at the boundary (1-65535) before reaching core functions
    - CompositionRequest.order is either "compose" or "and_then"
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class BaseUrlResponse(BaseModel):
    """A URL built by base_http_url (directly or partially applied)."""
    host: str
    port: int
    url: str


class EnterpriseResponse(BaseModel):
    """Result of the configured enterprise lookup."""
    ern: str
    source: str


class CompositionRequest(BaseModel):
    """Compose square with increment in the requested order, then apply to value."""
    order: Literal["compose", "and_then"]
    value: int = Field(ge=-1_000_000, le=1_000_000)


class CompositionResponse(BaseModel):
    order: str
    value: int
    result: int


class FusedMapRequest(BaseModel):
    """Numbers to increment-then-square in a single fused pass."""
    numbers: list[int] = Field(max_length=10_000)

    @field_validator("numbers")
    @classmethod
    def bounded_values(cls, v: list[int]) -> list[int]:
        if any(abs(n) > 1_000_000 for n in v):
            raise ValueError("numbers must be within +/-1000000")
        return v


class FusedMapResponse(BaseModel):
    numbers: list[int]
    results: list[int]
