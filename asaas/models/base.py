from __future__ import annotations
from decimal import Decimal
from typing import Annotated, Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

# =============================================================================
# Scalars
# =============================================================================
# Asaas sends and expects plain JSON numbers for money ("value": 129.9).
# Keep Decimal in Python, emit a number on the wire.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


# =============================================================================
# Base models
# =============================================================================
class AsaasModel(BaseModel):
    """
    Loose model: snake_case in Python, camelCase on the wire, and unknown
    fields are kept so the SDK doesn't break when Asaas adds properties.
    """
    model_config = ConfigDict(
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class RequestModel(AsaasModel):
    """
    Request body.

    Only fields that were explicitly set are serialized. Setting a field to
    None sends JSON null, which clears it on update endpoints; leaving it
    unset keeps the server value.
    """

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


class QueryParams(AsaasModel):
    """Query-string filters; None values are dropped."""

    def to_params(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ListParams(QueryParams):
    offset: Optional[int] = None
    limit: Optional[int] = None

    @field_validator("offset")
    @classmethod
    def _offset_non_negative(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError("offset must be >= 0.")
        return v

    @field_validator("limit")
    @classmethod
    def _limit_range(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and not (1 <= v <= 100):
            raise ValueError("limit must be between 1 and 100.")
        return v


# =============================================================================
# Envelopes
# =============================================================================
T = TypeVar("T")


class Page(AsaasModel, Generic[T]):
    """
    List envelope:

        {"object": "list", "hasMore": true, "totalCount": 42,
         "limit": 10, "offset": 0, "data": [...]}
    """
    object: Optional[str] = "list"
    has_more: bool = False
    total_count: Optional[int] = None
    limit: Optional[int] = None
    offset: int = 0
    data: List[T] = Field(default_factory=list)

    def next_offset(self) -> Optional[int]:
        """Offset of the following page, or None when this is the last one."""
        if not self.has_more or not self.data:
            return None
        return self.offset + len(self.data)


class DeletedResponse(AsaasModel):
    deleted: bool = False
    id: Optional[str] = None


class ErrorItem(AsaasModel):
    code: Optional[str] = None
    description: Optional[str] = None


__all__ = [
    "Money",
    "AsaasModel",
    "RequestModel",
    "QueryParams",
    "ListParams",
    "Page",
    "DeletedResponse",
    "ErrorItem",
]
