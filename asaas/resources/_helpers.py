from __future__ import annotations
from typing import Any, Dict, Mapping, Optional, Type, Union
from urllib.parse import quote

from pydantic import ValidationError

from ..models.base import Page, QueryParams, RequestModel


def validate_id(name: str, value: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} is required and must be a non-empty string.")
    return value.strip()


def id_path(base: str, name: str, value: str, *suffix: str) -> str:
    """`/payments` + `pay_123` + `refund` -> `/payments/pay_123/refund`"""
    parts = [base.rstrip("/"), quote(validate_id(name, value), safe="")]
    parts.extend(suffix)
    return "/".join(parts)


def as_payload(
    model: Type[RequestModel],
    body: Union[RequestModel, Mapping[str, Any], None],
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Accept either a ready model or plain snake_case/camelCase kwargs and
    return the JSON body. Validation errors surface as ValueError.
    """
    if isinstance(body, RequestModel):
        if not overrides:
            return body.to_payload()
        data: Dict[str, Any] = {**body.model_dump(exclude_unset=True), **overrides}
    else:
        data = dict(body or {})
        data.update(overrides or {})
    try:
        return model.model_validate(data).to_payload()
    except ValidationError as e:
        raise ValueError(str(e)) from e


def as_params(model: Type[QueryParams], filters: Mapping[str, Any]) -> Dict[str, Any]:
    try:
        return model.model_validate(dict(filters)).to_params()
    except ValidationError as e:
        raise ValueError(str(e)) from e


def fetch_page(client: Any, path: str, item_model: Type[Any], params: Dict[str, Any]) -> Page:
    """GET a list endpoint and validate it as `Page[item_model]`."""
    return client.request_model("GET", path, Page[item_model], params=params)
