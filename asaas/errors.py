from __future__ import annotations
import json
from typing import Any, Dict, List, Optional

from .debug import dprint, djson
from .models.base import ErrorItem


class AsaasSDKError(Exception):
    """Base exception for all Asaas SDK errors."""
    pass


class AsaasConfigError(AsaasSDKError):
    """Raised when configuration/credentials are invalid or missing."""
    pass


class AsaasWebhookError(AsaasSDKError):
    """Raised for webhook authentication/format errors."""
    pass


class AsaasTransportError(AsaasSDKError):
    """
    Raised when no HTTP response was received (connection refused, DNS,
    timeouts, protocol errors). The original httpx exception is chained.
    """

    status = -1

    def __init__(self, message: str, *, method: Optional[str] = None, url: Optional[str] = None):
        self.method = method
        self.url = url
        dprint("AsaasTransportError", {"method": method, "url": url, "error": message})
        super().__init__(message)

    @property
    def retryable(self) -> bool:
        return True


class AsaasDecodeError(AsaasSDKError):
    """
    Raised when a successful response could not be turned into the expected
    model (invalid JSON, wrong shape, failed validation). `body` keeps what
    was received.
    """

    def __init__(self, message: str, body: Any = None, *, model: Optional[str] = None):
        self.body = body
        self.model = model
        super().__init__(f"{model}: {message}" if model else message)


class AsaasHTTPError(AsaasSDKError):
    """
    Error for non-2xx API responses.

    Attributes
    ----------
    status : int
        HTTP status code.
    payload : Any
        Parsed JSON or fallback body describing the error (kept verbatim).
    request_id : Optional[str]
        Server-provided request correlation id, if available.
    method : Optional[str]
        HTTP method that triggered the error (if provided).
    url : Optional[str]
        URL that triggered the error (if provided).

    Convenience
    -----------
    .code            -> first error code in the payload (if any)
    .message_text    -> human-friendly error message
    .retryable       -> bool, True if typical transient status (429, 500-504)
    .to_dict()       -> sanitized summary dict for logging
    """

    def __init__(
        self,
        status: int,
        payload: Any,
        request_id: Optional[str] = None,
        *,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ):
        self.status = int(status)
        self.payload = payload
        self.request_id = request_id
        self.method = method
        self.url = url

        dprint(type(self).__name__, {
            "status": self.status,
            "request_id": self.request_id,
            "method": self.method,
            "url": self.url,
        })
        djson(f"{type(self).__name__} payload", self.payload)

        super().__init__(self._message())

    # ---------------- convenience properties ----------------

    @property
    def retryable(self) -> bool:
        """Return True for common transient HTTP statuses."""
        return self.status in (429, 500, 502, 503, 504)

    @property
    def code(self) -> Optional[str]:
        p = self.payload
        if isinstance(p, dict):
            errs = p.get("errors")
            if isinstance(errs, list) and errs and isinstance(errs[0], dict) and errs[0].get("code"):
                return str(errs[0]["code"])
            if p.get("code"):
                return str(p["code"])
        return None

    @property
    def message_text(self) -> str:
        """
        Human-friendly message guessed from payload.
        Keeps it short and safe for logs.
        """
        p = self.payload
        if isinstance(p, str):
            return p.strip() or "error"
        if isinstance(p, dict):
            errs = p.get("errors")
            if isinstance(errs, list) and errs:
                descs = [
                    str(e.get("description") or e.get("code"))
                    for e in errs
                    if isinstance(e, dict) and (e.get("description") or e.get("code"))
                ]
                if descs:
                    return "; ".join(descs)
            for key in ("message", "error", "detail", "description"):
                val = p.get(key)
                if isinstance(val, str) and val.strip():
                    return val.strip()
            try:
                s = json.dumps(p, ensure_ascii=False)
            except (TypeError, ValueError):
                return "error"
            return s if len(s) <= 240 else s[:237] + "..."
        return str(p) if p is not None else "error"

    # ---------------- rendering & serialization ----------------

    def _message(self) -> str:
        rid = f" req_id={self.request_id}" if self.request_id else ""
        meth = f" {self.method}" if self.method else ""
        url = f" {self.url}" if self.url else ""
        code = f" code={self.code}" if self.code else ""
        return f"HTTP {self.status}{meth}{url}{rid}{code}: {self.message_text}"

    def __str__(self) -> str:
        return self._message()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, request_id={self.request_id!r}, code={self.code!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Sanitized summary for logs/telemetry; includes only non-sensitive fields."""
        return {
            "status": self.status,
            "request_id": self.request_id,
            "method": self.method,
            "url": self.url,
            "code": self.code,
            "message": self.message_text,
            "retryable": self.retryable,
        }


class AsaasAPIError(AsaasHTTPError):
    """
    Business error reported by the API in its `errors` array, e.g.

        {"errors": [{"code": "invalid_customer", "description": "Cliente inválido"}]}

    Raised whatever the HTTP status, including the rare 2xx body that still
    carries errors.
    """

    @property
    def errors(self) -> List[ErrorItem]:
        raw = self.payload.get("errors") if isinstance(self.payload, dict) else None
        return [ErrorItem.model_validate(e) for e in raw or [] if isinstance(e, dict)]

    @property
    def codes(self) -> List[str]:
        return [e.code for e in self.errors if e.code]

    def has_code(self, code: str) -> bool:
        return code in self.codes

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["errors"] = [e.model_dump() for e in self.errors]
        return d


def is_failure(body: Any) -> bool:
    """True if a decoded response body carries a non-empty `errors` list."""
    return isinstance(body, dict) and isinstance(body.get("errors"), list) and len(body["errors"]) > 0


__all__ = [
    "AsaasSDKError",
    "AsaasConfigError",
    "AsaasTransportError",
    "AsaasDecodeError",
    "AsaasHTTPError",
    "AsaasAPIError",
    "AsaasWebhookError",
    "is_failure",
]
