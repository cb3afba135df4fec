from __future__ import annotations

import time
from functools import cached_property
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from . import __version__ as SDK_VERSION
from .auth import AccessTokenAuth
from .config import AsaasConfig
from .debug import dprint, djson, scrub_headers
from .errors import (
    AsaasAPIError,
    AsaasDecodeError,
    AsaasHTTPError,
    AsaasTransportError,
    is_failure,
)

if TYPE_CHECKING:
    from .resources import (
        ChargesAPI,
        CustomersAPI,
        FinanceAPI,
        InstallmentsAPI,
        NotificationsAPI,
        PaymentLinksAPI,
        PixAPI,
        SubscriptionsAPI,
        TransfersAPI,
        WebhooksAPI,
    )


M = TypeVar("M", bound=BaseModel)

# -------------------- constants --------------------

# Treat as transient for simple retry/backoff
TRANSIENT_STATUS: Tuple[int, ...] = (429, 500, 502, 503, 504)

# Asaas has no idempotency key, so POST is only retried when the request
# never reached the server or was rejected before processing.
UNSENT_ERRORS: Tuple[Type[httpx.TransportError], ...] = (httpx.ConnectError, httpx.ConnectTimeout)
UNPROCESSED_STATUS: Tuple[int, ...] = (429,)
IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "PUT", "DELETE"})

REQUEST_ID_HEADERS: Tuple[str, ...] = ("X-Request-Id", "X-Request-ID", "X-Amzn-Trace-Id")

RATE_HEADERS: Tuple[str, ...] = (
    "RateLimit-Limit",
    "RateLimit-Remaining",
    "RateLimit-Reset",
)


def _first_header(headers: httpx.Headers, names: Tuple[str, ...]) -> Optional[str]:
    for n in names:
        v = headers.get(n)
        if v:
            return v
    return None


class AsaasClient:
    """
    Lightweight sync client for the Asaas v3 REST API.

    - Adds the `access_token` header to every request.
    - Optional simple retries/backoff for transient errors (429/5xx, network).
    - Raises AsaasAPIError when the body carries an `errors` list, AsaasHTTPError
      for other non-2xx responses, AsaasTransportError when nothing came back.
    - Resource services are available as properties (`client.charges`, ...).
    """

    def __init__(
        self,
        config: Optional[AsaasConfig] = None,
        *,
        retries: Optional[int] = None,
        backoff_factor: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = (config or AsaasConfig()).validate()
        self.retries = max(0, int(self.config.retries if retries is None else retries))
        self.backoff_factor = max(
            0.0, float(self.config.backoff_factor if backoff_factor is None else backoff_factor)
        )
        self.last_response_meta: Dict[str, Any] = {}

        self._client = httpx.Client(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            auth=AccessTokenAuth(self.config.access_token),
            transport=transport,
            headers={
                "User-Agent": f"asaas-python/{SDK_VERSION}",
                "Accept": "application/json",
            },
        )
        dprint(
            "Client init",
            {
                "base_url": self.config.base_url,
                "environment": self.config.environment,
                "timeout": self.config.timeout,
                "retries": self.retries,
                "backoff_factor": self.backoff_factor,
                "sdk_version": SDK_VERSION,
            },
        )

    # ------------ context manager support ------------
    def __enter__(self) -> "AsaasClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------ internal helpers ------------
    def _extract_meta(self, r: httpx.Response) -> Dict[str, Any]:
        meta: Dict[str, Any] = {k: r.headers.get(k) for k in RATE_HEADERS if k in r.headers}
        req_id = _first_header(r.headers, REQUEST_ID_HEADERS)
        if req_id:
            meta["request_id"] = req_id
        retry_after = r.headers.get("Retry-After")
        if retry_after:
            meta["retry_after"] = retry_after
        return meta

    def _decode(self, r: httpx.Response) -> Any:
        if r.status_code == 204 or not r.content:
            return {}
        try:
            body = r.json()
        except ValueError as e:
            if r.is_success:
                raise AsaasDecodeError(f"invalid JSON in response: {e}", r.text) from e
            # error pages (gateways, proxies) are often HTML/plain text
            return {"message": r.text}
        if isinstance(body, list):
            body = {"data": body}
        return body

    def _handle(self, r: httpx.Response) -> Dict[str, Any]:
        meta = self._extract_meta(r)
        self.last_response_meta = meta
        method = r.request.method
        url = str(r.request.url)
        dprint("Response", {"status": r.status_code, "request_id": meta.get("request_id")})

        body = self._decode(r)
        djson("Response body", body)

        if is_failure(body):
            raise AsaasAPIError(r.status_code, body, meta.get("request_id"), method=method, url=url)
        if not r.is_success:
            raise AsaasHTTPError(r.status_code, body, meta.get("request_id"), method=method, url=url)
        if not isinstance(body, dict):
            raise AsaasDecodeError("expected a JSON object", body)
        return body

    def _sleep_for_retry(self, attempt: int, *, retry_after_header: Optional[str]) -> float:
        # Retry-After in seconds wins; HTTP-date values fall back to backoff.
        if retry_after_header:
            try:
                secs = float(retry_after_header)
            except ValueError:
                secs = -1.0
            if secs >= 0:
                return secs
        return self.backoff_factor * (2 ** attempt)

    def _send_with_retries(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        idempotent = method in IDEMPOTENT_METHODS
        retry_status = TRANSIENT_STATUS if idempotent else UNPROCESSED_STATUS
        attempt = 0
        while True:
            try:
                dprint("HTTP send", {"method": method, "url": url})
                r = self._client.request(method, url, **kwargs)
            except httpx.TransportError as e:
                if attempt < self.retries and (idempotent or isinstance(e, UNSENT_ERRORS)):
                    wait = self.backoff_factor * (2 ** attempt)
                    dprint("Network error -> retry", {"error": repr(e), "attempt": attempt + 1, "sleep": wait})
                    time.sleep(wait)
                    attempt += 1
                    continue
                dprint("Network error -> giving up", {"error": repr(e)})
                raise AsaasTransportError(str(e) or type(e).__name__, method=method, url=url) from e

            if r.status_code in retry_status and attempt < self.retries:
                wait = self._sleep_for_retry(attempt, retry_after_header=r.headers.get("Retry-After"))
                dprint("Transient response -> retry", {"status": r.status_code, "attempt": attempt + 1, "sleep": wait})
                time.sleep(wait)
                attempt += 1
                continue
            return r

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        extra_headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        method = method.upper()
        headers: Dict[str, str] = dict(extra_headers or {})
        if json is not None:
            headers.setdefault("Content-Type", "application/json")
            djson("Request JSON", json)
        dprint(method, {"path": path, "params": params or {}})
        djson("Request headers", scrub_headers(headers))
        r = self._send_with_retries(method, path, json=json, params=params, headers=headers)
        return self._handle(r)

    # ------------ public request helpers ------------
    def get(self, path: str, *, params: Optional[Dict[str, Any]] = None, **kw: Any) -> Dict[str, Any]:
        return self.request("GET", path, params=params, **kw)

    def post(
        self,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        **kw: Any,
    ) -> Dict[str, Any]:
        return self.request("POST", path, json=json if json is not None else {}, params=params, **kw)

    def put(
        self,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        **kw: Any,
    ) -> Dict[str, Any]:
        return self.request("PUT", path, json=json if json is not None else {}, params=params, **kw)

    def delete(self, path: str, *, params: Optional[Dict[str, Any]] = None, **kw: Any) -> Dict[str, Any]:
        return self.request("DELETE", path, params=params, **kw)

    def request_model(
        self,
        method: str,
        path: str,
        model: Type[M],
        *,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> M:
        """Issue a call and validate the body into `model`."""
        if json is None and method.upper() in ("POST", "PUT"):
            json = {}
        body = self.request(method, path, json=json, params=params)
        try:
            return model.model_validate(body)
        except ValidationError as e:
            raise AsaasDecodeError(str(e), body, model=model.__name__) from e

    def close(self) -> None:
        dprint("Client close()")
        self._client.close()

    # ------------ resource services ------------
    @cached_property
    def customers(self) -> "CustomersAPI":
        from .resources import CustomersAPI
        return CustomersAPI(self)

    @cached_property
    def charges(self) -> "ChargesAPI":
        from .resources import ChargesAPI
        return ChargesAPI(self)

    @cached_property
    def subscriptions(self) -> "SubscriptionsAPI":
        from .resources import SubscriptionsAPI
        return SubscriptionsAPI(self)

    @cached_property
    def installments(self) -> "InstallmentsAPI":
        from .resources import InstallmentsAPI
        return InstallmentsAPI(self)

    @cached_property
    def transfers(self) -> "TransfersAPI":
        from .resources import TransfersAPI
        return TransfersAPI(self)

    @cached_property
    def webhooks(self) -> "WebhooksAPI":
        from .resources import WebhooksAPI
        return WebhooksAPI(self)

    @cached_property
    def notifications(self) -> "NotificationsAPI":
        from .resources import NotificationsAPI
        return NotificationsAPI(self)

    @cached_property
    def payment_links(self) -> "PaymentLinksAPI":
        from .resources import PaymentLinksAPI
        return PaymentLinksAPI(self)

    @cached_property
    def pix(self) -> "PixAPI":
        from .resources import PixAPI
        return PixAPI(self)

    @cached_property
    def finance(self) -> "FinanceAPI":
        from .resources import FinanceAPI
        return FinanceAPI(self)


__all__ = ["AsaasClient", "TRANSIENT_STATUS"]
