"""
Asaas SDK Webhook Handler
~~~~~~~~~~~~~~~~~~~~~~~~~

Authentication, parsing and dispatch of incoming webhook deliveries.

Asaas does not sign payloads. Each webhook is configured with an
`authToken`, which Asaas sends back verbatim in the `asaas-access-token`
header; a delivery is authentic when that header matches.
"""
from __future__ import annotations

import hmac
import json
from collections import OrderedDict
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from .debug import dprint, djson
from .errors import AsaasWebhookError
from .models.events import WebhookEvent, WebhookEventTypes

TOKEN_HEADER = "asaas-access-token"


def _get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    for k, v in (headers or {}).items():
        if k.lower() == name.lower():
            return v
    return None


# ------------------------
# Authentication
# ------------------------

def verify_token(
    *,
    headers: Mapping[str, str],
    expected: Optional[str],
    header_name: str = TOKEN_HEADER,
    skip_verification: bool = False,
) -> Dict[str, Any]:
    """
    Compare the delivery's auth token with the configured one (constant time).

    Returns a details dict; raises AsaasWebhookError on failure (unless
    skip_verification=True, meant for local development only).
    """
    if skip_verification:
        dprint("webhook.verify_token() skipped (dev mode)")
        return {"skipped": True}

    if not expected:
        raise AsaasWebhookError("webhook token not configured")

    received = _get_header(headers, header_name)
    if not received:
        raise AsaasWebhookError(f"header '{header_name}' not found")

    ok = hmac.compare_digest(received.encode("utf-8"), expected.encode("utf-8"))
    dprint("webhook.verify_token() result", {"ok": ok, "header": header_name})
    if not ok:
        raise AsaasWebhookError("webhook token mismatch")
    return {"ok": True, "header": header_name}


# ------------------------
# Parsing
# ------------------------

def _load_json(body: Union[str, bytes, bytearray, Mapping[str, Any]]) -> Dict[str, Any]:
    if isinstance(body, Mapping):
        return dict(body)
    raw_text = body.decode("utf-8", errors="replace") if isinstance(body, (bytes, bytearray)) else body
    try:
        payload = json.loads(raw_text) if raw_text else {}
    except ValueError as e:
        raise AsaasWebhookError(f"invalid JSON body: {e}") from e
    if not isinstance(payload, dict):
        raise AsaasWebhookError("webhook body must be a JSON object")
    return payload


def parse_event(
    *,
    body: Union[str, bytes, bytearray, Mapping[str, Any]],
    headers: Optional[Mapping[str, str]] = None,
    token: Optional[str] = None,
    skip_verification: bool = False,
) -> WebhookEvent:
    """
    Authenticate (unless skipped) and parse a delivery.

    Args:
      body: raw request body (bytes/str) or an already-decoded dict.
      headers: incoming HTTP headers (case-insensitive handling).
      token: the `authToken` configured on the webhook.
      skip_verification: set True for local/dev only.
    """
    verify_token(headers=headers or {}, expected=token, skip_verification=skip_verification)

    payload = _load_json(body)
    djson("webhook.parse_event() payload", payload)

    if not payload.get("event"):
        raise AsaasWebhookError("missing 'event' field in webhook payload")

    try:
        event = WebhookEvent.model_validate(payload)
    except ValidationError as e:
        raise AsaasWebhookError(f"failed to parse webhook event: {e}") from e

    dprint("webhook.parse_event()", {"id": event.id, "event": event.event})
    return event


def verify_and_parse(
    *,
    body: Union[str, bytes, bytearray, Mapping[str, Any]],
    headers: Mapping[str, str],
    token: Optional[str],
    skip_verification: bool = False,
) -> Tuple[Dict[str, Any], WebhookEvent]:
    """
    Convenience: verify_token(...) + parse_event(...)

    Returns:
      (verify_info_dict, WebhookEvent)
    """
    info = verify_token(headers=headers, expected=token, skip_verification=skip_verification)
    event = parse_event(body=body, headers=headers, skip_verification=True)
    return info, event


# ------------------------
# Event router
# ------------------------

Handler = Callable[[WebhookEvent], Any]


class WebhookRouter:
    """
    Minimal event router:

        router = WebhookRouter()

        @router.on(WebhookEventTypes.PAYMENT_RECEIVED)
        def paid(e): ...

        @router.on("PAYMENT_*")     # any event type with this prefix
        def any_payment(e): ...

        @router.on("*")             # everything
        def audit(e): ...

        results = router.dispatch(event)

    Handler exceptions are collected into the result list instead of
    aborting the other handlers. With `dedupe_size > 0` an event id seen
    recently is skipped (Asaas redelivers until it gets a 200).
    """

    def __init__(self, *, dedupe_size: int = 0) -> None:
        self._map: Dict[str, List[Handler]] = {}
        self._dedupe_size = max(0, int(dedupe_size))
        self._seen: "OrderedDict[str, None]" = OrderedDict()

    def on(self, event_type: str) -> Callable[[Handler], Handler]:
        if not event_type or not isinstance(event_type, str):
            raise ValueError("event_type must be a non-empty string (or '*').")

        def _decorator(func: Handler) -> Handler:
            self.add(event_type, func)
            return func

        return _decorator

    def add(self, event_type: str, func: Handler) -> None:
        key = event_type.strip().upper() if event_type != "*" else "*"
        self._map.setdefault(key, []).append(func)
        dprint("webhook.router.add()", {"event_type": key, "handler": getattr(func, "__name__", "handler")})

    def handlers_for(self, event_type: Optional[str]) -> Iterable[Handler]:
        if not event_type:
            # no type => only wildcard
            return list(self._map.get("*", []))
        et = event_type.upper()
        # longest prefix first: "PAYMENT_CHARGEBACK_*" before "PAYMENT_*"
        prefixes = sorted(
            (k for k in self._map if k != "*" and k.endswith("*") and et.startswith(k[:-1])),
            key=len,
            reverse=True,
        )
        return [
            *self._map.get(et, []),
            *(fn for k in prefixes for fn in self._map[k]),
            *self._map.get("*", []),
        ]

    def is_duplicate(self, event: WebhookEvent) -> bool:
        if not self._dedupe_size or not event.id:
            return False
        if event.id in self._seen:
            self._seen.move_to_end(event.id)
            return True
        self._seen[event.id] = None
        while len(self._seen) > self._dedupe_size:
            self._seen.popitem(last=False)
        return False

    def dispatch(self, event: WebhookEvent) -> List[Any]:
        if self.is_duplicate(event):
            dprint("webhook.router.dispatch() duplicate skipped", {"id": event.id})
            return []
        dprint("webhook.router.dispatch()", {"event": event.event})
        out: List[Any] = []
        for fn in self.handlers_for(event.event):
            try:
                out.append(fn(event))
            except Exception as e:
                dprint("webhook.router handler error", {"handler": getattr(fn, "__name__", "handler"), "error": repr(e)})
                out.append(e)
        return out


__all__ = [
    "TOKEN_HEADER",
    "WebhookEvent",
    "WebhookEventTypes",
    "WebhookRouter",
    "verify_token",
    "parse_event",
    "verify_and_parse",
]
