"""
Opt-in diagnostic output for the SDK.

Nothing is printed unless ASAAS_DEBUG is truthy (or `set_debug(True)` is
called). API keys, webhook tokens and card data are masked before any
header or payload reaches stdout.
"""
from __future__ import annotations

import datetime
import json
import os
from typing import Any, Dict, Mapping, Optional

_DEBUG_ENABLED = os.getenv("ASAAS_DEBUG", "0").strip().lower() not in ("0", "false", "no", "off", "")

# cap printed JSON length
MAX_JSON_CHARS = int(os.getenv("ASAAS_DEBUG_MAX_JSON", "50000"))

SENSITIVE_HEADER_KEYS = frozenset({"access_token", "asaas-access-token", "authorization"})

# body keys whose values never get printed
SENSITIVE_BODY_KEYS = frozenset({"creditCard", "creditCardHolderInfo", "creditCardToken", "authToken"})


def is_enabled() -> bool:
    return _DEBUG_ENABLED


def set_debug(enabled: bool) -> None:
    global _DEBUG_ENABLED
    _DEBUG_ENABLED = bool(enabled)


def mask_token(val: Optional[str]) -> Optional[str]:
    """
    Mask an API key while leaving its environment prefix visible.

    "$aact_hmlg_000MzkwODA2MWY2OGM3..." -> "$aact_hmlg_***...c7"
    """
    if val is None:
        return None
    v = val.strip()
    if len(v) <= 12:
        return "***"
    # "$aact_prod_" / "$aact_hmlg_"
    prefix = v[:11] if v.startswith("$aact_") else ""
    return f"{prefix}***...{v[-2:]}"


def scrub_headers(h: Mapping[str, str]) -> Dict[str, str]:
    return {
        k: (mask_token(v) or "***") if k.lower() in SENSITIVE_HEADER_KEYS else v
        for k, v in (h or {}).items()
    }


def scrub_payload(data: Any) -> Any:
    """Recursively replace card data and tokens in a JSON-like structure."""
    if isinstance(data, Mapping):
        return {k: "***" if k in SENSITIVE_BODY_KEYS else scrub_payload(v) for k, v in data.items()}
    if isinstance(data, list):
        return [scrub_payload(v) for v in data]
    return data


def _stamp() -> str:
    # 2025-09-13T10:20:30Z
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.isoformat(timespec="seconds").replace("+00:00", "Z")


def dprint(*args: Any) -> None:
    if not _DEBUG_ENABLED:
        return
    print("[AsaasSDK]", _stamp(), *args, flush=True)


def djson(label: str, data: Any) -> None:
    """Pretty-print `data` as JSON (scrubbed, truncated) under `label`."""
    if not _DEBUG_ENABLED:
        return
    try:
        text = json.dumps(scrub_payload(data), ensure_ascii=False, indent=2, default=str)
    except (TypeError, ValueError):
        text = repr(data)
    if len(text) > MAX_JSON_CHARS:
        text = text[:MAX_JSON_CHARS] + "... (truncated)"
    print("[AsaasSDK]", _stamp(), f"{label}:", text, flush=True)
