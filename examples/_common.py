from __future__ import annotations
import argparse, json
from typing import Any
from asaas import AsaasConfig, AsaasClient
from asaas.debug import dprint

def add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--env", default=None, help="sandbox|production (overrides ASAAS_ENV)")
    p.add_argument("--base-url", default=None, help="Override ASAAS_BASE_URL")
    p.add_argument("--token", default=None, help="Override ASAAS_ACCESS_TOKEN")
    p.add_argument("--timeout", type=float, default=None, help="HTTP timeout seconds")
    p.add_argument("--debug", type=int, default=None, help="Set debug 1/0 (overrides ASAAS_DEBUG)")

def make_client_from_args(args) -> AsaasClient:
    cfg = AsaasConfig(
        access_token=args.token,
        environment=args.env,
        base_url=args.base_url,
        timeout=args.timeout,
        debug=(None if args.debug is None else bool(args.debug)),
    )
    dprint("[COMMON] Config", cfg.masked())
    cfg.validate()
    client = AsaasClient(cfg, retries=1, backoff_factor=0.5)
    return client

def pretty(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=False, indent=2, default=str)

def print_error(tag: str, e) -> None:
    print(f"[{tag}] HTTP {e.status} req_id={e.request_id}")
    print(pretty(e.payload))
