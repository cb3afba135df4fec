"""
Asaas FastAPI Integration
~~~~~~~~~~~~~~~~~~~~~~~~~

    router = WebhookRouter()
    app.include_router(create_webhook_router(router, token="my-webhook-token"))
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from ..config import AsaasConfig
from ..errors import AsaasWebhookError
from ..webhook import WebhookRouter, parse_event, verify_token


logger = logging.getLogger(__name__)


def create_webhook_router(
    router: WebhookRouter,
    token: Optional[str] = None,
    prefix: str = "/webhooks",
    path: str = "/asaas",
    tags: Optional[List[str]] = None,
    skip_verification: bool = False,
) -> APIRouter:
    """
    Create a FastAPI router receiving Asaas webhook deliveries.

    Handlers registered on `router` run in the threadpool, so blocking
    handlers do not stall the event loop.
    """
    expected = token if token is not None else AsaasConfig().webhook_token
    api = APIRouter(prefix=prefix, tags=tags or ["webhooks"])

    @api.post(path)
    async def handle_webhook(request: Request):
        headers = dict(request.headers)
        try:
            verify_token(headers=headers, expected=expected, skip_verification=skip_verification)
        except AsaasWebhookError as e:
            logger.warning("Webhook authentication failed: %s", e)
            return JSONResponse(content={"received": False, "error": "unauthorized"}, status_code=401)

        body = await request.body()
        try:
            event = parse_event(body=body, headers=headers, skip_verification=True)
        except AsaasWebhookError as e:
            logger.error("Webhook body rejected: %s", e)
            return JSONResponse(content={"received": False, "error": str(e)}, status_code=400)

        logger.info("Received webhook event: %s (ID: %s)", event.event, event.id)
        results = await run_in_threadpool(router.dispatch, event)
        for result in results:
            if isinstance(result, Exception):
                logger.error("Webhook handler failed for %s: %r", event.event, result)
        return JSONResponse(content={"received": True}, status_code=200)

    return api


__all__ = ["create_webhook_router"]
