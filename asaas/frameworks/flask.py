"""
Asaas Flask Integration
~~~~~~~~~~~~~~~~~~~~~~~

    router = WebhookRouter()

    @router.on(WebhookEventTypes.PAYMENT_RECEIVED)
    def paid(event): ...

    app.register_blueprint(create_webhook_blueprint(router, token="my-webhook-token"))
"""

import logging
from typing import Optional

from flask import Blueprint, jsonify, request

from ..config import AsaasConfig
from ..errors import AsaasWebhookError
from ..webhook import WebhookRouter, parse_event, verify_token


logger = logging.getLogger(__name__)


def create_webhook_blueprint(
    router: WebhookRouter,
    token: Optional[str] = None,
    url_prefix: str = "/webhooks/asaas",
    endpoint: str = "",
    skip_verification: bool = False,
    name: str = "asaas_webhooks",
) -> Blueprint:
    """
    Create a Flask blueprint receiving Asaas webhook deliveries.

    Args:
        router: WebhookRouter whose handlers get each parsed event
        token: webhook authToken (defaults to ASAAS_WEBHOOK_TOKEN)
        url_prefix: URL prefix for the blueprint
        endpoint: path below the prefix
        skip_verification: accept unauthenticated deliveries (dev only)
        name: blueprint name, unique per app

    Returns:
        Flask Blueprint answering 200 {"received": true}, 401 on a bad
        token and 400 on an unparseable body.
    """
    expected = token if token is not None else AsaasConfig().webhook_token
    bp = Blueprint(name, __name__, url_prefix=url_prefix)

    @bp.route(f"/{endpoint.lstrip('/')}", methods=["POST"], strict_slashes=False)
    def handle_webhook():
        headers = dict(request.headers)
        try:
            verify_token(headers=headers, expected=expected, skip_verification=skip_verification)
        except AsaasWebhookError as e:
            logger.warning("Webhook authentication failed: %s", e)
            return jsonify({"received": False, "error": "unauthorized"}), 401

        try:
            event = parse_event(body=request.get_data(), headers=headers, skip_verification=True)
        except AsaasWebhookError as e:
            logger.error("Webhook body rejected: %s", e)
            return jsonify({"received": False, "error": str(e)}), 400

        logger.info("Received webhook event: %s (ID: %s)", event.event, event.id)
        for result in router.dispatch(event):
            if isinstance(result, Exception):
                logger.error("Webhook handler failed for %s: %r", event.event, result)
        return jsonify({"received": True}), 200

    return bp


__all__ = ["create_webhook_blueprint"]
