"""
Asaas Framework Integrations
~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Webhook receivers for Flask and FastAPI. Each adapter imports its
framework, so load them explicitly:

    from asaas.frameworks.flask import create_webhook_blueprint
    from asaas.frameworks.fastapi import create_webhook_router
"""

import importlib
from typing import Any, Optional

_FRAMEWORK_MODULES = {
    "flask": ".flask",
    "fastapi": ".fastapi",
}


def get_framework_integration(framework: str) -> Optional[Any]:
    """
    Dynamically load a framework integration.

    Returns the adapter module, or None when the name is unknown or the
    framework itself is not installed.
    """
    module_path = _FRAMEWORK_MODULES.get(framework.lower())
    if not module_path:
        return None
    try:
        return importlib.import_module(module_path, package=__name__)
    except ImportError:
        return None


__all__ = ["get_framework_integration"]
