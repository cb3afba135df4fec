"""
Asaas SDK Authentication
~~~~~~~~~~~~~~~~~~~~~~~~

API-key authentication for the Asaas API.
"""

from typing import Dict, Generator

import httpx

from .errors import AsaasConfigError


ACCESS_TOKEN_HEADER = "access_token"


class AccessTokenAuth(httpx.Auth):
    """
    Attach the account API key to every request.

    Asaas does not use `Authorization: Bearer`; the key travels in a custom
    `access_token` header.
    """

    def __init__(self, access_token: str):
        if not access_token or not access_token.strip():
            raise AsaasConfigError("access_token is required")
        self.access_token = access_token.strip()

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers[ACCESS_TOKEN_HEADER] = self.access_token
        yield request

    def get_headers(self) -> Dict[str, str]:
        """Headers for callers that build requests by hand (e.g. curl snippets)."""
        return {ACCESS_TOKEN_HEADER: self.access_token}

    def __repr__(self) -> str:
        return "AccessTokenAuth(access_token=***)"
