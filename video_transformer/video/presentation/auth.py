"""
Bearer token authentication for the video API.
"""

import logging
import secrets
from typing import Optional

from fastapi import HTTPException, Request

MISSING_HEADER = "Authorization header is missing"
INVALID_FORMAT = "Invalid authorization format"
INVALID_TOKEN = "Invalid API token"


class BearerTokenAuth:
    """
    FastAPI dependency comparing the bearer token with the configured secret.

    Missing header, malformed header and wrong token are reported with
    different messages; all three deny access with 401.
    """

    def __init__(self, api_token: Optional[str]):
        self.api_token = api_token
        self.logger = logging.getLogger(__name__)
        if not api_token:
            self.logger.warning("No API token configured - every authenticated request will be rejected")

    async def __call__(self, request: Request) -> None:
        authorization = request.headers.get("authorization")
        if not authorization:
            self._reject(MISSING_HEADER)

        # Only the first two space-separated parts count; anything after the token is ignored
        scheme, _, rest = authorization.partition(" ")
        token = rest.split(" ")[0]
        if scheme != "Bearer" or not token:
            self._reject(INVALID_FORMAT)

        if not self.api_token or not secrets.compare_digest(token.encode(), self.api_token.encode()):
            self._reject(INVALID_TOKEN)

    def _reject(self, message: str) -> None:
        self.logger.debug(f"Rejected request: {message}")
        raise HTTPException(status_code=401, detail=message, headers={"WWW-Authenticate": "Bearer"})
