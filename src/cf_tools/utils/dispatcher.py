"""Authenticated requests against the Cloudflare client API."""
from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx
from pydantic import BaseModel, ConfigDict, Field

from cf_tools.errors import DecodeError, TransportError
from cf_tools.models.responses import ApiResponse

__all__ = ["Credentials", "ActionRequest", "RequestDispatcher"]

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    api_key: str = Field(repr=False)
    email: str


class ActionRequest(BaseModel):
    """One action code and its action specific fields."""

    model_config = ConfigDict(frozen=True)

    action: str = Field(min_length=1)
    params: dict[str, Any] = Field(default_factory=dict)

    def to_form(self, credentials: Credentials) -> dict[str, str]:
        """Form fields to post, with the credential fields injected."""
        form = {key: str(value) for key, value in self.params.items()}
        form["a"] = self.action
        form["tkn"] = credentials.api_key
        form["email"] = credentials.email
        return form


class RequestDispatcher:
    def __init__(
        self,
        credentials: Credentials,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Dispatches actions to the API endpoint in `credentials`.
        Uses `client` when given, otherwise a new connection per request.
        """
        self.credentials = credentials
        self.client = client
        self.timeout = timeout

    def _post(self, form: dict[str, str]) -> httpx.Response:
        if self.client is not None:
            return self.client.post(self.credentials.url, data=form, timeout=self.timeout)
        return httpx.post(self.credentials.url, data=form, timeout=self.timeout)

    def dispatch(self, action: str, params: Mapping[str, Any] | None = None) -> ApiResponse:
        """Post one action and return the decoded response."""
        if not action:
            raise ValueError("action must not be empty")

        request = ActionRequest(action=action, params=dict(params or {}))
        log.debug("POST %s a=%s fields=%s", self.credentials.url, action, sorted(request.params))

        try:
            res = self._post(request.to_form(self.credentials))
            text = res.text
        except httpx.DecodingError as e:
            log.warning("Response for %r could not be decoded: %s", action, e)
            raise DecodeError(action, f"Could not decode response body: {e}") from e
        except httpx.TransportError as e:
            log.warning("Request for %r failed: %s", action, e)
            raise TransportError(action, f"Could not reach {self.credentials.url}: {e}") from e

        try:
            payload = json.loads(text)
        except (ValueError, RecursionError) as e:
            log.warning("Response for %r is not JSON (%d)", action, res.status_code)
            raise DecodeError(action, f"Response is not valid JSON ({res.status_code})", text) from e

        if not isinstance(payload, dict):
            raise DecodeError(action, f"Expected a JSON object, got {type(payload).__name__}", text)

        return ApiResponse.model_validate(payload)
