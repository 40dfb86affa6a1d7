"""HTTP client construction from request options."""

from __future__ import annotations

import ssl

import certifi
import httpx

from frizz.utils.debug import (
    debug_http_request,
    debug_http_response,
    is_debug_enabled,
    set_debug_enabled,
)

from .models import ExecRequest


def build_ssl_context(
    disable_cert_validation: bool = False,
    disable_hostname_validation: bool = False,
) -> ssl.SSLContext:
    """Build the TLS context; either validation step can be bypassed on its own."""
    ctx = ssl.create_default_context(cafile=certifi.where())
    if disable_cert_validation or disable_hostname_validation:
        ctx.check_hostname = False
    if disable_cert_validation:
        ctx.verify_mode = ssl.CERT_NONE
    return ctx


class HTTPClient:
    """Async context manager owning an ``httpx.AsyncClient`` for one request."""

    def __init__(
        self,
        user_agent: str = "frizz",
        timeout: float = 30.0,
        follow_redirects: bool = True,
        disable_cert_validation: bool = False,
        disable_hostname_validation: bool = False,
        verbose: bool = False,
    ):
        self.user_agent = user_agent
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.disable_cert_validation = disable_cert_validation
        self.disable_hostname_validation = disable_hostname_validation
        self.verbose = verbose
        self.client: httpx.AsyncClient | None = None
        self._previous_debug = False

    @classmethod
    def from_request(cls, request: ExecRequest) -> "HTTPClient":
        return cls(
            user_agent=request.user_agent,
            timeout=request.timeout,
            disable_cert_validation=request.disable_cert_validation,
            disable_hostname_validation=request.disable_hostname_validation,
            verbose=request.verbose,
        )

    async def __aenter__(self) -> httpx.AsyncClient:
        event_hooks = {}
        self._previous_debug = is_debug_enabled()
        if self.verbose:
            set_debug_enabled(True)
            event_hooks = {"request": [debug_http_request], "response": [debug_http_response]}
        self.client = httpx.AsyncClient(
            headers={"User-Agent": self.user_agent},
            timeout=self.timeout,
            follow_redirects=self.follow_redirects,
            verify=build_ssl_context(
                self.disable_cert_validation,
                self.disable_hostname_validation,
            ),
            event_hooks=event_hooks,
        )
        return self.client

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if self.client:
                await self.client.aclose()
        finally:
            set_debug_enabled(self._previous_debug)
