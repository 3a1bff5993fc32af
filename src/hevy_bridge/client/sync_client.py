"""Synchronous HTTP client with API-key injection, dry-run, and error mapping.

This module provides :class:`SyncClient`, the blocking client used by every
hevy-bridge data command. It wraps :class:`httpx.Client` and layers on:

- **Auth injection** -- the Hevy API key travels in the ``api-key`` header
  of every request.
- **Dry-run mode** -- prints the request to stderr and returns a synthetic
  payload without sending traffic.
- **Error mapping** -- transport failures, non-2xx statuses, and bodies
  that are not JSON become typed :mod:`hevy_bridge.exceptions`.

Timeouts are httpx's defaults. Nothing is retried.
"""

from __future__ import annotations

import json
from typing import Any, Optional

import httpx

from hevy_bridge.client.response import extract_response_data
from hevy_bridge.config import DEFAULT_BASE_URL, mask_secret
from hevy_bridge.exceptions import RemoteError, TransportError
from hevy_bridge.models import ApiRequest
from hevy_bridge.output import get_output

API_KEY_HEADER = "api-key"


class SyncClient:
    """Synchronous client for the Hevy API.

    Must be used as a context manager so that the underlying transport is
    opened and closed.

    Args:
        api_key: The resolved Hevy API key.
        base_url: API root, e.g. ``https://api.hevyapp.com/v1``.
        dry_run: When ``True``, requests are printed to stderr and a
            synthetic payload is returned without network I/O.
        transport: Optional httpx transport, mainly for tests
            (:class:`httpx.MockTransport`).

    Example::

        with SyncClient("my-key") as client:
            data = client.execute(ApiRequest(path="/user/info"))
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        dry_run: bool = False,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._dry_run = dry_run
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> SyncClient:
        self._client = httpx.Client(
            base_url=self._base_url,
            headers=self._default_headers(),
            transport=self._transport,
        )
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def execute(self, request: ApiRequest) -> Any:
        """Send *request* once and return the decoded JSON body.

        Args:
            request: The request to perform. ``params`` are forwarded as the
                query string unchanged. For POST and PUT, ``json_body`` is
                serialised as JSON and sent even when it is ``None``
                (the JSON literal ``null``).

        Returns:
            The decoded JSON value of a 2xx response.

        Raises:
            TransportError: On DNS, connection, TLS, or timeout failures.
            RemoteError: On any non-2xx status, carrying the body verbatim.
            ResponseFormatError: On a 2xx response whose body is not JSON.
        """
        output = get_output()

        if self._dry_run:
            return self._print_dry_run(request)

        assert self._client is not None, "Client not initialised -- use as context manager"

        kwargs: dict[str, Any] = {
            "method": request.method.value,
            "url": request.path,
        }
        if request.params:
            kwargs["params"] = request.params
        if request.has_body:
            kwargs["content"] = json.dumps(
                request.json_body, ensure_ascii=False, separators=(",", ":")
            ).encode("utf-8")
            kwargs["headers"] = {"Content-Type": "application/json"}

        output.debug(f"{request.describe()} -> {self._base_url}{request.path}")
        try:
            response = self._client.request(**kwargs)
        except httpx.TransportError as exc:
            raise TransportError(
                f"{request.describe()} failed: {exc.__class__.__name__}: {exc}"
            ) from exc

        output.info(f"HTTP {response.status_code} {response.reason_phrase or ''}".rstrip())

        if not response.is_success:
            raise RemoteError(
                response.status_code,
                response.text,
                reason=response.reason_phrase or None,
            )

        return extract_response_data(response)

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _default_headers(self) -> dict[str, str]:
        return {
            API_KEY_HEADER: self._api_key,
            "Accept": "application/json",
        }

    def _print_dry_run(self, request: ApiRequest) -> Any:
        """Print request details to stderr and return a synthetic payload."""
        output = get_output()
        output.info(f"[dry-run] {request.method.value} {self._base_url}{request.path}")
        output.info(f"  Header: {API_KEY_HEADER}: {mask_secret(self._api_key)}")

        for key, value in request.params.items():
            output.info(f"  Param: {key}={value}")

        if request.has_body:
            output.info(f"  Body (JSON): {json.dumps(request.json_body, indent=2)}")

        return {"dry_run": True, "message": "Request was not sent"}
