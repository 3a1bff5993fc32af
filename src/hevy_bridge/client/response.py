"""JSON decoding at the edges of the HTTP client.

:func:`extract_response_data` decodes a successful response body and
:func:`parse_json_body` decodes the raw ``--json`` text a user passes to
create/update commands. Both are strict: anything that is not valid JSON
becomes a typed error rather than being passed through as text.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from hevy_bridge.exceptions import RequestBodyError, ResponseFormatError


def extract_response_data(response: httpx.Response) -> Any:
    """Decode the body of a 2xx response.

    Args:
        response: The :class:`httpx.Response` to decode.

    Returns:
        The decoded JSON value.

    Raises:
        ResponseFormatError: If the body is empty or not valid JSON.
    """
    if not response.content:
        raise ResponseFormatError(
            f"HTTP {response.status_code} response had an empty body; expected JSON"
        )
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        snippet = response.text[:200]
        raise ResponseFormatError(
            f"HTTP {response.status_code} response is not valid JSON ({exc}): {snippet}"
        ) from exc


def _reject_constant(name: str) -> Any:
    """``json.loads`` hook: ``NaN`` and ``Infinity`` are not JSON."""
    raise ValueError(f"{name} is not a valid JSON value")


def parse_json_body(raw: str, help_command: str | None = None) -> Any:
    """Parse the raw ``--json`` option value before any network activity.

    The decoded value is forwarded as-is; no schema validation happens
    locally, the API enforces its own. Python's ``json`` module extensions
    (``NaN``, ``Infinity``, ``-Infinity``) are rejected since they cannot
    be sent on the wire.

    Args:
        raw: JSON text exactly as given on the command line.
        help_command: Command whose ``--help`` documents the expected shape,
            e.g. ``"workouts create"``. Mentioned in the error message.

    Raises:
        RequestBodyError: If *raw* is not valid JSON.
    """
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        message = f"Invalid JSON body: {exc}"
        if help_command:
            message += f". See `hevy-bridge {help_command} --help` for the expected schema."
        raise RequestBodyError(message) from exc
