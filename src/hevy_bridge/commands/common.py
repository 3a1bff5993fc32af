"""Shared plumbing for the resource sub-commands.

Every data command follows the same linear sequence, implemented once in
:func:`run_request`:

1. build the :class:`~hevy_bridge.models.ApiRequest` (parsing ``--json``
   first, so a bad body fails before anything else),
2. resolve the API key from exactly one source,
3. send the request through :class:`~hevy_bridge.client.SyncClient`,
4. print the JSON payload to stdout.

Any :class:`~hevy_bridge.exceptions.HevyBridgeError` along the way is
printed to stderr and turned into ``typer.Exit`` with the error's exit code.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Optional

import typer

from hevy_bridge.models import ApiRequest

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 5


def api_key_option() -> Any:
    """``--api-key`` accepted after the action, overriding the root flag."""
    return typer.Option(
        None,
        "--api-key",
        help="Hevy API key (overrides HEVY_API_KEY and the stored config).",
        show_default=False,
    )


def page_option() -> Any:
    return typer.Option(DEFAULT_PAGE, "--page", min=1, help="Page number (1-based).")


def page_size_option(maximum: int = 10) -> Any:
    return typer.Option(
        DEFAULT_PAGE_SIZE,
        "--page-size",
        min=1,
        help=f"Items per page (the API allows at most {maximum}).",
    )


def json_body_option(schema: str) -> Any:
    return typer.Option(
        ...,
        "--json",
        help=f"Raw JSON request body ({schema}), sent verbatim.",
        show_default=False,
    )


def validate_timestamp(value: Optional[str]) -> Optional[str]:
    """Typer callback: accept ISO 8601 timestamps and return them unchanged.

    A trailing ``Z`` is accepted as UTC. The string is forwarded to the API
    exactly as typed; parsing only rejects obvious typos early.
    """
    if value is None:
        return None
    candidate = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    try:
        datetime.fromisoformat(candidate)
    except ValueError:
        raise typer.BadParameter(
            f"'{value}' is not an ISO 8601 timestamp (e.g. 2024-01-15T00:00:00Z)"
        ) from None
    return value


def _root_option(ctx: typer.Context, key: str, default: Any = None) -> Any:
    """Read an option stored by the root callback in ``ctx.obj``."""
    obj = ctx.find_root().obj or {}
    return obj.get(key, default)


def run_request(
    ctx: typer.Context,
    build: Callable[[], ApiRequest],
    api_key: Optional[str] = None,
) -> None:
    """Build, authenticate, send, and print one API request.

    Args:
        ctx: Typer context; the root callback stores ``api_key`` and
            ``dry_run`` in ``ctx.obj``.
        build: Zero-argument factory for the request. Body parsing happens
            inside it so that invalid JSON fails before credential lookup.
        api_key: Command-level ``--api-key`` value, which wins over the
            root-level flag.

    Raises:
        typer.Exit: With the error's exit code on any
            :class:`~hevy_bridge.exceptions.HevyBridgeError`.
    """
    from hevy_bridge.client import SyncClient
    from hevy_bridge.config import resolve_api_key, resolve_base_url
    from hevy_bridge.exceptions import HevyBridgeError
    from hevy_bridge.output import debug, error, format_response

    try:
        request = build()
        credential = resolve_api_key(api_key or _root_option(ctx, "api_key"))
        debug(f"Using API key from {credential.source.value}")
        with SyncClient(
            credential.value,
            base_url=resolve_base_url(),
            dry_run=_root_option(ctx, "dry_run", False),
        ) as client:
            data = client.execute(request)
    except HevyBridgeError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    format_response(data)
