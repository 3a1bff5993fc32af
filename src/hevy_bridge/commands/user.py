"""User commands -- the account that owns the API key."""

from __future__ import annotations

from typing import Optional

import typer

from hevy_bridge import endpoints
from hevy_bridge.commands.common import api_key_option, run_request


user_app = typer.Typer(no_args_is_help=True)


@user_app.command("info")
def user_info(
    ctx: typer.Context,
    api_key: Optional[str] = api_key_option(),
) -> None:
    """Get the authenticated user's profile information.

    Returns JSON with: id, name, url

    Example: hevy-bridge user info
    """
    run_request(ctx, endpoints.user_info, api_key)
