"""Routine folder commands."""

from __future__ import annotations

from typing import Optional

import typer

from hevy_bridge import endpoints
from hevy_bridge.client.response import parse_json_body
from hevy_bridge.commands.common import (
    api_key_option,
    json_body_option,
    page_option,
    page_size_option,
    run_request,
)


folders_app = typer.Typer(no_args_is_help=True)


@folders_app.command("list")
def folders_list(
    ctx: typer.Context,
    page: int = page_option(),
    page_size: int = page_size_option(10),
    api_key: Optional[str] = api_key_option(),
) -> None:
    """List routine folders (paginated).

    Returns: page, page_count, routine_folders[]. Each folder has id,
    index, title, updated_at, created_at.

    Example: hevy-bridge folders list
    """
    run_request(ctx, lambda: endpoints.list_routine_folders(page, page_size), api_key)


@folders_app.command("get")
def folders_get(
    ctx: typer.Context,
    folder_id: str = typer.Argument(help="The folder ID."),
    api_key: Optional[str] = api_key_option(),
) -> None:
    """Get a single routine folder by ID.

    Example: hevy-bridge folders get 42
    """
    run_request(ctx, lambda: endpoints.get_routine_folder(folder_id), api_key)


@folders_app.command("create")
def folders_create(
    ctx: typer.Context,
    json_body: str = json_body_option("PostRoutineFolderRequestBody"),
    api_key: Optional[str] = api_key_option(),
) -> None:
    """Create a new routine folder.

    The folder is created at index 0 and existing folders shift up by one.

    JSON schema: {"routine_folder": {"title": "Push Pull"}}

    Example: hevy-bridge folders create --json '{"routine_folder":{"title":"My Folder"}}'
    """
    run_request(
        ctx,
        lambda: endpoints.create_routine_folder(parse_json_body(json_body, "folders create")),
        api_key,
    )
