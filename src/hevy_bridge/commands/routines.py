"""Routine commands -- routines are workout templates with target sets."""

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


routines_app = typer.Typer(no_args_is_help=True)


@routines_app.command("list")
def routines_list(
    ctx: typer.Context,
    page: int = page_option(),
    page_size: int = page_size_option(10),
    api_key: Optional[str] = api_key_option(),
) -> None:
    """List routines (paginated).

    Returns: page, page_count, routines[]. Each routine includes exercises
    with target sets and an optional rep_range.

    Example: hevy-bridge routines list --page 1 --page-size 5
    """
    run_request(ctx, lambda: endpoints.list_routines(page, page_size), api_key)


@routines_app.command("get")
def routines_get(
    ctx: typer.Context,
    routine_id: str = typer.Argument(help="The routine ID."),
    api_key: Optional[str] = api_key_option(),
) -> None:
    """Get a single routine by its ID.

    Example: hevy-bridge routines get <ROUTINE_ID>
    """
    run_request(ctx, lambda: endpoints.get_routine(routine_id), api_key)


@routines_app.command("create")
def routines_create(
    ctx: typer.Context,
    json_body: str = json_body_option("PostRoutinesRequestBody"),
    api_key: Optional[str] = api_key_option(),
) -> None:
    """Create a new routine.

    JSON schema (PostRoutinesRequestBody):

      {
        "routine": {
          "title": "Push Day",
          "folder_id": null,
          "notes": "Focus on form",
          "exercises": [
            {
              "exercise_template_id": "D04AC939",
              "superset_id": null,
              "rest_seconds": 90,
              "notes": "Slow and controlled",
              "sets": [
                {
                  "type": "normal",
                  "weight_kg": 80,
                  "reps": 10,
                  "rep_range": {"start": 8, "end": 12}
                }
              ]
            }
          ]
        }
      }

    Example: hevy-bridge routines create --json '{"routine":{...}}'
    """
    run_request(
        ctx,
        lambda: endpoints.create_routine(parse_json_body(json_body, "routines create")),
        api_key,
    )


@routines_app.command("update")
def routines_update(
    ctx: typer.Context,
    routine_id: str = typer.Argument(help="The routine ID to update."),
    json_body: str = json_body_option("PutRoutinesRequestBody"),
    api_key: Optional[str] = api_key_option(),
) -> None:
    """Update an existing routine.

    JSON schema (PutRoutinesRequestBody), the same as create but without
    folder_id:

      {"routine": {"title": "Updated Push Day", "notes": "...", "exercises": [...]}}

    Example: hevy-bridge routines update <ID> --json '{"routine":{...}}'
    """
    run_request(
        ctx,
        lambda: endpoints.update_routine(
            routine_id, parse_json_body(json_body, "routines update")
        ),
        api_key,
    )
