"""Workout commands -- list, view, count, create, update, and events.

Workouts are the core data type in Hevy. Each workout has a title,
start/end timestamps and a list of exercises with their sets.
"""

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
    validate_timestamp,
)


workouts_app = typer.Typer(no_args_is_help=True)

_WORKOUT_SCHEMA = "PostWorkoutsRequestBody"


@workouts_app.command("list")
def workouts_list(
    ctx: typer.Context,
    page: int = page_option(),
    page_size: int = page_size_option(10),
    api_key: Optional[str] = api_key_option(),
) -> None:
    """List workouts (paginated).

    Returns JSON with: page, page_count, workouts[]. Each workout includes
    id, title, description, start_time, end_time, created_at, updated_at,
    routine_id and exercises[].

    Example: hevy-bridge workouts list --page 1 --page-size 5
    """
    run_request(ctx, lambda: endpoints.list_workouts(page, page_size), api_key)


@workouts_app.command("get")
def workouts_get(
    ctx: typer.Context,
    workout_id: str = typer.Argument(help="The workout ID (UUID)."),
    api_key: Optional[str] = api_key_option(),
) -> None:
    """Get a single workout by its ID, including all exercises and sets.

    Example: hevy-bridge workouts get b459cba5-cd6d-463c-abd6-54f8eafcadcb
    """
    run_request(ctx, lambda: endpoints.get_workout(workout_id), api_key)


@workouts_app.command("count")
def workouts_count(
    ctx: typer.Context,
    api_key: Optional[str] = api_key_option(),
) -> None:
    """Get the total number of workouts on the account.

    Returns JSON: {"workout_count": <number>}

    Example: hevy-bridge workouts count
    """
    run_request(ctx, endpoints.workout_count, api_key)


@workouts_app.command("events")
def workouts_events(
    ctx: typer.Context,
    page: int = page_option(),
    page_size: int = page_size_option(10),
    since: Optional[str] = typer.Option(
        None,
        "--since",
        callback=validate_timestamp,
        help="Only events after this ISO 8601 timestamp (e.g. 2024-01-01T00:00:00Z).",
    ),
    api_key: Optional[str] = api_key_option(),
) -> None:
    """List workout events (updates and deletes) since a given date.

    Useful for keeping an external copy in sync. Events are ordered newest
    to oldest. Returns: page, page_count, events[] (each of type "updated"
    or "deleted").

    Example: hevy-bridge workouts events --since 2024-01-01T00:00:00Z
    """
    run_request(ctx, lambda: endpoints.workout_events(page, page_size, since), api_key)


@workouts_app.command("create")
def workouts_create(
    ctx: typer.Context,
    json_body: str = json_body_option(_WORKOUT_SCHEMA),
    api_key: Optional[str] = api_key_option(),
) -> None:
    """Create a new workout.

    The JSON body must match the PostWorkoutsRequestBody schema:

      {
        "workout": {
          "title": "Leg Day",
          "description": "Optional description",
          "start_time": "2024-08-14T12:00:00Z",
          "end_time": "2024-08-14T12:30:00Z",
          "is_private": false,
          "exercises": [
            {
              "exercise_template_id": "D04AC939",
              "superset_id": null,
              "notes": "Felt good",
              "sets": [
                {"type": "normal", "weight_kg": 100, "reps": 10, "rpe": 8.5}
              ]
            }
          ]
        }
      }

    Set types: "normal", "warmup", "failure", "dropset".
    RPE values: 6, 7, 7.5, 8, 8.5, 9, 9.5, 10. Weights are in kilograms.

    Example: hevy-bridge workouts create --json '{"workout":{...}}'
    """
    run_request(
        ctx,
        lambda: endpoints.create_workout(parse_json_body(json_body, "workouts create")),
        api_key,
    )


@workouts_app.command("update")
def workouts_update(
    ctx: typer.Context,
    workout_id: str = typer.Argument(help="The workout ID to update (UUID)."),
    json_body: str = json_body_option(_WORKOUT_SCHEMA),
    api_key: Optional[str] = api_key_option(),
) -> None:
    """Update an existing workout.

    Takes the workout ID and a JSON body with the same schema as
    `workouts create`.

    Example: hevy-bridge workouts update <ID> --json '{"workout":{...}}'
    """
    run_request(
        ctx,
        lambda: endpoints.update_workout(
            workout_id, parse_json_body(json_body, "workouts update")
        ),
        api_key,
    )
