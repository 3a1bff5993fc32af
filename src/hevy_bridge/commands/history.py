"""Exercise history commands -- set-level data across workouts."""

from __future__ import annotations

from typing import Optional

import typer

from hevy_bridge import endpoints
from hevy_bridge.commands.common import api_key_option, run_request, validate_timestamp


history_app = typer.Typer(no_args_is_help=True)


@history_app.command("get")
def history_get(
    ctx: typer.Context,
    exercise_template_id: str = typer.Argument(help="The exercise template ID."),
    start: Optional[str] = typer.Option(
        None,
        "--start",
        callback=validate_timestamp,
        help="Only sets on or after this ISO 8601 timestamp.",
    ),
    end: Optional[str] = typer.Option(
        None,
        "--end",
        callback=validate_timestamp,
        help="Only sets on or before this ISO 8601 timestamp.",
    ),
    api_key: Optional[str] = api_key_option(),
) -> None:
    """Get set-level history for one exercise template.

    Returns every set recorded for the exercise, each with workout context
    (workout_id, title, timestamps) and set data (weight_kg, reps, rpe,
    distance_meters, duration_seconds, set_type).

    Examples:

      hevy-bridge history get D04AC939

      hevy-bridge history get D04AC939 --start 2024-01-01T00:00:00Z --end 2024-12-31T23:59:59Z
    """
    run_request(
        ctx,
        lambda: endpoints.exercise_history(exercise_template_id, start, end),
        api_key,
    )
