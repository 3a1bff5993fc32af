"""Exercise template commands -- built-in and custom exercises.

``exercise_template_id`` values from these commands are needed when
creating workouts or routines.
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
)


exercises_app = typer.Typer(no_args_is_help=True)


@exercises_app.command("list")
def exercises_list(
    ctx: typer.Context,
    page: int = page_option(),
    page_size: int = page_size_option(100),
    api_key: Optional[str] = api_key_option(),
) -> None:
    """List exercise templates (paginated).

    Returns: page, page_count, exercise_templates[]. Each template has id,
    title, type, primary_muscle_group, secondary_muscle_groups, is_custom.

    Example: hevy-bridge exercises list --page-size 100
    """
    run_request(ctx, lambda: endpoints.list_exercise_templates(page, page_size), api_key)


@exercises_app.command("get")
def exercises_get(
    ctx: typer.Context,
    template_id: str = typer.Argument(help="The exercise template ID."),
    api_key: Optional[str] = api_key_option(),
) -> None:
    """Get a single exercise template by ID.

    Example: hevy-bridge exercises get D04AC939
    """
    run_request(ctx, lambda: endpoints.get_exercise_template(template_id), api_key)


@exercises_app.command("create")
def exercises_create(
    ctx: typer.Context,
    json_body: str = json_body_option("CreateCustomExerciseRequestBody"),
    api_key: Optional[str] = api_key_option(),
) -> None:
    """Create a custom exercise template.

    JSON schema (CreateCustomExerciseRequestBody):

      {
        "exercise": {
          "title": "My Custom Press",
          "exercise_type": "weight_reps",
          "equipment_category": "barbell",
          "muscle_group": "chest",
          "other_muscles": ["triceps", "shoulders"]
        }
      }

    exercise_type: weight_reps, reps_only, bodyweight_reps,
    bodyweight_assisted_reps, duration, weight_duration, distance_duration,
    short_distance_weight

    equipment_category: none, barbell, dumbbell, kettlebell, machine,
    plate, resistance_band, suspension, other

    muscle_group: abdominals, shoulders, biceps, triceps, forearms,
    quadriceps, hamstrings, calves, glutes, abductors, adductors, lats,
    upper_back, traps, lower_back, chest, cardio, neck, full_body, other

    Example: hevy-bridge exercises create --json '{"exercise":{...}}'
    """
    run_request(
        ctx,
        lambda: endpoints.create_exercise_template(
            parse_json_body(json_body, "exercises create")
        ),
        api_key,
    )
