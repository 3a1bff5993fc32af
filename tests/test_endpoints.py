"""Tests for the command -> request translation table."""

from __future__ import annotations

import pytest

from hevy_bridge import endpoints
from hevy_bridge.models import HTTPMethod


@pytest.mark.parametrize(
    "request_, method, path",
    [
        (endpoints.user_info(), HTTPMethod.GET, "/user/info"),
        (endpoints.get_workout("w1"), HTTPMethod.GET, "/workouts/w1"),
        (endpoints.workout_count(), HTTPMethod.GET, "/workouts/count"),
        (endpoints.create_workout({}), HTTPMethod.POST, "/workouts"),
        (endpoints.update_workout("w1", {}), HTTPMethod.PUT, "/workouts/w1"),
        (endpoints.get_routine("r1"), HTTPMethod.GET, "/routines/r1"),
        (endpoints.create_routine({}), HTTPMethod.POST, "/routines"),
        (endpoints.update_routine("r1", {}), HTTPMethod.PUT, "/routines/r1"),
        (endpoints.get_exercise_template("D04AC939"), HTTPMethod.GET, "/exercise_templates/D04AC939"),
        (endpoints.create_exercise_template({}), HTTPMethod.POST, "/exercise_templates"),
        (endpoints.get_routine_folder("42"), HTTPMethod.GET, "/routine_folders/42"),
        (endpoints.create_routine_folder({}), HTTPMethod.POST, "/routine_folders"),
        (endpoints.exercise_history("D04AC939"), HTTPMethod.GET, "/exercise_history/D04AC939"),
    ],
)
def test_method_and_path(request_, method, path) -> None:
    assert request_.method == method
    assert request_.path == path


@pytest.mark.parametrize(
    "builder, path",
    [
        (endpoints.list_workouts, "/workouts"),
        (endpoints.list_routines, "/routines"),
        (endpoints.list_exercise_templates, "/exercise_templates"),
        (endpoints.list_routine_folders, "/routine_folders"),
    ],
)
def test_list_endpoints_forward_pagination(builder, path) -> None:
    request = builder(3, 7)
    assert request.method == HTTPMethod.GET
    assert request.path == path
    assert request.params == {"page": 3, "pageSize": 7}
    assert request.json_body is None


def test_ids_are_escaped() -> None:
    assert endpoints.get_workout("a/b c").path == "/workouts/a%2Fb%20c"


def test_workout_events_since_optional() -> None:
    assert endpoints.workout_events(1, 5).params == {"page": 1, "pageSize": 5}
    assert endpoints.workout_events(1, 5, "2024-01-01T00:00:00Z").params["since"] == (
        "2024-01-01T00:00:00Z"
    )


def test_history_date_range() -> None:
    request = endpoints.exercise_history("X", start="2024-01-01", end="2024-12-31")
    assert request.params == {"start_date": "2024-01-01", "end_date": "2024-12-31"}
    assert endpoints.exercise_history("X").params == {}


def test_body_forwarded_verbatim() -> None:
    body = {"workout": {"title": "Leg Day", "unknown_field": [1]}}
    assert endpoints.create_workout(body).json_body == body


def test_describe() -> None:
    assert endpoints.update_routine("r1", {}).describe() == "PUT /routines/r1"
