"""Translation of CLI commands into Hevy API requests.

Each function maps one (resource, action) pair onto an
:class:`~hevy_bridge.models.ApiRequest`. They are pure: nothing here
touches the network, the config file, or the terminal.

Paginated list endpoints take ``page`` and ``pageSize`` query parameters,
forwarded exactly as given. The API reports ``page_count`` in its response;
callers decide whether to ask for another page.
"""

from __future__ import annotations

from typing import Any, Optional
from urllib.parse import quote

from hevy_bridge.models import ApiRequest, HTTPMethod

PAGE_PARAM = "page"
PAGE_SIZE_PARAM = "pageSize"


def _segment(value: str) -> str:
    """URL-escape a single path segment (IDs are user input)."""
    return quote(value, safe="")


def _page(page: int, page_size: int) -> dict[str, Any]:
    return {PAGE_PARAM: page, PAGE_SIZE_PARAM: page_size}


# --- User ---


def user_info() -> ApiRequest:
    return ApiRequest(path="/user/info")


# --- Workouts ---


def list_workouts(page: int, page_size: int) -> ApiRequest:
    return ApiRequest(path="/workouts", params=_page(page, page_size))


def get_workout(workout_id: str) -> ApiRequest:
    return ApiRequest(path=f"/workouts/{_segment(workout_id)}")


def workout_count() -> ApiRequest:
    return ApiRequest(path="/workouts/count")


def workout_events(page: int, page_size: int, since: Optional[str] = None) -> ApiRequest:
    """Workout update/delete events, newest first, optionally since a timestamp."""
    params = _page(page, page_size)
    if since is not None:
        params["since"] = since
    return ApiRequest(path="/workouts/events", params=params)


def create_workout(body: Any) -> ApiRequest:
    return ApiRequest(method=HTTPMethod.POST, path="/workouts", json_body=body)


def update_workout(workout_id: str, body: Any) -> ApiRequest:
    return ApiRequest(
        method=HTTPMethod.PUT,
        path=f"/workouts/{_segment(workout_id)}",
        json_body=body,
    )


# --- Routines ---


def list_routines(page: int, page_size: int) -> ApiRequest:
    return ApiRequest(path="/routines", params=_page(page, page_size))


def get_routine(routine_id: str) -> ApiRequest:
    return ApiRequest(path=f"/routines/{_segment(routine_id)}")


def create_routine(body: Any) -> ApiRequest:
    return ApiRequest(method=HTTPMethod.POST, path="/routines", json_body=body)


def update_routine(routine_id: str, body: Any) -> ApiRequest:
    return ApiRequest(
        method=HTTPMethod.PUT,
        path=f"/routines/{_segment(routine_id)}",
        json_body=body,
    )


# --- Exercise templates ---


def list_exercise_templates(page: int, page_size: int) -> ApiRequest:
    return ApiRequest(path="/exercise_templates", params=_page(page, page_size))


def get_exercise_template(template_id: str) -> ApiRequest:
    return ApiRequest(path=f"/exercise_templates/{_segment(template_id)}")


def create_exercise_template(body: Any) -> ApiRequest:
    return ApiRequest(method=HTTPMethod.POST, path="/exercise_templates", json_body=body)


# --- Routine folders ---


def list_routine_folders(page: int, page_size: int) -> ApiRequest:
    return ApiRequest(path="/routine_folders", params=_page(page, page_size))


def get_routine_folder(folder_id: str) -> ApiRequest:
    return ApiRequest(path=f"/routine_folders/{_segment(folder_id)}")


def create_routine_folder(body: Any) -> ApiRequest:
    return ApiRequest(method=HTTPMethod.POST, path="/routine_folders", json_body=body)


# --- Exercise history ---


def exercise_history(
    template_id: str,
    start: Optional[str] = None,
    end: Optional[str] = None,
) -> ApiRequest:
    """Every logged set for one exercise template, optionally bounded by dates."""
    params: dict[str, Any] = {}
    if start is not None:
        params["start_date"] = start
    if end is not None:
        params["end_date"] = end
    return ApiRequest(path=f"/exercise_history/{_segment(template_id)}", params=params)
