"""Tests for the synchronous HTTP client."""

from __future__ import annotations

import json

import httpx
import pytest

from hevy_bridge.client.sync_client import API_KEY_HEADER, SyncClient
from hevy_bridge.exceptions import RemoteError, ResponseFormatError, TransportError
from hevy_bridge.exit_codes import (
    EXIT_REMOTE_ERROR,
    EXIT_RESPONSE_FORMAT_ERROR,
    EXIT_TRANSPORT_ERROR,
)
from hevy_bridge.models import ApiRequest, HTTPMethod
from hevy_bridge.output import OutputManager, reset_output, set_output


BASE_URL = "https://api.example.com/v1"


@pytest.fixture(autouse=True)
def _clean_output():
    set_output(OutputManager(no_color=True, quiet=True))
    yield
    reset_output()


def _client(handler, **kwargs) -> SyncClient:
    return SyncClient(
        "test-key",
        base_url=BASE_URL,
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


# ---------------------------------------------------------------------------
# Context manager
# ---------------------------------------------------------------------------


class TestContextManager:
    def test_enter_and_exit(self) -> None:
        client = SyncClient("k")
        assert client._client is None
        with client:
            assert client._client is not None
        assert client._client is None


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class TestRequests:
    def test_api_key_header_and_base_url(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"id": "u1"})

        with _client(handler) as client:
            data = client.execute(ApiRequest(path="/user/info"))

        assert data == {"id": "u1"}
        assert len(seen) == 1
        assert str(seen[0].url) == f"{BASE_URL}/user/info"
        assert seen[0].headers[API_KEY_HEADER] == "test-key"
        assert seen[0].headers["accept"] == "application/json"

    def test_query_params_forwarded_unchanged(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"page": 2})

        with _client(handler) as client:
            client.execute(ApiRequest(path="/workouts", params={"page": 2, "pageSize": 5}))

        assert seen[0].url.params["page"] == "2"
        assert seen[0].url.params["pageSize"] == "5"

    def test_json_body_sent(self) -> None:
        seen: list[httpx.Request] = []
        body = {"routine_folder": {"title": "Push Pull"}}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={"id": 42})

        with _client(handler) as client:
            data = client.execute(
                ApiRequest(method=HTTPMethod.POST, path="/routine_folders", json_body=body)
            )

        assert data == {"id": 42}
        assert seen[0].method == "POST"
        assert json.loads(seen[0].content) == body
        assert seen[0].headers["content-type"] == "application/json"

    def test_get_sends_no_body(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        with _client(handler) as client:
            client.execute(ApiRequest(path="/workouts/count"))

        assert seen[0].content == b""

    def test_null_body_sent_on_put(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        with _client(handler) as client:
            client.execute(ApiRequest(method=HTTPMethod.PUT, path="/workouts/w-1"))

        assert seen[0].content == b"null"
        assert seen[0].headers["content-type"] == "application/json"


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------


class TestErrorMapping:
    def test_non_2xx_is_remote_error_with_verbatim_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, content=b'{"error":"not found"}')

        with _client(handler) as client:
            with pytest.raises(RemoteError) as exc_info:
                client.execute(ApiRequest(path="/workouts/missing"))

        exc = exc_info.value
        assert exc.status_code == 404
        assert exc.body == '{"error":"not found"}'
        assert "404" in str(exc)
        assert '{"error":"not found"}' in str(exc)
        assert exc.exit_code == EXIT_REMOTE_ERROR

    @pytest.mark.parametrize("status", [400, 401, 403, 429, 500, 503])
    def test_every_error_status_maps_to_remote_error(self, status: int) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, text="nope")

        with _client(handler) as client:
            with pytest.raises(RemoteError) as exc_info:
                client.execute(ApiRequest(path="/workouts"))
        assert exc_info.value.status_code == status

    def test_no_retry_on_server_error(self) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(503, text="busy")

        with _client(handler) as client:
            with pytest.raises(RemoteError):
                client.execute(ApiRequest(path="/workouts"))
        assert len(calls) == 1

    def test_connection_failure_is_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with _client(handler) as client:
            with pytest.raises(TransportError) as exc_info:
                client.execute(ApiRequest(path="/user/info"))

        assert "connection refused" in str(exc_info.value)
        assert exc_info.value.exit_code == EXIT_TRANSPORT_ERROR

    def test_timeout_is_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with _client(handler) as client:
            with pytest.raises(TransportError):
                client.execute(ApiRequest(path="/user/info"))

    def test_2xx_with_html_is_response_format_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>maintenance</html>")

        with _client(handler) as client:
            with pytest.raises(ResponseFormatError) as exc_info:
                client.execute(ApiRequest(path="/workouts"))
        assert exc_info.value.exit_code == EXIT_RESPONSE_FORMAT_ERROR


# ---------------------------------------------------------------------------
# Dry run
# ---------------------------------------------------------------------------


class TestDryRun:
    def test_dry_run_sends_nothing(self, capsys) -> None:
        set_output(OutputManager(no_color=True))
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={})

        with _client(handler, dry_run=True) as client:
            data = client.execute(
                ApiRequest(
                    method=HTTPMethod.PUT,
                    path="/routines/r1",
                    params={"page": 1},
                    json_body={"routine": {"title": "x"}},
                )
            )

        assert calls == []
        assert data == {"dry_run": True, "message": "Request was not sent"}
        err = capsys.readouterr().err
        assert f"[dry-run] PUT {BASE_URL}/routines/r1" in err
        assert "test****" in err
        assert "test-key" not in err
        assert "page=1" in err
