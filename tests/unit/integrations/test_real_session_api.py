"""Tests for RealSessionApi against an httpx MockTransport."""

import json

import httpx

from session_metadata.integrations.session_api.real import RealSessionApi
from session_metadata.models import SessionApiError, SessionRecord


def _api(handler) -> tuple[RealSessionApi, list[httpx.Request]]:
    requests: list[httpx.Request] = []

    def recording_handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    client = httpx.Client(
        base_url="http://localhost:4096", transport=httpx.MockTransport(recording_handler)
    )
    return RealSessionApi("http://localhost:4096", client=client), requests


def test_get_session_success() -> None:
    api, requests = _api(
        lambda request: httpx.Response(200, json={"id": "ses-1", "projectID": "proj-123"})
    )

    result = api.get_session("ses-1", "/work")

    assert result == SessionRecord(data={"id": "ses-1", "projectID": "proj-123"})
    assert requests[0].method == "GET"
    assert requests[0].url.path == "/session/ses-1"
    assert requests[0].url.params["directory"] == "/work"


def test_get_session_error_payload_is_verbatim() -> None:
    error_body = {"name": "NotFoundError", "data": {"message": "Session not found"}}
    api, _ = _api(lambda request: httpx.Response(404, json=error_body))

    result = api.get_session("missing", "/work")

    assert result == SessionApiError(payload=error_body)


def test_get_session_non_json_error_body() -> None:
    api, _ = _api(lambda request: httpx.Response(500, text="boom"))

    result = api.get_session("ses-1", "/work")

    assert result == SessionApiError(payload="boom")


def test_get_session_transport_failure() -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    api, _ = _api(refuse)

    result = api.get_session("ses-1", "/work")

    assert isinstance(result, SessionApiError)
    assert result.payload == {"name": "ConnectError", "message": "connection refused"}


def test_get_session_non_object_body() -> None:
    api, _ = _api(lambda request: httpx.Response(200, json=[1, 2]))

    result = api.get_session("ses-1", "/work")

    assert isinstance(result, SessionApiError)
    assert result.payload["name"] == "UnexpectedResponse"


def test_update_session_title_sends_patch() -> None:
    api, requests = _api(
        lambda request: httpx.Response(200, json={"id": "ses-1", "title": "New"})
    )

    result = api.update_session_title("ses-1", "/work", "New")

    assert isinstance(result, SessionRecord)
    assert requests[0].method == "PATCH"
    assert json.loads(requests[0].content) == {"title": "New"}
    assert requests[0].url.params["directory"] == "/work"


def test_client_is_not_opened_until_first_request() -> None:
    api = RealSessionApi("http://localhost:4096")

    api.close()

    assert api._client is None


def test_close_closes_client() -> None:
    client = httpx.Client(
        base_url="http://localhost:4096",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})),
    )
    api = RealSessionApi("http://localhost:4096", client=client)

    api.close()

    assert client.is_closed
