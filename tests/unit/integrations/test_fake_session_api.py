"""Tests for FakeSessionApi implementation."""

from session_metadata.integrations.session_api.fake import FakeSessionApi
from session_metadata.models import SessionApiError, SessionRecord


class TestFakeSessionApi:
    """Tests for the FakeSessionApi fake implementation."""

    def test_get_unknown_session_is_error(self) -> None:
        api = FakeSessionApi()

        result = api.get_session("nope", "/dir")

        assert isinstance(result, SessionApiError)

    def test_get_known_session(self) -> None:
        api = FakeSessionApi(sessions={"ses-1": {"id": "ses-1", "projectID": "p"}})

        result = api.get_session("ses-1", "/dir")

        assert result == SessionRecord(data={"id": "ses-1", "projectID": "p"})
        assert api.get_calls == [("ses-1", "/dir")]

    def test_update_title_mutates_record(self) -> None:
        api = FakeSessionApi(sessions={"ses-1": {"id": "ses-1", "title": "old"}})

        result = api.update_session_title("ses-1", "/dir", "new")

        assert isinstance(result, SessionRecord)
        assert result.data["title"] == "new"
        assert api.sessions["ses-1"]["title"] == "new"
        assert api.title_updates == [("ses-1", "new")]

    def test_update_error_is_returned(self) -> None:
        api = FakeSessionApi(sessions={"ses-1": {"id": "ses-1"}}, update_error={"code": 403})

        result = api.update_session_title("ses-1", "/dir", "new")

        assert result == SessionApiError(payload={"code": 403})
        assert "title" not in api.sessions["ses-1"]
