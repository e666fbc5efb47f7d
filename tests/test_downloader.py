from unittest import mock

import pytest
import requests

from bbcschedules.downloader import DEFAULT_USER_AGENT, ScheduleDownloader
from bbcschedules.errors import FetchFailed

URL = "http://www.bbc.co.uk/bbcthree/programmes/schedules/2011/4/7/ataglance"


def make_response(status_code=200, text=""):
    response = mock.Mock()
    response.status_code = status_code
    response.text = text
    response.content = text.encode("utf-8")
    return response


def test_fetch_returns_page_text():
    downloader = ScheduleDownloader(timeout=5)
    with mock.patch.object(
        downloader.session, "get", return_value=make_response(text="<html></html>")
    ) as get:
        assert downloader.fetch(URL) == "<html></html>"

    get.assert_called_once_with(URL, timeout=5)
    assert downloader.get_stats() == {
        "total_requests": 1,
        "failed_requests": 0,
        "bytes_received": 13,
    }


def test_fetch_empty_page_is_not_a_failure():
    downloader = ScheduleDownloader()
    with mock.patch.object(downloader.session, "get", return_value=make_response(text="")):
        assert downloader.fetch(URL) == ""


def test_fetch_non_success_status_raises():
    downloader = ScheduleDownloader()
    with mock.patch.object(downloader.session, "get", return_value=make_response(404)):
        with pytest.raises(FetchFailed) as excinfo:
            downloader.fetch(URL)

    assert excinfo.value.url == URL
    assert excinfo.value.status_code == 404
    assert URL in str(excinfo.value)
    assert downloader.get_stats()["failed_requests"] == 1


def test_fetch_connection_error_raises():
    downloader = ScheduleDownloader()
    with mock.patch.object(
        downloader.session, "get", side_effect=requests.exceptions.ConnectionError("refused")
    ):
        with pytest.raises(FetchFailed) as excinfo:
            downloader.fetch(URL)

    assert excinfo.value.url == URL
    assert excinfo.value.status_code is None


def test_fetch_timeout_raises():
    downloader = ScheduleDownloader(timeout=3)
    with mock.patch.object(downloader.session, "get", side_effect=requests.exceptions.Timeout()):
        with pytest.raises(FetchFailed, match="timeout after 3s") as excinfo:
            downloader.fetch(URL)

    assert isinstance(excinfo.value.__cause__, requests.exceptions.Timeout)


def test_session_headers_and_user_agent():
    assert ScheduleDownloader().session.headers["User-Agent"] == DEFAULT_USER_AGENT
    assert ScheduleDownloader(user_agent="test/1.0").session.headers["User-Agent"] == "test/1.0"


def test_context_manager_closes_session():
    with ScheduleDownloader() as downloader:
        assert downloader.session is not None
    assert downloader.session is None


def test_fetch_after_close_reopens_session():
    downloader = ScheduleDownloader()
    downloader.close()
    with mock.patch("requests.Session.get", return_value=make_response(text="ok")):
        assert downloader.fetch(URL) == "ok"
