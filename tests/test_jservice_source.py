"""Tests for the jService HTTP question source."""

from unittest.mock import MagicMock, PropertyMock, patch

import pytest
import requests

from jtrivia.config import TriviaConfig
from jtrivia.constants import JSERVICE_RANDOM_URL
from jtrivia.errors import ResponseReadError, TransportError
from jtrivia.source import JServiceSource


@pytest.fixture
def config(tmp_path):
    return TriviaConfig(str(tmp_path / "missing.json"))


def mock_session_class(response=None, get_error=None):
    """Build a stand-in for requests.Session returning the given response."""
    session = MagicMock()
    if get_error is not None:
        session.get.side_effect = get_error
    else:
        session.get.return_value = response
    session_class = MagicMock()
    session_class.return_value.__enter__.return_value = session
    return session_class, session


def mock_response(content=b"", status_code=200):
    response = MagicMock()
    response.content = content
    response.status_code = status_code
    response.ok = status_code < 400
    response.__enter__.return_value = response
    return response


class TestFetch:

    def test_requests_random_endpoint_with_connection_close(self, config):
        session_class, session = mock_session_class(mock_response(b"[]"))

        with patch('jtrivia.source.jservice.requests.Session', session_class):
            JServiceSource(config).fetch()

        args, kwargs = session.get.call_args
        assert args[0] == JSERVICE_RANDOM_URL
        assert kwargs['headers'] == {'Connection': 'close'}
        assert kwargs['timeout'] is None

    def test_body_is_trimmed(self, config):
        body = b'  \n[{"id": 1}]\r\n\t '
        session_class, _ = mock_session_class(mock_response(body))

        with patch('jtrivia.source.jservice.requests.Session', session_class):
            result = JServiceSource(config).fetch()

        assert result == '[{"id": 1}]'

    def test_utf8_body_is_decoded(self, config):
        body = '[{"question": "Café"}]'.encode('utf-8')
        session_class, _ = mock_session_class(mock_response(body))

        with patch('jtrivia.source.jservice.requests.Session', session_class):
            result = JServiceSource(config).fetch()

        assert "Café" in result

    def test_error_status_still_returns_body(self, config):
        session_class, _ = mock_session_class(mock_response(b"Not Found", status_code=404))

        with patch('jtrivia.source.jservice.requests.Session', session_class):
            result = JServiceSource(config).fetch()

        assert result == "Not Found"

    def test_configured_endpoint_and_timeout_are_used(self, tmp_path):
        settings = tmp_path / "settings.json"
        settings.write_text('{"source": {"endpoint": "http://localhost:9/random", "timeout": 2.5}}')
        session_class, session = mock_session_class(mock_response(b"[]"))

        with patch('jtrivia.source.jservice.requests.Session', session_class):
            JServiceSource(TriviaConfig(str(settings))).fetch()

        args, kwargs = session.get.call_args
        assert args[0] == "http://localhost:9/random"
        assert kwargs['timeout'] == 2.5


class TestFetchErrors:

    @pytest.mark.parametrize("error", [
        requests.exceptions.ConnectionError("connection refused"),
        requests.exceptions.Timeout("timed out"),
        requests.exceptions.InvalidURL("bad url")
    ])
    def test_request_failure_raises_transport_error(self, config, error):
        session_class, _ = mock_session_class(get_error=error)

        with patch('jtrivia.source.jservice.requests.Session', session_class):
            with pytest.raises(TransportError) as exc_info:
                JServiceSource(config).fetch()

        assert exc_info.value.__cause__ is error

    def test_invalid_utf8_raises_read_error(self, config):
        session_class, _ = mock_session_class(mock_response(b"\xff\xfe[]"))

        with patch('jtrivia.source.jservice.requests.Session', session_class):
            with pytest.raises(ResponseReadError):
                JServiceSource(config).fetch()

    def test_broken_stream_raises_read_error(self, config):
        response = MagicMock()
        response.ok = True
        response.__enter__.return_value = response
        type(response).content = PropertyMock(
            side_effect=requests.exceptions.ChunkedEncodingError("connection broken")
        )
        session_class, _ = mock_session_class(response)

        with patch('jtrivia.source.jservice.requests.Session', session_class):
            with pytest.raises(ResponseReadError):
                JServiceSource(config).fetch()

    def test_no_retry_on_failure(self, config):
        session_class, session = mock_session_class(
            get_error=requests.exceptions.ConnectionError("down")
        )

        with patch('jtrivia.source.jservice.requests.Session', session_class):
            with pytest.raises(TransportError):
                JServiceSource(config).fetch()

        assert session.get.call_count == 1
