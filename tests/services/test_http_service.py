from markcrawl.services.http_service import HttpService
from markcrawl.services.fetcher import HttpServiceFetcher
from markcrawl.domain import CrawlPolicy
from markcrawl.exceptions import HttpFetchError
from unittest.mock import Mock
import requests


def test_fetch_success():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = 'hello world'
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch('http://example.com')
    assert response.status_code == 200
    assert response.text == 'hello world'
    assert response.ok


def test_fetch_sends_user_agent_and_custom_headers():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = ''
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client, timeout=30)
    http.fetch('http://example.com', headers={'X-Token': 'abc'}, timeout=7)
    _, kwargs = mock_http_client.call_args
    assert kwargs['headers'] == {'User-Agent': 'TestAgent', 'X-Token': 'abc'}
    assert kwargs['timeout'] == 7


def test_custom_headers_override_user_agent():
    http = HttpService(user_agent='TestAgent', http_client=Mock())
    assert http.build_headers({'User-Agent': 'Other'}) == {'User-Agent': 'Other'}


def test_fetch_wraps_requests_exception():
    mock_http_client = Mock()
    mock_http_client.side_effect = requests.exceptions.Timeout("timed out")
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)

    try:
        http.fetch('http://example.com')
        assert False, "expected HttpFetchError"
    except HttpFetchError as e:
        assert "http://example.com" in str(e)


def test_fetch_content_type_and_final_url():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = '<html>test</html>'
    mock_http_client.return_value.headers = {'Content-Type': 'text/html; charset=utf-8'}
    mock_http_client.return_value.url = 'http://example.com/landing'
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch('http://example.com')
    assert response.content_type == 'text/html; charset=utf-8'
    assert response.url == 'http://example.com/landing'


def test_fetch_missing_content_type():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = 'data'
    mock_http_client.return_value.headers = {}
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch('http://example.com')
    assert response.content_type is None
    assert response.url == 'http://example.com'


def test_non_success_status_is_not_ok():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 404
    mock_http_client.return_value.text = 'missing'
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    assert not http.fetch('http://example.com').ok


def test_fetch_bubbles_unexpected_exceptions():
    """Verify that non-requests exceptions from headers.get() are NOT swallowed."""
    mock_http_client = Mock()
    mock_response = Mock()
    mock_response.status_code = 200
    mock_response.text = 'test'
    mock_response.headers.get.side_effect = RuntimeError("Real bug in headers.get()")
    mock_http_client.return_value = mock_response
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)

    try:
        http.fetch('http://example.com')
        assert False, "expected RuntimeError to bubble up"
    except RuntimeError as e:
        assert "Real bug" in str(e)


def test_http_fetcher_applies_policy_headers_and_timeout():
    http_service = Mock()
    policy = CrawlPolicy(url='http://example.com', custom_headers={'Cookie': 'a=b'}, timeout_seconds=12)
    HttpServiceFetcher(http_service).fetch('http://example.com/page', policy)
    http_service.fetch.assert_called_once_with('http://example.com/page', headers={'Cookie': 'a=b'}, timeout=12)
