"""Tests for the requests-backed order gateway.

``requests.Session.post`` is patched, so no real HTTP request is made.
"""

from unittest.mock import Mock, patch

import pytest
import requests

from cupcake.domain.exceptions import TransportError
from cupcake.infrastructure.http.requests_order_gateway import RequestsOrderGateway
from cupcake.infrastructure.settings import Settings

BODY = b'{"type":0,"quantity":3}'


@pytest.fixture
def settings():
    return Settings(endpoint_url="https://orders.test/api/cupcakes", timeout_seconds=10)


def _response(status_code: int, content: bytes) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.content = content
    return response


def test_session_sends_json_headers(settings):
    gateway = RequestsOrderGateway(settings)
    assert gateway.session.headers["Content-Type"] == "application/json"
    assert gateway.session.headers["Accept"] == "application/json"


@patch("cupcake.infrastructure.http.requests_order_gateway.requests.Session.post")
def test_post_order_returns_body(mock_post, settings):
    mock_post.return_value = _response(201, b'{"echo":true}')

    result = RequestsOrderGateway(settings).post_order(BODY)

    assert result == b'{"echo":true}'
    mock_post.assert_called_once()
    call_args = mock_post.call_args
    assert call_args.args[0] == "https://orders.test/api/cupcakes"
    assert call_args.kwargs["data"] == BODY
    assert call_args.kwargs["timeout"] == 10


@patch("cupcake.infrastructure.http.requests_order_gateway.requests.Session.post")
def test_default_timeout_is_left_to_the_client(mock_post):
    mock_post.return_value = _response(200, b"{}")
    RequestsOrderGateway(Settings()).post_order(BODY)
    assert mock_post.call_args.kwargs["timeout"] is None


@patch("cupcake.infrastructure.http.requests_order_gateway.requests.Session.post")
def test_empty_body_raises_transport_error(mock_post, settings):
    mock_post.return_value = _response(204, b"")
    with pytest.raises(TransportError, match="No data in response: HTTP 204"):
        RequestsOrderGateway(settings).post_order(BODY)


@patch("cupcake.infrastructure.http.requests_order_gateway.requests.Session.post")
def test_error_status_with_body_is_returned(mock_post, settings):
    mock_post.return_value = _response(500, b"<html>Server Error</html>")
    assert RequestsOrderGateway(settings).post_order(BODY) == b"<html>Server Error</html>"


@patch("cupcake.infrastructure.http.requests_order_gateway.requests.Session.post")
def test_connection_error_raises_transport_error(mock_post, settings):
    mock_post.side_effect = requests.ConnectionError("Name or service not known")
    with pytest.raises(TransportError, match="Name or service not known"):
        RequestsOrderGateway(settings).post_order(BODY)


@patch("cupcake.infrastructure.http.requests_order_gateway.requests.Session.post")
def test_timeout_raises_transport_error(mock_post, settings):
    mock_post.side_effect = requests.Timeout("read timed out")
    with pytest.raises(TransportError, match="read timed out"):
        RequestsOrderGateway(settings).post_order(BODY)
