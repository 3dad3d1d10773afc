import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest
import requests

from app.utils.gemini_client import call_gemini


def fake_http(status, text):
    response = MagicMock()
    response.status_code = status
    response.ok = 200 <= status < 400
    response.text = text
    return response


def test_sends_key_header_and_parses_json():
    with patch("app.utils.gemini_client.requests.post", return_value=fake_http(200, '{"candidates": []}')) as post:
        result = call_gemini("https://upstream.test/gen", "secret", {"contents": []}, timeout=5)

    assert result.ok is True
    assert result.status == 200
    assert result.data == {"candidates": []}
    assert post.call_args.kwargs["headers"]["x-goog-api-key"] == "secret"
    assert post.call_args.kwargs["json"] == {"contents": []}
    assert post.call_args.kwargs["timeout"] == 5


def test_non_json_body_is_kept_raw():
    with patch("app.utils.gemini_client.requests.post", return_value=fake_http(200, "<html>")):
        result = call_gemini("https://upstream.test/gen", "k", {})
    assert result.data is None
    assert result.body == "<html>"


def test_error_status_is_returned_not_raised():
    with patch("app.utils.gemini_client.requests.post", return_value=fake_http(500, "internal")):
        result = call_gemini("https://upstream.test/gen", "k", {})
    assert result.ok is False
    assert result.status == 500
    assert result.body == "internal"


def test_connection_failure_propagates():
    with patch("app.utils.gemini_client.requests.post", side_effect=requests.ConnectionError("down")):
        with pytest.raises(requests.ConnectionError):
            call_gemini("https://upstream.test/gen", "k", {})


def test_undecodable_body_is_replaced_not_dropped():
    response = requests.Response()
    response.status_code = 200
    response._content = b"\xff\xfe not utf-8"
    response.encoding = "utf-8"
    with patch("app.utils.gemini_client.requests.post", return_value=response):
        result = call_gemini("https://upstream.test/gen", "k", {})
    assert result.body is not None
    assert "not utf-8" in result.body
    assert result.data is None
