"""
Tests for API Gateway request/response utilities.
"""

import base64
import json
import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

from services import responses
from services.responses import InvalidBodyError


class TestBuildResponse:
    """Test build_response."""

    def test_build_response_json_body(self):
        """Test status code, JSON body and headers."""
        result = responses.build_response(202, {'status': 'accepted'}, 'https://example.com')

        assert result['statusCode'] == 202
        assert json.loads(result['body']) == {'status': 'accepted'}
        headers = result['headers']
        assert headers['Content-Type'] == 'application/json'
        assert headers['Access-Control-Allow-Origin'] == 'https://example.com'
        assert headers['Access-Control-Allow-Methods'] == 'POST, OPTIONS'
        assert headers['Access-Control-Allow-Headers'] == 'Content-Type, Authorization'
        assert headers['X-Content-Type-Options'] == 'nosniff'
        assert headers['X-Frame-Options'] == 'DENY'

    def test_build_response_empty_body(self):
        """Test None body is sent as an empty string."""
        result = responses.build_response(200, None, '*')

        assert result['body'] == ''
        assert result['headers']['Access-Control-Allow-Origin'] == '*'

    def test_build_response_keeps_non_ascii(self):
        """Test non-ASCII text is not escaped."""
        result = responses.build_response(400, {'message': 'お名前'}, '*')

        assert 'お名前' in result['body']


class TestParseJsonBody:
    """Test parse_json_body."""

    def test_parse_json_object(self):
        """Test a JSON object body is decoded."""
        event = {'body': json.dumps({'name': 'A'})}

        assert responses.parse_json_body(event) == {'name': 'A'}

    def test_parse_base64_body(self):
        """Test base64-encoded bodies are decoded first."""
        raw = json.dumps({'name': '山田'}).encode('utf-8')
        event = {'body': base64.b64encode(raw).decode('ascii'), 'isBase64Encoded': True}

        assert responses.parse_json_body(event) == {'name': '山田'}

    @pytest.mark.parametrize("body", [None, ''])
    def test_parse_empty_body(self, body):
        """Test missing body is rejected."""
        with pytest.raises(InvalidBodyError, match="empty"):
            responses.parse_json_body({'body': body})

    def test_parse_invalid_json(self):
        """Test malformed JSON is rejected."""
        with pytest.raises(InvalidBodyError, match="not valid JSON"):
            responses.parse_json_body({'body': '{"name": '})

    @pytest.mark.parametrize("body", ['[1, 2]', '"text"', '42', 'null'])
    def test_parse_non_object(self, body):
        """Test JSON that is not an object is rejected."""
        with pytest.raises(InvalidBodyError, match="must be a JSON object"):
            responses.parse_json_body({'body': body})

    def test_parse_invalid_base64(self):
        """Test undecodable base64 is rejected."""
        with pytest.raises(InvalidBodyError, match="base64"):
            responses.parse_json_body({'body': '!!!', 'isBase64Encoded': True})

    def test_invalid_body_error_is_value_error(self):
        assert issubclass(InvalidBodyError, ValueError)


class TestRequestMethod:
    """Test request_method."""

    def test_rest_api_event(self):
        assert responses.request_method({'httpMethod': 'post'}) == 'POST'

    def test_http_api_event(self):
        event = {'requestContext': {'http': {'method': 'OPTIONS'}}}

        assert responses.request_method(event) == 'OPTIONS'

    def test_unknown_method(self):
        assert responses.request_method({}) == ''

    def test_null_request_context(self):
        """Test null requestContext and http sections are tolerated."""
        assert responses.request_method({'httpMethod': None, 'requestContext': None}) == ''
        assert responses.request_method({'requestContext': {'http': None}}) == ''


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
