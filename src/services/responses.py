"""
API Gateway request/response utilities.

This module provides reusable functions for decoding proxy-integration
request bodies and building JSON responses with CORS and security headers.
"""

import base64
import binascii
import json
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'DENY',
    'Strict-Transport-Security': 'max-age=31536000; includeSubDomains',
    'Referrer-Policy': 'no-referrer',
}


class InvalidBodyError(ValueError):
    """Raised when a request body is not a JSON object."""
    pass


def cors_headers(allowed_origin: str) -> Dict[str, str]:
    """
    CORS headers for the contact endpoint.

    Args:
        allowed_origin: Origin allowed to call the endpoint ('*' for any)

    Returns:
        Dict of Access-Control-* headers
    """
    return {
        'Access-Control-Allow-Origin': allowed_origin,
        'Access-Control-Allow-Methods': 'POST, OPTIONS',
        'Access-Control-Allow-Headers': 'Content-Type, Authorization',
    }


def build_response(
    status_code: int,
    body: Optional[Dict[str, Any]],
    allowed_origin: str
) -> Dict[str, Any]:
    """
    Build an API Gateway proxy response.

    Args:
        status_code: HTTP status code
        body: JSON-serializable body, or None for an empty body
        allowed_origin: Value of Access-Control-Allow-Origin

    Returns:
        Dict with statusCode, headers and body

    Example:
        >>> build_response(202, {'status': 'accepted'}, '*')['statusCode']
        202
    """
    headers = {'Content-Type': 'application/json'}
    headers.update(SECURITY_HEADERS)
    headers.update(cors_headers(allowed_origin))

    return {
        'statusCode': status_code,
        'headers': headers,
        'body': json.dumps(body, ensure_ascii=False) if body is not None else ''
    }


def parse_json_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Decode the JSON object carried by an API Gateway proxy event.

    Args:
        event: API Gateway proxy event

    Returns:
        Decoded body as a dict

    Raises:
        InvalidBodyError: If the body is missing, not JSON, or not a JSON object
    """
    body = event.get('body')
    if not body:
        raise InvalidBodyError("request body is empty")

    if event.get('isBase64Encoded'):
        try:
            body = base64.b64decode(body, validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise InvalidBodyError(f"request body is not valid base64 UTF-8: {e}")

    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise InvalidBodyError(f"request body is not valid JSON: {e}")

    if not isinstance(data, dict):
        raise InvalidBodyError(f"request body must be a JSON object, got {type(data).__name__}")

    return data


def request_method(event: Dict[str, Any]) -> str:
    """
    HTTP method of a proxy event (REST v1 or HTTP API v2 payload).
    """
    method = event.get('httpMethod')
    if not method:
        http = (event.get('requestContext') or {}).get('http') or {}
        method = http.get('method') or ''
    return method.upper()
