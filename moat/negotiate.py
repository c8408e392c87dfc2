"""
Content negotiation for registry responses.

The versioned API (``/v3.0/...``) answers in XML unless the client asks for
JSON in its ``Accept`` header, like the real registry does. Everything else
(the OAuth endpoints) always answers in JSON.
"""

from typing import Any, Dict, Optional

from flask import Response, current_app, request

from . import logging, serialize
from .exceptions import EncodeError
from .serialize import JSON, XML, MEDIA_TYPES

logger = logging.getLogger(__name__)

API_PREFIX = '/v3.0/'


def choose_format(path: str, accept: Optional[str],
                  prefix: str = API_PREFIX) -> str:
    """
    Pick the response format for a request.

    Parameters
    ----------
    path : str
        Request path.
    accept : str or None
        Raw value of the ``Accept`` header.
    prefix : str
        Path prefix of the versioned API.

    Returns
    -------
    str
        :data:`.serialize.JSON` or :data:`.serialize.XML`.

    """
    if not path.startswith(prefix):
        return JSON
    if accept and MEDIA_TYPES[JSON] in accept:
        return JSON
    return XML


def content_type(fmt: str) -> str:
    return f'{MEDIA_TYPES[fmt]}; charset=utf-8'


def render(value: Any, fmt: str, status_code: int = 200,
           headers: Optional[Dict[str, str]] = None) -> Response:
    """
    Serialize ``value`` as ``fmt`` into a response.

    If the value cannot be encoded the failure is logged and the response
    goes out with an empty body; the status and headers are already decided
    at that point.
    """
    try:
        body = serialize.dumps(value, fmt)
    except EncodeError as e:
        logger.error('Failed to encode %s response: %s', fmt, e)
        body = b''
    response = Response(body, status=status_code, headers=headers or {})
    response.headers['Content-Type'] = content_type(fmt)
    return response


def respond(value: Any, status_code: int = 200,
            headers: Optional[Dict[str, str]] = None) -> Response:
    """Render ``value`` in the format negotiated for the current request."""
    fmt = choose_format(request.path, request.headers.get('Accept'),
                        current_app.config.get('API_PREFIX', API_PREFIX))
    logger.debug('Negotiated %s for %s', fmt, request.path)
    return render(value, fmt, status_code, headers)


def respond_json(value: Any, status_code: int = 200,
                 headers: Optional[Dict[str, str]] = None) -> Response:
    """Render ``value`` as JSON regardless of the request headers."""
    return render(value, JSON, status_code, headers)
