"""WSGI middleware that logs every request and response."""

import io
import time
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from werkzeug.exceptions import HTTPException
from werkzeug.routing import Map

from . import logging

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(object):
    """
    Log requests before and after the application handles them.

    Before dispatch, the handler name, headers and body are logged at DEBUG.
    The body is read here and handed on to the application unchanged.
    After dispatch, method, path, status and duration are logged at INFO.

    Every response also gets ``Access-Control-Allow-Origin: *``, so browser
    clients on any origin can talk to the mock.
    """

    def __init__(self, app: Callable, url_map: Map,
                 handler_names: Mapping[str, str]) -> None:
        """
        Wrap a WSGI application.

        Parameters
        ----------
        app : callable
            The WSGI application, usually ``flask_app.wsgi_app``.
        url_map : :class:`werkzeug.routing.Map`
            Used to find which endpoint a request is routed to.
        handler_names : dict
            Endpoint name to the handler name written to the log.

        """
        self.app = app
        self.url_map = url_map
        self.handler_names = handler_names

    def __call__(self, environ: dict, start_response: Callable) -> Iterable:
        start = time.monotonic()
        logger.debug('Handling request', extra={
            'handler-name': self.handler_name(environ),
            'headers': request_headers(environ),
            'body': read_body(environ),
        })
        response: Dict[str, Any] = {}

        def _start_response(status: str, headers: list,
                            exc_info: Optional[Any] = None) -> Callable:
            response['status'] = int(status.split(' ', 1)[0])
            headers.append(('Access-Control-Allow-Origin', '*'))
            return start_response(status, headers, exc_info)

        try:
            return self.app(environ, _start_response)
        finally:
            logger.info('Request processed', extra={
                'method': environ.get('REQUEST_METHOD'),
                'path': environ.get('PATH_INFO'),
                'status': response.get('status'),
                'duration': time.monotonic() - start,
            })

    def handler_name(self, environ: dict) -> str:
        """Name of the handler this request is routed to, or ``unknown``."""
        try:
            endpoint, _ = self.url_map.bind_to_environ(environ).match()
        except HTTPException:
            return 'unknown'
        return self.handler_names.get(endpoint, 'unknown')


def request_headers(environ: dict) -> Dict[str, str]:
    headers = {
        key[5:].replace('_', '-').title(): value
        for key, value in environ.items() if key.startswith('HTTP_')
    }
    for key in ('CONTENT_TYPE', 'CONTENT_LENGTH'):
        if environ.get(key):
            headers[key.replace('_', '-').title()] = environ[key]
    return headers


def read_body(environ: dict) -> str:
    """Read the request body and put it back for the application."""
    try:
        length = int(environ.get('CONTENT_LENGTH') or 0)
    except ValueError:
        length = 0
    if length <= 0:
        return ''
    data = environ['wsgi.input'].read(length)
    environ['wsgi.input'] = io.BytesIO(data)
    return data.decode('utf-8', errors='replace')
