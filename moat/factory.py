"""Application factory for the mock registry."""

from typing import Optional

from flask import Flask, Response
from werkzeug.exceptions import HTTPException

from . import logging, routes
from .middleware import RequestLoggingMiddleware
from .services import store
from .services.store import RecordStore


def create_web_app(record_store: Optional[RecordStore] = None) -> Flask:
    """
    Initialize and configure the mock registry application.

    Parameters
    ----------
    record_store : :class:`.RecordStore`
        Profiles to serve. If not provided, the demo population is loaded.

    """
    app = Flask('moat')
    app.config.from_pyfile('config.py')
    logging.setup_logger(app.config['LOGLEVEL'], app.config['LOGFILE'])

    store.init_app(app, record_store)
    app.register_blueprint(routes.auth)
    app.register_blueprint(routes.api)
    register_error_handlers(app)

    app.wsgi_app = RequestLoggingMiddleware(  # type: ignore
        app.wsgi_app, app.url_map, routes.HANDLER_NAMES
    )
    return app


def register_error_handlers(app: Flask) -> None:
    """Register error handlers for the Flask app."""
    app.errorhandler(HTTPException)(plain_text_exception)


def plain_text_exception(error: HTTPException) -> Response:
    """Render exceptions as plain text, whatever format was asked for."""
    return Response(f'{error.description}\n', status=error.code or 500,
                    content_type='text/plain; charset=utf-8')
