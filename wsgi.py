"""Web Server Gateway Interface entry-point."""

from moat.factory import create_web_app
import os

__flask_app__ = create_web_app()


def application(environ, start_response):    # type: ignore
    """WSGI application."""
    for key in ('API_HOST', 'ORCID_HOST'):
        # uWSGI can pass these in the request environ; they override the
        # hosts used to build ``Location`` headers and identifier URIs.
        value = environ.get(f'MOAT_{key}')
        if value is not None:
            os.environ[f'MOAT_{key}'] = str(value)
            __flask_app__.config[key] = str(value)
    return __flask_app__(environ, start_response)
