"""Run the mock registry with the development server."""

from . import logging
from .factory import create_web_app

logger = logging.getLogger(__name__)


def main() -> None:
    """Serve on the port from ``MOAT_PORT`` or ``PORT`` (default 8080)."""
    app = create_web_app()
    address = app.config['PORT']
    host, _, port = address.rpartition(':')
    logger.info('ORCID v3 Mock Service running on %s (Version: %s)',
                address, app.config['VERSION'])
    logger.info("Try: curl -X POST http://localhost%s/oauth/token"
                " -d 'client_id=APP-123&grant_type=client_credentials'",
                address)
    app.run(host=host or '0.0.0.0', port=int(port), threaded=True)


if __name__ == '__main__':
    main()
