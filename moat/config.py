"""Flask configuration."""

import os


def get_port() -> str:
    """
    Listening address, normalized to ``:<port>``.

    ``MOAT_PORT`` wins over ``PORT``; empty values are ignored.
    """
    for key in ('MOAT_PORT', 'PORT'):
        port = os.environ.get(key)
        if port:
            return port if port.startswith(':') else f':{port}'
    return ':8080'


VERSION = os.environ.get('MOAT_VERSION', 'dev')
"""Release of this service; set at build time."""

PORT = get_port()

API_PREFIX = '/v3.0/'
"""Paths under this prefix get content negotiation (XML by default)."""

API_HOST = os.environ.get('MOAT_API_HOST', 'api.orcid.org')
"""Host used in ``Location`` headers for created/updated activities."""

ORCID_HOST = os.environ.get('MOAT_ORCID_HOST', 'orcid.org')
"""Host of the canonical identifier URIs in seeded records."""

LOGFILE = os.environ.get('LOGFILE')
LOGLEVEL = os.environ.get('LOGLEVEL', '10')

JSON_SORT_KEYS = False
