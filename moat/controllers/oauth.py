"""OAuth 2.0 token and authorization endpoints, with fixed grants."""

import re
from typing import Dict, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from arxiv import status

from .. import logging
from ..domain import TokenResponse
from ..exceptions import ClientInputError
from ..services.seed import DEMO_ORCID
from . import Response

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'
AUTHORIZATION_CODE = 'mock-auth-code-12345'

# Every client is issued the same long-lived token for the demo user,
# whatever it asks for.
TOKEN = TokenResponse(
    access_token='mock-access-token-12345',
    token_type='bearer',
    refresh_token='mock-refresh-token-67890',
    expires_in=631138518,
    scope='/read-limited /activities/update',
    name='Sofia Garcia',
    orcid=DEMO_ORCID,
)

_BAD_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')


def parse_form(body: str) -> Dict[str, str]:
    """
    Parse an ``application/x-www-form-urlencoded`` body.

    Raises
    ------
    :class:`.ClientInputError`
        If the body has a broken percent-escape or uses ``;`` separators.

    """
    if _BAD_ESCAPE.search(body):
        raise ClientInputError('Invalid request')
    if ';' in body:
        raise ClientInputError('Invalid request')
    return dict(parse_qsl(body, keep_blank_values=True))


def issue_token(body: str, content_type: Optional[str]) -> Response:
    """
    Issue an access token.

    Parameters
    ----------
    body : str
        Raw request body.
    content_type : str
        Media type of the request body. Only form bodies are parsed.

    Returns
    -------
    :class:`.TokenResponse`
    int
        An HTTP status code.
    dict
        Extra headers.

    """
    params: Dict[str, str] = {}
    if content_type == FORM_CONTENT_TYPE:
        params = parse_form(body)
    logger.debug('Issuing token to client %s for grant %s',
                 params.get('client_id'), params.get('grant_type'))
    return TOKEN, status.HTTP_200_OK, {}


def authorize(redirect_uri: Optional[str], state: Optional[str]) -> str:
    """
    Approve an authorization request without asking anybody.

    Returns
    -------
    str
        The ``redirect_uri`` with ``code`` (and ``state``, if given) added
        to its query.

    Raises
    ------
    :class:`.ClientInputError`
        If ``redirect_uri`` is missing.

    """
    if not redirect_uri:
        raise ClientInputError('Missing redirect_uri')
    params = [('code', AUTHORIZATION_CODE)]
    if state:
        params.append(('state', state))
    parts = urlsplit(redirect_uri)
    query = '&'.join(q for q in (parts.query, urlencode(params)) if q)
    target = urlunsplit(parts._replace(query=query))
    logger.debug('Redirecting authorization to %s', target)
    return target
