"""
Works and employments.

Reads return a generic activity for whatever put-code is asked for, and
writes are acknowledged without looking at (or keeping) the payload.
"""

from arxiv import status

from .. import logging
from ..domain import Work, Employment, Title, DateYear, Organization, \
    PutCodeEcho, Value, Visibility
from ..services.putcodes import new_put_code
from . import Response

logger = logging.getLogger(__name__)

WORK = 'work'
EMPLOYMENT = 'employment'
UPDATED = 'updated'


def location(host: str, orcid: str, section: str, put_code: int) -> str:
    """Absolute URL of an activity on the public API."""
    return f'https://{host}/v3.0/{orcid}/{section}/{put_code}'


def get_work(put_code: int) -> Response:
    """
    Retrieve a work.

    Parameters
    ----------
    put_code : int
        Echoed back in the response.

    Returns
    -------
    :class:`.Work`
    int
        An HTTP status code.
    dict
        Extra headers.

    """
    work = Work(
        put_code=put_code,
        title=Title(title=Value('Retrieved Mock Work')),
        type='journal-article',
        publication_date=DateYear(year=Value('2023')),
        visibility=Visibility.PUBLIC,
    )
    return work, status.HTTP_200_OK, {}


def get_employment(put_code: int) -> Response:
    """Retrieve an employment; see :func:`get_work`."""
    employment = Employment(
        put_code=put_code,
        department_name='Mock Department',
        role_title='Mock Researcher',
        start_date=DateYear(year=Value('2020')),
        organization=Organization(name='Mock Org'),
        visibility=Visibility.PUBLIC,
    )
    return employment, status.HTTP_200_OK, {}


def create_activity(host: str, orcid: str, section: str) -> Response:
    """
    Accept a new work or employment.

    Parameters
    ----------
    host : str
        Public API host, for the ``Location`` header.
    orcid : str
    section : str
        :data:`WORK` or :data:`EMPLOYMENT`.

    Returns
    -------
    :class:`.PutCodeEcho`
        With the newly assigned put-code.
    int
        201 Created.
    dict
        ``Location`` of the new activity.

    """
    put_code = new_put_code()
    logger.debug('Created %s %i for %s', section, put_code, orcid)
    headers = {'Location': location(host, orcid, section, put_code)}
    return PutCodeEcho(put_code=put_code), status.HTTP_201_CREATED, headers


def update_activity(host: str, orcid: str, section: str,
                    put_code: int) -> Response:
    """Accept changes to an existing work or employment."""
    logger.debug('Updated %s %i for %s', section, put_code, orcid)
    headers = {'Location': location(host, orcid, section, put_code)}
    echo = PutCodeEcho(put_code=put_code, status=UPDATED)
    return echo, status.HTTP_200_OK, headers
