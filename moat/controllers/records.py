"""Profile retrieval."""

from arxiv import status

from .. import logging
from ..exceptions import RecordNotFound
from ..services.store import RecordStore
from . import Response

logger = logging.getLogger(__name__)


def get_record(store: RecordStore, orcid: str) -> Response:
    """
    Retrieve the full profile for ``orcid``.

    Parameters
    ----------
    store : :class:`.RecordStore`
    orcid : str
        Bare identifier, e.g. ``0000-0001-2345-6789``.

    Returns
    -------
    :class:`.Record`
    int
        An HTTP status code.
    dict
        Extra headers.

    Raises
    ------
    :class:`.RecordNotFound`

    """
    record = store.get_record(orcid)
    if record is None:
        logger.debug('No record for %s', orcid)
        raise RecordNotFound('Record not found')
    return record, status.HTTP_200_OK, {}


def get_person(store: RecordStore, orcid: str) -> Response:
    """Retrieve the person section of the profile for ``orcid``."""
    person = store.get_person(orcid)
    if person is None:
        logger.debug('No person for %s', orcid)
        raise RecordNotFound('Person not found')
    return person, status.HTTP_200_OK, {}
