"""Registry search."""

from typing import Optional

from arxiv import status

from .. import logging
from ..domain import Search, SearchResult
from ..exceptions import SimulatedUpstreamError
from ..services.seed import DEMO_ORCID, orcid_identifier
from . import Response

logger = logging.getLogger(__name__)

FAILURE_TRIGGER = 'error'
"""Queries containing this fail with a 500, to test client error paths."""


def search(query: Optional[str], host: str = 'orcid.org') -> Response:
    """
    Search the registry.

    Every query finds the demo profile, except those containing
    :data:`FAILURE_TRIGGER`.

    Raises
    ------
    :class:`.SimulatedUpstreamError`

    """
    query = query or ''
    if FAILURE_TRIGGER in query:
        logger.debug('Failing search for %r on request', query)
        raise SimulatedUpstreamError('Search failed')
    result = Search(
        result=[SearchResult(orcid_identifier=orcid_identifier(DEMO_ORCID,
                                                               host))],
        num_found=1,
    )
    return result, status.HTTP_200_OK, {}
