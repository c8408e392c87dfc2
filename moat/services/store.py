"""
In-memory lookup of registry profiles by identifier.

The store is read by every request thread and written once, when the
application is created. Reads share a lock; the load takes it exclusively.
"""

import threading
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Optional

from flask import Flask, current_app

from .. import logging
from ..domain import Person, Record
from . import seed

logger = logging.getLogger(__name__)

EXTENSION = 'moat.store'
SECTIONS = ('work', 'employment')
"""Activity sections that have a per-identifier slot."""


class RWLock(object):
    """Many readers or one writer."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writing:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            while self._writing or self._readers:
                self._cond.wait()
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


class RecordStore(object):
    """Profiles keyed by the bare identifier, e.g. ``0000-0001-2345-6789``."""

    def __init__(self) -> None:
        self._lock = RWLock()
        self._records: Dict[str, Record] = {}
        self._activities: Dict[str, Dict[str, Dict[int, bytes]]] = {}

    def load(self, records: Iterable[Record]) -> None:
        """Add ``records``, replacing any with the same identifier."""
        with self._lock.write():
            for record in records:
                orcid = record.orcid_identifier.path
                self._records[orcid] = record
                self._activities[orcid] = {section: {}
                                           for section in SECTIONS}
                logger.debug('Loaded record %s', orcid)

    def get_record(self, orcid: str) -> Optional[Record]:
        """Get the full profile for ``orcid``, or ``None``."""
        with self._lock.read():
            return self._records.get(orcid)

    def get_person(self, orcid: str) -> Optional[Person]:
        """Get the person section for ``orcid``, or ``None``."""
        record = self.get_record(orcid)
        if record is None:
            return None
        return record.person

    def get_activity(self, orcid: str, section: str,
                     put_code: int) -> Optional[bytes]:
        """
        Get a stored activity document.

        Slots exist for every loaded identifier but nothing writes to them
        yet; submitted works and employments are acknowledged, not kept.
        """
        if section not in SECTIONS:
            raise ValueError(f'No such activity section: {section}')
        with self._lock.read():
            return self._activities.get(orcid, {}).get(section, {}) \
                .get(put_code)

    def identifiers(self) -> List[str]:
        with self._lock.read():
            return list(self._records)

    def __contains__(self, orcid: object) -> bool:
        with self._lock.read():
            return orcid in self._records

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._records)


def init_app(app: Flask, store: Optional[RecordStore] = None) -> RecordStore:
    """
    Attach a record store to ``app``.

    Parameters
    ----------
    app : :class:`flask.Flask`
    store : :class:`RecordStore`
        If not provided, a new store is created and loaded with the demo
        population.

    """
    if store is None:
        store = RecordStore()
        store.load(seed.demo_records(app.config.get('ORCID_HOST',
                                                    'orcid.org')))
    app.extensions[EXTENSION] = store
    logger.info('Record store ready with %i profiles', len(store))
    return store


def current_store() -> RecordStore:
    """Get the record store of the current application."""
    store: RecordStore = current_app.extensions[EXTENSION]
    return store
