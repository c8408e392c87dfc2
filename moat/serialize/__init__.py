"""
Dual-format codec for registry values.

The same :mod:`moat.domain` value can be written as JSON (:func:`to_json`,
:func:`dumps_json`) or as namespaced XML (:func:`to_xml`,
:func:`dumps_xml`), and read back from either (:func:`from_json`,
:func:`from_xml`). Encoding rules for both live in :mod:`.schema`.
"""

from .compare import canonicalize, equivalent
from .json_codec import to_json, from_json, dumps as dumps_json, \
    loads as loads_json
from .xml_codec import to_xml, from_xml, dumps as dumps_xml, PROLOG

JSON = 'json'
XML = 'xml'

MEDIA_TYPES = {
    JSON: 'application/json',
    XML: 'application/xml',
}


def dumps(obj: object, fmt: str) -> bytes:
    """Serialize ``obj`` in format ``fmt`` (:data:`JSON` or :data:`XML`)."""
    if fmt == XML:
        return dumps_xml(obj)
    return dumps_json(obj)
