"""
Semantic comparison of XML documents.

Two documents are equivalent when they have the same elements (by namespace
URI and local name) in the same order, the same attributes (in any order,
ignoring namespace declarations), and the same character content once
surrounding whitespace is trimmed. Indentation, attribute order and prefix
spelling do not matter; comments and processing instructions are ignored.
"""

from typing import Tuple, Union
from xml.etree import ElementTree as ET

from ..exceptions import DecodeError

Document = Union[bytes, str, ET.Element]


def canonicalize(document: Document) -> Tuple:
    """Reduce a document to a nested tuple that compares semantically."""
    if isinstance(document, ET.Element):
        return _canonical(document)
    try:
        return _canonical(ET.fromstring(document))
    except ET.ParseError as e:
        raise DecodeError(f'Malformed XML: {e}') from e


def equivalent(first: Document, second: Document) -> bool:
    """Check whether two documents carry the same information."""
    return canonicalize(first) == canonicalize(second)


def _canonical(element: ET.Element) -> Tuple:
    attributes = tuple(sorted(
        (name, value) for name, value in element.attrib.items()
        if not name.startswith('xmlns')
    ))
    content = []
    if (element.text or '').strip():
        content.append(element.text.strip())  # type: ignore
    for child in element:
        content.append(_canonical(child))
        if (child.tail or '').strip():
            content.append(child.tail.strip())  # type: ignore
    return (element.tag, attributes, tuple(content))
