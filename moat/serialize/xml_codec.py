"""
Namespaced XML encoding of registry values.

Documents follow the ORCID 3.0 message vocabulary: every element is
qualified by a namespace from :data:`.schema.NAMESPACES`, ``put-code``,
``visibility`` and a few other flags are unqualified attributes, and the
root element carries ``xsi:schemaLocation``. ElementTree declares every
namespace used in the tree on the root element.

Decoding resolves elements by namespace URI and local name, so documents
written with other prefixes (or default namespaces) decode the same way.
"""

import re
from typing import Any, Dict, List, Optional, Type, TypeVar, Union
from xml.etree import ElementTree as ET

from .. import domain, logging
from ..exceptions import DecodeError, EncodeError
from .schema import NAMESPACES, XSI, ATTR, LIST, NODE, TEXT, VALUE, ROOTS, \
    DEFAULT_ELEMENTS, ELEMENT_NAMES, Entity, Field, entity_for, \
    schema_location

logger = logging.getLogger(__name__)

T = TypeVar('T')

PROLOG = '<?xml version="1.0" encoding="UTF-8"?>\n'
SCHEMA_LOCATION = '{%s}schemaLocation' % XSI

for _prefix, _uri in NAMESPACES.items():
    ET.register_namespace(_prefix, _uri)
ET.register_namespace('xsi', XSI)

_KNOWN_URIS = frozenset(NAMESPACES.values())

# Characters outside the XML 1.0 ``Char`` production.
_UNREPRESENTABLE = re.compile(
    '[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]'
)


def to_xml(obj: Any) -> ET.Element:
    """
    Build the XML element tree for a :mod:`moat.domain` value.

    Document roots (:class:`.domain.Record`, :class:`.domain.Person`, ...)
    use their registered element name; any other value is named after the
    first element that holds it, e.g. ``common:source-orcid``.

    Raises
    ------
    :class:`.EncodeError`
        If ``obj`` is not a registry model, or holds a string with a
        character XML 1.0 cannot carry (e.g. ``\\x07``).

    """
    entity = entity_for(type(obj))
    prefix, local = DEFAULT_ELEMENTS[entity.cls]
    root = _build(obj, entity, '{%s}%s' % (NAMESPACES[prefix], local))
    root.set(SCHEMA_LOCATION, schema_location(entity._replace(ns=prefix)))
    return root


def dumps(obj: Any, indent: Optional[str] = '  ') -> bytes:
    """
    Serialize a registry value as a UTF-8 XML document, prolog included.

    Parameters
    ----------
    obj : tuple
        A :mod:`moat.domain` value.
    indent : str or None
        Indentation per nesting level; ``None`` for a single line.

    """
    root = to_xml(obj)
    if indent is not None:
        ET.indent(root, space=indent)
    # ElementTree leaves carriage returns in text unescaped,
    # and parsers turn a literal one into a newline.
    body = ET.tostring(root, encoding='unicode').replace('\r', '&#13;')
    return (PROLOG + body).encode('utf-8')


def from_xml(payload: Union[bytes, str], cls: Optional[Type[T]] = None) -> T:
    """
    Decode an XML document into a registry value.

    Parameters
    ----------
    payload : bytes or str
        The document. Comments, processing instructions and whitespace
        between elements are ignored.
    cls : type
        Expected model class. If omitted, the class is chosen by the root
        element, which must then be a document root such as
        ``record:record``.

    Raises
    ------
    :class:`.DecodeError`
        If the document is malformed or truncated, uses an element outside
        the known namespaces, or lacks a required element. Also if ``cls``
        is given and the root element is not one ``cls`` is encoded as.

    """
    try:
        root = ET.fromstring(payload)
    except ET.ParseError as e:
        raise DecodeError(f'Malformed XML: {e}') from e
    for element in root.iter():
        _split(element.tag)

    if cls is None:
        try:
            entity = ROOTS[root.tag]
        except KeyError as e:
            raise DecodeError(f'Not a registry document: {root.tag}') from e
    else:
        entity = entity_for(cls)
        if root.tag not in ELEMENT_NAMES[entity.cls]:
            raise DecodeError(f'{root.tag} is not a {entity.cls.__name__}')
    return _parse(root, entity)  # type: ignore


def _split(tag: Any) -> tuple:
    """Split ``{uri}local`` and make sure ``uri`` is a registry namespace."""
    if not isinstance(tag, str) or not tag.startswith('{'):
        raise DecodeError(f'Element {tag} has no namespace')
    uri, local = tag[1:].split('}', 1)
    if uri not in _KNOWN_URIS:
        raise DecodeError(f'Element {local} is in unknown namespace {uri}')
    return uri, local


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    text = str(value)
    bad = _UNREPRESENTABLE.search(text)
    if bad:
        raise EncodeError(f'{bad.group()!r} cannot be written as XML')
    return text


def _build(obj: Any, entity: Entity, qname: str) -> ET.Element:
    element = ET.Element(qname)
    for field in entity.fields:
        value = getattr(obj, field.name)
        if value is None or (field.kind == VALUE and value.value is None):
            continue
        if field.kind == ATTR:
            element.set(field.key, _text(value))
        elif field.kind == TEXT:
            ET.SubElement(element, field.qname).text = _text(value)
        elif field.kind == VALUE:
            ET.SubElement(element, field.qname).text = _text(value.value)
        elif field.kind == NODE:
            element.append(_build(value, entity_for(type(value)),
                                  field.qname))
        elif field.kind == LIST:
            for item in value:
                element.append(_build(item, entity_for(type(item)),
                                      field.qname))
    return element


def _scalar(field: Field, raw: str) -> Any:
    if field.type is bool:
        if raw.strip() == 'true':
            return True
        if raw.strip() == 'false':
            return False
        raise DecodeError(f'{field.key}: expected true or false, got {raw!r}')
    if field.type is int:
        try:
            return int(raw.strip())
        except ValueError as e:
            raise DecodeError(f'{field.key}: expected an integer,'
                              f' got {raw!r}') from e
    return raw


def _parse(element: ET.Element, entity: Entity) -> Any:
    children: Dict[str, List[ET.Element]] = {}
    for child in element:
        children.setdefault(child.tag, []).append(child)

    values: Dict[str, Any] = {}
    for field in entity.fields:
        if field.kind == ATTR:
            raw = element.get(field.key)
            if raw is not None:
                values[field.name] = _scalar(field, raw)
            continue

        found = children.pop(field.qname, [])
        if field.kind == LIST:
            values[field.name] = [_parse(child, entity_for(field.type))
                                  for child in found]
            continue
        if not found:
            continue
        if len(found) > 1:
            raise DecodeError(f'{field.key} may only appear once')
        child = found[0]
        if field.kind == TEXT:
            values[field.name] = _scalar(field, child.text or '')
        elif field.kind == VALUE:
            values[field.name] = domain.Value(_scalar(field, child.text or ''))
        elif field.kind == NODE:
            values[field.name] = _parse(child, entity_for(field.type))

    for tag in children:
        logger.debug('Skipping unsupported element %s in %s', tag,
                     entity.cls.__name__)

    missing = [name for name in entity.required if name not in values]
    if missing:
        raise DecodeError(f'{element.tag} is missing {missing}')
    return entity.cls(**values)
