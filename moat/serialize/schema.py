"""
Encoding tables shared by the JSON and XML codecs.

Each model class in :mod:`moat.domain` has exactly one :class:`Entity` here.
The order of an entity's fields is the order in which child elements appear
in XML documents (and keys in JSON objects), following the ORCID 3.0 message
schema. Attributes come first, since they belong to the start tag.

Field kinds:

``attr``
    XML attribute on the owning element; plain JSON field.
``text``
    XML element with character content; plain JSON field.
``value``
    :class:`.domain.Value` wrapper. XML element with character content;
    JSON object ``{"value": ...}``.
``node``
    Nested entity.
``list``
    Repeated nested entity; JSON array.

The tables are checked against the model classes when this module is
imported, see :func:`_validate`.
"""

from typing import Any, Dict, FrozenSet, NamedTuple, Optional, Set, Tuple

from .. import domain
from ..exceptions import EncodeError

NAMESPACES: Dict[str, str] = {
    'common': 'http://www.orcid.org/ns/common',
    'record': 'http://www.orcid.org/ns/record',
    'person': 'http://www.orcid.org/ns/person',
    'personal-details': 'http://www.orcid.org/ns/personal-details',
    'other-name': 'http://www.orcid.org/ns/other-name',
    'researcher-url': 'http://www.orcid.org/ns/researcher-url',
    'email': 'http://www.orcid.org/ns/email',
    'address': 'http://www.orcid.org/ns/address',
    'keyword': 'http://www.orcid.org/ns/keyword',
    'external-identifier': 'http://www.orcid.org/ns/external-identifier',
    'activities': 'http://www.orcid.org/ns/activities',
    'work': 'http://www.orcid.org/ns/work',
    'employment': 'http://www.orcid.org/ns/employment',
    'search': 'http://www.orcid.org/ns/search',
}
"""Prefix to namespace URI, for every namespace an element may live in."""

XSI = 'http://www.w3.org/2001/XMLSchema-instance'
SCHEMA_VERSION = '3.0'

ATTR = 'attr'
TEXT = 'text'
VALUE = 'value'
NODE = 'node'
LIST = 'list'
SCALARS = (ATTR, TEXT, VALUE)


class Field(NamedTuple):
    """Encoding rule for one attribute of a model class."""

    name: str
    """Attribute name on the model class."""

    key: str
    """External name: JSON key, XML local name or XML attribute name."""

    kind: str

    ns: Optional[str] = None
    """Namespace prefix of the XML element. Unused for attributes."""

    type: Any = str
    """Scalar type (``str``, ``int``, ``bool``), or the nested model class."""

    @property
    def is_element(self) -> bool:
        return self.kind != ATTR

    @property
    def qname(self) -> str:
        """ElementTree-style qualified name, ``{uri}local``."""
        return '{%s}%s' % (NAMESPACES[self.ns], self.key)


class Entity(NamedTuple):
    """Encoding rules for one model class."""

    cls: type
    fields: Tuple[Field, ...]
    ns: Optional[str] = None
    """Namespace prefix of the element when it is a document root."""

    tag: Optional[str] = None
    """Local name of the element when it is a document root."""

    @property
    def qname(self) -> str:
        return '{%s}%s' % (NAMESPACES[self.ns], self.tag)

    @property
    def required(self) -> Tuple[str, ...]:
        """Model attributes that have no default value."""
        defaults = self.cls._field_defaults  # type: ignore
        return tuple(f for f in self.cls._fields if f not in defaults)  # type: ignore


def _dates() -> Tuple[Field, ...]:
    return (
        Field('created_date', 'created-date', VALUE, 'common', int),
        Field('last_modified_date', 'last-modified-date', VALUE, 'common',
              int),
    )


def _item_attrs() -> Tuple[Field, ...]:
    return (
        Field('put_code', 'put-code', ATTR, type=int),
        Field('visibility', 'visibility', ATTR),
    )


def _source() -> Field:
    return Field('source', 'source', NODE, 'common', domain.Source)


def _last_modified() -> Field:
    return Field('last_modified_date', 'last-modified-date', VALUE, 'common',
                 int)


_ENTITIES = (
    Entity(domain.OrcidIdentifier, (
        Field('uri', 'uri', TEXT, 'common'),
        Field('path', 'path', TEXT, 'common'),
        Field('host', 'host', TEXT, 'common'),
    )),
    Entity(domain.Source, (
        Field('source_orcid', 'source-orcid', NODE, 'common',
              domain.OrcidIdentifier),
        Field('source_name', 'source-name', VALUE, 'common'),
    )),
    Entity(domain.Name, (
        Field('visibility', 'visibility', ATTR),
        *_dates(),
        Field('given_names', 'given-names', VALUE, 'personal-details'),
        Field('family_name', 'family-name', VALUE, 'personal-details'),
        Field('credit_name', 'credit-name', VALUE, 'personal-details'),
    )),
    Entity(domain.Biography, (
        Field('visibility', 'visibility', ATTR),
        *_dates(),
        Field('content', 'content', TEXT, 'personal-details'),
    )),
    Entity(domain.OtherName, (
        *_item_attrs(),
        *_dates(),
        _source(),
        Field('content', 'content', TEXT, 'other-name'),
    )),
    Entity(domain.OtherNames, (
        _last_modified(),
        Field('other_name', 'other-name', LIST, 'other-name',
              domain.OtherName),
    )),
    Entity(domain.ResearcherUrl, (
        *_item_attrs(),
        *_dates(),
        _source(),
        Field('url_name', 'url-name', TEXT, 'researcher-url'),
        Field('url', 'url', VALUE, 'researcher-url'),
    )),
    Entity(domain.ResearcherUrls, (
        _last_modified(),
        Field('researcher_url', 'researcher-url', LIST, 'researcher-url',
              domain.ResearcherUrl),
    )),
    Entity(domain.Email, (
        *_item_attrs(),
        Field('verified', 'verified', ATTR, type=bool),
        Field('primary', 'primary', ATTR, type=bool),
        *_dates(),
        _source(),
        Field('email', 'email', TEXT, 'email'),
    )),
    Entity(domain.Emails, (
        _last_modified(),
        Field('email', 'email', LIST, 'email', domain.Email),
    )),
    Entity(domain.Address, (
        *_item_attrs(),
        *_dates(),
        _source(),
        Field('country', 'country', VALUE, 'address'),
    )),
    Entity(domain.Addresses, (
        _last_modified(),
        Field('address', 'address', LIST, 'address', domain.Address),
    )),
    Entity(domain.Keyword, (
        *_item_attrs(),
        *_dates(),
        _source(),
        Field('content', 'content', TEXT, 'keyword'),
    )),
    Entity(domain.Keywords, (
        _last_modified(),
        Field('keyword', 'keyword', LIST, 'keyword', domain.Keyword),
    )),
    Entity(domain.ExternalIdentifier, (
        *_item_attrs(),
        *_dates(),
        _source(),
        Field('external_id_type', 'external-id-type', TEXT, 'common'),
        Field('external_id_value', 'external-id-value', TEXT, 'common'),
        Field('external_id_url', 'external-id-url', VALUE, 'common'),
        Field('external_id_relationship', 'external-id-relationship', TEXT,
              'common'),
    )),
    Entity(domain.ExternalIdentifiers, (
        _last_modified(),
        Field('external_identifier', 'external-identifier', LIST,
              'external-identifier', domain.ExternalIdentifier),
    )),
    Entity(domain.Person, (
        Field('path', 'path', ATTR),
        _last_modified(),
        Field('name', 'name', NODE, 'person', domain.Name),
        Field('other_names', 'other-names', NODE, 'other-name',
              domain.OtherNames),
        Field('biography', 'biography', NODE, 'person', domain.Biography),
        Field('researcher_urls', 'researcher-urls', NODE, 'researcher-url',
              domain.ResearcherUrls),
        Field('emails', 'emails', NODE, 'email', domain.Emails),
        Field('addresses', 'addresses', NODE, 'address', domain.Addresses),
        Field('keywords', 'keywords', NODE, 'keyword', domain.Keywords),
        Field('external_identifiers', 'external-identifiers', NODE,
              'external-identifier', domain.ExternalIdentifiers),
    ), 'person', 'person'),
    Entity(domain.Title, (Field('title', 'title', VALUE, 'common'),)),
    Entity(domain.DateYear, (Field('year', 'year', VALUE, 'common'),)),
    Entity(domain.Organization, (Field('name', 'name', TEXT, 'common'),)),
    Entity(domain.WorkSummary, (
        *_item_attrs(),
        _last_modified(),
        Field('title', 'title', NODE, 'work', domain.Title),
        Field('type', 'type', TEXT, 'work'),
    )),
    Entity(domain.WorkGroup, (
        Field('work_summary', 'work-summary', LIST, 'work',
              domain.WorkSummary),
    )),
    Entity(domain.Works, (
        Field('group', 'group', LIST, 'activities', domain.WorkGroup),
    )),
    Entity(domain.EmploymentSummary, (
        *_item_attrs(),
        Field('department_name', 'department-name', TEXT, 'common'),
        Field('role_title', 'role-title', TEXT, 'common'),
        Field('start_date', 'start-date', NODE, 'common', domain.DateYear),
        Field('organization', 'organization', NODE, 'common',
              domain.Organization),
    )),
    Entity(domain.AffiliationGroup, (
        Field('employment_summary', 'employment-summary', LIST, 'employment',
              domain.EmploymentSummary),
    )),
    Entity(domain.Employments, (
        Field('affiliation_group', 'affiliation-group', LIST, 'activities',
              domain.AffiliationGroup),
    )),
    Entity(domain.ActivitiesSummary, (
        Field('employments', 'employments', NODE, 'activities',
              domain.Employments),
        Field('works', 'works', NODE, 'activities', domain.Works),
    )),
    Entity(domain.Record, (
        Field('orcid_identifier', 'orcid-identifier', NODE, 'common',
              domain.OrcidIdentifier),
        Field('person', 'person', NODE, 'person', domain.Person),
        Field('activities_summary', 'activities-summary', NODE, 'activities',
              domain.ActivitiesSummary),
    ), 'record', 'record'),
    Entity(domain.SearchResult, (
        Field('orcid_identifier', 'orcid-identifier', NODE, 'common',
              domain.OrcidIdentifier),
    )),
    Entity(domain.Search, (
        Field('num_found', 'num-found', ATTR, type=int),
        Field('result', 'result', LIST, 'search', domain.SearchResult),
    ), 'search', 'search'),
    Entity(domain.Work, (
        *_item_attrs(),
        Field('title', 'title', NODE, 'work', domain.Title),
        Field('type', 'type', TEXT, 'work'),
        Field('publication_date', 'publication-date', NODE, 'common',
              domain.DateYear),
    ), 'work', 'work'),
    Entity(domain.Employment, (
        *_item_attrs(),
        Field('department_name', 'department-name', TEXT, 'common'),
        Field('role_title', 'role-title', TEXT, 'common'),
        Field('start_date', 'start-date', NODE, 'common', domain.DateYear),
        Field('organization', 'organization', NODE, 'common',
              domain.Organization),
    ), 'employment', 'employment'),
    Entity(domain.PutCodeEcho, (
        Field('put_code', 'put-code', ATTR, type=int),
        Field('status', 'status', TEXT, 'common'),
    ), 'common', 'response'),
    Entity(domain.TokenResponse, (
        Field('access_token', 'access_token', TEXT, 'common'),
        Field('token_type', 'token_type', TEXT, 'common'),
        Field('refresh_token', 'refresh_token', TEXT, 'common'),
        Field('expires_in', 'expires_in', TEXT, 'common', int),
        Field('scope', 'scope', TEXT, 'common'),
        Field('name', 'name', TEXT, 'common'),
        Field('orcid', 'orcid', TEXT, 'common'),
    ), 'common', 'token'),
)

ENTITIES: Dict[type, Entity] = {entity.cls: entity for entity in _ENTITIES}

ROOTS: Dict[str, Entity] = {
    entity.qname: entity for entity in _ENTITIES if entity.tag is not None
}
"""Document root entities by qualified element name."""


def entity_for(cls: type) -> Entity:
    """Get the encoding rules for a model class."""
    try:
        return ENTITIES[cls]
    except KeyError as e:
        raise EncodeError(f'{cls.__name__} is not a registry model') from e


def schema_location(entity: Entity) -> str:
    """The ``xsi:schemaLocation`` value for a document rooted at ``entity``."""
    return f'{NAMESPACES[entity.ns]} ../{entity.ns}-{SCHEMA_VERSION}.xsd'


def _default_elements() -> Dict[type, Tuple[str, str]]:
    names: Dict[type, Tuple[str, str]] = {}
    for entity in _ENTITIES:
        if entity.tag is not None:
            names[entity.cls] = (entity.ns, entity.tag)
    for entity in _ENTITIES:
        for field in entity.fields:
            if field.kind in (NODE, LIST):
                names.setdefault(field.type, (field.ns, field.key))
    return names


DEFAULT_ELEMENTS = _default_elements()
"""Element name used when a value is encoded as a document on its own."""


def _element_names() -> Dict[type, FrozenSet[str]]:
    names: Dict[type, Set[str]] = {cls: set() for cls in ENTITIES}
    for entity in _ENTITIES:
        if entity.tag is not None:
            names[entity.cls].add(entity.qname)
        for field in entity.fields:
            if field.kind in (NODE, LIST):
                names.setdefault(field.type, set()).add(field.qname)
    return {cls: frozenset(qnames) for cls, qnames in names.items()}


ELEMENT_NAMES = _element_names()
"""Every qualified element name a model class may be encoded under."""


def _validate() -> None:
    for entity in _ENTITIES:
        names = [field.name for field in entity.fields]
        if sorted(names) != sorted(entity.cls._fields):  # type: ignore
            raise EncodeError(f'Field table for {entity.cls.__name__} does'
                              f' not match the model: {names}')
        kinds = [field.is_element for field in entity.fields]
        if kinds != sorted(kinds):
            raise EncodeError(f'{entity.cls.__name__}: attributes must'
                              ' precede elements')
        elements = [(f.ns, f.key) for f in entity.fields if f.is_element]
        if len(set(elements)) != len(elements):
            raise EncodeError(f'{entity.cls.__name__}: duplicate element')
        for field in entity.fields:
            if field.is_element and field.ns not in NAMESPACES:
                raise EncodeError(f'{entity.cls.__name__}.{field.name}:'
                                  f' unknown namespace {field.ns}')
            if field.kind in (NODE, LIST) and field.type not in ENTITIES:
                raise EncodeError(f'{entity.cls.__name__}.{field.name}:'
                                  f' unregistered type {field.type}')
            if field.kind in SCALARS and field.type not in (str, int, bool):
                raise EncodeError(f'{entity.cls.__name__}.{field.name}:'
                                  f' unsupported scalar {field.type}')
    missing = set(ENTITIES) - set(DEFAULT_ELEMENTS)
    if missing:
        raise EncodeError(f'No element name for {missing}')


_validate()
