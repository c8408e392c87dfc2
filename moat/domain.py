"""
Core data structures for the mock ORCID registry.

These are format-agnostic snapshots of profile data. Both wire encodings
(see :mod:`moat.serialize`) are derived from the same instances, so nothing
here knows about JSON keys, XML namespaces or attributes.

Optional sub-structures are ``None`` when absent; an empty string or an empty
list means "present but empty".
"""

from typing import Any, NamedTuple, Optional, List


class Visibility(object):
    """Known visibility levels for profile items."""

    PUBLIC = 'public'
    LIMITED = 'limited'
    REGISTERED_ONLY = 'registered-only'
    PRIVATE = 'private'
    LEVELS = (PUBLIC, LIMITED, REGISTERED_ONLY, PRIVATE)


class Value(NamedTuple):
    """A scalar that the registry wraps in a ``value`` container."""

    value: Any
    """A string, or an integer for timestamps (epoch milliseconds)."""


class OrcidIdentifier(NamedTuple):
    """The canonical identifier of a registry profile."""

    uri: str
    """E.g. ``https://orcid.org/0000-0001-2345-6789``."""

    path: str
    """The bare identifier, e.g. ``0000-0001-2345-6789``. Never validated."""

    host: str
    """E.g. ``orcid.org``."""


class Source(NamedTuple):
    """Who asserted a profile item."""

    source_orcid: Optional[OrcidIdentifier] = None
    source_name: Optional[Value] = None


class Name(NamedTuple):
    """Personal name of the profile owner."""

    given_names: Optional[Value] = None
    family_name: Optional[Value] = None
    credit_name: Optional[Value] = None
    visibility: Optional[str] = None
    created_date: Optional[Value] = None
    last_modified_date: Optional[Value] = None


class Biography(NamedTuple):
    """Free-text biography."""

    content: str
    visibility: Optional[str] = None
    created_date: Optional[Value] = None
    last_modified_date: Optional[Value] = None


class Email(NamedTuple):
    """An email address on the profile."""

    email: str
    verified: bool = False
    primary: bool = False
    visibility: Optional[str] = None
    put_code: Optional[int] = None
    created_date: Optional[Value] = None
    last_modified_date: Optional[Value] = None
    source: Optional[Source] = None


class Emails(NamedTuple):
    """Container for :class:`Email` entries, in profile order."""

    email: List[Email]
    last_modified_date: Optional[Value] = None


class ResearcherUrl(NamedTuple):
    """A labelled link (homepage, lab page, etc)."""

    url_name: str
    url: Value
    visibility: Optional[str] = None
    put_code: Optional[int] = None
    created_date: Optional[Value] = None
    last_modified_date: Optional[Value] = None
    source: Optional[Source] = None


class ResearcherUrls(NamedTuple):
    """Container for :class:`ResearcherUrl` entries."""

    researcher_url: List[ResearcherUrl]
    last_modified_date: Optional[Value] = None


class OtherName(NamedTuple):
    """An alternative name (maiden name, transliteration, ...)."""

    content: str
    visibility: Optional[str] = None
    put_code: Optional[int] = None
    created_date: Optional[Value] = None
    last_modified_date: Optional[Value] = None
    source: Optional[Source] = None


class OtherNames(NamedTuple):
    other_name: List[OtherName]
    last_modified_date: Optional[Value] = None


class Keyword(NamedTuple):
    """A research keyword."""

    content: str
    visibility: Optional[str] = None
    put_code: Optional[int] = None
    created_date: Optional[Value] = None
    last_modified_date: Optional[Value] = None
    source: Optional[Source] = None


class Keywords(NamedTuple):
    keyword: List[Keyword]
    last_modified_date: Optional[Value] = None


class Address(NamedTuple):
    """A country associated with the profile owner."""

    country: Value
    """ISO 3166-1 alpha-2 country code."""

    visibility: Optional[str] = None
    put_code: Optional[int] = None
    created_date: Optional[Value] = None
    last_modified_date: Optional[Value] = None
    source: Optional[Source] = None


class Addresses(NamedTuple):
    address: List[Address]
    last_modified_date: Optional[Value] = None


class ExternalIdentifier(NamedTuple):
    """A person identifier issued by another system (Scopus, ResearcherID)."""

    external_id_type: str
    external_id_value: str
    external_id_url: Optional[Value] = None
    external_id_relationship: Optional[str] = None
    visibility: Optional[str] = None
    put_code: Optional[int] = None
    created_date: Optional[Value] = None
    last_modified_date: Optional[Value] = None
    source: Optional[Source] = None


class ExternalIdentifiers(NamedTuple):
    external_identifier: List[ExternalIdentifier]
    last_modified_date: Optional[Value] = None


class Person(NamedTuple):
    """Biographical section of a profile."""

    name: Optional[Name] = None
    other_names: Optional[OtherNames] = None
    biography: Optional[Biography] = None
    researcher_urls: Optional[ResearcherUrls] = None
    emails: Optional[Emails] = None
    addresses: Optional[Addresses] = None
    keywords: Optional[Keywords] = None
    external_identifiers: Optional[ExternalIdentifiers] = None
    last_modified_date: Optional[Value] = None
    path: Optional[str] = None
    """Relative API path of this section, e.g. ``/0000-0001-2345-6789/person``."""


class Title(NamedTuple):
    title: Value


class DateYear(NamedTuple):
    year: Value


class Organization(NamedTuple):
    name: str


class WorkSummary(NamedTuple):
    """Summary of a research output as listed in the activities section."""

    put_code: int
    title: Title
    type: str
    last_modified_date: Optional[Value] = None
    visibility: Optional[str] = None


class WorkGroup(NamedTuple):
    """Work summaries that describe the same output."""

    work_summary: List[WorkSummary]


class Works(NamedTuple):
    group: List[WorkGroup]


class EmploymentSummary(NamedTuple):
    """Summary of an employment affiliation."""

    put_code: int
    department_name: Optional[str] = None
    role_title: Optional[str] = None
    organization: Optional[Organization] = None
    start_date: Optional[DateYear] = None
    visibility: Optional[str] = None


class AffiliationGroup(NamedTuple):
    employment_summary: List[EmploymentSummary]


class Employments(NamedTuple):
    affiliation_group: List[AffiliationGroup]


class ActivitiesSummary(NamedTuple):
    """Activities section of a profile."""

    works: Works
    employments: Employments


class Record(NamedTuple):
    """A full profile, as returned by ``/{orcid}/record``."""

    orcid_identifier: OrcidIdentifier
    person: Person
    activities_summary: ActivitiesSummary


class SearchResult(NamedTuple):
    orcid_identifier: OrcidIdentifier


class Search(NamedTuple):
    """Result of a registry search."""

    result: List[SearchResult]
    num_found: int


class Work(NamedTuple):
    """A single work, as returned by ``/{orcid}/work/{put_code}``."""

    put_code: int
    title: Title
    type: str
    publication_date: Optional[DateYear] = None
    visibility: Optional[str] = None


class Employment(NamedTuple):
    """A single employment, as returned by ``/{orcid}/employment/{put_code}``."""

    put_code: int
    department_name: Optional[str] = None
    role_title: Optional[str] = None
    start_date: Optional[DateYear] = None
    organization: Optional[Organization] = None
    visibility: Optional[str] = None


class PutCodeEcho(NamedTuple):
    """Acknowledgement of a create or update; never stored."""

    put_code: int
    status: Optional[str] = None


class TokenResponse(NamedTuple):
    """OAuth 2.0 token endpoint response."""

    access_token: str
    token_type: str
    refresh_token: str
    expires_in: int
    scope: str
    name: str
    orcid: str
