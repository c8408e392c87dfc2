"""Demo population served by the mock registry."""

from datetime import datetime
from typing import List, Optional

from pytz import UTC

from ..domain import Record, OrcidIdentifier, Person, Name, Biography, \
    Email, Emails, ResearcherUrl, ResearcherUrls, Keyword, Keywords, \
    ActivitiesSummary, Works, WorkGroup, WorkSummary, Title, Employments, \
    AffiliationGroup, EmploymentSummary, Organization, Value, Visibility

DEMO_ORCID = '0000-0001-2345-6789'
"""The identity every OAuth flow authenticates as."""

PEOPLE = [
    (DEMO_ORCID, 'Sofia', 'Garcia', 'Computer Science',
     'Sofia Garcia is a researcher in the field of Computer Science.'),
    ('0000-0002-1001-2002', 'John', 'Smith', 'Physics',
     'John Smith studies Physics.'),
    ('0000-0003-3003-4004', 'Wei', 'Chen', 'Biology',
     'Wei Chen is a Biologist.'),
    ('0000-0004-5005-6006', 'Priya', 'Patel', 'Chemistry',
     'Priya Patel works in Chemistry.'),
    ('0000-0005-7007-8008', 'Ahmed', 'Al-Fayed', 'Mathematics',
     'Ahmed Al-Fayed is a Mathematician.'),
    ('0000-0006-9009-0000', 'Elena', 'Popov', 'History',
     'Elena Popov researches History.'),
]

WORK_PUT_CODE = 123456
EMPLOYMENT_PUT_CODE = 789012
KEYWORD_PUT_CODE = 4321


def epoch_millis(when: Optional[datetime] = None) -> int:
    """Registry timestamps are milliseconds since the epoch."""
    if when is None:
        when = datetime.now(UTC)
    return int(when.timestamp() * 1000)


def orcid_identifier(orcid: str, host: str = 'orcid.org') -> OrcidIdentifier:
    return OrcidIdentifier(uri=f'https://{host}/{orcid}', path=orcid,
                           host=host)


def mock_record(orcid: str, given: str, family: str, bio: str,
                field: Optional[str] = None, host: str = 'orcid.org',
                modified: Optional[int] = None) -> Record:
    """
    Build a demo profile.

    Parameters
    ----------
    orcid : str
        Bare identifier.
    given : str
    family : str
    bio : str
        Biography text.
    field : str
        Research field, listed as a keyword if given.
    host : str
        Host of the canonical identifier URI.
    modified : int
        Last-modified timestamp of the work summary; defaults to now.

    Returns
    -------
    :class:`.Record`

    """
    slug = f'{given.lower()}.{family.lower()}'
    keywords = None
    if field is not None:
        keywords = Keywords(keyword=[
            Keyword(content=field, visibility=Visibility.PUBLIC,
                    put_code=KEYWORD_PUT_CODE)
        ])
    person = Person(
        name=Name(
            given_names=Value(given),
            family_name=Value(family),
            credit_name=Value(f'{given[0]}. {family}'),
            visibility=Visibility.PUBLIC,
        ),
        biography=Biography(content=bio, visibility=Visibility.PUBLIC),
        researcher_urls=ResearcherUrls(researcher_url=[
            ResearcherUrl(url_name='Personal Website',
                          url=Value(f'https://{slug}.mock'),
                          visibility=Visibility.PUBLIC)
        ]),
        emails=Emails(email=[
            Email(email=f'{slug}@mock.edu', verified=True, primary=True,
                  visibility=Visibility.PUBLIC)
        ]),
        keywords=keywords,
        path=f'/{orcid}/person',
    )
    activities = ActivitiesSummary(
        works=Works(group=[
            WorkGroup(work_summary=[
                WorkSummary(
                    put_code=WORK_PUT_CODE,
                    title=Title(title=Value('Mock Paper Title')),
                    type='journal-article',
                    last_modified_date=Value(modified or epoch_millis()),
                    visibility=Visibility.PUBLIC,
                )
            ])
        ]),
        employments=Employments(affiliation_group=[
            AffiliationGroup(employment_summary=[
                EmploymentSummary(
                    put_code=EMPLOYMENT_PUT_CODE,
                    department_name='Mock Department',
                    role_title='Mock Researcher',
                    organization=Organization(name='Mock University'),
                    visibility=Visibility.PUBLIC,
                )
            ])
        ]),
    )
    return Record(orcid_identifier=orcid_identifier(orcid, host),
                  person=person, activities_summary=activities)


def demo_records(host: str = 'orcid.org') -> List[Record]:
    """The fixed demo population, stamped with the current time."""
    now = epoch_millis()
    return [mock_record(orcid, given, family, bio, field, host, now)
            for orcid, given, family, field, bio in PEOPLE]
