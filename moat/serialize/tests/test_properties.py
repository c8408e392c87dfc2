"""Properties that hold across both encodings."""

from typing import Any, Iterator
from unittest import TestCase
from xml.etree import ElementTree as ET

from hypothesis import given, settings
from hypothesis import strategies as st

from moat import domain
from moat.serialize import to_json, dumps_xml, from_xml, from_json, \
    equivalent
from moat.serialize.xml_codec import SCHEMA_LOCATION
from moat.services import seed

# XML 1.0 can't carry control characters other than tab, newline and
# carriage return, nor surrogates or noncharacters.
xml_text = st.one_of(
    st.text(
        alphabet=st.characters(exclude_categories=('Cc', 'Cs', 'Cn'),
                               include_characters='\t\n\r'),
        min_size=1
    ),
    st.builds('{}{}{}'.format, st.sampled_from([' ', '\t', '\r\n']),
              st.sampled_from(['a', 'line\r\nbreak', '\r']),
              st.sampled_from([' ', '\n', '\r\n']))
)

identifiers = st.from_regex(r'\A[0-9]{4}-[0-9]{4}-[0-9]{4}-[0-9]{3}[0-9X]\Z')


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def json_leaves(data: Any) -> Iterator[str]:
    if isinstance(data, dict):
        for value in data.values():
            yield from json_leaves(value)
    elif isinstance(data, list):
        for item in data:
            yield from json_leaves(item)
    elif data is not None:
        yield _scalar(data)


def xml_leaves(element: ET.Element) -> Iterator[str]:
    for name, value in element.attrib.items():
        if name != SCHEMA_LOCATION:
            yield value
    if len(element) == 0 and element.text:
        yield element.text
    for child in element:
        yield from xml_leaves(child)


class TestCrossFormatParity(TestCase):
    """Both encodings carry the same scalar values."""

    def test_seeded_records(self):
        for record in seed.demo_records():
            root = ET.fromstring(dumps_xml(record))
            self.assertEqual(set(json_leaves(to_json(record))),
                             set(xml_leaves(root)))

    @given(orcid=identifiers, given_name=xml_text, family=xml_text,
           bio=xml_text, modified=st.integers(min_value=0,
                                             max_value=2 ** 53))
    @settings(max_examples=50)
    def test_generated_records(self, orcid, given_name, family, bio,
                               modified):
        record = seed.mock_record(orcid, given_name, family, bio,
                                  modified=modified)
        root = ET.fromstring(dumps_xml(record))
        self.assertEqual(set(json_leaves(to_json(record))),
                         set(xml_leaves(root)))


class TestRoundTrip(TestCase):
    """Decoding what was encoded gives back the same value."""

    @given(orcid=identifiers, given_name=xml_text, family=xml_text,
           bio=xml_text, field=st.one_of(st.none(), xml_text))
    @settings(max_examples=50)
    def test_records(self, orcid, given_name, family, bio, field):
        record = seed.mock_record(orcid, given_name, family, bio, field,
                                  modified=1)
        document = dumps_xml(record)
        self.assertEqual(from_xml(document), record)
        self.assertTrue(equivalent(dumps_xml(from_xml(document)), document))
        self.assertEqual(from_json(domain.Record, to_json(record)), record)

    @given(put_code=st.integers(min_value=0, max_value=2 ** 31),
           status=st.one_of(st.none(), xml_text))
    def test_put_code_echo(self, put_code, status):
        echo = domain.PutCodeEcho(put_code=put_code, status=status)
        self.assertEqual(from_xml(dumps_xml(echo)), echo)


class TestOptionalFieldOmission(TestCase):
    """Absent biographies leave no trace; empty ones do."""

    def setUp(self):
        self.record = seed.mock_record('0000-0001-2345-6789', 'Sofia',
                                       'Garcia', 'A bio.', modified=1)
        self.biography = '{http://www.orcid.org/ns/person}biography'

    def test_absent(self):
        record = self.record._replace(
            person=self.record.person._replace(biography=None)
        )
        self.assertNotIn('biography', to_json(record)['person'])
        root = ET.fromstring(dumps_xml(record))
        self.assertEqual(list(root.iter(self.biography)), [])

    def test_present_but_empty(self):
        record = self.record._replace(
            person=self.record.person._replace(
                biography=domain.Biography(content='')
            )
        )
        self.assertEqual(to_json(record)['person']['biography'],
                         {'content': ''})
        root = ET.fromstring(dumps_xml(record))
        biographies = list(root.iter(self.biography))
        self.assertEqual(len(biographies), 1)
        self.assertEqual(len(biographies[0]), 1)
