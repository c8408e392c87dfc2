"""Tests for :mod:`moat.serialize.json_codec`."""

import json
from unittest import TestCase

from moat import domain
from moat.exceptions import DecodeError, EncodeError
from moat.serialize import to_json, from_json, dumps_json, loads_json
from moat.services import seed


class TestToJSON(TestCase):
    """Encode registry values as JSON."""

    def setUp(self):
        self.record = seed.mock_record('0000-0001-2345-6789', 'Sofia',
                                       'Garcia', 'A bio.', 'Computer Science',
                                       modified=1700000000000)
        self.data = to_json(self.record)

    def test_keys(self):
        """Keys use the registry's kebab-case names."""
        self.assertEqual(list(self.data),
                         ['orcid-identifier', 'person', 'activities-summary'])
        self.assertEqual(self.data['orcid-identifier'], {
            'uri': 'https://orcid.org/0000-0001-2345-6789',
            'path': '0000-0001-2345-6789',
            'host': 'orcid.org',
        })

    def test_value_containers(self):
        """Wrapped scalars become ``{"value": ...}`` objects."""
        name = self.data['person']['name']
        self.assertEqual(name['given-names'], {'value': 'Sofia'})
        self.assertEqual(name['credit-name'], {'value': 'S. Garcia'})
        summary = self.data['activities-summary']['works']['group'][0][
            'work-summary'][0]
        self.assertEqual(summary['last-modified-date'],
                         {'value': 1700000000000})
        self.assertEqual(summary['put-code'], 123456)

    def test_native_scalars(self):
        """Booleans and integers keep their JSON types."""
        email = self.data['person']['emails']['email'][0]
        self.assertIs(email['verified'], True)
        self.assertIs(email['primary'], True)
        self.assertEqual(email['email'], 'sofia.garcia@mock.edu')

    def test_absent_fields_omitted(self):
        """``None`` fields are left out entirely."""
        name = self.data['person']['name']
        self.assertNotIn('created-date', name)
        self.assertNotIn('addresses', self.data['person'])

    def test_empty_biography(self):
        """Present but empty content is still written."""
        person = domain.Person(biography=domain.Biography(content=''))
        self.assertEqual(to_json(person), {'biography': {'content': ''}})
        self.assertEqual(to_json(domain.Person()), {})

    def test_dumps(self):
        """Serialized JSON is UTF-8 and parses back to the same dict."""
        self.assertEqual(json.loads(dumps_json(self.record).decode('utf-8')),
                         self.data)

    def test_unicode(self):
        """Non-ASCII text survives serialization."""
        bio = domain.Biography(content='Café Ñandú')
        self.assertEqual(loads_json(domain.Biography, dumps_json(bio)), bio)

    def test_not_a_model(self):
        with self.assertRaises(EncodeError):
            to_json(object())


class TestFromJSON(TestCase):
    """Decode registry values from JSON."""

    def test_round_trip(self):
        """Every seeded record survives a round trip."""
        for record in seed.demo_records():
            self.assertEqual(from_json(domain.Record, to_json(record)),
                             record)
            self.assertEqual(loads_json(domain.Record, dumps_json(record)),
                             record)

    def test_put_code_echo(self):
        echo = from_json(domain.PutCodeEcho,
                         {'put-code': 123, 'status': 'updated'})
        self.assertEqual(echo, domain.PutCodeEcho(123, 'updated'))

    def test_missing_required(self):
        with self.assertRaises(DecodeError):
            from_json(domain.Work, {'put-code': 1, 'type': 'book'})

    def test_wrong_scalar_type(self):
        """Put-codes must be integers, and booleans don't count."""
        with self.assertRaises(DecodeError):
            from_json(domain.PutCodeEcho, {'put-code': '123'})
        with self.assertRaises(DecodeError):
            from_json(domain.PutCodeEcho, {'put-code': True})
        with self.assertRaises(DecodeError):
            from_json(domain.Email, {'email': 'a@b.c', 'verified': 'yes'})

    def test_bad_value_container(self):
        with self.assertRaises(DecodeError):
            from_json(domain.Title, {'title': 'not wrapped'})

    def test_bad_list(self):
        with self.assertRaises(DecodeError):
            from_json(domain.Works, {'group': {}})

    def test_not_an_object(self):
        with self.assertRaises(DecodeError):
            from_json(domain.Title, ['title'])

    def test_malformed(self):
        with self.assertRaises(DecodeError):
            loads_json(domain.Title, b'{"title": ')
