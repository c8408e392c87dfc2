"""Tests for :mod:`moat.services.seed` and :mod:`moat.services.putcodes`."""

from datetime import datetime
from unittest import TestCase, mock

from pytz import UTC

from moat.domain import Visibility
from moat.services import putcodes, seed


class TestDemoRecords(TestCase):
    """The demo population."""

    def setUp(self):
        self.records = seed.demo_records()

    def test_population(self):
        self.assertEqual(len(self.records), 6)
        orcids = [r.orcid_identifier.path for r in self.records]
        self.assertEqual(len(set(orcids)), 6)
        self.assertEqual(orcids[0], seed.DEMO_ORCID)

    def test_demo_profile(self):
        record = self.records[0]
        name = record.person.name
        self.assertEqual(name.given_names.value, 'Sofia')
        self.assertEqual(name.family_name.value, 'Garcia')
        self.assertEqual(name.credit_name.value, 'S. Garcia')
        email = record.person.emails.email[0]
        self.assertEqual(email.email, 'sofia.garcia@mock.edu')
        self.assertTrue(email.verified)
        self.assertTrue(email.primary)
        self.assertEqual(email.visibility, Visibility.PUBLIC)
        self.assertEqual(record.person.keywords.keyword[0].content,
                         'Computer Science')

    def test_activities(self):
        for record in self.records:
            work = record.activities_summary.works.group[0].work_summary[0]
            self.assertEqual(work.put_code, seed.WORK_PUT_CODE)
            self.assertEqual(work.type, 'journal-article')
            self.assertIsInstance(work.last_modified_date.value, int)
            employment = record.activities_summary.employments \
                .affiliation_group[0].employment_summary[0]
            self.assertEqual(employment.put_code, seed.EMPLOYMENT_PUT_CODE)
            self.assertEqual(employment.organization.name, 'Mock University')

    def test_same_seed_time(self):
        """Every record in a population is stamped with the same time."""
        stamps = {
            r.activities_summary.works.group[0].work_summary[0]
            .last_modified_date.value for r in self.records
        }
        self.assertEqual(len(stamps), 1)

    def test_host(self):
        record = seed.demo_records('sandbox.orcid.org')[1]
        self.assertEqual(record.orcid_identifier.uri,
                         'https://sandbox.orcid.org/0000-0002-1001-2002')
        self.assertEqual(record.orcid_identifier.host, 'sandbox.orcid.org')


class TestEpochMillis(TestCase):
    def test_fixed_time(self):
        when = datetime(2020, 1, 1, tzinfo=UTC)
        self.assertEqual(seed.epoch_millis(when), 1577836800000)

    def test_now(self):
        before = int(datetime.now(UTC).timestamp() * 1000)
        self.assertGreaterEqual(seed.epoch_millis(), before)


class TestPutCodes(TestCase):
    """New put-codes are drawn from a fixed range."""

    def test_range(self):
        for _ in range(1000):
            put_code = putcodes.new_put_code()
            self.assertGreaterEqual(put_code, 100000)
            self.assertLessEqual(put_code, 999099)

    @mock.patch('moat.services.putcodes.random.randint')
    def test_bounds_inclusive(self, mock_randint):
        mock_randint.return_value = 999099
        self.assertEqual(putcodes.new_put_code(), 999099)
        mock_randint.assert_called_once_with(100000, 999099)
