"""Tests for :mod:`moat.serialize.compare`."""

from unittest import TestCase

from moat.exceptions import DecodeError
from moat.serialize import canonicalize, equivalent

FIRST = '''<?xml version="1.0" encoding="UTF-8"?>
<a:work xmlns:a="http://www.orcid.org/ns/work"
        xmlns:b="http://www.orcid.org/ns/common"
        put-code="1" visibility="public">
    <a:title>
        <b:title>  Title  </b:title>
    </a:title>
    <a:type>book</a:type>
</a:work>
'''

SECOND = (
    '<work:work xmlns:work="http://www.orcid.org/ns/work"'
    ' visibility="public" put-code="1"><!-- reordered -->'
    '<work:title><common:title xmlns:common="http://www.orcid.org/ns/common">'
    'Title</common:title></work:title><work:type>book</work:type></work:work>'
)


class TestEquivalent(TestCase):
    """Semantic equality of XML documents."""

    def test_equivalent(self):
        """Whitespace, prefixes, comments and attribute order are ignored."""
        self.assertTrue(equivalent(FIRST, SECOND))
        self.assertTrue(equivalent(FIRST.encode('utf-8'), SECOND))

    def test_different_text(self):
        self.assertFalse(equivalent(FIRST, SECOND.replace('book', 'thesis')))

    def test_different_attribute(self):
        self.assertFalse(equivalent(FIRST,
                                    SECOND.replace('put-code="1"',
                                                   'put-code="2"')))

    def test_different_namespace(self):
        """The same local name in another namespace is a different element."""
        other = SECOND.replace('ns/work', 'ns/employment')
        self.assertFalse(equivalent(FIRST, other))

    def test_element_order(self):
        swapped = SECOND.replace(
            '<work:type>book</work:type>', ''
        ).replace('<work:title>', '<work:type>book</work:type><work:title>')
        self.assertFalse(equivalent(FIRST, swapped))

    def test_canonical_form(self):
        """The canonical form is a nested tuple."""
        tag, attributes, content = canonicalize(SECOND)
        self.assertEqual(tag, '{http://www.orcid.org/ns/work}work')
        self.assertEqual(attributes,
                         (('put-code', '1'), ('visibility', 'public')))
        self.assertEqual(len(content), 2)

    def test_malformed(self):
        with self.assertRaises(DecodeError):
            canonicalize('<a:work')
