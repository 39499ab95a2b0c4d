"""
Pytest fixtures for the record model tests.
"""

import pytest


@pytest.fixture
def title_descriptor():
    """Descriptor of a title record with two local records."""
    return {
        'fields': [
            {'tag': '002@', 'occurrence': 0, 'subfields': [{'code': '0', 'value': 'Aau'}]},
            {'tag': '003@', 'occurrence': 0, 'subfields': [{'code': '0', 'value': '123456789'}]},
            {'tag': '021A', 'occurrence': 0, 'subfields': [{'code': 'a', 'value': 'Title'}]},
            {'tag': '101@', 'occurrence': 0, 'subfields': [{'code': 'a', 'value': '50'}]},
            {'tag': '201@', 'occurrence': 1, 'subfields': [{'code': 'a', 'value': 'first'}]},
            {'tag': '203@', 'occurrence': 1, 'subfields': [{'code': '0', 'value': '1001'}]},
            {'tag': '201@', 'occurrence': 2, 'subfields': [{'code': 'a', 'value': 'second'}]},
            {'tag': '101@', 'occurrence': 0, 'subfields': [{'code': 'a', 'value': '20'}]},
            {'tag': '201@', 'occurrence': 1, 'subfields': [{'code': 'a', 'value': 'third'}]},
        ]
    }


@pytest.fixture
def authority_descriptor():
    """Descriptor of a valid authority record."""
    return {
        'fields': [
            {'tag': '002@', 'occurrence': 0, 'subfields': [{'code': '0', 'value': 'T'}]},
            {'tag': '003@', 'occurrence': 0, 'subfields': [{'code': '0', 'value': '987654321'}]},
            {'tag': '028A', 'occurrence': None, 'subfields': [{'code': 'a', 'value': 'Name'}]},
        ]
    }
