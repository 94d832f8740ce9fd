"""
Pytest configuration for all tests.

Shared viewers and block attributes used across the unit tests.
"""

import pytest

from restricted_content import BlockAttributes, ViewerIdentity

INNER_CONTENT = '<p class="secret">Members only <strong>notes</strong></p>'


@pytest.fixture
def inner_content() -> str:
    return INNER_CONTENT


@pytest.fixture
def anonymous() -> ViewerIdentity:
    return ViewerIdentity.anonymous()


@pytest.fixture
def student() -> ViewerIdentity:
    return ViewerIdentity.logged_in("alice@school.edu")


@pytest.fixture
def outsider() -> ViewerIdentity:
    return ViewerIdentity.logged_in("bob@company.com")


@pytest.fixture
def default_attributes() -> BlockAttributes:
    return BlockAttributes()


@pytest.fixture
def broken_pattern_attributes() -> BlockAttributes:
    return BlockAttributes(emailPattern="(unclosed")
