import pytest

from emojikit.ucd import get_property_table


@pytest.fixture(scope="session")
def table():
    return get_property_table()
