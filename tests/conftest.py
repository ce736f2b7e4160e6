"""
Fixtures used in the tests
"""
import pytest

from tests.utility import ABANDON_MNEMONIC


@pytest.fixture()
def abandon_mnemonic():
    return ABANDON_MNEMONIC


@pytest.fixture(params=[12, 15, 18, 21, 24])
def word_count(request):
    return request.param
