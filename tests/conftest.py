"""
Fixtures used in the tests
"""
import pytest

from utxo_ledger.crypto import generate_private_key
from tests.utility import make_genesis, pool_from

NUM_KEYS = 3


@pytest.fixture(scope="session")
def private_keys():
    return [generate_private_key() for _ in range(NUM_KEYS)]


@pytest.fixture(scope="session")
def public_keys(private_keys):
    return [key.public_key() for key in private_keys]


@pytest.fixture()
def genesis(public_keys):
    """Two outputs of 100 owned by key 0"""
    return make_genesis([(100.0, public_keys[0]), (100.0, public_keys[0])])


@pytest.fixture()
def pool(genesis):
    return pool_from(genesis)
