# standard imports
import os
import logging

# external imports
import pytest
from web3 import Web3

# local imports
from celophane.rpc import RPC
from celophane.registry import (
        REGISTRY_ADDRESS,
        EXCHANGE,
        GOLD_TOKEN,
        STABLE_TOKEN,
        STABLE_TOKEN_EUR,
        )
from celophane.pytest.mock.node import (
        MockNode,
        MockRegistry,
        MockToken,
        MockExchange,
        )

logg = logging.getLogger(__name__)


def random_address():
    return Web3.to_checksum_address('0x' + os.urandom(20).hex())


@pytest.fixture(scope='function')
def holder_address():
    return random_address()


@pytest.fixture(scope='function')
def contract_addresses():
    return {
        GOLD_TOKEN: random_address(),
        STABLE_TOKEN: random_address(),
        STABLE_TOKEN_EUR: random_address(),
        EXCHANGE: random_address(),
            }


@pytest.fixture(scope='function')
def mock_registry(
        contract_addresses,
        ):
    return MockRegistry(contract_addresses)


@pytest.fixture(scope='function')
def mock_tokens():
    return {
        GOLD_TOKEN: MockToken(),
        STABLE_TOKEN: MockToken(),
        STABLE_TOKEN_EUR: MockToken(),
            }


@pytest.fixture(scope='function')
def mock_exchange():
    return MockExchange(numerator=3, denominator=2)


@pytest.fixture(scope='function')
def mock_node(
        contract_addresses,
        mock_registry,
        mock_tokens,
        mock_exchange,
        ):
    node = MockNode()
    node.add_contract(REGISTRY_ADDRESS, 'Registry', mock_registry)
    for k, v in mock_tokens.items():
        node.add_contract(contract_addresses[k], 'IERC20', v)
    node.add_contract(contract_addresses[EXCHANGE], 'Exchange', mock_exchange)
    return node


@pytest.fixture(scope='function', params=[True, False], ids=['concurrent', 'serial'])
def mock_rpc(
        request,
        mock_node,
        ):
    w3 = Web3(mock_node)
    return RPC(w3, concurrent=request.param, endpoint='mock://')
