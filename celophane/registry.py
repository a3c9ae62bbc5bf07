# standard imports
import logging

# external imports
from web3 import Web3
from hexathon import strip_0x

# local imports
from celophane.abi import load_abi
from celophane.error import UnknownContractError

logg = logging.getLogger(__name__)

REGISTRY_ADDRESS = '0x000000000000000000000000000000000000ce10'
ZERO_ADDRESS = '0x0000000000000000000000000000000000000000'

EXCHANGE = 'Exchange'
GOLD_TOKEN = 'GoldToken'
STABLE_TOKEN = 'StableToken'
STABLE_TOKEN_EUR = 'StableTokenEUR'


def is_zero_address(address):
    return int(strip_0x(address), 16) == 0


def registry_lookup(w3, name, registry_address=REGISTRY_ADDRESS):
    """Resolve the deployed address of a contract registered under the given name.

    :param w3: Client
    :type w3: web3.Web3
    :param name: Registry identifier, e.g. "StableToken"
    :type name: str
    :param registry_address: Address of the registry contract
    :type registry_address: str, 0x-hex
    :raises celophane.error.UnknownContractError: Registry returned the zero address
    :return: Contract address
    :rtype: str, checksummed 0x-hex
    """
    registry = w3.eth.contract(
            address=Web3.to_checksum_address(registry_address),
            abi=load_abi('Registry'),
            )
    address = registry.functions.getAddressForString(name).call()
    # the registry has no notion of a missing entry
    if is_zero_address(address):
        raise UnknownContractError(name)
    logg.debug('registry {} resolved {} to {}'.format(registry_address, name, address))
    return Web3.to_checksum_address(address)
