# standard imports
import logging

# local imports
from celophane.abi import load_abi
from celophane.registry import (
        registry_lookup,
        REGISTRY_ADDRESS,
        EXCHANGE,
        GOLD_TOKEN,
        STABLE_TOKEN,
        STABLE_TOKEN_EUR,
        )

logg = logging.getLogger(__name__)


def get_erc20_token(w3, name, registry_address=REGISTRY_ADDRESS):
    address = registry_lookup(w3, name, registry_address=registry_address)
    return w3.eth.contract(address=address, abi=load_abi('IERC20'))


def get_celo_token(w3, registry_address=REGISTRY_ADDRESS):
    return get_erc20_token(w3, GOLD_TOKEN, registry_address=registry_address)


def get_cusd_token(w3, registry_address=REGISTRY_ADDRESS):
    return get_erc20_token(w3, STABLE_TOKEN, registry_address=registry_address)


def get_ceur_token(w3, registry_address=REGISTRY_ADDRESS):
    return get_erc20_token(w3, STABLE_TOKEN_EUR, registry_address=registry_address)


def get_exchange(w3, registry_address=REGISTRY_ADDRESS):
    address = registry_lookup(w3, EXCHANGE, registry_address=registry_address)
    return w3.eth.contract(address=address, abi=load_abi('Exchange'))
