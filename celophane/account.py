# standard imports
import sys
import logging

# external imports
from web3.exceptions import Web3Exception

# local imports
from celophane.contract import (
        get_celo_token,
        get_cusd_token,
        get_ceur_token,
        )
from celophane.registry import REGISTRY_ADDRESS
from celophane.error import UnknownContractError
from celophane.dispatch import (
        join,
        failed,
        )

logg = logging.getLogger(__name__)

# errors that only mean the token cannot report a balance for this account
suppressed_errors = (
        UnknownContractError,
        Web3Exception,
        )

tokens = [
    ('CELO', get_celo_token),
    ('cUSD', get_cusd_token),
    ('cEUR', get_ceur_token),
        ]


def token_balance(w3, getter, holder_address, registry_address=REGISTRY_ADDRESS):
    token = getter(w3, registry_address=registry_address)
    return token.functions.balanceOf(holder_address).call()


def account_balance(rpc, holder_address, registry_address=REGISTRY_ADDRESS, outf=None):
    """Print the balances held by an account in each of the registry tokens.

    Tokens missing from the registry, and tokens whose balance call fails, are left out of the output. Any other error is raised.

    :param rpc: Connection
    :type rpc: celophane.rpc.RPC
    :param holder_address: Account to report on
    :type holder_address: str, checksummed 0x-hex
    :param registry_address: Address of the registry contract
    :type registry_address: str, 0x-hex
    :param outf: Output stream
    :type outf: file
    :return: Balances retrieved, by token label
    :rtype: dict
    """
    if outf == None:
        outf = sys.stdout

    calls = []
    for (label, getter) in tokens:
        calls.append(lambda getter=getter: token_balance(rpc.w3, getter, holder_address, registry_address=registry_address))
    outcomes = join(calls, concurrent=rpc.concurrent)
    for r in outcomes:
        if failed(r) and not isinstance(r, suppressed_errors):
            raise r

    print('All balances expressed in units of 10^-18.', file=outf)
    balances = {}
    for i, (label, getter) in enumerate(tokens):
        r = outcomes[i]
        if failed(r):
            logg.debug('skipping {} balance for {}: {}'.format(label, holder_address, r))
            continue
        balances[label] = r
        print('{}: {}'.format(label, r), file=outf)

    return balances
