# standard imports
import sys
import logging

# local imports
from celophane.contract import get_exchange
from celophane.registry import REGISTRY_ADDRESS
from celophane.dispatch import (
        join,
        failed,
        )

logg = logging.getLogger(__name__)

DEFAULT_AMOUNT = 10 ** 18


def exchange_show(rpc, amount=DEFAULT_AMOUNT, registry_address=REGISTRY_ADDRESS, outf=None):
    """Print the on-chain exchange quotes for selling the given amount in both directions.

    :param rpc: Connection
    :type rpc: celophane.rpc.RPC
    :param amount: Amount sold, in smallest units
    :type amount: int
    :raises celophane.error.UnknownContractError: No exchange in registry
    :return: CELO to cUSD quote and cUSD to CELO quote
    :rtype: tuple of int
    """
    if outf == None:
        outf = sys.stdout

    exchange = get_exchange(rpc.w3, registry_address=registry_address)
    logg.debug('exchange at {} quoting {}'.format(exchange.address, amount))

    fn = exchange.functions.getBuyTokenAmount
    outcomes = join([
        lambda: fn(amount, True).call(),
        lambda: fn(amount, False).call(),
        ], concurrent=rpc.concurrent)
    for r in outcomes:
        if failed(r):
            raise r
    (cusd_quote, celo_quote) = outcomes

    print('{} CELO => {} cUSD'.format(amount, cusd_quote), file=outf)
    print('{} cUSD => {} CELO'.format(amount, celo_quote), file=outf)

    return (cusd_quote, celo_quote)
