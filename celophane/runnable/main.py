#!python3

# SPDX-License-Identifier: GPL-3.0-or-later

# standard imports
import sys
import logging

# external imports
from web3.exceptions import Web3Exception

# local imports
import celophane.cli
from celophane.rpc import RPC
from celophane.account import account_balance
from celophane.exchange import exchange_show
from celophane.error import (
        UnknownSchemeError,
        UnknownContractError,
        )

logging.basicConfig(level=logging.WARNING)
logg = logging.getLogger()
logging.getLogger('websockets.protocol').setLevel(logging.CRITICAL)
logging.getLogger('websockets.client').setLevel(logging.CRITICAL)
logging.getLogger('web3.RequestManager').setLevel(logging.CRITICAL)
logging.getLogger('web3.providers.HTTPProvider').setLevel(logging.CRITICAL)
logging.getLogger('urllib3').setLevel(logging.CRITICAL)


def run(args, outf=None):
    if outf == None:
        outf = sys.stdout
    config = celophane.cli.Config.from_args(args)
    rpc = RPC.from_config(config)
    registry_address = config.get('CELO_REGISTRY_ADDRESS')

    if args.cmd == 'account':
        if args.account_cmd == 'balance':
            account_balance(rpc, args.address, registry_address=registry_address, outf=outf)
    elif args.cmd == 'exchange':
        if args.exchange_cmd == 'show':
            amount = int(config.get('EXCHANGE_AMOUNT'))
            exchange_show(rpc, amount=amount, registry_address=registry_address, outf=outf)


def main(argv=None, outf=None):
    argparser = celophane.cli.ArgumentParser(prog='celophane')
    args = argparser.parse_args(argv)

    if args.vv:
        logging.getLogger().setLevel(logging.DEBUG)
    elif args.v:
        logging.getLogger().setLevel(logging.INFO)

    try:
        run(args, outf=outf)
    except (UnknownSchemeError, UnknownContractError) as e:
        logg.critical(str(e))
        return 1
    except (Web3Exception, ValueError, OSError) as e:
        logg.critical('rpc call failed: {}'.format(e))
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
