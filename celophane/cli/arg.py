# standard imports
import argparse

# external imports
from web3 import Web3
from hexathon import (
        strip_0x,
        add_0x,
        )


def address_arg(v):
    hx = v
    if hx[:2] == '0x':
        hx = hx[2:]
    if len(hx) != 40:
        raise argparse.ArgumentTypeError('invalid address {}'.format(v))
    try:
        hx = strip_0x(hx)
    except ValueError:
        raise argparse.ArgumentTypeError('invalid address {}'.format(v))
    return Web3.to_checksum_address(add_0x(hx))


def amount_arg(v):
    try:
        amount = int(v, 10)
    except ValueError:
        raise argparse.ArgumentTypeError('invalid amount {}'.format(v))
    if amount < 0:
        raise argparse.ArgumentTypeError('amount cannot be negative: {}'.format(v))
    return amount


class ArgumentParser(argparse.ArgumentParser):

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('description', 'Query balances and exchange rates on the Celo blockchain')
        super(ArgumentParser, self).__init__(*args, **kwargs)
        self.add_argument('--endpoint', type=str, help='Endpoint to connect to (default http://localhost:8545)')
        self.add_argument('-v', help='be verbose', action='store_true')
        self.add_argument('-vv', help='be more verbose', action='store_true')
        self.process_commands()


    def process_commands(self):
        # subcommand parsers must not inherit the root options and command tree
        sub = self.add_subparsers(dest='cmd', metavar='command', parser_class=argparse.ArgumentParser)
        sub.required = True

        account = sub.add_parser('account', help='Account management')
        account_sub = account.add_subparsers(dest='account_cmd', metavar='command', parser_class=argparse.ArgumentParser)
        account_sub.required = True
        balance = account_sub.add_parser('balance', help='Retrieve an account\'s balance')
        balance.add_argument('address', type=address_arg, help='Account address')

        exchange = sub.add_parser('exchange', help='On-chain exchange (Mento) interaction')
        exchange_sub = exchange.add_subparsers(dest='exchange_cmd', metavar='command', parser_class=argparse.ArgumentParser)
        exchange_sub.required = True
        show = exchange_sub.add_parser('show', help='Display the on-chain exchange (Mento) rates')
        show.add_argument('--amount', type=amount_arg, help='Amount (base) to report quote amounts on (default 10^18)')
