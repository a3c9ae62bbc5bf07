# standard imports
import logging
import threading

# external imports
import eth_abi
from eth_utils import function_signature_to_4byte_selector
from hexathon import (
        strip_0x,
        add_0x,
        )
from web3.providers.base import BaseProvider

# local imports
from celophane.abi import load_abi
from celophane.registry import ZERO_ADDRESS

logg = logging.getLogger(__name__)

CELO_CHAIN_ID = 42220


class MockRevert(Exception):
    pass


def abi_types(entries):
    return [e['type'] for e in entries]


class MockContract:
    """Dispatches calldata to the method of the same name on the implementation object.

    :param abi: Contract interface
    :type abi: list of dict
    :param implementation: Object carrying a method for each abi function
    :type implementation: object
    """

    def __init__(self, abi, implementation):
        self.implementation = implementation
        self.methods = {}
        for entry in abi:
            if entry.get('type') != 'function':
                continue
            inputs = abi_types(entry['inputs'])
            signature = '{}({})'.format(entry['name'], ','.join(inputs))
            selector = function_signature_to_4byte_selector(signature)
            self.methods[selector] = (entry['name'], inputs, abi_types(entry['outputs']))


    def call(self, data):
        selector = data[:4]
        try:
            (name, inputs, outputs) = self.methods[selector]
        except KeyError:
            raise MockRevert('no method with selector {}'.format(selector.hex()))
        args = eth_abi.decode(inputs, data[4:])
        logg.debug('mock call {}{}'.format(name, args))
        r = getattr(self.implementation, name)(*args)
        return eth_abi.encode(outputs, [r])


class MockRegistry:

    def __init__(self, entries=None):
        self.entries = {}
        if entries != None:
            self.entries.update(entries)


    def getAddressForString(self, name):
        return self.entries.get(name, ZERO_ADDRESS)


class MockToken:

    def __init__(self, balances=None, broken=False):
        self.balances = {}
        self.broken = broken
        if balances != None:
            for k, v in balances.items():
                self.balances[k.lower()] = v


    def balanceOf(self, holder_address):
        if self.broken:
            raise MockRevert('balanceOf')
        return self.balances.get(holder_address.lower(), 0)


class MockExchange:
    """Constant rate exchange, quoting sold CELO at rate and sold cUSD at the inverse.
    """

    def __init__(self, numerator=2, denominator=1):
        self.numerator = numerator
        self.denominator = denominator


    def getBuyTokenAmount(self, sell_amount, sell_gold):
        if sell_gold:
            return sell_amount * self.numerator // self.denominator
        return sell_amount * self.denominator // self.numerator


    def getSellTokenAmount(self, buy_amount, sell_gold):
        return self.getBuyTokenAmount(buy_amount, not sell_gold)


class MockNode(BaseProvider):
    """In-process node answering the read-only json-rpc calls needed by contract calls.
    """

    def __init__(self, chain_id=CELO_CHAIN_ID):
        super(MockNode, self).__init__()
        self.chain_id = chain_id
        self.contracts = {}
        self.requests = []
        self.lock = threading.Lock()


    def add_contract(self, address, abi_name, implementation):
        self.contracts[address.lower()] = MockContract(load_abi(abi_name), implementation)


    def remove_contract(self, address):
        del self.contracts[address.lower()]


    def is_connected(self, show_traceback=False):
        return True


    def make_request(self, method, params):
        with self.lock:
            self.requests.append(method)
            request_id = len(self.requests)

        try:
            result = self.process(method, params)
        except MockRevert as e:
            logg.debug('mock revert {}: {}'.format(method, e))
            return {
                'jsonrpc': '2.0',
                'id': request_id,
                'error': {
                    'code': 3,
                    'message': 'execution reverted',
                    },
                }

        return {
            'jsonrpc': '2.0',
            'id': request_id,
            'result': result,
            }


    def process(self, method, params):
        if method == 'eth_chainId':
            return hex(self.chain_id)
        elif method == 'eth_blockNumber':
            return '0x1'
        elif method == 'eth_getCode':
            if params[0].lower() in self.contracts:
                return '0x6080'
            return '0x'
        elif method == 'eth_call':
            tx = params[0]
            contract = self.contracts.get(tx['to'].lower())
            if contract == None:
                return '0x'
            data = tx.get('data', tx.get('input'))
            data = bytes.fromhex(strip_0x(data))
            return add_0x(contract.call(data).hex())
        raise NotImplementedError('mock node does not serve {}'.format(method))
