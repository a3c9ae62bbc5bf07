# standard imports
import re
import logging

# external imports
from web3 import (
        Web3,
        HTTPProvider,
        LegacyWebSocketProvider,
        )

# local imports
from celophane.error import UnknownSchemeError

logg = logging.getLogger(__name__)

re_websocket = re.compile(r'^wss?://', re.IGNORECASE)
re_http = re.compile(r'^https?://', re.IGNORECASE)
re_scheme = re.compile(r'^([a-zA-Z][a-zA-Z0-9+.-]*)://')


def select_provider(url):
    """Picks the transport for the given node endpoint.

    :param url: Node endpoint
    :type url: str
    :raises celophane.error.UnknownSchemeError: Scheme is neither http(s) nor ws(s)
    :return: Provider, and whether it tolerates concurrent requests
    :rtype: tuple of (web3.providers.BaseProvider, bool)
    """
    if re.match(re_websocket, url) != None:
        logg.debug('using websocket provider for {}'.format(url))
        # one persistent socket, requests must not interleave
        return (LegacyWebSocketProvider(url), False)
    elif re.match(re_http, url) != None:
        logg.debug('using http provider for {}'.format(url))
        return (HTTPProvider(url), True)

    scheme = None
    m = re.match(re_scheme, url)
    if m != None:
        scheme = m.group(1)
    raise UnknownSchemeError(scheme, url)


class RPC:
    """Holds the single client used for the lifetime of the process.

    :param w3: Client
    :type w3: web3.Web3
    :param concurrent: Whether calls may be dispatched in parallel
    :type concurrent: bool
    """

    def __init__(self, w3, concurrent=True, endpoint=None):
        self.w3 = w3
        self.concurrent = concurrent
        self.endpoint = endpoint


    @staticmethod
    def connect(url):
        (provider, concurrent) = select_provider(url)
        w3 = Web3(provider)
        rpc = RPC(w3, concurrent=concurrent, endpoint=url)
        logg.info('set up rpc: {}'.format(rpc))
        return rpc


    @staticmethod
    def from_config(config):
        return RPC.connect(config.get('RPC_PROVIDER'))


    def __str__(self):
        return 'RPC client, endpoint {}, concurrent {}'.format(self.endpoint, self.concurrent)
