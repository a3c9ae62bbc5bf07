# standard imports
import os
import json
import logging

# local imports
from celophane.error import AbiNotFoundError

logg = logging.getLogger(__name__)

script_dir = os.path.dirname(os.path.realpath(__file__))
abi_dir = os.path.join(script_dir, 'data', 'abi')


def load_abi(name, path=abi_dir):
    """Load a bundled contract interface by its file stem, e.g. "IERC20".
    """
    fp = os.path.join(path, name + '.json')
    if not os.path.isfile(fp):
        raise AbiNotFoundError('no abi for {} in {}'.format(name, path))
    f = open(fp, 'r')
    abi = json.load(f)
    f.close()
    logg.debug('loaded abi {} from {}'.format(name, fp))
    return abi
