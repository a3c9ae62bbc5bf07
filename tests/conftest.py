# standard imports
import os
import sys
import logging

script_dir = os.path.dirname(os.path.realpath(__file__))
root_dir = os.path.dirname(script_dir)
sys.path.insert(0, root_dir)

# assemble fixtures
from celophane.pytest.fixtures_rpc import *

logging.basicConfig(level=logging.DEBUG)
