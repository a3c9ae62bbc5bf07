# local imports
from .arg import ArgumentParser
from .config import Config
