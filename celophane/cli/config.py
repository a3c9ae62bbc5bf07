# standard imports
import os
import logging

# external imports
import confini
from confini.common import to_constant_name

script_dir = os.path.dirname(os.path.realpath(__file__))

logg = logging.getLogger(__name__)


class Config(confini.Config):

    default_config_dir = os.path.join(script_dir, '..', 'data', 'config')

    def discard_environment(self):
        """Restore the values of the config files, dropping any environment variable overrides applied by process.
        """
        for s in self.parser.sections():
            for so in self.parser.options(s):
                self.add(self.parser.get(s, so), to_constant_name(so, s), exists_ok=True)


    @classmethod
    def from_args(cls, args, config_dir=None):
        if config_dir == None:
            config_dir = cls.default_config_dir
        config = cls(config_dir)
        config.process()
        # only the packaged defaults and the command line are consulted
        config.discard_environment()

        args_override = {
                'RPC_PROVIDER': getattr(args, 'endpoint', None),
                'EXCHANGE_AMOUNT': getattr(args, 'amount', None),
                }
        args_override = {k: v for k, v in args_override.items() if v != None}
        config.dict_override(args_override, 'cli flag')

        logg.debug('config loaded from {}:\n{}'.format(config_dir, config))
        return config
