class UnknownSchemeError(ValueError):
    """Exception raised when an endpoint url scheme has no matching transport

    """
    def __init__(self, scheme, url=None):
        self.scheme = scheme
        self.url = url
        super(UnknownSchemeError, self).__init__('unknown provider scheme "{}" in url {}'.format(scheme, url))


class UnknownContractError(Exception):
    """Exception raised when the registry has no address for a contract name
    """
    def __init__(self, name):
        self.name = name
        super(UnknownContractError, self).__init__('contract "{}" not found in registry'.format(name))


class AbiNotFoundError(FileNotFoundError):
    """Exception raised when a contract interface is not bundled with the package

    """
    pass
