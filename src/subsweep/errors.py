class SubsweepError(Exception):
    """Base class for fatal errors raised before a scan starts."""


class ConfigurationError(SubsweepError):
    pass


class WordlistError(SubsweepError):
    pass


class NoUsableResolverError(SubsweepError):
    pass


class ConnectivityError(SubsweepError):
    pass
