# datasources/exceptions.py

class RateSourceError(Exception):
    pass


class PairNotFound(RateSourceError):
    pass


class RateSourceUnavailable(RateSourceError):
    pass


class QueryTimeout(RateSourceError):
    pass


class InvalidQuery(RateSourceError):
    pass


class BackendStartupTimeout(RateSourceError):
    pass
