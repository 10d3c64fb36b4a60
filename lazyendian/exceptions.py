class LazyEndianException(Exception):
    '''Base class to extend in order to throw exception in lazyendian.

    It takes a single argument that represents the chain of the layer that
    caused the exception.
    '''

    def __init__(self, chain=None):
        self.chain = chain if chain is not None else []
        super().__init__()


class PackException(LazyEndianException):
    '''The value doesn't fit the scalar type it's packed into.'''
    pass


class ShortReadException(LazyEndianException):
    '''Not enough data: "got" is how many bytes were consumed before the end.'''

    def __init__(self, chain=None, got=0):
        self.got = got
        super().__init__(chain=chain)


class MagicException(LazyEndianException):
    pass


class UnsupportedScalarException(LazyEndianException):
    pass


class UnknownArchitectureException(LazyEndianException):
    '''The host is neither little nor big endian: it shouldn't be possible.'''
    pass
