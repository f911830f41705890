class CdTextException(Exception):
    '''Base class to extend in order to throw exception in cdtext.

    It takes a single argument that represents the chain of the attributes that
    caused the exception.
    '''

    def __init__(self, chain, msg=None):
        self.chain = chain
        super().__init__(*((msg,) if msg else ()))


class OutOfRangeException(CdTextException, ValueError):
    pass


class InvalidBlockException(OutOfRangeException):
    '''The block number must be in the range 0..7'''
    pass


class UnknownPackTypeException(CdTextException, ValueError):
    '''This is useful when is not possible to let an unknown pack type
    slip through the decoding.'''
    pass
