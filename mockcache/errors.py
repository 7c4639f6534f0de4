class InvalidArgument(ValueError):
    pass


class InvalidKey(InvalidArgument):
    pass


class InvalidTTL(InvalidArgument):
    pass
