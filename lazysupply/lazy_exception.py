class LazyException(Exception):
    pass

class InvalidArgumentException(LazyException):
    pass

class InvalidDataException(LazyException):
    pass

class ProducerFailureException(LazyException):
    pass
