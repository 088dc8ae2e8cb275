# engine/exceptions.py

class EstimationError(Exception):
    pass


class InvalidInput(EstimationError, ValueError):
    pass


class InsufficientData(InvalidInput):
    pass


class UnsupportedStrategy(EstimationError):
    pass
