"""Exceptions raised when an algorithm is selected with a bad id or bad input."""


class AlgoTraceError(ValueError):
    """Base class for selection-time failures."""


class UnknownAlgorithmError(AlgoTraceError):
    """Raised when an algorithm id is not in the registry."""

    def __init__(self, algo_id: str):
        super().__init__(f"Unknown algorithm: {algo_id}")
        self.algo_id = algo_id


class InvalidInputError(AlgoTraceError):
    """Raised when generator parameters are missing, unexpected or malformed."""
