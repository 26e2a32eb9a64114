"""
algotrace — step traces for teaching algorithms.

    from algotrace import Recorder
    steps = Recorder("bubble-sort", array=[5, 3, 8, 1]).generate_steps()
"""

from algotrace.engine import Recorder, Stepper
from algotrace.errors import AlgoTraceError, InvalidInputError, UnknownAlgorithmError

__version__ = "0.1.0"

__all__ = [
    "AlgoTraceError",
    "InvalidInputError",
    "Recorder",
    "Stepper",
    "UnknownAlgorithmError",
]
