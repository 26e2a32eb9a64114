"""
engine/
-------
Recording & playback layer.

    from algotrace.engine import Recorder, Stepper
"""

from algotrace.engine.stepper  import Stepper, StepperState, SPEED_PRESETS
from algotrace.engine.recorder import Recorder, RunMetrics

__all__ = [
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "Recorder",
    "RunMetrics",
]
