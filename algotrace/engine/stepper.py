"""
stepper.py — Playback Cursor
=============================
A Stepper walks an index over a trace that a Recorder has already
materialised.  It never regenerates or mutates the trace, so rewinding
and jumping are plain index moves.

Cursor states:
    IDLE      nothing loaded
    PAUSED    showing a step, waiting for input
    PLAYING   tick() advances on its own
    FINISHED  showing the COMPLETE step

The state is derived from the position on every move: landing on the last
step finishes playback, moving off it pauses.

Speed is in steps per second; while playing, tick() advances one step
every 1000 / speed milliseconds.  Not thread-safe.
"""

import time
from enum import Enum
from typing import Callable, List, Optional, Sequence, Union

from algotrace.algorithms.step import ArrayStep, StepKind, TraceStep

Step = Union[ArrayStep, TraceStep]


class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# steps per second
SPEED_PRESETS = {
    "slow":   1.0,
    "medium": 2.5,
    "fast":   6.0,
    "turbo":  20.0,
}

MIN_SPEED = 0.1
MAX_SPEED = 50.0


class Stepper:
    """
    Attributes:
        steps       : The loaded trace.
        current_idx : Position of the displayed step (-1 when nothing is loaded).
        state       : StepperState.
        speed       : Steps per second while playing.
        on_step     : Optional callback(step), fired whenever the cursor lands on a step.
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None):
        self.steps:       List[Step]   = []
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.speed:       float        = SPEED_PRESETS["medium"]
        self.on_step = on_step
        self._last_advance: float = 0.0

    def load(self, steps: Sequence[Step], position: int = 0) -> None:
        """Attach a trace and show `position`, clamped into range."""
        self.steps = list(steps)
        self.current_idx = -1
        self.state = StepperState.IDLE
        if self.steps:
            self._move(min(max(position, 0), len(self.steps) - 1))

    def reset(self) -> None:
        self.load([])

    # ------------------------------------------------------------------
    # Navigation; every move returns False instead of leaving the trace
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        return self.goto_step(self.current_idx + 1)

    def prev_step(self) -> bool:
        return self.goto_step(self.current_idx - 1)

    def goto_step(self, idx: int) -> bool:
        if not self.steps or not 0 <= idx < len(self.steps):
            return False
        self._move(idx)
        return True

    def rewind(self) -> bool:
        return self.goto_step(0)

    def jump_to_end(self) -> bool:
        return self.goto_step(len(self.steps) - 1)

    def seek(self, kind: StepKind, forward: bool = True) -> bool:
        """Move to the nearest step of `kind` after (or before) the cursor."""
        if forward:
            candidates = range(self.current_idx + 1, len(self.steps))
        else:
            candidates = range(self.current_idx - 1, -1, -1)
        for idx in candidates:
            if self.steps[idx].kind is kind:
                self._move(idx)
                return True
        return False

    # ------------------------------------------------------------------
    # Auto-play
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state is not StepperState.PAUSED:
            return
        self.state = StepperState.PLAYING
        self._last_advance = time.monotonic()

    def pause(self) -> None:
        if self.state is StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def tick(self, now: Optional[float] = None) -> bool:
        """
        Drive auto-play from a timer.  Advances at most one step, and only
        once interval_ms has passed since the previous advance.
        Returns True if the cursor moved.
        """
        if not self.is_playing:
            return False
        if now is None:
            now = time.monotonic()
        if (now - self._last_advance) * 1000 < self.interval_ms:
            return False
        self._last_advance = now
        return self.next_step()

    def set_speed(self, preset: str) -> None:
        """Apply a named preset; unknown names fall back to "medium"."""
        self.speed = SPEED_PRESETS.get(preset, SPEED_PRESETS["medium"])

    def set_speed_value(self, speed: float) -> None:
        self.speed = min(max(MIN_SPEED, speed), MAX_SPEED)

    @property
    def interval_ms(self) -> float:
        return 1000 / self.speed

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        return self.steps[self.current_idx] if self.current_idx >= 0 else None

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def progress(self) -> float:
        """Fraction of the trace shown so far, 0.0 … 1.0."""
        if len(self.steps) < 2:
            return 1.0 if self.steps else 0.0
        return self.current_idx / (len(self.steps) - 1)

    @property
    def is_finished(self) -> bool:
        return self.state is StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state is StepperState.PLAYING

    def _move(self, idx: int) -> None:
        self.current_idx = idx
        if idx == len(self.steps) - 1:
            self.state = StepperState.FINISHED
        elif self.state is not StepperState.PLAYING:
            self.state = StepperState.PAUSED
        if self.on_step is not None:
            self.on_step(self.steps[idx])
