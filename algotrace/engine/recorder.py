"""
recorder.py — Trace Recorder & Run Metrics
============================================
A Recorder is the per-selection generator object: it is bound to one
algorithm id and one set of parameters, validates both up front, and
materialises the full trace on demand.

Usage:
    rec = Recorder("dijkstra", source=0)
    steps   = rec.generate_steps()      # full list, INIT … COMPLETE
    info    = rec.get_algorithm_info()  # the metadata card
    metrics = rec.get_metrics()         # counts by step kind, timing
    rec.export()                        # JSON-ready snapshot for save/replay

Every generate_steps() call runs the generator function afresh, so the
trace can be regenerated at any time and always comes out the same.
"""

import inspect
import itertools
import logging
import sys
import time
from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Union

from algotrace.algorithms import AlgoInfo, require_algorithm
from algotrace.algorithms.step import ArrayStep, StepKind, TraceStep, to_jsonable
from algotrace.algorithms.validation import validate_params
from algotrace.errors import InvalidInputError
from algotrace.graph import Graph

LOGGER = logging.getLogger(__name__)

Step = Union[ArrayStep, TraceStep]


# ---------------------------------------------------------------------------
# Metrics dataclass: what the analytics card renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_id:      str   = ""
    algo_name:    str   = ""
    category:     str   = ""
    total_steps:  int   = 0
    comparisons:  int   = 0          # COMPARE steps
    swaps:        int   = 0          # SWAP steps
    updates:      int   = 0          # UPDATE steps
    rejections:   int   = 0          # NO_UPDATE steps
    visits:       int   = 0          # VISIT steps
    backtracks:   int   = 0          # BACKTRACK steps
    memo_hits:    int   = 0          # MEMO_HIT steps
    wall_time_ms: float = 0.0        # wall-clock time to materialise the trace
    memory_bytes: int   = 0          # approx size of the step buffer (sys.getsizeof)
    outcome:      Dict[str, Any] = field(default_factory=dict)   # terminal-step flags and results


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        info    : AlgoInfo of the selected algorithm.
        params  : Validated keyword arguments for the generator function.
        steps   : Trace from the most recent generate_steps() call.
        metrics : RunMetrics for that trace (None until generated).
    """

    def __init__(self, algo_id: str, /, **params: Any):
        info = require_algorithm(algo_id)
        signature = inspect.signature(info.fn)

        try:
            bound = signature.bind(**params)
        except TypeError as exc:
            LOGGER.warning("Rejected params for %s: %s", algo_id, exc)
            raise InvalidInputError(f"{algo_id}: {exc}") from exc
        bound.apply_defaults()
        arguments = dict(bound.arguments)

        # graph algorithms get their demonstration graph filled in so the
        # vertex parameters can be range-checked against it
        if info.sample is not None and arguments.get("graph") is None:
            arguments["graph"] = info.sample()

        # only parameters that default to None may be passed as None
        nullable = {name for name, p in signature.parameters.items() if p.default is None}
        try:
            self.params: Dict[str, Any] = validate_params(
                arguments, info.choices, nullable=nullable, directed_only=info.directed_only,
            )
        except InvalidInputError as exc:
            LOGGER.warning("Rejected params for %s: %s", algo_id, exc)
            raise

        self.info:    AlgoInfo             = info
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------
    def generate_steps(self, max_steps: Optional[int] = None) -> List[Step]:
        """
        Run the generator to completion and return every step, in order.

        With `max_steps` set, a trace that would grow past that many steps
        is abandoned and InvalidInputError is raised instead.
        """
        started = time.monotonic()
        if max_steps is None:
            steps = list(self.info.fn(**self.params))
        else:
            steps = list(itertools.islice(self.info.fn(**self.params), max_steps + 1))
            if len(steps) > max_steps:
                LOGGER.warning("%s exceeded the %d step budget", self.info.id, max_steps)
                raise InvalidInputError(
                    f"{self.info.id} needs more than {max_steps} steps for this input; try a smaller one"
                )
        wall_ms = (time.monotonic() - started) * 1000

        self.steps   = steps
        self.metrics = self._compute_metrics(wall_ms)
        LOGGER.debug("%s produced %d steps in %.2f ms", self.info.id, len(steps), wall_ms)
        return list(steps)

    def get_algorithm_info(self) -> AlgoInfo:
        return self.info

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        if not self.steps:
            self.generate_steps()
        return {
            "algorithm": self.info.id,
            "params":    self.serialised_params(),
            "info":      self.info.to_dict(),
            "metrics":   to_jsonable(asdict(self.metrics)) if self.metrics else {},
            "steps":     [s.to_dict() for s in self.steps],
        }

    def serialised_params(self) -> Dict[str, Any]:
        return {
            name: value.to_dict() if isinstance(value, Graph) else to_jsonable(value)
            for name, value in self.params.items()
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self.info
        counts = Counter(s.kind for s in self.steps)
        last = self.steps[-1] if self.steps else None

        # approximate memory: sizeof the steps buffer
        mem = sys.getsizeof(self.steps)
        for s in self.steps:
            mem += sys.getsizeof(s)

        outcome = {k: v for k, v in last.metadata.items() if k != "line"} if last else {}

        return RunMetrics(
            algo_id=info.id,
            algo_name=info.name,
            category=info.category,
            total_steps=len(self.steps),
            comparisons=counts[StepKind.COMPARE],
            swaps=counts[StepKind.SWAP],
            updates=counts[StepKind.UPDATE],
            rejections=counts[StepKind.NO_UPDATE],
            visits=counts[StepKind.VISIT],
            backtracks=counts[StepKind.BACKTRACK],
            memo_hits=counts[StepKind.MEMO_HIT],
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
            outcome=outcome,
        )
