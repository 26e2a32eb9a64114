"""
step.py — Algorithm Step Snapshots
===================================
Every algorithm is a generator that yields step objects.
A step is a frozen-in-time picture of everything a player needs
to render one frame, plus a plain-English narration of the
transition that produced it.

Two shapes exist:

    • ArrayStep  – sorting / searching: the working array and the
                   comparing / swapping / sorted index sets
    • TraceStep  – graph / DP / backtracking: a free-form `data`
                   payload (distances, dp table, queue, …) plus
                   generic highlight sets and flags

Both carry a StepKind tag so a player can dispatch on what kind of
event the frame shows without probing optional fields.

Design decisions:
  - Steps are frozen dataclasses.  They are SNAPSHOTS.  The generator
    is the only writer; recorder / stepper / HTTP layer only read.
  - The mutable scratch state lives in a tracer (ArrayTracer / Tracer).
    The tracer stamps monotonic ids and copies its containers into
    every step it builds, so no step aliases a later step's state.
"""

import math
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set, Tuple


# ---------------------------------------------------------------------------
# Step kinds: the closed set of events a frame can show
# ---------------------------------------------------------------------------
class StepKind(Enum):
    INIT      = "init"        # untouched input / seeded base cases
    CONSIDER  = "consider"    # entering a pass, range, cell or call
    COMPARE   = "compare"     # reading values that drive a decision
    SWAP      = "swap"        # about to exchange two positions
    DECIDE    = "decide"      # branch taken (take/skip, discard half, …)
    UPDATE    = "update"      # a write that changed state
    NO_UPDATE = "no_update"   # a candidate was checked and rejected
    VISIT     = "visit"       # graph node expanded
    MEMO_HIT  = "memo_hit"    # memo table answered without recursion
    BACKTRACK = "backtrack"   # leaving a call / reconstructing a solution
    COMPLETE  = "complete"    # terminal state


# ---------------------------------------------------------------------------
# JSON helper
# ---------------------------------------------------------------------------
def to_jsonable(value: Any) -> Any:
    """Recursively convert step payloads into JSON-safe structures.

    Infinite distances become the "∞" string, enums become their value
    and dict keys become strings.
    """
    if isinstance(value, float) and math.isinf(value):
        return "∞" if value > 0 else "-∞"
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return [to_jsonable(v) for v in sorted(value)]
    return value


# ---------------------------------------------------------------------------
# Sorting / searching shape
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ArrayStep:
    """
    Attributes:
        id          : 0-based position of this step in its trace.
        kind        : StepKind tag.
        description : What just happened, for the narration panel.
        array       : Full working array at this instant.
        comparing   : Indices being compared (a search may highlight a range).
        swapping    : Indices being swapped / written; empty otherwise.
        sorted      : Ascending indices whose final position is settled.
                      Searches reuse it as the found-marker.
        metadata    : Algorithm-specific extras (pivot, buffers, found, …).
    """

    id:          int
    kind:        StepKind
    description: str
    array:       Tuple[float, ...]
    comparing:   Tuple[int, ...]   = ()
    swapping:    Tuple[int, ...]   = ()
    sorted:      Tuple[int, ...]   = ()
    metadata:    Dict[str, Any]    = field(default_factory=dict)

    @property
    def completed(self) -> bool:
        return self.kind is StepKind.COMPLETE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id":          self.id,
            "kind":        self.kind.value,
            "description": self.description,
            "array":       to_jsonable(self.array),
            "comparing":   list(self.comparing),
            "swapping":    list(self.swapping),
            "sorted":      list(self.sorted),
            "completed":   self.completed,
            "metadata":    to_jsonable(self.metadata),
        }


# ---------------------------------------------------------------------------
# Graph / DP / backtracking shape
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TraceStep:
    """
    Attributes:
        id          : 0-based monotonic sequence number.
        kind        : StepKind tag.
        description : What just happened, for the narration panel.
        data        : Family payload, e.g. {"distances", "visited", "queue"}
                      for graphs or {"dp_table", "current_i", "current_j"}
                      for DP tables.  Deep-copied at emission.
        highlights  : Generic emphasis (nodes, cells, items).
        comparisons : Positions whose values are being compared.
        swaps       : Positions being exchanged.
        completed   : True on terminal / summary steps.
        metadata    : Rendering flags: {"updated": True},
                      {"negative_cycle": True}, {"memoized": True}, …
    """

    id:          int
    kind:        StepKind
    description: str
    data:        Dict[str, Any]   = field(default_factory=dict)
    highlights:  Tuple[Any, ...]  = ()
    comparisons: Tuple[Any, ...]  = ()
    swaps:       Tuple[Any, ...]  = ()
    completed:   bool             = False
    metadata:    Dict[str, Any]   = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id":          self.id,
            "kind":        self.kind.value,
            "description": self.description,
            "data":        to_jsonable(self.data),
            "highlights":  to_jsonable(self.highlights),
            "comparisons": to_jsonable(self.comparisons),
            "swaps":       to_jsonable(self.swaps),
            "completed":   self.completed,
            "metadata":    to_jsonable(self.metadata),
        }


# ---------------------------------------------------------------------------
# Tracers: mutable scratch-pads that build the frozen steps
# ---------------------------------------------------------------------------
class ArrayTracer:
    """
    Working state for an array algorithm.

    Usage inside a generator:
        t = ArrayTracer(array)
        yield t.snapshot(StepKind.INIT, "Initial array")
        yield t.snapshot(StepKind.COMPARE, "Compare 3 and 5", comparing=(0, 1))
        t.swap(0, 1)
        t.settle(1)
        yield t.complete("Array sorted")

    `settle` never lets the sorted set reach the full index range; the
    last outstanding index only settles in `complete`.
    """

    def __init__(self, array: Sequence[float]):
        self.array:    List[float] = list(array)
        self.sorted:   Set[int]    = set()
        self._next_id: int         = 0

    def __len__(self) -> int:
        return len(self.array)

    def swap(self, i: int, j: int) -> None:
        self.array[i], self.array[j] = self.array[j], self.array[i]

    def settle(self, *indices: int) -> None:
        for index in indices:
            if index in self.sorted or len(self.sorted) >= len(self.array) - 1:
                continue
            self.sorted.add(index)

    def snapshot(
        self,
        kind: StepKind,
        description: str,
        comparing: Iterable[int] = (),
        swapping: Iterable[int] = (),
        marked: Optional[Iterable[int]] = None,
        **metadata: Any,
    ) -> ArrayStep:
        """Freeze the current state. `marked` overrides the sorted set."""
        sorted_set = self.sorted if marked is None else set(marked)
        step = ArrayStep(
            id=self._next_id,
            kind=kind,
            description=description,
            array=tuple(self.array),
            comparing=tuple(comparing),
            swapping=tuple(swapping),
            sorted=tuple(sorted(sorted_set)),
            metadata=deepcopy(metadata),
        )
        self._next_id += 1
        return step

    def complete(self, description: str, **metadata: Any) -> ArrayStep:
        """Terminal step of a sort: every index is settled."""
        self.sorted = set(range(len(self.array)))
        return self.snapshot(StepKind.COMPLETE, description, **metadata)


class Tracer:
    """
    Id stamping and copying for TraceStep producers.

    Usage inside a generator:
        t = Tracer()
        yield t.snapshot(StepKind.INIT, "Start", {"dp_table": dp})
    """

    def __init__(self):
        self._next_id: int = 0

    def snapshot(
        self,
        kind: StepKind,
        description: str,
        data: Dict[str, Any],
        highlights: Iterable[Any] = (),
        comparisons: Iterable[Any] = (),
        swaps: Iterable[Any] = (),
        completed: Optional[bool] = None,
        **metadata: Any,
    ) -> TraceStep:
        step = TraceStep(
            id=self._next_id,
            kind=kind,
            description=description,
            data=deepcopy(data),
            highlights=tuple(highlights),
            comparisons=tuple(comparisons),
            swaps=tuple(swaps),
            completed=(kind is StepKind.COMPLETE) if completed is None else completed,
            metadata=deepcopy(metadata),
        )
        self._next_id += 1
        return step
