"""
subset_sum.py — Subset Sum
===========================
Include-first recursion over the items in order.  A branch whose
running sum overshoots the target is pruned (inputs are expected to be
non-negative).  Stops at the first subset that hits the target exactly.
"""

from typing import Generator, List, Sequence

from algotrace.algorithms.step import StepKind, Tracer, TraceStep


PSEUDOCODE: List[str] = [
    "def search(i, total):",                        # 0
    "    if total == target: return True",          # 1
    "    if i == n or total > target: return False", # 2
    "    include a[i]: if search(i+1, total+a[i]): return True",  # 3
    "    exclude a[i]: return search(i+1, total)",  # 4
]


def subset_sum(numbers: Sequence[int] = (3, 34, 4, 12, 5, 2), target: int = 9) -> Generator[TraceStep, None, None]:
    t = Tracer()
    values = list(numbers)
    chosen: List[int] = []

    def data(i=None) -> dict:
        return {
            "numbers":        values,
            "target":         target,
            "chosen_indices": chosen,
            "subset":         [values[k] for k in chosen],
            "current_sum":    sum(values[k] for k in chosen),
            "current_index":  i,
        }

    def search(i: int, total: float) -> Generator[TraceStep, None, bool]:
        if total == target:
            return True
        if i == len(values):
            return False

        chosen.append(i)
        yield t.snapshot(
            StepKind.UPDATE, f"Include a[{i}]={values[i]}: sum = {total + values[i]}.",
            data(i), highlights=(i,), line=3,
        )
        if total + values[i] > target:
            yield t.snapshot(
                StepKind.DECIDE, f"{total + values[i]} > {target}: prune this branch.",
                data(i), highlights=(i,), pruned=True, line=2,
            )
        else:
            found = yield from search(i + 1, total + values[i])
            if found:
                return True
        chosen.pop()
        yield t.snapshot(
            StepKind.BACKTRACK, f"Exclude a[{i}]={values[i]}: sum back to {total}.",
            data(i), highlights=(i,), line=4,
        )
        return (yield from search(i + 1, total))

    yield t.snapshot(StepKind.INIT, f"Find a subset of {values} summing to {target}.", data(), line=0)
    found = yield from search(0, 0)

    final = data()
    final["found"] = found
    description = (
        f"Subset {final['subset']} sums to {target}." if found else f"No subset of {values} sums to {target}."
    )
    yield t.snapshot(StepKind.COMPLETE, description, final, highlights=tuple(chosen), line=1)
