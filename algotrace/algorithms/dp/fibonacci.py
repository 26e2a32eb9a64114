"""
fibonacci.py — Fibonacci Numbers
=================================
Two trace modes over the same 1-D table dp[0 … n]:

  • "bottom-up" (default) – seed dp[0], dp[1], then fill left to right.
  • "top-down"            – memoised recursion; a MEMO_HIT step shows
                            every lookup that saved a recomputation.

Empty cells are None until written.
"""

from typing import Generator, List, Optional

from algotrace.algorithms.step import StepKind, Tracer, TraceStep


PSEUDOCODE: List[str] = [
    "def fib(n):",                                  # 0
    "    dp[0] ← 0; dp[1] ← 1",                     # 1
    "    for i in 2 … n:",                          # 2
    "        dp[i] ← dp[i-1] + dp[i-2]",            # 3
    "    return dp[n]",                             # 4
    "def fib_memo(n):",                             # 5
    "    if memo[n] known: return memo[n]",         # 6
    "    if n ≤ 1: memo[n] ← n",                    # 7
    "    else: memo[n] ← fib_memo(n-1) + fib_memo(n-2)",  # 8
]

MODES = ("bottom-up", "top-down")


def fibonacci(n: int = 10, mode: str = "bottom-up") -> Generator[TraceStep, None, None]:
    if mode == "top-down":
        return _top_down(n)
    return _bottom_up(n)


# ---------------------------------------------------------------------------
def _bottom_up(n: int) -> Generator[TraceStep, None, None]:
    t = Tracer()
    dp: List[Optional[int]] = [None] * (n + 1)

    def data(i: Optional[int] = None) -> dict:
        return {"dp_table": dp, "n": n, "current_i": i, "mode": "bottom-up"}

    yield t.snapshot(StepKind.INIT, f"Compute F({n}) bottom-up with a table of {n + 1} cell(s).", data(), line=0)

    dp[0] = 0
    yield t.snapshot(StepKind.UPDATE, "Base case: F(0) = 0.", data(0), highlights=(0,), line=1)
    if n >= 1:
        dp[1] = 1
        yield t.snapshot(StepKind.UPDATE, "Base case: F(1) = 1.", data(1), highlights=(1,), line=1)

    for i in range(2, n + 1):
        yield t.snapshot(
            StepKind.COMPARE, f"F({i}) = F({i - 1}) + F({i - 2}) = {dp[i - 1]} + {dp[i - 2]}.",
            data(i), highlights=(i,), comparisons=(i - 1, i - 2), line=3,
        )
        dp[i] = dp[i - 1] + dp[i - 2]
        yield t.snapshot(StepKind.UPDATE, f"dp[{i}] = {dp[i]}.", data(i), highlights=(i,), updated=True, line=3)

    final = data()
    final["result"] = dp[n]
    yield t.snapshot(StepKind.COMPLETE, f"F({n}) = {dp[n]}.", final, highlights=(n,), line=4)


# ---------------------------------------------------------------------------
def _top_down(n: int) -> Generator[TraceStep, None, None]:
    t = Tracer()
    memo: List[Optional[int]] = [None] * (n + 1)
    calls: List[int] = []

    def data(i: Optional[int] = None) -> dict:
        return {"dp_table": memo, "n": n, "current_i": i, "call_stack": calls, "mode": "top-down"}

    def solve(k: int) -> Generator[TraceStep, None, int]:
        if memo[k] is not None:
            yield t.snapshot(
                StepKind.MEMO_HIT, f"F({k}) already memoised: {memo[k]}.",
                data(k), highlights=(k,), memoized=True, line=6,
            )
            return memo[k]

        calls.append(k)
        if k <= 1:
            memo[k] = k
            yield t.snapshot(StepKind.UPDATE, f"Base case: F({k}) = {k}.", data(k), highlights=(k,), line=7)
            calls.pop()
            return k

        yield t.snapshot(StepKind.CONSIDER, f"Call F({k}) = F({k - 1}) + F({k - 2}).", data(k), highlights=(k,), line=8)
        a = yield from solve(k - 1)
        b = yield from solve(k - 2)
        memo[k] = a + b
        calls.pop()
        yield t.snapshot(
            StepKind.BACKTRACK, f"Return F({k}) = {a} + {b} = {memo[k]}.",
            data(k), highlights=(k,), comparisons=(k - 1, k - 2), updated=True, line=8,
        )
        return memo[k]

    yield t.snapshot(StepKind.INIT, f"Compute F({n}) top-down with an empty memo table.", data(), line=5)
    result = yield from solve(n)

    final = data()
    final["result"] = result
    yield t.snapshot(StepKind.COMPLETE, f"F({n}) = {result}.", final, highlights=(n,), line=5)
