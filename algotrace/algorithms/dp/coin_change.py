"""
coin_change.py — Minimum Coin Change
=====================================
1-D table over amounts 0 … target; dp[0] = 0 and ∞ marks an amount
no combination of coins can reach.

    for each amount a, for each coin c ≤ a:
        dp[a] = min(dp[a], dp[a-c] + 1)

An unreachable target is reported as min_coins = -1 on the terminal
step.  `last_coin[a]` remembers the coin that produced dp[a] so the
backtrack can list the coins used.
"""

import math
from typing import Generator, List, Optional, Sequence

from algotrace.algorithms.step import StepKind, Tracer, TraceStep


PSEUDOCODE: List[str] = [
    "def coin_change(coins, amount):",              # 0
    "    dp ← [∞]·(amount+1); dp[0] ← 0",           # 1
    "    for a in 1 … amount:",                     # 2
    "        for c in coins, c ≤ a:",               # 3
    "            dp[a] ← min(dp[a], dp[a-c] + 1)",  # 4
    "    return dp[amount] if finite else -1",      # 5
]


def coin_change(coins: Sequence[int] = (1, 2, 5), amount: int = 11) -> Generator[TraceStep, None, None]:
    t = Tracer()
    coins = list(coins)
    dp: List[float] = [math.inf] * (amount + 1)
    last_coin: List[Optional[int]] = [None] * (amount + 1)
    used: List[int] = []

    def data(a: Optional[int] = None, coin: Optional[int] = None) -> dict:
        return {
            "coins":          coins,
            "amount":         amount,
            "dp_table":       dp,
            "current_amount": a,
            "current_coin":   coin,
            "coins_used":     used,
        }

    yield t.snapshot(StepKind.INIT, f"Fewest coins from {coins} that sum to {amount}.", data(), line=1)
    dp[0] = 0
    yield t.snapshot(StepKind.UPDATE, "Base case: dp[0] = 0 (no coins for amount 0).", data(0), highlights=(0,), line=1)

    for a in range(1, amount + 1):
        yield t.snapshot(StepKind.CONSIDER, f"Amount {a}.", data(a), highlights=(a,), line=2)
        for coin in coins:
            if coin > a:
                continue
            candidate = dp[a - coin] + 1
            yield t.snapshot(
                StepKind.COMPARE, f"Coin {coin}: dp[{a - coin}] + 1 = {candidate} vs dp[{a}] = {dp[a]}.",
                data(a, coin), highlights=(a,), comparisons=(a - coin, a), line=4,
            )
            if candidate < dp[a]:
                dp[a] = candidate
                last_coin[a] = coin
                yield t.snapshot(
                    StepKind.UPDATE, f"dp[{a}] = {candidate} using coin {coin}.",
                    data(a, coin), highlights=(a,), updated=True, line=4,
                )
            else:
                yield t.snapshot(
                    StepKind.NO_UPDATE, f"Coin {coin} does not improve dp[{a}].",
                    data(a, coin), highlights=(a,), updated=False, line=4,
                )

    final = data()
    if math.isinf(dp[amount]):
        final["min_coins"] = -1
        yield t.snapshot(
            StepKind.COMPLETE, f"Amount {amount} cannot be made from {coins}: result -1.",
            final, highlights=(amount,), line=5,
        )
        return

    a = amount
    while a > 0:
        coin = last_coin[a]
        used.append(coin)
        yield t.snapshot(
            StepKind.BACKTRACK, f"dp[{a}] came from coin {coin}; continue at amount {a - coin}.",
            data(a, coin), highlights=(a,), line=5,
        )
        a -= coin

    final = data()
    final["min_coins"] = int(dp[amount])
    yield t.snapshot(
        StepKind.COMPLETE, f"Minimum coins for {amount}: {int(dp[amount])} {used}.",
        final, highlights=(amount,), line=5,
    )
