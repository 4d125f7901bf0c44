"""Counting the ordered ways to reach an amount with given coins."""

from collections.abc import Iterable
from functools import lru_cache


def _validate(amount: int, coins: Iterable[int]) -> tuple[int, ...]:
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")
    coins = tuple(coins)
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    return coins


def coin_ways_top_down(amount: int, coins: Iterable[int]) -> int:
    """Count ordered coin sequences summing to ``amount``, memoised recursion."""
    coins = _validate(amount, coins)

    @lru_cache(maxsize=None)
    def ways(remaining: int) -> int:
        if remaining == 0:
            return 1
        return sum(ways(remaining - coin) for coin in coins if coin <= remaining)

    return ways(amount)


def coin_ways_bottom_up(amount: int, coins: Iterable[int]) -> int:
    """Count ordered coin sequences summing to ``amount``, table filled upward."""
    coins = _validate(amount, coins)
    table = [1] + [0] * amount
    for value in range(1, amount + 1):
        table[value] = sum(table[value - coin] for coin in coins if coin <= value)
    return table[amount]