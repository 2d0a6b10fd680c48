# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Introductory numeric helpers."""

import math
from typing import Any, Optional, Sequence


def max_of(a: Any, b: Any) -> Any:
    """Return the larger argument, preferring the first on ties."""
    return a if a >= b else b


def fizz_buzz(n: int) -> str:
    if n % 3 == 0 and n % 5 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def calculate_average(numbers: Sequence[float]) -> float:
    """Return the arithmetic mean, or nan for an empty sequence."""
    if not numbers:
        return math.nan
    return sum(numbers) / len(numbers)


def factorial(n: int) -> Optional[int]:
    """Return n!, or None when n is negative."""
    if n < 0:
        return None
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result
