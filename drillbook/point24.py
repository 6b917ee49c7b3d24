"""The 24 game: combine four digits with + - * / to reach 24."""

from __future__ import annotations

import math
from itertools import product
from typing import Iterator, MutableSequence, Sequence

_OPERATORS = "+-*/"
_DIGITS = "0123456789"
_TARGET = 24


def _divide(a: float, b: float) -> float:
    """Divide like IEEE floating point, giving inf or nan for a zero divisor."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def calculate_string(expression: str) -> float:
    """Evaluate a string of single digits joined by + - * /.

    Every character other than an operator is one digit. A digit that
    follows ``*`` or ``/`` is folded into the number before it at once;
    the remaining numbers are then summed from the right, each taking the
    sign of the operator popped alongside it. Operators used by ``*`` and
    ``/`` stay on the operator stack and take part in that pairing.
    """
    numbers: list[float] = []
    operators: list[str] = []
    for ch in expression:
        if ch in _OPERATORS:
            operators.append(ch)
            continue
        if ch not in _DIGITS:
            raise ValueError(f"unexpected character {ch!r} in expression")
        value = float(_DIGITS.index(ch))
        if not numbers:
            numbers.append(value)
        elif operators and operators[-1] == "*":
            numbers[-1] *= value
        elif operators and operators[-1] == "/":
            numbers[-1] = _divide(numbers[-1], value)
        else:
            numbers.append(value)

    result = 0.0
    while operators and numbers:
        value = numbers.pop()
        result += -value if operators.pop() == "-" else value
    for value in reversed(numbers):
        result += value
    return result


def _arrangements(values: MutableSequence[int], index: int = 0) -> Iterator[tuple[int, ...]]:
    """Yield orderings of ``values`` by swapping each slot with those after it.

    A slot whose value occurs again later produces no orderings at all.
    """
    if index == len(values):
        yield tuple(values)
        return
    if values[index] in values[index + 1:]:
        return
    for i in range(index, len(values)):
        values[index], values[i] = values[i], values[index]
        yield from _arrangements(values, index + 1)
        values[index], values[i] = values[i], values[index]


def judge_point24(nums: Sequence[int]) -> bool:
    """Return True if some ordering of the four numbers and choice of operators reaches 24.

    Expressions are read left to right by :func:`calculate_string`, and a
    value counts when it truncates to 24.
    """
    if len(nums) != 4:
        raise ValueError("exactly four numbers are needed")
    for arrangement in _arrangements(list(nums)):
        texts = [str(v) for v in arrangement]
        for ops in product(_OPERATORS, repeat=3):
            expression = texts[0] + "".join(op + text for op, text in zip(ops, texts[1:]))
            value = calculate_string(expression)
            if math.isfinite(value) and math.trunc(value) == _TARGET:
                return True
    return False