import math
import operator
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Callable, Dict, Generic, TypeVar

W = TypeVar("W")


@dataclass(frozen=True)
class FlowArithmetic(Generic[W]):
    """
    Arithmetic over capacities of type W.

    Ordering is taken from W itself; everything else the flow algorithms
    need goes through this object, so the same engine runs over ints,
    floats, fractions or fixed-point decimals.

    Attributes:
        name: short label, also the key in `ARITHMETICS`
        zero: additive identity, i.e. "no capacity"
        infinity: compares greater than any capacity that will appear
        add: (a, b) -> a + b
        subtract: (a, b) -> a - b
        parse: turns a text field (CSV cell, CLI argument) into a W
    """

    name: str
    zero: W
    infinity: W
    add: Callable[[W, W], W] = operator.add
    subtract: Callable[[W, W], W] = operator.sub
    parse: Callable[[str], W] = float

    def sum(self, values) -> W:
        total = self.zero
        for value in values:
            total = self.add(total, value)
        return total


# math.inf compares correctly against any int or Fraction
INTEGER: FlowArithmetic[int] = FlowArithmetic("int", 0, math.inf, parse=int)
FLOAT: FlowArithmetic[float] = FlowArithmetic("float", 0.0, math.inf, parse=float)
FRACTION: FlowArithmetic[Fraction] = FlowArithmetic("fraction", Fraction(0), math.inf, parse=Fraction)
DECIMAL: FlowArithmetic[Decimal] = FlowArithmetic("decimal", Decimal(0), Decimal("Infinity"), parse=Decimal)

ARITHMETICS: Dict[str, FlowArithmetic] = {
    a.name: a for a in (INTEGER, FLOAT, FRACTION, DECIMAL)
}


def get_arithmetic(name: str) -> FlowArithmetic:
    try:
        return ARITHMETICS[name]
    except KeyError:
        raise ValueError(
            f"unknown arithmetic '{name}', expected one of {sorted(ARITHMETICS)}"
        ) from None
