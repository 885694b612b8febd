"""
IEEE-754 primitives: precision detection and bit reinterpretation.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass(frozen=True)
class FloatFormat:
    """A float type paired with the signed integer type of the same width"""
    name: str
    float_type: type
    int_type: type
    bits: int


SINGLE = FloatFormat("single", np.float32, np.int32, 32)
DOUBLE = FloatFormat("double", np.float64, np.int64, 64)


def float_format(x: Any) -> FloatFormat:
    """Return the precision of a scalar or array operand"""
    if isinstance(x, np.ndarray):
        if x.dtype == np.float32:
            return SINGLE
        if x.dtype == np.float64:
            return DOUBLE
        raise TypeError(f"Unsupported array dtype: {x.dtype}")

    if isinstance(x, np.float32):
        return SINGLE
    # np.float64 subclasses float
    if isinstance(x, float):
        return DOUBLE
    if isinstance(x, (int, np.integer)) and not isinstance(x, (bool, np.bool_)):
        try:
            float(x)
        except OverflowError:
            raise TypeError("Integer operand out of double range") from None
        return DOUBLE
    raise TypeError(f"Unsupported operand type: {type(x).__name__}")


def common_format(a: Any, b: Any) -> FloatFormat:
    """Return the shared precision of two operands"""
    lhs, rhs = float_format(a), float_format(b)
    if lhs is not rhs:
        raise TypeError(f"Precision mismatch: {lhs.name} vs {rhs.name}")
    return lhs


def to_bits(x: Any, fmt: FloatFormat) -> int:
    """Read the bit pattern of ``x`` as a signed integer of the same width"""
    return int(fmt.float_type(x).view(fmt.int_type))


def from_bits(n: int, fmt: FloatFormat):
    """Inverse of to_bits"""
    return fmt.int_type(n).view(fmt.float_type)
