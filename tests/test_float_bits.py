"""
Tests for precision detection and bit reinterpretation
"""

import numpy as np
import pytest

from ApproxEq.float_bits import DOUBLE, SINGLE, common_format, float_format, from_bits, to_bits


class TestFloatFormat:
    """Test operand precision detection"""

    def test_double_precision_operands(self):
        assert float_format(1.0) is DOUBLE
        assert float_format(np.float64(1.0)) is DOUBLE
        assert float_format(3) is DOUBLE
        assert float_format(np.zeros(3)) is DOUBLE

    def test_single_precision_operands(self):
        assert float_format(np.float32(1.0)) is SINGLE
        assert float_format(np.zeros(3, dtype=np.float32)) is SINGLE

    def test_unsupported_operands(self):
        with pytest.raises(TypeError):
            float_format(np.float16(1.0))
        with pytest.raises(TypeError):
            float_format(True)
        with pytest.raises(TypeError):
            float_format("1.0")
        with pytest.raises(TypeError, match="Unsupported array dtype"):
            float_format(np.zeros(3, dtype=np.int32))

    def test_integer_out_of_double_range(self):
        assert float_format(2 ** 1000) is DOUBLE
        with pytest.raises(TypeError, match="out of double range"):
            float_format(10 ** 400)

    def test_precision_mismatch(self):
        assert common_format(1.0, 2.0) is DOUBLE
        with pytest.raises(TypeError, match="Precision mismatch"):
            common_format(np.float32(1.0), 1.0)


class TestBits:
    """Test bit reinterpretation"""

    def test_known_patterns(self):
        assert to_bits(1.0, DOUBLE) == 0x3FF0000000000000
        assert to_bits(np.float32(1.0), SINGLE) == 0x3F800000
        assert to_bits(0.0, DOUBLE) == 0

    def test_negative_zero_sets_sign_bit(self):
        assert to_bits(-0.0, DOUBLE) == -(2 ** 63)
        assert to_bits(np.float32(-0.0), SINGLE) == -(2 ** 31)

    def test_adjacent_floats_differ_by_one(self):
        one = np.float32(1.0)
        next_up = np.nextafter(one, np.float32(2.0))
        assert to_bits(next_up, SINGLE) - to_bits(one, SINGLE) == 1
        assert from_bits(0x3F800001, SINGLE) == next_up
