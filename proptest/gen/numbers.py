"""Generators for integers, floats and complex numbers."""

from __future__ import annotations

import math
import struct
from typing import Any

from proptest.gen.basic import (
    Gen,
    combine_gens,
    fail,
    map_gen,
    such_that,
    with_shrinker,
)
from proptest.gen.number_shrink import (
    complex64_shrinker,
    complex128_shrinker,
    float32_shrinker,
    float64_shrinker,
    int8_shrinker,
    int16_shrinker,
    int32_shrinker,
    int64_shrinker,
    int_shrinker,
    uint8_shrinker,
    uint16_shrinker,
    uint32_shrinker,
    uint64_shrinker,
    uint_shrinker,
)
from proptest.gen_parameters import GenParameters
from proptest.gen_result import GenResult, new_gen_result
from proptest.shrink import Shrinker

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1
_FLOAT32_MAX = 3.4028234663852886e38


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >= 1 << (bits - 1) else value


def _wrap_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _f32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def int64_range(min_value: int, max_value: int) -> Gen:
    """Generate signed 64-bit integers in ``[min_value, max_value]``."""
    if max_value < min_value:
        return fail(int)
    if min_value == INT64_MIN and max_value == INT64_MAX:

        def full(params: GenParameters) -> GenResult:
            return new_gen_result(params.next_int64(), int64_shrinker)

        return full

    range_size = max_value - min_value + 1

    def generate(params: GenParameters) -> GenResult:
        result = new_gen_result(
            min_value + params.next_uint64() % range_size, int64_shrinker
        )
        result.sieve = lambda v: min_value <= v <= max_value
        return result

    return generate


def uint64_range(min_value: int, max_value: int) -> Gen:
    """Generate unsigned 64-bit integers in ``[min_value, max_value]``."""
    if max_value < min_value:
        return fail(int)
    span = max_value - min_value + 1
    if span == 1 << 64:

        def full(params: GenParameters) -> GenResult:
            return new_gen_result(params.next_uint64(), uint64_shrinker)

        return full

    def generate(params: GenParameters) -> GenResult:
        result = new_gen_result(min_value + params.next_uint64() % span, uint64_shrinker)
        result.sieve = lambda v: min_value <= v <= max_value
        return result

    return generate


def int64() -> Gen:
    """Generate an arbitrary signed 64-bit integer."""
    return int64_range(INT64_MIN, INT64_MAX)


def uint64() -> Gen:
    """Generate an arbitrary unsigned 64-bit integer."""
    return uint64_range(0, UINT64_MAX)


def _narrow(base: Gen, convert: Any, shrinker: Shrinker, min_value: int, max_value: int) -> Gen:
    return such_that(
        with_shrinker(map_gen(base, convert), shrinker),
        lambda v: min_value <= v <= max_value,
    )


def _signed_range(bits: int, shrinker: Shrinker, min_value: int, max_value: int) -> Gen:
    return _narrow(
        int64_range(min_value, max_value),
        lambda v: _wrap_signed(v, bits),
        shrinker,
        min_value,
        max_value,
    )


def _unsigned_range(bits: int, shrinker: Shrinker, min_value: int, max_value: int) -> Gen:
    return _narrow(
        uint64_range(min_value, max_value),
        lambda v: _wrap_unsigned(v, bits),
        shrinker,
        min_value,
        max_value,
    )


def int32_range(min_value: int, max_value: int) -> Gen:
    """Generate signed 32-bit integers within a range."""
    return _signed_range(32, int32_shrinker, min_value, max_value)


def uint32_range(min_value: int, max_value: int) -> Gen:
    """Generate unsigned 32-bit integers within a range."""
    return _unsigned_range(32, uint32_shrinker, min_value, max_value)


def int32() -> Gen:
    """Generate an arbitrary signed 32-bit integer."""
    return int32_range(-(1 << 31), (1 << 31) - 1)


def uint32() -> Gen:
    """Generate an arbitrary unsigned 32-bit integer."""
    return uint32_range(0, (1 << 32) - 1)


def int16_range(min_value: int, max_value: int) -> Gen:
    """Generate signed 16-bit integers within a range."""
    return _signed_range(16, int16_shrinker, min_value, max_value)


def uint16_range(min_value: int, max_value: int) -> Gen:
    """Generate unsigned 16-bit integers within a range."""
    return _unsigned_range(16, uint16_shrinker, min_value, max_value)


def int16() -> Gen:
    """Generate an arbitrary signed 16-bit integer."""
    return int16_range(-(1 << 15), (1 << 15) - 1)


def uint16() -> Gen:
    """Generate an arbitrary unsigned 16-bit integer."""
    return uint16_range(0, (1 << 16) - 1)


def int8_range(min_value: int, max_value: int) -> Gen:
    """Generate signed 8-bit integers within a range."""
    return _signed_range(8, int8_shrinker, min_value, max_value)


def uint8_range(min_value: int, max_value: int) -> Gen:
    """Generate unsigned 8-bit integers within a range."""
    return _unsigned_range(8, uint8_shrinker, min_value, max_value)


def int8() -> Gen:
    """Generate an arbitrary signed 8-bit integer."""
    return int8_range(-128, 127)


def uint8() -> Gen:
    """Generate an arbitrary unsigned 8-bit integer."""
    return uint8_range(0, 255)


def int_range(min_value: int, max_value: int) -> Gen:
    """Generate integers within a range."""
    return _signed_range(64, int_shrinker, min_value, max_value)


def _identity(value: int) -> int:
    return value


def int_gen() -> Gen:
    """Generate an arbitrary integer within the signed 32-bit range."""
    return with_shrinker(map_gen(int64_range(-(1 << 31), (1 << 31) - 1), _identity), int_shrinker)


def uint_range(min_value: int, max_value: int) -> Gen:
    """Generate non-negative integers within a range."""
    return _unsigned_range(64, uint_shrinker, min_value, max_value)


def uint_gen() -> Gen:
    """Generate an arbitrary non-negative integer within the unsigned 32-bit range."""
    return with_shrinker(map_gen(uint64_range(0, (1 << 32) - 1), _identity), uint_shrinker)


def size() -> Gen:
    """Generate the ``max_size`` of the parameters."""

    def generate(params: GenParameters) -> GenResult:
        return new_gen_result(params.max_size, int_shrinker)

    return generate


def float64_range(min_value: float, max_value: float) -> Gen:
    """Generate floats within ``[min_value, max_value]``."""
    span = max_value - min_value
    if span < 0 or span > 1.7976931348623157e308:
        return fail(float)

    def generate(params: GenParameters) -> GenResult:
        result = new_gen_result(min_value + params.rng.random() * span, float64_shrinker)
        result.sieve = lambda v: min_value <= v <= max_value
        return result

    return generate


def _bits_to_float64(values: list) -> float:
    sign, exponent, mantissa = values
    bits = (sign << 63) | (exponent << 52) | mantissa
    return struct.unpack("<d", struct.pack("<Q", bits))[0]


def float64() -> Gen:
    """Generate an arbitrary finite float (no NaN or infinity)."""
    return with_shrinker(
        map_gen(
            combine_gens(
                int64_range(0, 1),
                int64_range(0, 0x7FE),
                int64_range(0, 0xFFFFFFFFFFFFF),
            ),
            _bits_to_float64,
        ),
        float64_shrinker,
    )


def _random_float32(params: GenParameters) -> float:
    while True:
        value = _f32(params.rng.random())
        if value != 1.0:
            return value


def float32_range(min_value: float, max_value: float) -> Gen:
    """Generate single-precision floats within ``[min_value, max_value]``."""
    low = _f32(min_value)
    high = _f32(max_value)
    span = _f32(high - low)
    if span < 0 or span > _FLOAT32_MAX:
        return fail(float)

    def generate(params: GenParameters) -> GenResult:
        value = _f32(low + _f32(_random_float32(params) * span))
        result = new_gen_result(value, float32_shrinker)
        result.sieve = lambda v: low <= v <= high
        return result

    return generate


def _bits_to_float32(values: list) -> float:
    sign, exponent, mantissa = values
    bits = (sign << 31) | (exponent << 23) | mantissa
    return struct.unpack("<f", struct.pack("<I", bits))[0]


def float32() -> Gen:
    """Generate an arbitrary finite single-precision float."""
    return with_shrinker(
        map_gen(
            combine_gens(
                int32_range(0, 1),
                int32_range(0, 0xFE),
                int32_range(0, 0x7FFFFF),
            ),
            _bits_to_float32,
        ),
        float32_shrinker,
    )


def _to_complex(values: list) -> complex:
    return complex(values[0], values[1])


def _box(gen_real: Gen, gen_imag: Gen, low: complex, high: complex, shrinker: Shrinker) -> Gen:
    def inside(v: complex) -> bool:
        return low.real <= v.real <= high.real and low.imag <= v.imag <= high.imag

    return with_shrinker(
        such_that(map_gen(combine_gens(gen_real, gen_imag), _to_complex), inside),
        shrinker,
    )


def complex128_box(min_value: complex, max_value: complex) -> Gen:
    """Generate complex numbers inside a rectangle of the complex plane."""
    low, high = complex(min_value), complex(max_value)
    return _box(
        float64_range(low.real, high.real),
        float64_range(low.imag, high.imag),
        low,
        high,
        complex128_shrinker,
    )


def complex128() -> Gen:
    """Generate an arbitrary complex number with finite parts."""
    return with_shrinker(map_gen(combine_gens(float64(), float64()), _to_complex), complex128_shrinker)


def complex64_box(min_value: complex, max_value: complex) -> Gen:
    """Generate single-precision complex numbers inside a rectangle."""
    raw_low, raw_high = complex(min_value), complex(max_value)
    low = complex(_f32(raw_low.real), _f32(raw_low.imag))
    high = complex(_f32(raw_high.real), _f32(raw_high.imag))
    return _box(
        float32_range(low.real, high.real),
        float32_range(low.imag, high.imag),
        low,
        high,
        complex64_shrinker,
    )


def complex64() -> Gen:
    """Generate an arbitrary single-precision complex number."""
    return with_shrinker(map_gen(combine_gens(float32(), float32()), _to_complex), complex64_shrinker)