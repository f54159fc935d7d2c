"""Shrinkers for integers, floats, complex numbers and timestamps."""

from __future__ import annotations

import math
import struct
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Iterator, Optional

from proptest.shrink import Shrink, Shrinker

_EPOCH_UTC = datetime(1970, 1, 1, tzinfo=timezone.utc)
_EPOCH_NAIVE = datetime(1970, 1, 1)


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _wrap_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _trunc_half(value: int) -> int:
    """Halve an integer, rounding toward zero."""
    return -((-value) // 2) if value < 0 else value // 2


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _int64_halves(original: int, half: int) -> Iterator[int]:
    while half != 0:
        yield _wrap_signed(original - half, 64)
        half = _trunc_half(half)


def _uint64_halves(original: int, half: int) -> Iterator[int]:
    while half != 0:
        yield _wrap_unsigned(original - half, 64)
        half >>= 1


def int64_shrinker(value: Any) -> Shrink:
    """Shrink a signed 64-bit integer toward zero, trying both signs."""
    v = _wrap_signed(int(value), 64)
    negated = _wrap_signed(-v, 64)
    negative = Shrink(_int64_halves(negated, negated))
    positive = Shrink(_int64_halves(v, _trunc_half(v)))
    return negative.interleave(positive)


def uint64_shrinker(value: Any) -> Shrink:
    """Shrink an unsigned 64-bit integer toward zero."""
    v = _wrap_unsigned(int(value), 64)
    return Shrink(_uint64_halves(v, v))


def _signed(bits: int) -> Shrinker:
    def shrinker(value: Any) -> Shrink:
        return int64_shrinker(int(value)).map(lambda v: _wrap_signed(v, bits))

    return shrinker


def _unsigned(bits: int) -> Shrinker:
    def shrinker(value: Any) -> Shrink:
        return uint64_shrinker(int(value)).map(lambda v: _wrap_unsigned(v, bits))

    return shrinker


_int32 = _signed(32)
_int16 = _signed(16)
_int8 = _signed(8)
_uint32 = _unsigned(32)
_uint16 = _unsigned(16)
_uint8 = _unsigned(8)


def int32_shrinker(value: Any) -> Shrink:
    """Shrink a signed 32-bit integer."""
    return _int32(value)


def uint32_shrinker(value: Any) -> Shrink:
    """Shrink an unsigned 32-bit integer."""
    return _uint32(value)


def int16_shrinker(value: Any) -> Shrink:
    """Shrink a signed 16-bit integer."""
    return _int16(value)


def uint16_shrinker(value: Any) -> Shrink:
    """Shrink an unsigned 16-bit integer."""
    return _uint16(value)


def int8_shrinker(value: Any) -> Shrink:
    """Shrink a signed 8-bit integer."""
    return _int8(value)


def uint8_shrinker(value: Any) -> Shrink:
    """Shrink an unsigned 8-bit integer."""
    return _uint8(value)


def int_shrinker(value: Any) -> Shrink:
    """Shrink a platform-sized (64-bit) signed integer."""
    return int64_shrinker(value)


def uint_shrinker(value: Any) -> Shrink:
    """Shrink a platform-sized (64-bit) unsigned integer."""
    return uint64_shrinker(value)


def _is_zero_or_very_close(half: float) -> bool:
    if half == 0:
        return True
    multiple = half * 100000
    return abs(multiple) < 1 and multiple != 0


def _float_halves(original: float, half: float) -> Iterator[float]:
    while not _is_zero_or_very_close(half):
        yield original - half
        half /= 2


def float64_shrinker(value: Any) -> Shrink:
    """Shrink a float toward zero, trying both signs."""
    v = float(value)
    negative = Shrink(_float_halves(-v, -v))
    positive = Shrink(_float_halves(v, v / 2))
    return negative.interleave(positive)


def float32_shrinker(value: Any) -> Shrink:
    """Shrink a float, rounding every result to single precision."""
    return float64_shrinker(float(value)).map(_to_float32)


def _complex_shrinker(value: Any, convert: Callable[[float], float]) -> Shrink:
    c = complex(value)
    re, im = convert(c.real), convert(c.imag)
    real_shrink = float64_shrinker(re).map(lambda r: complex(convert(r), im))
    imag_shrink = float64_shrinker(im).map(lambda i: complex(re, convert(i)))
    return real_shrink.interleave(imag_shrink)


def complex128_shrinker(value: Any) -> Shrink:
    """Shrink the real and imaginary parts of a complex number in turn."""
    return _complex_shrinker(value, float)


def complex64_shrinker(value: Any) -> Shrink:
    """Shrink a complex number whose parts are single precision."""
    return _complex_shrinker(value, _to_float32)


def _from_unix(epoch: datetime, seconds: int, micros: int) -> Optional[datetime]:
    try:
        return epoch + timedelta(seconds=seconds, microseconds=micros)
    except OverflowError:
        return None


def time_shrinker(value: datetime) -> Shrink:
    """Shrink the seconds and the sub-second part of a datetime in turn."""
    if not isinstance(value, datetime):
        raise TypeError(f"{value!r} is not a datetime")
    epoch = _EPOCH_NAIVE if value.tzinfo is None else _EPOCH_UTC
    delta = value - epoch
    seconds = delta.days * 86400 + delta.seconds
    micros = delta.microseconds

    def with_seconds() -> Iterator[datetime]:
        start = _wrap_unsigned(seconds, 64)
        for shrunk in _uint64_halves(start, start):
            result = _from_unix(epoch, _wrap_signed(shrunk, 64), micros)
            if result is not None:
                yield result

    def with_micros() -> Iterator[datetime]:
        for shrunk in _uint64_halves(micros, micros):
            result = _from_unix(epoch, seconds, shrunk)
            if result is not None:
                yield result

    return Shrink(with_seconds()).interleave(Shrink(with_micros()))