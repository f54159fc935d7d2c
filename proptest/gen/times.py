"""Generators for timestamps."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from proptest.gen.basic import Gen
from proptest.gen.number_shrink import time_shrinker
from proptest.gen_parameters import GenParameters
from proptest.gen_result import GenResult, new_gen_result

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_SECOND = timedelta(seconds=1)
_MICROSECOND = timedelta(microseconds=1)
_TIME_SECONDS = 253402214400
_MIN_SECONDS = (datetime.min.replace(tzinfo=timezone.utc) - _EPOCH) // _SECOND
_MAX_SECONDS = (datetime.max.replace(tzinfo=timezone.utc) - _EPOCH) // _SECOND
_ANY_SPAN = _MAX_SECONDS - _MIN_SECONDS + 1


def time_gen() -> Gen:
    """Generate a UTC datetime between 1970 and the end of year 9999."""

    def generate(params: GenParameters) -> GenResult:
        seconds = params.rng.randrange(_TIME_SECONDS)
        nanos = params.rng.randrange(1_000_000_000)
        value = _EPOCH + timedelta(seconds=seconds, microseconds=nanos // 1000)
        return new_gen_result(value, time_shrinker)

    return generate


def any_time() -> Gen:
    """Generate any UTC datetime that can be represented."""

    def generate(params: GenParameters) -> GenResult:
        seconds = _MIN_SECONDS + params.next_int64() % _ANY_SPAN
        micros = params.next_int64() % 1_000_000
        value = _EPOCH + timedelta(seconds=seconds, microseconds=micros)
        return new_gen_result(value, time_shrinker)

    return generate


def time_range(start: datetime, duration: timedelta) -> Gen:
    """Generate datetimes in ``[start, start + duration)``."""

    def generate(params: GenParameters) -> GenResult:
        micros = duration // _MICROSECOND
        if micros <= 0:
            raise ValueError("duration must be positive")
        value = start + timedelta(microseconds=params.rng.randrange(micros))
        return new_gen_result(value, time_shrinker)

    return generate