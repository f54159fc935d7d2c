from datetime import datetime, timedelta, timezone

import pytest

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
    time_shrinker,
    uint8_shrinker,
    uint16_shrinker,
    uint32_shrinker,
    uint64_shrinker,
    uint_shrinker,
)

SIGNED_TEN = [0, 5, -5, 8, -8, 9, -9]
UNSIGNED_TEN = [0, 5, 8, 9]

ONE_SHRINKS = [
    0.0, 0.5, -0.5, 0.75, -0.75, 0.875, -0.875, 0.9375, -0.9375,
    0.96875, -0.96875, 0.984375, -0.984375, 0.9921875, -0.9921875,
    0.99609375, -0.99609375, 0.998046875, -0.998046875,
    0.9990234375, -0.9990234375, 0.99951171875, -0.99951171875,
    0.999755859375, -0.999755859375, 0.9998779296875, -0.9998779296875,
    0.99993896484375, -0.99993896484375, 0.999969482421875, -0.999969482421875,
    0.9999847412109375, -0.9999847412109375,
]


def test_int64_shrink():
    assert int64_shrinker(0).all() == []
    assert int64_shrinker(10).all() == SIGNED_TEN
    assert int64_shrinker(-10).all() == [0, -5, 5, -8, 8, -9, 9]
    assert int64_shrinker(1337).all() == [
        0, 669, -669, 1003, -1003, 1170, -1170,
        1254, -1254, 1296, -1296, 1317, -1317,
        1327, -1327, 1332, -1332, 1335, -1335,
        1336, -1336,
    ]


def test_int64_shrink_stays_in_range():
    values = int64_shrinker(-(1 << 63)).all()
    assert values
    assert all(-(1 << 63) <= v < (1 << 63) for v in values)


def test_uint64_shrink():
    assert uint64_shrinker(0).all() == []
    assert uint64_shrinker(10).all() == UNSIGNED_TEN
    assert uint64_shrinker(1337).all() == [
        0, 669, 1003, 1170, 1254, 1296, 1317, 1327, 1332, 1335, 1336,
    ]


@pytest.mark.parametrize(
    "shrinker", [int32_shrinker, int16_shrinker, int8_shrinker, int_shrinker]
)
def test_signed_narrow_shrink(shrinker):
    assert shrinker(0).all() == []
    assert shrinker(10).all() == SIGNED_TEN


@pytest.mark.parametrize(
    "shrinker", [uint32_shrinker, uint16_shrinker, uint8_shrinker, uint_shrinker]
)
def test_unsigned_narrow_shrink(shrinker):
    assert shrinker(0).all() == []
    assert shrinker(10).all() == UNSIGNED_TEN


def test_int8_shrink_stays_in_range():
    values = int8_shrinker(-128).all()
    assert values
    assert all(-128 <= v <= 127 for v in values)


def test_float64_shrinker():
    assert float64_shrinker(0.0).all() == []
    assert float64_shrinker(1.0).all() == ONE_SHRINKS
    assert float64_shrinker(100.0).all() == [
        0.0, 50.0, -50.0, 75.0, -75.0, 87.5, -87.5, 93.75, -93.75,
        96.875, -96.875, 98.4375, -98.4375, 99.21875, -99.21875,
        99.609375, -99.609375, 99.8046875, -99.8046875,
        99.90234375, -99.90234375, 99.951171875, -99.951171875,
        99.9755859375, -99.9755859375, 99.98779296875, -99.98779296875,
        99.993896484375, -99.993896484375, 99.9969482421875, -99.9969482421875,
        99.99847412109375, -99.99847412109375, 99.99923706054688, -99.99923706054688,
        99.99961853027344, -99.99961853027344, 99.99980926513672, -99.99980926513672,
        99.99990463256836, -99.99990463256836, 99.99995231628418, -99.99995231628418,
        99.99997615814209, -99.99997615814209, 99.99998807907104, -99.99998807907104,
    ]


def test_float32_shrinker():
    assert float32_shrinker(0.0).all() == []
    assert float32_shrinker(1.0).all() == ONE_SHRINKS


def test_complex128_shrinker():
    assert complex128_shrinker(0j).all() == []
    assert complex128_shrinker(1 + 0j).all() == [complex(x, 0) for x in ONE_SHRINKS]
    assert complex128_shrinker(1j).all() == [complex(0, x) for x in ONE_SHRINKS]

    pairs = [
        (0, 1), (10, 0), (5, 1), (10, 0.5), (-5, 1), (10, -0.5),
        (7.5, 1), (10, 0.75), (-7.5, 1), (10, -0.75), (8.75, 1),
        (10, 0.875), (-8.75, 1), (10, -0.875), (9.375, 1), (10, 0.9375),
        (-9.375, 1), (10, -0.9375), (9.6875, 1), (10, 0.96875),
        (-9.6875, 1), (10, -0.96875), (9.84375, 1), (10, 0.984375),
        (-9.84375, 1), (10, -0.984375), (9.921875, 1), (10, 0.9921875),
        (-9.921875, 1), (10, -0.9921875), (9.9609375, 1), (10, 0.99609375),
        (-9.9609375, 1), (10, -0.99609375), (9.98046875, 1), (10, 0.998046875),
        (-9.98046875, 1), (10, -0.998046875), (9.990234375, 1), (10, 0.9990234375),
        (-9.990234375, 1), (10, -0.9990234375), (9.9951171875, 1),
        (10, 0.99951171875), (-9.9951171875, 1), (10, -0.99951171875),
        (9.99755859375, 1), (10, 0.999755859375), (-9.99755859375, 1),
        (10, -0.999755859375), (9.998779296875, 1), (10, 0.9998779296875),
        (-9.998779296875, 1), (10, -0.9998779296875), (9.9993896484375, 1),
        (10, 0.99993896484375), (-9.9993896484375, 1), (10, -0.99993896484375),
        (9.99969482421875, 1), (10, 0.999969482421875), (-9.99969482421875, 1),
        (10, -0.999969482421875), (9.999847412109375, 1), (10, 0.9999847412109375),
        (-9.999847412109375, 1), (10, -0.9999847412109375),
        (9.999923706054688, 1), (-9.999923706054688, 1),
        (9.999961853027344, 1), (-9.999961853027344, 1),
        (9.999980926513672, 1), (-9.999980926513672, 1),
    ]
    assert complex128_shrinker(10 + 1j).all() == [complex(r, i) for r, i in pairs]


def test_complex64_shrinker():
    assert complex64_shrinker(0j).all() == []
    assert complex64_shrinker(1 + 0j).all() == [complex(x, 0) for x in ONE_SHRINKS]


def test_time_shrink():
    epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)

    def at(seconds, micros):
        return epoch + timedelta(seconds=seconds, microseconds=micros)

    assert time_shrinker(at(20, 10)).all() == [
        at(0, 10), at(20, 0), at(10, 10), at(20, 5), at(15, 10),
        at(20, 8), at(18, 10), at(20, 9), at(19, 10),
    ]


def test_time_shrink_rejects_non_datetime():
    with pytest.raises(TypeError):
        time_shrinker(20)