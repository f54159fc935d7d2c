import pytest

from proptest.gen.basic import const, map_gen, such_that
from proptest.gen.collections import map_of, ptr_of, slice_of, slice_of_n
from proptest.gen.numbers import int8
from proptest.gen.strings import identifier, rune
from proptest.gen_parameters import default_gen_parameters


def _params(seed=1234, min_size=0, max_size=100):
    params = default_gen_parameters().clone_with_seed(seed)
    params.min_size = min_size
    params.max_size = max_size
    return params


def _samples(gen, params, count=100):
    samples = []
    for _ in range(count):
        value, ok = gen(params).retrieve()
        assert ok
        samples.append(value)
    return samples


def test_slice_of_max_size():
    samples = _samples(slice_of(const("element")), _params(max_size=50))
    for sample in samples:
        assert isinstance(sample, list)
        assert len(sample) < 50
        assert all(item == "element" for item in sample)


def test_slice_of_min_size():
    samples = _samples(slice_of(const("element")), _params(min_size=10, max_size=50))
    assert all(10 <= len(sample) < 50 for sample in samples)


def test_slice_of_equal_sizes():
    samples = _samples(slice_of(const("element")), _params(min_size=10, max_size=10))
    assert all(sample == ["element"] * 10 for sample in samples)


def test_slice_of_zero_size():
    samples = _samples(slice_of(const("element")), _params(min_size=0, max_size=0))
    assert all(sample == [] for sample in samples)


def test_slice_of_min_greater_than_max_raises():
    gen = slice_of(const("element"))
    with pytest.raises(ValueError):
        gen(_params(min_size=1, max_size=0))


def test_slice_of_shrinker_drops_chunks():
    result = slice_of(const("element"))(_params())
    assert result.shrinker(["element", "element"]).all() == [["element"], ["element"]]


def test_slice_of_is_deterministic_for_a_seed():
    gen = slice_of(int8())
    first = _samples(gen, _params(seed=99), count=5)
    second = _samples(gen, _params(seed=99), count=5)
    assert first == second


def test_slice_of_n():
    samples = _samples(slice_of_n(10, const("element")), _params())
    assert all(sample == ["element"] * 10 for sample in samples)


def test_slice_of_n_sieve():
    calls = []

    def element_sieve(value):
        calls.append(value)
        return value == "element"

    gen = slice_of_n(10, such_that(const("element"), element_sieve))
    result = gen(default_gen_parameters())
    value, ok = result.retrieve()
    assert ok
    assert value == ["element"] * 10
    assert len(calls) == 20
    assert not result.sieve(value[0:9])
    broken = list(value)
    broken[0] = "bla"
    assert not result.sieve(broken)


def test_slice_of_n_shrinker_keeps_length():
    result = slice_of_n(3, const("element"))(_params())
    assert result.shrinker(["element"] * 3).all() == []


def test_map_of():
    map_gen_ = map_of(identifier(), const("element"))
    for max_size in (50, 10):
        for sample in _samples(map_gen_, _params(max_size=max_size)):
            assert isinstance(sample, dict)
            assert len(sample) <= max_size
            assert all(value == "element" for value in sample.values())


def test_map_of_zero_size():
    samples = _samples(map_of(identifier(), const("element")), _params(min_size=0, max_size=0))
    assert all(sample == {} for sample in samples)


def test_map_of_min_greater_than_max_raises():
    gen = map_of(identifier(), const("element"))
    with pytest.raises(ValueError):
        gen(_params(min_size=1, max_size=0))


def test_map_of_sieve_checks_keys():
    result = map_of(identifier(), const("element"))(_params())
    assert result.sieve({"abc": "element"})
    assert not result.sieve({"1abc": "element"})


def test_ptr_of():
    samples = _samples(ptr_of(const("element")), _params())
    assert all(sample is None or sample == "element" for sample in samples)
    assert None in samples
    assert "element" in samples


def test_ptr_of_mapped_runes():
    gen = ptr_of(map_gen(slice_of_n(16, rune()), "".join))
    samples = _samples(gen, _params())
    assert all(sample is None or len(sample) == 16 for sample in samples)


def test_ptr_of_shrinker_starts_with_none():
    params = _params()
    for _ in range(50):
        result = ptr_of(const("element"))(params)
        value, ok = result.retrieve()
        assert ok
        if value is not None:
            assert result.shrinker(value).all() == [None]
            break
    else:
        pytest.fail("no value generated")