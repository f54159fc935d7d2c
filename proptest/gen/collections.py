"""Generators for lists, dictionaries and optional values."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

from proptest.gen.basic import Gen
from proptest.gen.collection_shrink import map_shrinker, ptr_shrinker, slice_shrinker, slice_shrinker_one
from proptest.gen_parameters import GenParameters
from proptest.gen_result import GenResult, new_empty_result, new_gen_result
from proptest.shrink import Shrinker

Sieve = Optional[Callable[[Any], bool]]


def _draw_length(params: GenParameters) -> int:
    """Pick a length in ``[min_size, max_size)``, or exactly ``max_size`` if both agree."""
    if params.max_size > 0 or params.min_size > 0:
        if params.min_size > params.max_size:
            raise ValueError("GenParameters.MinSize must be <= GenParameters.MaxSize")
        if params.max_size == params.min_size:
            return params.max_size
        return params.rng.randrange(params.max_size - params.min_size) + params.min_size
    return 0


def _generate_values(
    element_gen: Gen, params: GenParameters, length: int
) -> Tuple[List[Any], Sieve, Shrinker]:
    element = element_gen(params)
    element_sieve = element.sieve
    element_shrinker = element.shrinker
    values: List[Any] = []
    for _ in range(length):
        value, ok = element.retrieve()
        if ok:
            values.append(value)
        element = element_gen(params)
    return values, element_sieve, element_shrinker


def _for_all_sieve(element_sieve: Callable[[Any], bool]) -> Callable[[Any], bool]:
    def sieve(values: Any) -> bool:
        return all(element_sieve(value) for value in reversed(values))

    return sieve


def slice_of(element_gen: Gen) -> Gen:
    """Generate lists of generated elements.

    The length lies in ``[min_size, max_size)`` of the parameters.
    """

    def generate(params: GenParameters) -> GenResult:
        length = _draw_length(params)
        values, element_sieve, element_shrinker = _generate_values(element_gen, params, length)
        result = new_gen_result(values, slice_shrinker(element_shrinker))
        if element_sieve is not None:
            result.sieve = _for_all_sieve(element_sieve)
        return result

    return generate


def slice_of_n(desired_len: int, element_gen: Gen) -> Gen:
    """Generate lists of exactly ``desired_len`` generated elements."""

    def generate(params: GenParameters) -> GenResult:
        values, element_sieve, element_shrinker = _generate_values(
            element_gen, params, desired_len
        )
        result = new_gen_result(values, slice_shrinker_one(element_shrinker))
        if element_sieve is not None:
            all_elements = _for_all_sieve(element_sieve)
            result.sieve = lambda v: len(v) == desired_len and all_elements(v)
        else:
            result.sieve = lambda v: len(v) == desired_len
        return result

    return generate


def _for_all_key_value_sieve(key_sieve: Sieve, element_sieve: Sieve) -> Callable[[Any], bool]:
    def sieve(mapping: Dict[Any, Any]) -> bool:
        for key, element in mapping.items():
            if key_sieve is not None and not key_sieve(key):
                return False
            if element_sieve is not None and not element_sieve(element):
                return False
        return True

    return sieve


def map_of(key_gen: Gen, element_gen: Gen) -> Gen:
    """Generate dictionaries of generated keys and values.

    At most ``max_size - 1`` entries (fewer if keys collide), at least
    ``min_size`` attempts.
    """

    def generate(params: GenParameters) -> GenResult:
        length = _draw_length(params)
        element = element_gen(params)
        element_sieve, element_shrinker = element.sieve, element.shrinker
        key = key_gen(params)
        key_sieve, key_shrinker = key.sieve, key.shrinker

        mapping: Dict[Any, Any] = {}
        for _ in range(length):
            key_value, key_ok = key.retrieve()
            element_value, element_ok = element.retrieve()
            if key_ok and element_ok:
                mapping[key_value] = element_value
            key = key_gen(params)
            element = element_gen(params)

        result = new_gen_result(mapping, map_shrinker(key_shrinker, element_shrinker))
        if key_sieve is not None or element_sieve is not None:
            result.sieve = _for_all_key_value_sieve(key_sieve, element_sieve)
        return result

    return generate


def ptr_of(element_gen: Gen) -> Gen:
    """Generate either a generated element or ``None``."""

    def generate(params: GenParameters) -> GenResult:
        element = element_gen(params)
        element_shrinker = element.shrinker
        element_sieve = element.sieve

        def sieve(value: Any) -> bool:
            if element_sieve is None:
                return True
            return value is None or element_sieve(value)

        value, ok = element.retrieve()
        if not ok or params.next_bool():
            result = new_empty_result(element.result_type)
        else:
            result = new_gen_result(value, ptr_shrinker(element_shrinker))
        result.sieve = sieve
        return result

    return generate