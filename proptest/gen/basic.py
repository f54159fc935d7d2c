"""Core generators and the combinators used to build new generators."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence

from proptest.gen_parameters import GenParameters
from proptest.gen_result import GenResult, new_empty_result, new_gen_result
from proptest.shrink import Shrinker, combine_shrinker, no_shrinker

Gen = Callable[[GenParameters], GenResult]


def _require_callable(func: Any, what: str) -> None:
    if not callable(func):
        raise TypeError(
            f"Param of {what} has to be a func, but is {type(func).__name__}"
        )


def map_gen(gen: Gen, func: Callable[[Any], Any]) -> Gen:
    """Derive a generator that applies ``func`` to every generated value.

    The derived generator has no shrinker and no sieve of its own.
    """
    _require_callable(func, "Map")

    def mapped(params: GenParameters) -> GenResult:
        result = gen(params)
        value, ok = result.retrieve_as_value()
        if ok:
            mapped_value = func(value)
            return GenResult(
                result=mapped_value,
                shrinker=no_shrinker,
                result_type=None if mapped_value is None else type(mapped_value),
                labels=list(result.labels),
            )
        return GenResult(
            result=None,
            shrinker=no_shrinker,
            result_type=None,
            labels=list(result.labels),
        )

    return mapped


def such_that(gen: Gen, condition: Callable[[Any], bool]) -> Gen:
    """Derive a generator whose values must also satisfy ``condition``."""
    _require_callable(condition, "SuchThat")

    def check(value: Any) -> bool:
        return value is not None and bool(condition(value))

    def filtered(params: GenParameters) -> GenResult:
        result = gen(params)
        previous = result.sieve
        if previous is None:
            result.sieve = check
        else:
            result.sieve = lambda value: previous(value) and check(value)
        return result

    return filtered


def with_shrinker(gen: Gen, shrinker: Optional[Shrinker]) -> Gen:
    """Derive a generator that uses ``shrinker``; ``None`` disables shrinking."""
    chosen = no_shrinker if shrinker is None else shrinker

    def shrinking(params: GenParameters) -> GenResult:
        result = gen(params)
        result.shrinker = chosen
        return result

    return shrinking


def combine_gens(*gens: Gen) -> Gen:
    """Combine generators into one that produces a list of their values."""

    def combined(params: GenParameters) -> GenResult:
        labels = []
        values = []
        shrinkers = []
        sieves = []
        for gen in gens:
            result = gen(params)
            labels.extend(result.labels)
            value, ok = result.retrieve()
            if not ok:
                return GenResult(
                    result=None,
                    shrinker=no_shrinker,
                    result_type=list,
                    labels=list(result.labels),
                )
            values.append(value)
            shrinkers.append(result.shrinker)
            sieves.append(result.sieve)

        def sieve(candidate: Any) -> bool:
            if candidate is None:
                return False
            return all(
                element_sieve is None or element_sieve(value)
                for element_sieve, value in zip(sieves, candidate)
            )

        return GenResult(
            result=values,
            shrinker=combine_shrinker(*shrinkers),
            result_type=list,
            labels=labels,
            sieve=sieve,
        )

    return combined


def bool_gen() -> Gen:
    """Generate an arbitrary boolean."""

    def generate(params: GenParameters) -> GenResult:
        return new_gen_result(params.next_bool(), no_shrinker)

    return generate


def const(value: Any) -> Gen:
    """Always generate ``value``."""

    def generate(params: GenParameters) -> GenResult:
        return new_gen_result(value, no_shrinker)

    return generate


def fail(result_type: Optional[type]) -> Gen:
    """A generator that never produces a value."""

    def generate(params: GenParameters) -> GenResult:
        return new_empty_result(result_type)

    return generate


def one_const_of(*consts: Any) -> Gen:
    """Generate one of the given constants."""
    if not consts:
        return fail(None)

    def generate(params: GenParameters) -> GenResult:
        return new_gen_result(consts[params.rng.randrange(len(consts))], no_shrinker)

    return generate


def one_gen_of(*gens: Gen) -> Gen:
    """Generate a value from one of the given generators, picked at random."""
    if not gens:
        return fail(None)

    def generate(params: GenParameters) -> GenResult:
        return gens[params.rng.randrange(len(gens))](params)

    return generate


def frequency(weighted_gens: Mapping[int, Gen]) -> Gen:
    """Pick among generators keyed by weight; higher weights are used more often."""
    if not weighted_gens:
        return fail(None)
    weights = sorted(weighted_gens)
    highest = max(0, weights[-1])

    def generate(params: GenParameters) -> GenResult:
        index = bisect_left(weights, params.rng.randrange(highest + 1))
        result = weighted_gens[weights[index]](params)
        result.sieve = None
        return result

    return generate


@dataclass(frozen=True)
class WeightedGen:
    """A generator with the weight used by :func:`weighted`."""

    weight: int
    gen: Gen


def weighted(weighted_gens: Sequence[WeightedGen]) -> Gen:
    """Pick among generators with probability proportional to their weights."""
    if not weighted_gens:
        raise ValueError("weightedGens must be non-empty")
    cumulative = []
    total = 0
    for entry in weighted_gens:
        if entry.weight <= 0:
            raise ValueError(
                f"weightedGens must have positive weights; got {entry.weight}"
            )
        total += entry.weight
        cumulative.append(total)

    def generate(params: GenParameters) -> GenResult:
        index = bisect_left(cumulative, 1 + params.rng.randrange(total))
        result = weighted_gens[index].gen(params)
        result.sieve = None
        return result

    return generate


def sized(func: Callable[[int], Gen]) -> Gen:
    """Derive a generator from a size drawn between the parameters' limits."""

    def generate(params: GenParameters) -> GenResult:
        if params.max_size == params.min_size:
            size = params.max_size
        else:
            size = params.rng.randrange(params.max_size - params.min_size) + params.min_size
        return func(size)(params)

    return generate


def retry_until(gen: Gen, condition: Callable[[Any], bool], max_retries: int) -> Gen:
    """Retry ``gen`` until ``condition`` holds, giving up after ``max_retries``."""
    gen_with_sieve = such_that(gen, condition)

    def generate(params: GenParameters) -> GenResult:
        for _ in range(max_retries):
            result = gen_with_sieve(params)
            _, ok = result.retrieve()
            if ok:
                return result
        return new_empty_result(gen(params).result_type)

    return generate