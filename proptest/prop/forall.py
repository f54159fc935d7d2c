"""Properties that must hold for all generated values."""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple

from proptest.gen.basic import Gen
from proptest.gen_parameters import GenParameters
from proptest.gen_result import GenResult
from proptest.prop.condition import check_condition_func, error_prop
from proptest.prop_result import (
    Prop,
    PropResult,
    PropStatus,
    new_prop_arg,
    save_prop,
)
from proptest.shrink import Shrink

Check = Callable[[Any], PropResult]


def _format(value: Any) -> str:
    return f"{value}"


def _generate(
    gens: Tuple[Gen, ...], params: GenParameters
) -> Optional[Tuple[List[GenResult], List[Any], List[str]]]:
    gen_results: List[GenResult] = []
    values: List[Any] = []
    formatted: List[str] = []
    for gen in gens:
        result = gen(params)
        value, ok = result.retrieve_as_value()
        if not ok:
            return None
        gen_results.append(result)
        values.append(value)
        formatted.append(_format(value))
    return gen_results, values, formatted


def _first_failure(shrink: Shrink, check: Check) -> Optional[Tuple[PropResult, Any, str]]:
    for value in shrink:
        result = check(value)
        if not result.success():
            return result, value, _format(value)
    return None


def _shrink_value(
    max_shrink_count: int,
    gen_result: GenResult,
    orig_value: Any,
    orig_formatted: str,
    first_fail: PropResult,
    check: Check,
) -> Tuple[PropResult, Any]:
    last_fail = first_fail
    last_value = orig_value
    last_formatted = orig_formatted
    shrinks = 0
    found = _first_failure(gen_result.shrinker(last_value).filter(gen_result.sieve), check)
    while found is not None and shrinks < max_shrink_count:
        shrinks += 1
        last_fail, last_value, last_formatted = found
        found = _first_failure(
            gen_result.shrinker(last_value).filter(gen_result.sieve), check
        )
    result = last_fail.with_args(first_fail.args).add_args(
        new_prop_arg(
            gen_result, shrinks, last_value, last_formatted, orig_value, orig_formatted
        )
    )
    return result, last_value


def _undecided() -> PropResult:
    return PropResult(status=PropStatus.UNDECIDED)


def for_all(condition: Any, *gens: Gen) -> Prop:
    """A property requiring ``condition`` to hold for all generated values.

    ``condition`` takes one argument per generator. Failing values are shrunk,
    one argument after the other.
    """
    try:
        call_check = check_condition_func(condition, len(gens))
    except TypeError as err:
        return error_prop(err)

    def prop(params: GenParameters) -> PropResult:
        generated = _generate(gens, params)
        if generated is None:
            return _undecided()
        gen_results, values, formatted = generated
        result = call_check(values)
        if result.success():
            for gen_result, value, text in zip(gen_results, values, formatted):
                result = result.add_args(new_prop_arg(gen_result, 0, value, text, value, text))
            return result
        for index, gen_result in enumerate(gen_results):

            def check_one(candidate: Any, index: int = index) -> PropResult:
                shrunk = list(values)
                shrunk[index] = candidate
                return call_check(shrunk)

            result, values[index] = _shrink_value(
                params.max_shrink_count,
                gen_result,
                values[index],
                formatted[index],
                result,
                check_one,
            )
        return result

    return save_prop(prop)


def for_all1(gen: Gen, check: Callable[[Any], Any]) -> Prop:
    """A single-generator property whose failing values are shrunk."""
    try:
        call_check = check_condition_func(check, 1)
    except TypeError as err:
        return error_prop(err)

    def check_func(value: Any) -> PropResult:
        return call_check([value])

    def prop(params: GenParameters) -> PropResult:
        gen_result = gen(params)
        value, ok = gen_result.retrieve()
        if not ok:
            return _undecided()
        formatted = _format(value)
        result = check_func(value)
        if result.success():
            return result.add_args(
                new_prop_arg(gen_result, 0, value, formatted, value, formatted)
            )
        result, _ = _shrink_value(
            params.max_shrink_count, gen_result, value, formatted, result, check_func
        )
        return result

    return save_prop(prop)


def for_all_no_shrink(condition: Any, *gens: Gen) -> Prop:
    """A property requiring ``condition`` to hold; failing values are not shrunk."""
    try:
        call_check = check_condition_func(condition, len(gens))
    except TypeError as err:
        return error_prop(err)

    def prop(params: GenParameters) -> PropResult:
        generated = _generate(gens, params)
        if generated is None:
            return _undecided()
        gen_results, values, formatted = generated
        result = call_check(values)
        for gen_result, value, text in zip(gen_results, values, formatted):
            result = result.add_args(new_prop_arg(gen_result, 0, value, text, value, text))
        return result

    return save_prop(prop)


def for_all_no_shrink1(gen: Gen, check: Callable[[Any], Any]) -> Prop:
    """A single-generator property whose failing values are not shrunk."""
    try:
        call_check = check_condition_func(check, 1)
    except TypeError as err:
        return error_prop(err)

    def prop(params: GenParameters) -> PropResult:
        gen_result = gen(params)
        value, ok = gen_result.retrieve()
        if not ok:
            return _undecided()
        formatted = _format(value)
        return call_check([value]).add_args(
            new_prop_arg(gen_result, 0, value, formatted, value, formatted)
        )

    return save_prop(prop)