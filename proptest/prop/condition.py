"""Turning check functions and their outcomes into property results."""

from __future__ import annotations

import traceback
from typing import Any, Callable, List, Optional, Sequence, Tuple

from proptest.gen_parameters import GenParameters
from proptest.prop_result import Prop, PropResult, PropStatus

CallCheck = Callable[[Sequence[Any]], PropResult]

_MISSING = object()
_VARARGS_FLAG = 0x04


def _positional_arity(func: Any) -> Optional[Tuple[int, int, Optional[int]]]:
    """Return (declared, minimum, maximum) positional arguments, if knowable."""
    target = func
    offset = 0
    if getattr(func, "__self__", None) is not None and hasattr(func, "__func__"):
        target = func.__func__
        offset = 1
    code = getattr(target, "__code__", None)
    if code is None:
        return None
    declared = max(code.co_argcount - offset, 0)
    defaults = len(getattr(target, "__defaults__", None) or ())
    minimum = max(declared - defaults, 0)
    maximum = None if code.co_flags & _VARARGS_FLAG else declared
    return declared, minimum, maximum


def _split_outcome(outcome: Any) -> Tuple[Any, Optional[BaseException]]:
    """Separate a ``(result, error)`` pair from a plain result."""
    if (
        isinstance(outcome, tuple)
        and len(outcome) == 2
        and (outcome[1] is None or isinstance(outcome[1], BaseException))
    ):
        return outcome[0], outcome[1]
    return outcome, None


def check_condition_func(check: Any, num_args: int) -> CallCheck:
    """Validate ``check`` and return a caller that maps its outcome to a result.

    ``check`` must accept ``num_args`` positional arguments and return a bool,
    a string, a :class:`PropResult`, or a ``(result, error)`` pair. Raises
    ``TypeError`` if ``check`` cannot serve as a condition.
    """
    if not callable(check):
        raise TypeError(
            f"First param of ForAll has to be a func: {type(check).__name__}"
        )
    arity = _positional_arity(check)
    if arity is not None:
        declared, minimum, maximum = arity
        if num_args < minimum or (maximum is not None and num_args > maximum):
            raise TypeError(
                "Number of parameters does not match number of generators: "
                f"{declared} != {num_args}"
            )
    annotations = getattr(check, "__annotations__", None)
    if isinstance(annotations, dict):
        returned = annotations.get("return", _MISSING)
        if returned is None or returned == "None":
            raise TypeError("At least one output parameters is required")

    def call(values: Sequence[Any]) -> PropResult:
        try:
            outcome = check(*values)
        except Exception as exc:
            error = RuntimeError(f"Check paniced: {exc}")
            error.__cause__ = exc
            return PropResult(
                status=PropStatus.ERROR,
                error=error,
                error_stack=traceback.format_exc(),
            )
        result, error = _split_outcome(outcome)
        return convert_result(result, error)

    return call


def convert_result(result: Any, error: Optional[BaseException]) -> PropResult:
    """Map the outcome of a check to a :class:`PropResult`."""
    if error is not None:
        return PropResult(status=PropStatus.ERROR, error=error)
    if isinstance(result, bool):
        return PropResult(status=PropStatus.TRUE if result else PropStatus.FALSE)
    if isinstance(result, str):
        if result == "":
            return PropResult(status=PropStatus.TRUE)
        labels: List[str] = [result]
        return PropResult(status=PropStatus.FALSE, labels=labels)
    if isinstance(result, PropResult):
        return result
    return PropResult(
        status=PropStatus.ERROR,
        error=ValueError(f"Invalid check result: {result!r}"),
    )


def error_prop(error: BaseException) -> Prop:
    """A property that always fails with ``error``."""

    def prop(gen_params: GenParameters) -> PropResult:
        return PropResult(status=PropStatus.ERROR, error=error)

    return prop